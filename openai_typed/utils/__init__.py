"""Transport helpers."""
