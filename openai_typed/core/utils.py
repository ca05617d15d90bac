from typing import Any, Dict, List, Optional, Sequence, Union
from .exceptions import ValidationError

def validate_string(value: Any, name: str) -> str:
    """Validate a required, non-blank string parameter."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string", details={"field": name})
    return value

def validate_required(value: Any, name: str, expected_type: type = str) -> Any:
    """Validate that a required parameter is present and has the right type."""
    if value is None:
        raise ValidationError(f"{name} is required", details={"field": name})
    if not isinstance(value, expected_type):
        raise ValidationError(
            f"{name} must be of type {expected_type.__name__}",
            details={"field": name, "type": type(value).__name__}
        )
    return value

def validate_range(
    value: Optional[Union[int, float]],
    name: str,
    minimum: float,
    maximum: float
) -> Optional[Union[int, float]]:
    """Validate an optional number lies within [minimum, maximum]."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number", details={"field": name})
    if not minimum <= value <= maximum:
        raise ValidationError(
            f"{name} must be between {minimum} and {maximum}",
            details={"field": name, "value": value}
        )
    return value

def validate_positive_int(value: Optional[int], name: str) -> Optional[int]:
    """Validate an optional strictly positive integer."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer", details={"field": name, "value": value})
    return value

def validate_string_list(
    value: Union[str, Sequence[str]],
    name: str,
    max_items: Optional[int] = None
) -> Union[str, List[str]]:
    """Validate a string or a non-empty list of strings."""
    if isinstance(value, str):
        return validate_string(value, name)
    if not isinstance(value, (list, tuple)) or not value:
        raise ValidationError(f"{name} must be a string or a non-empty list of strings", details={"field": name})
    if not all(isinstance(item, str) for item in value):
        raise ValidationError(f"{name} must only contain strings", details={"field": name})
    if max_items is not None and len(value) > max_items:
        raise ValidationError(f"{name} accepts at most {max_items} items", details={"field": name})
    return list(value)

def drop_none(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Remove unset optional fields so they are omitted rather than sent as null."""
    return {key: value for key, value in payload.items() if value is not None}

def mask_secret(secret: str, visible: int = 4) -> str:
    """Mask all but the last few characters of a secret."""
    if not secret:
        return ""
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]

def validate_path_segment(value: Any, name: str) -> str:
    """Validate a value that is placed verbatim into one URL path segment."""
    validate_string(value, name)
    if value in (".", "..") or any(c in value for c in "/?#%\\") or any(c.isspace() for c in value):
        raise ValidationError(
            f"{name} must be a single path segment without '/', '?', '#', '%' or whitespace",
            details={"field": name, "value": value}
        )
    return value
