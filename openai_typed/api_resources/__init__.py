"""
Typed wrappers for the API's resources.

Each module exposes a parameter type, the response types and a coroutine
that dispatches one request through a :class:`~openai_typed.Client`.
"""

from . import completion, embedding, models, moderation
from .common import TokenUsage

__all__ = [
    'completion',
    'embedding',
    'models',
    'moderation',
    'TokenUsage'
]
