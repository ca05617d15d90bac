"""
Typed asynchronous client for the OpenAI HTTP API.

Each resource module (moderation, completion, models, embedding) pairs a
parameter type and response types with a coroutine that dispatches one
request through a shared :class:`Client`.
"""

from .core.config import Config, DEFAULT_BASE_URL
from .core.exceptions import (
    OpenAITypedError,
    ConfigError,
    LoggerError,
    ValidationError,
    APIError,
    RequestError,
    ResponseError,
    APIStatusError,
    AuthenticationError,
    NotFoundError,
    RateLimitError
)
from .core.logger import setup_logging
from .utils.api import Client, APIErrorBody, APIResponse
from .api_resources import completion, embedding, models, moderation, TokenUsage

__version__ = "0.1.0"

__all__ = [
    'Config',
    'DEFAULT_BASE_URL',
    'Client',
    'APIErrorBody',
    'APIResponse',
    'TokenUsage',
    'setup_logging',
    'completion',
    'embedding',
    'models',
    'moderation',
    'OpenAITypedError',
    'ConfigError',
    'LoggerError',
    'ValidationError',
    'APIError',
    'RequestError',
    'ResponseError',
    'APIStatusError',
    'AuthenticationError',
    'NotFoundError',
    'RateLimitError'
]
