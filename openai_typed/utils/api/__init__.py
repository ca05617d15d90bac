"""
HTTP plumbing shared by the resource modules.
"""

from .api_client import (
    Client,
    RequestMethod,
    RequestParam
)

from .response_handler import (
    APIErrorBody,
    APIResponse,
    ResponseHandler
)

__all__ = [
    'Client',
    'RequestMethod',
    'RequestParam',
    'APIErrorBody',
    'APIResponse',
    'ResponseHandler'
]
