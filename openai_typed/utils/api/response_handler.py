# openai_typed/utils/api/response_handler.py

from typing import Dict, Any, Optional, Type, TypeVar
from dataclasses import dataclass
from datetime import datetime
import json
import logging

from ...core.exceptions import OpenAITypedError, ResponseError

T = TypeVar('T')
logger = logging.getLogger(__name__)

@dataclass
class APIResponse:
    """Container for API response data"""
    status: int
    data: Any
    headers: Dict[str, str]
    timestamp: datetime
    duration: float

@dataclass
class APIErrorBody:
    """The vendor's error envelope: ``{"error": {"message", "type", "param", "code"}}``"""
    message: str = ""
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[str] = None

class ResponseHandler:
    """
    Turns decoded API responses into typed objects.

    Response types expose a ``from_dict`` classmethod; any failure while
    building them is reported as a ResponseError.
    """

    @staticmethod
    def process_response(response: APIResponse, expected_type: Type[T]) -> T:
        """
        Process an API response

        Args:
            response: APIResponse to process
            expected_type: Type exposing ``from_dict`` to build from the body

        Returns:
            Instance of ``expected_type``
        """
        data = response.data
        if not isinstance(data, dict):
            raise ResponseError(
                f"Expected a JSON object for {expected_type.__name__}, got {type(data).__name__}",
                details={"status": response.status}
            )
        try:
            return expected_type.from_dict(data)
        except OpenAITypedError:
            logger.error(f"Failed to process response as {expected_type.__name__}")
            raise
        except (TypeError, ValueError, KeyError) as e:
            logger.error(f"Failed to process response as {expected_type.__name__}: {str(e)}")
            raise ResponseError(f"Failed to process response: {str(e)}") from e

    @staticmethod
    def extract_error(body: str) -> Optional[APIErrorBody]:
        """
        Extract error information from a failed response body

        Args:
            body: Raw body text of a non-2xx response

        Returns:
            APIErrorBody when the body is the vendor error envelope, else None
        """
        try:
            data = json.loads(body) if body else None
        except ValueError:
            return None

        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, str):
            return APIErrorBody(message=error)
        if not isinstance(error, dict):
            return None

        def optional_str(key: str) -> Optional[str]:
            value = error.get(key)
            return None if value is None else str(value)

        return APIErrorBody(
            message=str(error.get("message") or ""),
            type=optional_str("type"),
            param=optional_str("param"),
            code=optional_str("code")
        )
