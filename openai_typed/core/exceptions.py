from typing import Any, Dict, Optional

class OpenAITypedError(Exception):
    """Base exception class for all openai_typed exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(OpenAITypedError):
    """Raised when the connection configuration is invalid"""
    pass

class LoggerError(OpenAITypedError):
    """Raised when there is a logging error"""
    pass

class ValidationError(OpenAITypedError):
    """Raised when request parameters are missing or out of range"""
    pass

class APIError(OpenAITypedError):
    """Base exception for errors raised while talking to the API"""
    pass

class RequestError(APIError):
    """Raised when the request never produced an HTTP response (DNS, TLS, connection, timeout)"""
    pass

class ResponseError(APIError):
    """Raised when a response body cannot be decoded into the expected type"""
    pass

class APIStatusError(APIError):
    """Raised when the API answers with a non-2xx status code"""
    def __init__(
        self,
        status: int,
        body: str = "",
        error: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status = status
        self.body = body or ""
        self.error = error
        super().__init__(self._format_message(), details)

    def _format_message(self) -> str:
        if self.error is not None and getattr(self.error, "message", ""):
            return f"API request failed: {self.status} - {self.error.message}"
        if self.body:
            return f"API request failed: {self.status} - {self.body}"
        return f"API request failed: {self.status}"

class AuthenticationError(APIStatusError):
    """Raised when the API rejects the credentials (401)"""
    pass

class NotFoundError(APIStatusError):
    """Raised when the requested resource does not exist (404)"""
    pass

class RateLimitError(APIStatusError):
    """Raised when the API reports that a rate limit was hit (429)"""
    pass

STATUS_ERRORS = {
    401: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}

def status_error_class(status: int) -> type:
    """Pick the APIStatusError subclass for an HTTP status"""
    return STATUS_ERRORS.get(status, APIStatusError)
