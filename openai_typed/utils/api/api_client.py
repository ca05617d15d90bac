# openai_typed/utils/api/api_client.py

from typing import Dict, Any, Optional, Protocol, Type, TypeVar
from enum import Enum
import asyncio
import json
import logging
import time
from datetime import datetime, UTC

import aiohttp
import yarl

from ...core.config import Config
from ...core.exceptions import RequestError, ResponseError, status_error_class
from .response_handler import APIResponse, ResponseHandler

logger = logging.getLogger(__name__)

T = TypeVar('T')

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"

class RequestParam(Protocol):
    """Anything that serializes itself to a JSON object"""
    def to_dict(self) -> Dict[str, Any]:
        ...

class Client:
    """
    Dispatches typed requests to the API.

    This class provides:
    - One HTTP round trip per call over a shared aiohttp session
    - Bearer and organization headers taken from the Config
    - Translation of transport, status and decoding failures into exceptions
    - Request/Response logging

    The client keeps no per-request state, so one instance can serve
    concurrently awaited calls.
    """

    def __init__(
        self,
        config: Config,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.config = config
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_api_key(cls, api_key: str) -> "Client":
        """Create a client for the default endpoint"""
        return cls(Config(api_key))

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    def _build_url(self, path: str) -> yarl.URL:
        return self.config.url.join(yarl.URL(path.lstrip('/')))

    async def request(
        self,
        method: RequestMethod,
        path: str,
        param: Optional[RequestParam] = None
    ) -> APIResponse:
        """
        Make an API request

        Args:
            method: HTTP method to use
            path: Endpoint path relative to the configured base URL
            param: Parameter object, sent as JSON body (POST) or query string (GET)

        Returns:
            APIResponse object containing the decoded JSON body

        Raises:
            RequestError: The request could not be completed
            APIStatusError: The API answered with a non-2xx status
            ResponseError: The body is not valid JSON
        """
        url = self._build_url(path)
        payload = param.to_dict() if param is not None else None
        kwargs: Dict[str, Any] = {"headers": self.config.auth_headers()}
        if payload is not None:
            if method is RequestMethod.GET:
                kwargs["params"] = {k: _query_value(v) for k, v in payload.items()}
            else:
                kwargs["json"] = payload

        session = await self._get_session()
        start = time.monotonic()
        try:
            async with session.request(method.value, url, **kwargs) as response:
                raw = await response.read()
                status = response.status
                headers = dict(response.headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{method.value} {url} failed: {e!r}")
            raise RequestError(f"{method.value} {url} failed: {e!r}") from e

        duration = time.monotonic() - start
        logger.debug(f"{method.value} {url} -> {status} in {duration:.3f}s")

        if not 200 <= status < 300:
            body = raw.decode("utf-8", errors="replace")
            error = ResponseHandler.extract_error(body)
            logger.error(f"{method.value} {url} returned {status}")
            raise status_error_class(status)(
                status,
                body=body,
                error=error,
                details={"method": method.value, "url": str(url)}
            )

        try:
            data = json.loads(raw.decode("utf-8")) if raw else None
        except (UnicodeDecodeError, ValueError) as e:
            logger.error(f"{method.value} {url} returned a body that is not JSON")
            raise ResponseError(f"Failed to decode response body: {str(e)}") from e

        return APIResponse(
            status=status,
            data=data,
            headers=headers,
            timestamp=datetime.now(UTC),
            duration=duration
        )

    async def get(
        self,
        path: str,
        response_type: Type[T],
        param: Optional[RequestParam] = None
    ) -> T:
        """Perform GET request and decode the body as ``response_type``"""
        response = await self.request(RequestMethod.GET, path, param)
        return ResponseHandler.process_response(response, response_type)

    async def post(
        self,
        path: str,
        response_type: Type[T],
        param: Optional[RequestParam] = None
    ) -> T:
        """Perform POST request and decode the body as ``response_type``"""
        response = await self.request(RequestMethod.POST, path, param)
        return ResponseHandler.process_response(response, response_type)

def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)
