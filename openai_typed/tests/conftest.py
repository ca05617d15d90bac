"""Global test configuration and fixtures."""
import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from openai_typed.core.config import Config
from openai_typed.utils.api.api_client import Client

MODERATION_RESPONSE = {
    "id": "modr-5MWoLO",
    "model": "text-moderation-001",
    "results": [
        {
            "categories": {
                "hate": False,
                "hate/threatening": True,
                "self-harm": False,
                "sexual": False,
                "sexual/minors": False,
                "violence": True,
                "violence/graphic": False
            },
            "category_scores": {
                "hate": 0.22714105248451233,
                "hate/threatening": 0.4132447838783264,
                "self-harm": 0.005232391878962517,
                "sexual": 0.01407341007143259,
                "sexual/minors": 0.0038522258400917053,
                "violence": 0.9223177433013916,
                "violence/graphic": 0.036865197122097015
            },
            "flagged": True
        }
    ]
}

def _make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None
) -> AsyncMock:
    """Build an async context manager standing in for ``session.request(...)``"""
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raw = json.dumps(body).encode("utf-8")

    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read = AsyncMock(return_value=raw)
    mock_response.headers = headers or {"Content-Type": "application/json"}

    mock_cm = AsyncMock()
    mock_cm.__aenter__.return_value = mock_response
    mock_cm.__aexit__.return_value = None
    return mock_cm

@pytest.fixture
def make_response():
    """Factory for mocked responses, see _make_response"""
    return _make_response

@pytest.fixture
def moderation_response():
    return json.loads(json.dumps(MODERATION_RESPONSE))

@pytest.fixture
def config():
    """Fixture for client configuration"""
    return Config("sk-test-1234", organization="org-test")

@pytest.fixture
def session():
    """Fixture for a mocked aiohttp session"""
    mock_session = MagicMock(spec=aiohttp.ClientSession)
    mock_session.closed = False
    return mock_session

@pytest.fixture
def client(config, session):
    """Fixture for API client"""
    return Client(config, session=session)
