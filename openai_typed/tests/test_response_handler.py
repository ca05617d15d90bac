"""Test module for response handling."""

import pytest
from dataclasses import dataclass
from datetime import datetime, UTC

from openai_typed.core.exceptions import ResponseError
from openai_typed.utils.api.response_handler import APIErrorBody, APIResponse, ResponseHandler

@dataclass
class Strict:
    count: int

    @classmethod
    def from_dict(cls, data):
        return cls(count=int(data["count"]))

def make_api_response(data):
    return APIResponse(
        status=200,
        data=data,
        headers={},
        timestamp=datetime.now(UTC),
        duration=0.01
    )

def test_process_response():
    result = ResponseHandler.process_response(make_api_response({"count": "3"}), Strict)
    assert result == Strict(count=3)

def test_process_response_conversion_failure():
    """Errors raised while building the type become ResponseError"""
    with pytest.raises(ResponseError):
        ResponseHandler.process_response(make_api_response({}), Strict)
    with pytest.raises(ResponseError):
        ResponseHandler.process_response(make_api_response({"count": "many"}), Strict)

@pytest.mark.parametrize("data", [None, [], "text", 3])
def test_process_response_requires_object(data):
    with pytest.raises(ResponseError):
        ResponseHandler.process_response(make_api_response(data), Strict)

def test_extract_error_envelope():
    body = '{"error": {"message": "Incorrect API key provided", "type": "invalid_request_error", "param": null, "code": "invalid_api_key"}}'
    assert ResponseHandler.extract_error(body) == APIErrorBody(
        message="Incorrect API key provided",
        type="invalid_request_error",
        param=None,
        code="invalid_api_key"
    )

def test_extract_error_string():
    assert ResponseHandler.extract_error('{"error": "Not found"}') == APIErrorBody(message="Not found")

@pytest.mark.parametrize("body", ["", "Bad Gateway", "[]", '{"detail": "x"}'])
def test_extract_error_unparseable(body):
    assert ResponseHandler.extract_error(body) is None
