"""
Shared pieces of the resource modules.

Response parsing is lenient about missing keys: an absent (or null) field
takes its default value. A field that is present with the wrong JSON type
is a ResponseError.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..core.exceptions import ResponseError


def expect_object(data: Any, name: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ResponseError(f"Expected a JSON object for {name}, got {type(data).__name__}")
    return data


def _wrong_type(key: str, expected: str, value: Any) -> ResponseError:
    return ResponseError(
        f"Field {key!r} should be {expected}, got {type(value).__name__}",
        details={"field": key}
    )


def get_str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise _wrong_type(key, "a string", value)
    return value


def get_optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    if data.get(key) is None:
        return None
    return get_str(data, key)


def get_bool(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise _wrong_type(key, "a boolean", value)
    return value


def get_int(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(key, "an integer", value)
    return value


def get_float(data: Mapping[str, Any], key: str, default: float = 0.0) -> float:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _wrong_type(key, "a number", value)
    return float(value)


def get_list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _wrong_type(key, "an array", value)
    return value


@dataclass
class TokenUsage:
    """Token accounting attached to some responses"""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "TokenUsage":
        data = expect_object(data, "usage")
        return cls(
            prompt_tokens=get_int(data, "prompt_tokens"),
            completion_tokens=get_int(data, "completion_tokens"),
            total_tokens=get_int(data, "total_tokens"),
        )

    @classmethod
    def from_optional(cls, data: Any) -> Optional["TokenUsage"]:
        if data is None:
            return None
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }
