import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yarl

from .exceptions import ConfigError
from .utils import mask_secret

DEFAULT_BASE_URL = "https://api.openai.com/v1/"

ENV_PREFIX = "OPENAI_"
ENV_FIELDS = {
    "OPENAI_API_KEY": "api_key",
    "OPENAI_BASE_URL": "base_url",
    "OPENAI_ORGANIZATION": "organization",
    "OPENAI_TIMEOUT": "timeout",
}

@dataclass(frozen=True)
class Config:
    """
    Connection descriptor shared by every request a Client makes.

    Instances are immutable: the ``with_*`` methods return an updated copy
    and leave the original untouched, so one Config can be shared by
    concurrently running calls.
    """
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=dict)
    organization: str = ""
    timeout: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.api_key, str):
            raise ConfigError("api_key must be a string")
        object.__setattr__(self, "base_url", self._normalize_base_url(self.base_url))
        headers = {} if self.headers is None else self.headers
        if not isinstance(headers, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in headers.items()
        ):
            raise ConfigError("headers must map header names to string values")
        object.__setattr__(self, "headers", MappingProxyType(dict(headers)))
        object.__setattr__(self, "organization", self.organization or "")
        if self.timeout is not None and (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise ConfigError("timeout must be a positive number of seconds")

    def __repr__(self) -> str:
        return (
            f"Config(api_key={mask_secret(self.api_key)!r}, base_url={self.base_url!r}, "
            f"headers={dict(self.headers)!r}, organization={self.organization!r}, "
            f"timeout={self.timeout!r})"
        )

    @staticmethod
    def _normalize_base_url(base_url: Union[str, yarl.URL]) -> str:
        """Validate base_url is absolute and make sure it ends with a slash"""
        try:
            url = yarl.URL(str(base_url))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid base_url {base_url!r}: {str(e)}")
        if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
            raise ConfigError(f"base_url must be an absolute http(s) URL, got {base_url!r}")
        text = str(url)
        if not text.endswith("/"):
            text += "/"
        return text

    @property
    def url(self) -> yarl.URL:
        return yarl.URL(self.base_url)

    def with_headers(self, headers: Mapping[str, str]) -> "Config":
        """Return a copy using ``headers`` as the default request headers"""
        return replace(self, headers=dict(headers))

    def with_organization(self, organization: str) -> "Config":
        return replace(self, organization=organization)

    def with_base_url(self, base_url: str) -> "Config":
        return replace(self, base_url=base_url)

    def with_timeout(self, timeout: Optional[float]) -> "Config":
        return replace(self, timeout=timeout)

    def auth_headers(self) -> Dict[str, str]:
        """Headers attached to every request: defaults, bearer token, organization"""
        headers = dict(self.headers)
        headers["Authorization"] = f"Bearer {self.api_key}"
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a Config from OPENAI_* environment variables"""
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for key, value in environ.items():
            if key in ENV_FIELDS and value != "":
                values[ENV_FIELDS[key]] = value

        if "api_key" not in values:
            raise ConfigError(f"{ENV_PREFIX}API_KEY is not set")
        if "timeout" in values:
            values["timeout"] = cls._convert_value(values["timeout"])
        return cls(**values)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")

        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        if not file_config.get("api_key"):
            raise ConfigError(f"Config file {path} has no api_key")

        unknown = set(file_config) - set(ENV_FIELDS.values()) - {"headers"}
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")
        return cls(**file_config)

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to JSON file"""
        with open(path, 'w') as f:
            json.dump(
                {
                    "api_key": self.api_key,
                    "base_url": self.base_url,
                    "headers": dict(self.headers),
                    "organization": self.organization,
                    "timeout": self.timeout,
                },
                f,
                indent=2
            )

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        # Handle boolean values
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        # Handle numeric values
        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            # If not a number, return as string
            return value
