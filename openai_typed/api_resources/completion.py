"""
Text completion: given a prompt, the model returns one or more predicted
completions.

Example::

    param = CompletionParam(
        "gpt-3.5-turbo-instruct",
        prompt="Generate a plot for an absurd interstellar parody.",
        max_tokens=500,
        temperature=0.9,
    )
    completion = await create(client, param)
    print(completion.choices[0].text)
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.exceptions import ValidationError
from ..core.utils import (
    drop_none,
    validate_positive_int,
    validate_range,
    validate_required,
    validate_string,
    validate_string_list,
)
from ..utils.api.api_client import Client
from .common import TokenUsage, expect_object, get_int, get_list, get_optional_str, get_str

ENDPOINT = "completions"

MAX_STOP_SEQUENCES = 4
MAX_LOGPROBS = 5


@dataclass(frozen=True)
class CompletionParam:
    """
    Parameters for :func:`create`.

    Only ``model`` is required. Every other field is omitted from the request
    when left as ``None`` so the API applies its own default.
    """

    model: str
    prompt: Optional[Union[str, List[str]]] = None
    suffix: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Optional[Union[str, List[str]]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None

    def __post_init__(self):
        validate_string(self.model, "model")
        if self.prompt is not None:
            object.__setattr__(self, "prompt", validate_string_list(self.prompt, "prompt"))
        if self.stop is not None:
            object.__setattr__(self, "stop", validate_string_list(self.stop, "stop", MAX_STOP_SEQUENCES))
        validate_range(self.temperature, "temperature", 0.0, 2.0)
        validate_range(self.top_p, "top_p", 0.0, 1.0)
        validate_range(self.presence_penalty, "presence_penalty", -2.0, 2.0)
        validate_range(self.frequency_penalty, "frequency_penalty", -2.0, 2.0)
        validate_positive_int(self.max_tokens, "max_tokens")
        validate_positive_int(self.n, "n")
        validate_positive_int(self.best_of, "best_of")
        if self.logprobs is not None:
            if isinstance(self.logprobs, bool) or not isinstance(self.logprobs, int):
                raise ValidationError("logprobs must be an integer", details={"field": "logprobs"})
            validate_range(self.logprobs, "logprobs", 0, MAX_LOGPROBS)
        if self.echo is not None and not isinstance(self.echo, bool):
            raise ValidationError("echo must be a boolean", details={"field": "echo"})
        if self.best_of is not None and self.n is not None and self.best_of < self.n:
            raise ValidationError("best_of must be greater than or equal to n", details={"field": "best_of"})
        if self.suffix is not None:
            validate_required(self.suffix, "suffix", str)
        if self.logit_bias is not None:
            if not isinstance(self.logit_bias, Mapping):
                raise ValidationError("logit_bias must map token ids to biases", details={"field": "logit_bias"})
            for token, bias in self.logit_bias.items():
                validate_range(bias, f"logit_bias[{token}]", -100, 100)
        if self.user is not None:
            validate_string(self.user, "user")

    def with_options(self, **changes: Any) -> "CompletionParam":
        """Return a validated copy with ``changes`` applied"""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none({
            "model": self.model,
            "prompt": self.prompt,
            "suffix": self.suffix,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "logprobs": self.logprobs,
            "echo": self.echo,
            "stop": self.stop,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "best_of": self.best_of,
            "logit_bias": dict(self.logit_bias) if self.logit_bias is not None else None,
            "user": self.user,
        })


@dataclass
class Choice:
    text: str = ""
    index: int = 0
    logprobs: Optional[Dict[str, Any]] = None
    finish_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Choice":
        data = expect_object(data, "choice")
        logprobs = data.get("logprobs")
        return cls(
            text=get_str(data, "text"),
            index=get_int(data, "index"),
            logprobs=dict(expect_object(logprobs, "logprobs")) if logprobs is not None else None,
            finish_reason=get_optional_str(data, "finish_reason"),
        )


@dataclass
class Completion:
    """Response of :func:`create`."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[Choice] = field(default_factory=list)
    usage: Optional[TokenUsage] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Completion":
        data = expect_object(data, "completion")
        return cls(
            id=get_str(data, "id"),
            object=get_str(data, "object"),
            created=get_int(data, "created"),
            model=get_str(data, "model"),
            choices=[Choice.from_dict(item) for item in get_list(data, "choices")],
            usage=TokenUsage.from_optional(data.get("usage")),
        )

    @property
    def text(self) -> str:
        """Text of the first choice, or an empty string"""
        return self.choices[0].text if self.choices else ""


async def create(client: Client, param: CompletionParam) -> Completion:
    """Create a completion for the provided prompt and parameters."""
    return await client.post(ENDPOINT, Completion, param)
