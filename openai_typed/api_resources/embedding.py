"""
Vector representations of text, for search, clustering and similar uses.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from ..core.exceptions import ResponseError
from ..core.utils import drop_none, validate_string, validate_string_list
from ..utils.api.api_client import Client
from .common import TokenUsage, expect_object, get_int, get_list, get_str

ENDPOINT = "embeddings"


@dataclass(frozen=True)
class EmbeddingParam:
    """Parameters for :func:`create`."""

    model: str
    input: Union[str, List[str]]
    user: Optional[str] = None

    def __post_init__(self):
        validate_string(self.model, "model")
        object.__setattr__(self, "input", validate_string_list(self.input, "input"))
        if self.user is not None:
            validate_string(self.user, "user")

    def with_options(self, **changes: Any) -> "EmbeddingParam":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none({"model": self.model, "input": self.input, "user": self.user})


@dataclass
class EmbeddingData:
    object: str = ""
    embedding: List[float] = field(default_factory=list)
    index: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "EmbeddingData":
        data = expect_object(data, "embedding")
        vector = get_list(data, "embedding")
        if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in vector):
            raise ResponseError("Field 'embedding' should only contain numbers")
        return cls(
            object=get_str(data, "object"),
            embedding=[float(x) for x in vector],
            index=get_int(data, "index"),
        )


@dataclass
class Embedding:
    """Response of :func:`create`."""

    object: str = ""
    data: List[EmbeddingData] = field(default_factory=list)
    model: str = ""
    usage: Optional[TokenUsage] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Embedding":
        data = expect_object(data, "embedding list")
        return cls(
            object=get_str(data, "object"),
            data=[EmbeddingData.from_dict(item) for item in get_list(data, "data")],
            model=get_str(data, "model"),
            usage=TokenUsage.from_optional(data.get("usage")),
        )


async def create(client: Client, param: EmbeddingParam) -> Embedding:
    """Create an embedding vector for each input."""
    return await client.post(ENDPOINT, Embedding, param)
