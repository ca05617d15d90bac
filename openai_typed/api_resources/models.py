"""
List and describe the models available through the API.
"""

from dataclasses import dataclass, field
from typing import Any, List

from ..core.utils import validate_path_segment
from ..utils.api.api_client import Client
from .common import expect_object, get_int, get_list, get_str

ENDPOINT = "models"


@dataclass
class Model:
    id: str = ""
    object: str = ""
    created: int = 0
    owned_by: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Model":
        data = expect_object(data, "model")
        return cls(
            id=get_str(data, "id"),
            object=get_str(data, "object"),
            created=get_int(data, "created"),
            owned_by=get_str(data, "owned_by"),
        )


@dataclass
class ModelList:
    object: str = ""
    data: List[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ModelList":
        data = expect_object(data, "model list")
        return cls(
            object=get_str(data, "object"),
            data=[Model.from_dict(item) for item in get_list(data, "data")],
        )

    def ids(self) -> List[str]:
        return [model.id for model in self.data]


async def list_models(client: Client) -> ModelList:
    """List the currently available models."""
    return await client.get(ENDPOINT, ModelList)


async def retrieve(client: Client, model_id: str) -> Model:
    """
    Retrieve a model instance, providing basic information such as its owner.

    Raises:
        ValidationError: ``model_id`` is empty or is not a single path segment
        NotFoundError: The API does not know the model
    """
    validate_path_segment(model_id, "model_id")
    return await client.get(f"{ENDPOINT}/{model_id}", Model)
