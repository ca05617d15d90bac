"""
Classify whether text violates the vendor's content policy.

The model evaluates seven categories:

- hate: content that expresses, incites, or promotes hate based on a
  protected attribute.
- hate/threatening: hateful content that also includes violence or serious
  harm towards the targeted group.
- self-harm: content that promotes, encourages, or depicts acts of
  self-harm.
- sexual: content meant to arouse sexual excitement, or that promotes
  sexual services.
- sexual/minors: sexual content that includes an individual under 18.
- violence: content that promotes or glorifies violence or celebrates the
  suffering or humiliation of others.
- violence/graphic: violent content depicting death, violence, or serious
  physical injury in extreme graphic detail.

Example::

    async with Client(Config.from_env()) as client:
        param = ModerationParam("I want to kill them.", model="text-moderation-stable")
        result = await create(client, param)
        print(result.flagged, result.results[0].categories.violated())
"""

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..core.utils import drop_none, validate_required, validate_string
from ..utils.api.api_client import Client
from .common import TokenUsage, expect_object, get_bool, get_float, get_list, get_str

ENDPOINT = "moderations"

# Python field name -> wire key. The only place the slashed names live.
CATEGORY_WIRE_NAMES: Dict[str, str] = {
    "hate": "hate",
    "hate_threatening": "hate/threatening",
    "self_harm": "self-harm",
    "sexual": "sexual",
    "sexual_minors": "sexual/minors",
    "violence": "violence",
    "violence_graphic": "violence/graphic",
}


@dataclass(frozen=True)
class ModerationParam:
    """Parameters for :func:`create`."""

    input: str
    model: Optional[str] = None

    def __post_init__(self):
        validate_required(self.input, "input", str)
        if self.model is not None:
            validate_string(self.model, "model")

    def with_options(self, **changes: Any) -> "ModerationParam":
        """Return a validated copy with ``changes`` applied"""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return drop_none({"model": self.model, "input": self.input})

    @classmethod
    def from_dict(cls, data: Any) -> "ModerationParam":
        data = expect_object(data, "moderation parameters")
        return cls(input=data.get("input"), model=data.get("model"))


@dataclass
class Categories:
    """
    Per-category policy violation flags.

    A value is ``True`` if the model flags the corresponding category as
    violated.
    """

    WIRE_NAMES: ClassVar[Dict[str, str]] = CATEGORY_WIRE_NAMES

    hate: bool = False
    hate_threatening: bool = False
    self_harm: bool = False
    sexual: bool = False
    sexual_minors: bool = False
    violence: bool = False
    violence_graphic: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Categories":
        data = expect_object(data, "categories")
        return cls(**{name: get_bool(data, wire) for name, wire in cls.WIRE_NAMES.items()})

    def to_dict(self) -> Dict[str, bool]:
        return {wire: getattr(self, name) for name, wire in self.WIRE_NAMES.items()}

    def violated(self) -> List[str]:
        """Wire names of the flagged categories"""
        return [wire for name, wire in self.WIRE_NAMES.items() if getattr(self, name)]


@dataclass
class CategoryScores:
    """
    Per-category raw scores output by the model.

    Each value lies between 0 and 1, higher meaning more confidence that the
    input violates the policy for that category. The scores are not
    probabilities and need not sum to 1.
    """

    WIRE_NAMES: ClassVar[Dict[str, str]] = CATEGORY_WIRE_NAMES

    hate: float = 0.0
    hate_threatening: float = 0.0
    self_harm: float = 0.0
    sexual: float = 0.0
    sexual_minors: float = 0.0
    violence: float = 0.0
    violence_graphic: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "CategoryScores":
        data = expect_object(data, "category_scores")
        return cls(**{name: get_float(data, wire) for name, wire in cls.WIRE_NAMES.items()})

    def to_dict(self) -> Dict[str, float]:
        return {wire: getattr(self, name) for name, wire in self.WIRE_NAMES.items()}

    def highest(self) -> Tuple[str, float]:
        """The category with the highest score, as ``(wire name, score)``"""
        name, wire = max(self.WIRE_NAMES.items(), key=lambda item: getattr(self, item[0]))
        return wire, getattr(self, name)


@dataclass
class ModerationResult:
    categories: Categories = field(default_factory=Categories)
    category_scores: CategoryScores = field(default_factory=CategoryScores)
    flagged: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "ModerationResult":
        data = expect_object(data, "moderation result")
        return cls(
            categories=Categories.from_dict(data.get("categories")),
            category_scores=CategoryScores.from_dict(data.get("category_scores")),
            flagged=get_bool(data, "flagged"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": self.categories.to_dict(),
            "category_scores": self.category_scores.to_dict(),
            "flagged": self.flagged,
        }


@dataclass
class Moderation:
    """Response of :func:`create`."""

    id: str = ""
    model: str = ""
    flagged: bool = False
    results: List[ModerationResult] = field(default_factory=list)
    token_usage: Optional[TokenUsage] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Moderation":
        data = expect_object(data, "moderation")
        results = [ModerationResult.from_dict(item) for item in get_list(data, "results")]
        return cls(
            id=get_str(data, "id"),
            model=get_str(data, "model"),
            # Older responses only carry the flag per result
            flagged=get_bool(data, "flagged", default=any(r.flagged for r in results)),
            results=results,
            token_usage=TokenUsage.from_optional(data.get("token_usage")),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "model": self.model,
            "flagged": self.flagged,
            "results": [result.to_dict() for result in self.results],
        }
        if self.token_usage is not None:
            payload["token_usage"] = self.token_usage.to_dict()
        return payload


async def create(client: Client, param: ModerationParam) -> Moderation:
    """
    Classify if text violates the content policy.

    Args:
        client: Client used to dispatch the request
        param: Text to classify and optional model

    Returns:
        The parsed :class:`Moderation`

    Raises:
        RequestError: The request could not be sent
        APIStatusError: The API answered with a non-2xx status
        ResponseError: The body does not have the moderation shape
    """
    return await client.post(ENDPOINT, Moderation, param)
