"""Tests for the moderation resource."""

import dataclasses
import json

import pytest

from openai_typed.core.exceptions import APIStatusError, ResponseError, ValidationError
from openai_typed.api_resources.common import TokenUsage
from openai_typed.api_resources.moderation import (
    CATEGORY_WIRE_NAMES,
    Categories,
    CategoryScores,
    Moderation,
    ModerationParam,
    ModerationResult,
    create
)

def test_param_serialization():
    """input round-trips and an unset model is absent, not null"""
    param = ModerationParam("I want to kill them.")
    payload = param.to_dict()

    assert payload == {"input": "I want to kill them."}
    assert "model" not in json.loads(json.dumps(payload))

def test_param_with_model():
    param = ModerationParam("text", model="text-moderation-stable")
    assert param.to_dict() == {"model": "text-moderation-stable", "input": "text"}

def test_param_from_dict():
    param = ModerationParam.from_dict(json.loads('{"input": "I want to kill them."}'))
    assert param.input == "I want to kill them."
    assert param.model is None

def test_param_requires_input():
    """A parameter object cannot exist without input"""
    with pytest.raises(TypeError):
        ModerationParam()
    with pytest.raises(ValidationError):
        ModerationParam(None)
    with pytest.raises(ValidationError):
        ModerationParam.from_dict({"model": "text-moderation-latest"})
    with pytest.raises(ValidationError):
        ModerationParam(["not", "a", "string"])

def test_param_empty_input_is_callers_business():
    assert ModerationParam("").to_dict() == {"input": ""}

def test_param_rejects_blank_model():
    with pytest.raises(ValidationError):
        ModerationParam("text", model="  ")

def test_param_with_options():
    param = ModerationParam("text")
    updated = param.with_options(model="text-moderation-latest")

    assert updated.model == "text-moderation-latest"
    assert param.model is None
    with pytest.raises(ValidationError):
        param.with_options(input=None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        param.input = "other"

def test_example_response(moderation_response):
    resp = Moderation.from_dict(moderation_response)

    assert resp.id == "modr-5MWoLO"
    assert resp.model == "text-moderation-001"
    assert len(resp.results) == 1
    assert resp.results[0].categories.hate_threatening is True
    assert resp.results[0].categories.hate is False
    assert resp.results[0].categories.violence is True
    assert resp.results[0].category_scores.violence == pytest.approx(0.9223177433013916)
    assert resp.results[0].flagged is True
    assert resp.token_usage is None

def test_top_level_flagged_derived_from_results(moderation_response):
    """Without a top-level flag, the response is flagged if any result is"""
    assert Moderation.from_dict(moderation_response).flagged is True

    moderation_response["flagged"] = False
    assert Moderation.from_dict(moderation_response).flagged is False

def test_missing_category_fields_default():
    categories = Categories.from_dict({"violence": True})
    assert categories == Categories(violence=True)

    scores = CategoryScores.from_dict({"hate/threatening": 0.5})
    assert scores.hate_threatening == 0.5
    assert scores.hate == 0.0
    assert scores.self_harm == 0.0

def test_missing_fields_default():
    resp = Moderation.from_dict({})
    assert resp == Moderation()
    assert resp.id == ""
    assert resp.flagged is False
    assert resp.results == []

    result = ModerationResult.from_dict({})
    assert result.categories == Categories()
    assert result.category_scores == CategoryScores()

def test_scores_accept_integers():
    scores = CategoryScores.from_dict({"hate": 1, "violence": 0})
    assert scores.hate == 1.0
    assert isinstance(scores.violence, float)

@pytest.mark.parametrize("data", [
    {"results": {"not": "a list"}},
    {"results": [{"categories": {"hate": "yes"}}]},
    {"results": [{"category_scores": {"hate": "high"}}]},
    {"results": ["nope"]},
    {"id": 42},
])
def test_wrong_types_are_errors(data):
    with pytest.raises(ResponseError):
        Moderation.from_dict(data)

def test_wire_name_mapping_is_distinct():
    """hate and hate/threatening never collapse onto the same field"""
    assert CATEGORY_WIRE_NAMES["hate"] == "hate"
    assert CATEGORY_WIRE_NAMES["hate_threatening"] == "hate/threatening"
    assert len(set(CATEGORY_WIRE_NAMES.values())) == len(CATEGORY_WIRE_NAMES) == 7
    assert set(CATEGORY_WIRE_NAMES) == {f.name for f in dataclasses.fields(Categories)}
    assert set(CATEGORY_WIRE_NAMES) == {f.name for f in dataclasses.fields(CategoryScores)}

def test_wire_names_serialize_both_ways():
    categories = Categories(hate_threatening=True, sexual_minors=True)
    wire = categories.to_dict()

    assert wire["hate/threatening"] is True
    assert wire["hate"] is False
    assert wire["sexual/minors"] is True
    assert "hate_threatening" not in wire
    assert Categories.from_dict(wire) == categories

def test_full_response_serializes_back(moderation_response):
    resp = Moderation.from_dict(moderation_response)
    wire = resp.to_dict()

    assert wire["results"][0]["categories"] == moderation_response["results"][0]["categories"]
    assert wire["results"][0]["category_scores"] == moderation_response["results"][0]["category_scores"]
    assert Moderation.from_dict(wire) == resp

def test_token_usage():
    resp = Moderation.from_dict({"token_usage": {"prompt_tokens": 5, "total_tokens": 5}})
    assert resp.token_usage == TokenUsage(prompt_tokens=5, completion_tokens=0, total_tokens=5)
    assert resp.to_dict()["token_usage"]["prompt_tokens"] == 5

def test_violated_and_highest(moderation_response):
    result = Moderation.from_dict(moderation_response).results[0]

    assert result.categories.violated() == ["hate/threatening", "violence"]
    category, score = result.category_scores.highest()
    assert category == "violence"
    assert score == pytest.approx(0.9223177433013916)

@pytest.mark.asyncio
async def test_create(client, session, make_response, moderation_response):
    session.request.return_value = make_response(200, moderation_response)

    resp = await create(client, ModerationParam("I want to kill them."))

    assert resp.id == "modr-5MWoLO"
    assert resp.results[0].categories.hate_threatening is True
    args, kwargs = session.request.call_args
    assert args[0] == "POST"
    assert str(args[1]) == "https://api.openai.com/v1/moderations"
    assert kwargs["json"] == {"input": "I want to kill them."}

@pytest.mark.asyncio
async def test_create_invalid_model(client, session, make_response):
    session.request.return_value = make_response(400, {
        "error": {"message": "Invalid model", "type": "invalid_request_error", "param": "model", "code": None}
    })

    with pytest.raises(APIStatusError) as exc_info:
        await create(client, ModerationParam("text", model="no-such-model"))
    assert exc_info.value.status == 400
    assert exc_info.value.error.param == "model"
