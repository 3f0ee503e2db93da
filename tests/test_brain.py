"""Tests for the Gemini brain and its reply parser, using a stubbed genai client."""

from types import SimpleNamespace

import pytest
from google.genai import types

from elfa_core.brain import GeminiBrain, ResponseParser, build_response_schema
from elfa_plugin.actions import SEARCH_MENTIONS


class _StubModels:
    def __init__(self, text: str | None) -> None:
        self.text = text
        self.calls: list[dict] = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        return SimpleNamespace(text=self.text)


def _stub_client(text: str | None) -> SimpleNamespace:
    return SimpleNamespace(aio=SimpleNamespace(models=_StubModels(text)))


def test_parser_strips_code_fences() -> None:
    raw = '```json\n{"ticker": "SOL", "page": 1}\n```'
    assert ResponseParser.parse_object(raw) == {"ticker": "SOL", "page": 1}


def test_parser_repairs_near_json() -> None:
    assert ResponseParser.parse_object('{"username": "elonmusk",}') == {"username": "elonmusk"}


def test_parser_returns_none_for_empty_reply() -> None:
    assert ResponseParser.parse_object("") is None
    assert ResponseParser.parse_object(None) is None


def test_response_schema_marks_required_fields() -> None:
    schema = build_response_schema(SEARCH_MENTIONS.fields, "search schema")

    assert schema.type == types.Type.OBJECT
    assert schema.required == ["keywords", "from", "to"]
    assert schema.properties["limit"].type == types.Type.NUMBER
    assert schema.properties["keywords"].type == types.Type.STRING


def test_response_schema_omits_empty_required_list() -> None:
    schema = build_response_schema(())

    assert schema.required is None


@pytest.mark.anyio
async def test_generate_object_requests_json_and_parses_reply() -> None:
    client = _stub_client('{"keywords": "ai agents", "from": 1, "to": 2}')
    brain = GeminiBrain(model_name="gemini-test", client=client)

    result = await brain.generate_object(
        "prompt",
        fields=SEARCH_MENTIONS.fields,
        schema_name=SEARCH_MENTIONS.schema_name,
    )

    assert result == {"keywords": "ai agents", "from": 1, "to": 2}
    call = client.aio.models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["config"].response_mime_type == "application/json"


@pytest.mark.anyio
async def test_generate_text_returns_reply_text() -> None:
    brain = GeminiBrain(client=_stub_client("Here is the summary."))

    assert await brain.generate_text("summarize") == "Here is the summary."


@pytest.mark.anyio
async def test_generate_text_maps_missing_text_to_empty_string() -> None:
    brain = GeminiBrain(client=_stub_client(None))

    assert await brain.generate_text("summarize") == ""

