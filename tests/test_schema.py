"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from elfa_core.schema.action import ActionDescriptor, FieldSpec
from elfa_core.schema.message import ActionMessage, ActionResult, ConversationMessage
from elfa_plugin.actions import SEARCH_MENTIONS, SMART_MENTIONS, TOP_MENTIONS


def test_conversation_message_minimal() -> None:
    msg = ConversationMessage(text="get trending tokens")
    assert msg.role == "user"
    assert msg.name is None
    assert msg.render() == "user: get trending tokens"


def test_conversation_message_prefers_name() -> None:
    msg = ConversationMessage(role="user", name="alice", text="ping elfa")
    assert msg.render() == "alice: ping elfa"


def test_action_message_optional_fields() -> None:
    msg = ActionMessage(text="done")
    assert msg.action is None
    assert msg.content is None


def test_action_result_keeps_raw_data() -> None:
    result = ActionResult(success=True, message=ActionMessage(text="ok"), data={"status": "ok"})
    assert result.data == {"status": "ok"}


def test_field_spec_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        FieldSpec(name="limit", type="integer")


def test_descriptor_is_immutable() -> None:
    with pytest.raises(ValidationError):
        TOP_MENTIONS.path = "/v2/top-mentions"


def test_descriptor_path_must_be_absolute() -> None:
    with pytest.raises(ValidationError):
        ActionDescriptor(name="X", description="x", path="v1/ping", success_text="ok", failure_text="no")


def test_resolve_query_substitutes_defaults_for_omitted_fields() -> None:
    query = TOP_MENTIONS.resolve_query({"ticker": "SOL"})

    assert query == {
        "ticker": "SOL",
        "timeWindow": "1h",
        "page": 1,
        "pageSize": 10,
        "includeAccountDetails": False,
    }


def test_resolve_query_keeps_extracted_values_and_drops_unknown_keys() -> None:
    query = SMART_MENTIONS.resolve_query({"limit": 5, "offset": None, "cursor": "abc"})

    assert query == {"limit": 5, "offset": 0}


def test_example_object_mixes_examples_and_defaults() -> None:
    assert SEARCH_MENTIONS.example_object() == {
        "keywords": "ai agents",
        "from": 1738675001,
        "to": 1738775001,
        "limit": 20,
    }


def test_render_formats_with_query_values() -> None:
    assert TOP_MENTIONS.render(TOP_MENTIONS.success_text, {"ticker": "SOL"}) == "Retrieved top tweets for the SOL:"
