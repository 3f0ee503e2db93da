"""Tests for the Elfa action registry."""

import pytest

from elfa_core.orchestrator import ActionContext
from elfa_plugin import ELFA_ACTION_DESCRIPTORS, PLUGIN_NAME, build_elfa_plugin
from elfa_plugin.actions import PING

from conftest import FakeBrain, MappingSettings

EXPECTED_PATHS = {
    "ELFA_PING": "/v1/ping",
    "ELFA_API_KEY_STATUS": "/v1/key-status",
    "ELFA_GET_SMART_MENTIONS": "/v1/mentions",
    "ELFA_GET_TOP_MENTIONS": "/v1/top-mentions",
    "ELFA_SEARCH_MENTIONS_BY_KEYWORDS": "/v1/mentions/search",
    "ELFA_GET_TRENDING_TOKENS": "/v1/trending-tokens",
    "ELFA_TWITTER_ACCOUNT_STATS": "/v1/account/smart-stats",
}


def test_registry_has_the_seven_endpoints() -> None:
    assert {d.name: d.path for d in ELFA_ACTION_DESCRIPTORS} == EXPECTED_PATHS


def test_descriptor_defaults_match_the_api_contract() -> None:
    defaults = {d.name: d.defaults for d in ELFA_ACTION_DESCRIPTORS}

    assert defaults["ELFA_GET_SMART_MENTIONS"] == {"limit": 100, "offset": 0}
    assert defaults["ELFA_GET_TRENDING_TOKENS"] == {
        "timeWindow": "24h",
        "page": 1,
        "pageSize": 50,
        "minMentions": 5,
    }
    assert defaults["ELFA_SEARCH_MENTIONS_BY_KEYWORDS"] == {"limit": 20}
    assert defaults["ELFA_TWITTER_ACCOUNT_STATS"] == {}


def test_only_parameterised_actions_extract_and_summarize() -> None:
    flags = {d.name: (d.requires_extraction, d.summarizes) for d in ELFA_ACTION_DESCRIPTORS}

    assert flags["ELFA_PING"] == (False, False)
    assert flags["ELFA_API_KEY_STATUS"] == (False, False)
    assert all(flags[name] == (True, True) for name in EXPECTED_PATHS if name not in {"ELFA_PING", "ELFA_API_KEY_STATUS"})


def test_build_plugin_binds_every_descriptor() -> None:
    plugin = build_elfa_plugin(FakeBrain())

    assert plugin.name == PLUGIN_NAME
    assert [a.name for a in plugin.actions] == [d.name for d in ELFA_ACTION_DESCRIPTORS]
    assert plugin.get("elfa_ping").descriptor is PING
    assert plugin.get("ELFA_UNKNOWN") is None


def test_build_plugin_rejects_duplicate_names() -> None:
    with pytest.raises(ValueError):
        build_elfa_plugin(FakeBrain(), descriptors=(PING, PING))


def test_match_prefers_the_longest_trigger_phrase() -> None:
    plugin = build_elfa_plugin(FakeBrain())

    assert plugin.match("Can you get top mentions for SOL?")[0].name == "ELFA_GET_TOP_MENTIONS"
    assert plugin.match("what are the trending tokens today")[0].name == "ELFA_GET_TRENDING_TOKENS"
    assert plugin.match("hello there") == []


@pytest.mark.anyio
@pytest.mark.parametrize(
    "values",
    [
        {},
        {"ELFA_AI_BASE_URL": "https://api.elfa.ai"},
        {"ELFA_AI_API_KEY": "key"},
        {"ELFA_AI_BASE_URL": "", "ELFA_AI_API_KEY": ""},
    ],
)
async def test_validate_is_false_for_every_action_without_full_config(values) -> None:
    plugin = build_elfa_plugin(FakeBrain())
    context = ActionContext(settings=MappingSettings(values), environ={})

    for action in plugin.actions:
        assert await action.validate(context) is False


@pytest.mark.anyio
async def test_validate_is_true_with_config_from_environment() -> None:
    plugin = build_elfa_plugin(FakeBrain())
    context = ActionContext(
        settings=MappingSettings(),
        environ={"ELFA_AI_BASE_URL": "https://api.elfa.ai", "ELFA_AI_API_KEY": "key"},
    )

    for action in plugin.actions:
        assert await action.validate(context) is True
