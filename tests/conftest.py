"""Shared fakes: an in-memory brain, a dict-backed settings lookup and a recording HTTP transport."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

import httpx
import pytest

from elfa_core.orchestrator import ActionContext
from elfa_core.schema.message import ConversationMessage

BASE_URL = "https://api.elfa.ai"
API_KEY = "test-elfa-key"


class FakeBrain:
    def __init__(
        self,
        obj: Any = None,
        text: str = "Narrative summary.",
        object_error: Exception | None = None,
        text_error: Exception | None = None,
    ) -> None:
        self.obj = obj
        self.text = text
        self.object_error = object_error
        self.text_error = text_error
        self.object_calls: list[dict[str, Any]] = []
        self.text_calls: list[str] = []

    async def generate_object(self, prompt, *, fields, schema_name, schema_description=""):
        self.object_calls.append(
            {
                "prompt": prompt,
                "fields": fields,
                "schema_name": schema_name,
                "schema_description": schema_description,
            }
        )
        if self.object_error is not None:
            raise self.object_error
        return self.obj

    async def generate_text(self, prompt: str) -> str:
        self.text_calls.append(prompt)
        if self.text_error is not None:
            raise self.text_error
        return self.text


class MappingSettings:
    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get_setting(self, key: str) -> str | None:
        return self._values.get(key)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def http_client_for(transport: httpx.AsyncBaseTransport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport)


def json_transport(body: Any, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(
        lambda request: httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))
    )


def make_context(text: str = "", **settings: str) -> ActionContext:
    values = {"ELFA_AI_BASE_URL": BASE_URL, "ELFA_AI_API_KEY": API_KEY}
    values.update(settings)
    messages = (ConversationMessage(role="user", name="alice", text=text),) if text else ()
    return ActionContext(settings=MappingSettings(values), messages=messages, environ={})


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
