# src/elfa_core/brain/gemini.py
from __future__ import annotations

import os
from typing import Any, Sequence

from google import genai
from google.genai import types
from loguru import logger

from elfa_core.brain.parser import ResponseParser
from elfa_core.logging_utils import log_event
from elfa_core.schema.action import FieldSpec

_GEMINI_TYPES = {
    "string": types.Type.STRING,
    "number": types.Type.NUMBER,
    "boolean": types.Type.BOOLEAN,
}


def build_response_schema(fields: Sequence[FieldSpec], description: str = "") -> types.Schema:
    """Translate field specs into a Gemini structured-output schema."""
    properties = {
        spec.name: types.Schema(type=_GEMINI_TYPES[spec.type], description=spec.description or None)
        for spec in fields
    }
    required = [spec.name for spec in fields if spec.required]
    return types.Schema(
        type=types.Type.OBJECT,
        description=description or None,
        properties=properties,
        required=required or None,
    )


class GeminiBrain:
    def __init__(
        self,
        *,
        model_name: str = "gemini-2.0-flash",
        api_key: str | None = None,
        http_options: dict | None = None,
        client: Any = None,
    ) -> None:
        if client is None:
            key = api_key or os.environ.get("GEMINI_API_KEY")
            client = genai.Client(api_key=key, http_options=http_options)
        self._client = client
        self._model_name = model_name

    @property
    def model_name(self) -> str:
        return self._model_name

    async def generate_object(
        self,
        prompt: str,
        *,
        fields: Sequence[FieldSpec],
        schema_name: str,
        schema_description: str = "",
    ) -> Any:
        logger.debug(log_event("brain.generate_object", model=self._model_name, schema=schema_name))
        response = await self._client.aio.models.generate_content(
            model=self._model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=build_response_schema(fields, schema_description),
            ),
        )
        return ResponseParser.parse_object(response.text)

    async def generate_text(self, prompt: str) -> str:
        logger.debug(log_event("brain.generate_text", model=self._model_name, chars=len(prompt)))
        response = await self._client.aio.models.generate_content(
            model=self._model_name,
            contents=prompt,
        )
        return response.text or ""
