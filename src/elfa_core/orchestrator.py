# src/elfa_core/orchestrator.py
from __future__ import annotations

import inspect
import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import httpx
from loguru import logger

from elfa_core.client import ElfaClient
from elfa_core.config import resolve_elfa_config
from elfa_core.errors import ConfigurationError, InvalidExtraction, SummarizationError, UpstreamError
from elfa_core.extractor import ParameterExtractor
from elfa_core.logging_utils import log_event
from elfa_core.protocols.brain import Brain
from elfa_core.protocols.runtime import MessageCallback, SettingsLookup
from elfa_core.schema.action import ActionDescriptor
from elfa_core.schema.message import ActionMessage, ActionResult, ConversationMessage
from elfa_core.summarizer import ResponseSummarizer, serialize_response

SEPARATOR = "-" * 48


@dataclass
class ActionContext:
    """Everything one invocation reads from its host."""

    settings: SettingsLookup | None = None
    messages: Sequence[ConversationMessage] = field(default_factory=tuple)
    environ: Mapping[str, str] | None = None


def _failure_text(headline: str, error: Exception) -> str:
    return f"{headline}\nError:\n{error}"


class ActionOrchestrator:
    """
    Runs one action end to end: configuration -> extraction -> dispatch ->
    summary -> message. Every failure is turned into a user-facing message and
    a `success=False` result; nothing is retried.
    """

    def __init__(
        self,
        descriptor: ActionDescriptor,
        brain: Brain,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._descriptor = descriptor
        self._extractor = ParameterExtractor(brain)
        self._summarizer = ResponseSummarizer(brain)
        self._http_client = http_client

    @property
    def descriptor(self) -> ActionDescriptor:
        return self._descriptor

    @property
    def name(self) -> str:
        return self._descriptor.name

    async def validate(self, context: ActionContext) -> bool:
        try:
            resolve_elfa_config(context.settings, context.environ)
        except ConfigurationError as exc:
            logger.error(log_event("action.validate.failed", action=self.name, error=str(exc)))
            return False
        return True

    async def execute(
        self,
        context: ActionContext,
        callback: MessageCallback | None = None,
    ) -> ActionResult:
        descriptor = self._descriptor
        logger.info(log_event("action.start", action=self.name, messages=len(context.messages)))

        try:
            config = resolve_elfa_config(context.settings, context.environ)
        except ConfigurationError as exc:
            return await self._fail(callback, _failure_text(descriptor.failure_text, exc))

        query: dict[str, Any] = {}
        try:
            if descriptor.requires_extraction:
                extracted = await self._extractor.extract(descriptor, context.messages)
                query = descriptor.resolve_query(extracted)

            data = await ElfaClient(config, http_client=self._http_client).get_json(
                descriptor.path, query
            )
        except InvalidExtraction as exc:
            message = ActionMessage(
                text=descriptor.invalid_text,
                action=self.name,
                content={"error": descriptor.invalid_error, "details": exc.errors},
            )
            return await self._finish(callback, message, success=False)
        except UpstreamError as exc:
            return await self._fail(callback, _failure_text(descriptor.failure_text, exc))
        except Exception as exc:
            logger.exception(log_event("action.error", action=self.name, error=str(exc)))
            return await self._fail(callback, _failure_text(descriptor.failure_text, exc))

        heading = descriptor.render(descriptor.success_text, query)
        if not descriptor.summarizes:
            text = f"{heading} Response: {json.dumps(data, separators=(',', ':'), ensure_ascii=False)}"
            return await self._finish(callback, ActionMessage(text=text, action=self.name), True, data)

        raw = serialize_response(data)
        instruction = descriptor.render(descriptor.summary_instruction or "", query)
        try:
            summary = await self._summarizer.summarize(instruction, data)
        except SummarizationError as exc:
            text = f"{_failure_text(descriptor.failure_text, exc)}\n{SEPARATOR}\nRaw Response: \n{raw}"
            return await self._fail(callback, text, data)

        text = f"{heading}\n{summary}\n{SEPARATOR}\nRaw Response: \n{raw}"
        return await self._finish(callback, ActionMessage(text=text, action=self.name), True, data)

    async def _fail(
        self,
        callback: MessageCallback | None,
        text: str,
        data: Any = None,
    ) -> ActionResult:
        return await self._finish(callback, ActionMessage(text=text, action=self.name), False, data)

    async def _finish(
        self,
        callback: MessageCallback | None,
        message: ActionMessage,
        success: bool,
        data: Any = None,
    ) -> ActionResult:
        if callback is not None:
            emitted = callback(message)
            if inspect.isawaitable(emitted):
                await emitted
        logger.info(log_event("action.done", action=self.name, success=success))
        return ActionResult(success=success, message=message, data=data)
