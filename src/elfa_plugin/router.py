from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from loguru import logger
from pydantic import BaseModel, Field

from elfa_core.config import resolve_elfa_config
from elfa_core.errors import ConfigurationError
from elfa_core.logging_utils import log_event
from elfa_core.orchestrator import ActionContext, ActionOrchestrator
from elfa_core.schema.action import ActionExample
from elfa_core.schema.message import ActionResult, ConversationMessage

from .plugin import ElfaPlugin

ELFA_TAG = "Elfa-Actions"

router = APIRouter(prefix="/api/elfa", tags=[ELFA_TAG])


class ActionSummaryResponse(BaseModel):
    name: str
    description: str
    similes: list[str] = Field(default_factory=list)
    parameters: list[str] = Field(default_factory=list)
    defaults: dict[str, Any] = Field(default_factory=dict)
    examples: list[ActionExample] = Field(default_factory=list)


class RunActionRequest(BaseModel):
    messages: list[ConversationMessage] = Field(default_factory=list, max_length=200)


def _plugin(request: Request) -> ElfaPlugin:
    return request.app.state.elfa_plugin


def _context(request: Request, payload: RunActionRequest) -> ActionContext:
    return ActionContext(
        settings=getattr(request.app.state, "elfa_settings", None),
        messages=tuple(payload.messages),
        environ=getattr(request.app.state, "elfa_environ", None),
    )


def _configuration_detail(context: ActionContext) -> str:
    try:
        resolve_elfa_config(context.settings, context.environ)
    except ConfigurationError as exc:
        return str(exc)
    return "Elfa AI configuration validation failed"


async def _run(action: ActionOrchestrator, context: ActionContext) -> ActionResult:
    if not await action.validate(context):
        raise HTTPException(status_code=503, detail=_configuration_detail(context))
    return await action.execute(context)


@router.get("/actions", response_model=list[ActionSummaryResponse])
async def list_actions(request: Request) -> Any:
    return [
        ActionSummaryResponse(
            name=action.name,
            description=action.descriptor.description,
            similes=list(action.descriptor.similes),
            parameters=[spec.name for spec in action.descriptor.fields],
            defaults=action.descriptor.defaults,
            examples=list(action.descriptor.examples),
        )
        for action in _plugin(request).actions
    ]


@router.post("/actions/{name}", response_model=ActionResult)
async def run_action(name: str, payload: RunActionRequest, request: Request) -> Any:
    action = _plugin(request).get(name)
    if action is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {name}")
    logger.info(log_event("api.action.run", action=action.name, messages=len(payload.messages)))
    return await _run(action, _context(request, payload))


@router.post("/dispatch", response_model=ActionResult)
async def dispatch_action(payload: RunActionRequest, request: Request) -> Any:
    if not payload.messages:
        raise HTTPException(status_code=422, detail="At least one message is required")
    candidates = _plugin(request).match(payload.messages[-1].text)
    if not candidates:
        raise HTTPException(status_code=404, detail="No action matches the latest message")
    action = candidates[0]
    logger.info(log_event("api.action.dispatch", action=action.name))
    return await _run(action, _context(request, payload))
