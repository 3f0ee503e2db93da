"""Pydantic models shared by extraction, dispatch and the host."""

from elfa_core.schema.action import ActionDescriptor, ActionExample, FieldSpec
from elfa_core.schema.message import ActionMessage, ActionResult, ConversationMessage

__all__ = [
    "ActionDescriptor",
    "ActionExample",
    "ActionMessage",
    "ActionResult",
    "ConversationMessage",
    "FieldSpec",
]
