"""Conversation and result models exchanged with the host."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ConversationMessage(BaseModel):
    """A single prior turn of the conversation transcript."""

    role: str = Field(default="user", description="Speaker role, e.g. 'user' or 'agent'.")
    name: Optional[str] = Field(default=None, description="Display name of the speaker.")
    text: str = Field(..., description="Raw message text.")

    def render(self) -> str:
        return f"{self.name or self.role}: {self.text}"


class ActionMessage(BaseModel):
    """
    The user-facing message an action emits through the host callback.
    """
    text: str
    action: Optional[str] = None
    content: Optional[dict[str, Any]] = None


class ActionResult(BaseModel):
    success: bool
    message: ActionMessage
    data: Any = Field(default=None, description="Raw API response, when one was received.")
