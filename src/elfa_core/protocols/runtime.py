"""Runtime protocols: how an action reads host settings and emits messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from elfa_core.schema.message import ActionMessage


@runtime_checkable
class SettingsLookup(Protocol):
    """
    Read-only view over the host's runtime settings.

    Implementations return None (or an empty string) for unknown keys so the
    configuration resolver can fall back to the process environment.
    """

    def get_setting(self, key: str) -> str | None:
        ...


@runtime_checkable
class MessageCallback(Protocol):
    """Receives the user-facing message produced by an action run."""

    def __call__(self, message: "ActionMessage") -> Awaitable[None] | None:
        ...
