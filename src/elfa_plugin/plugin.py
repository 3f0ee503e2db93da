from __future__ import annotations

from dataclasses import dataclass

import httpx

from elfa_core.orchestrator import ActionOrchestrator
from elfa_core.protocols.brain import Brain
from elfa_core.schema.action import ActionDescriptor

from .actions import ELFA_ACTION_DESCRIPTORS

PLUGIN_NAME = "elfa-ai"
PLUGIN_DESCRIPTION = "Integrates Elfa AI API for social media analytics and insights."


@dataclass(frozen=True)
class ElfaPlugin:
    """Immutable registry of the Elfa actions bound to one brain."""

    name: str
    description: str
    actions: tuple[ActionOrchestrator, ...]

    def get(self, name: str) -> ActionOrchestrator | None:
        wanted = name.strip().upper()
        for action in self.actions:
            if action.name == wanted:
                return action
        return None

    def match(self, text: str) -> list[ActionOrchestrator]:
        """
        Actions whose trigger phrase occurs in the text, best match first.

        Longer phrases rank higher so "get top mentions" beats "get mentions".
        """
        lowered = " ".join(text.lower().split())
        scored: list[tuple[int, int, ActionOrchestrator]] = []
        for index, action in enumerate(self.actions):
            hits = [len(simile) for simile in action.descriptor.similes if simile.lower() in lowered]
            if hits:
                scored.append((-max(hits), index, action))
        return [action for _, _, action in sorted(scored, key=lambda item: item[:2])]


def build_elfa_plugin(
    brain: Brain,
    *,
    http_client: httpx.AsyncClient | None = None,
    descriptors: tuple[ActionDescriptor, ...] = ELFA_ACTION_DESCRIPTORS,
) -> ElfaPlugin:
    names = [descriptor.name for descriptor in descriptors]
    if len(set(names)) != len(names):
        raise ValueError(f"Duplicate action names in plugin: {names}")
    return ElfaPlugin(
        name=PLUGIN_NAME,
        description=PLUGIN_DESCRIPTION,
        actions=tuple(ActionOrchestrator(d, brain, http_client=http_client) for d in descriptors),
    )
