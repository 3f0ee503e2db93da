from __future__ import annotations

import json
from typing import Any

from loguru import logger

from elfa_core.errors import SummarizationError
from elfa_core.logging_utils import log_event
from elfa_core.protocols.brain import Brain


def serialize_response(data: Any) -> str:
    """Pretty JSON used both in the summary prompt and in the final message."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def compose_summary_prompt(instruction: str, data: Any) -> str:
    return f"{instruction}:\n{serialize_response(data)}"


class ResponseSummarizer:
    def __init__(self, brain: Brain) -> None:
        self._brain = brain

    async def summarize(self, instruction: str, data: Any) -> str:
        """Return the model's narrative for the response; the text is not post-processed."""
        try:
            summary = await self._brain.generate_text(compose_summary_prompt(instruction, data))
        except Exception as exc:
            logger.warning(log_event("summarize.failed", error=str(exc)))
            raise SummarizationError(str(exc) or exc.__class__.__name__) from exc
        return summary
