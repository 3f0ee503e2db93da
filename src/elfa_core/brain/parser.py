# src/elfa_core/brain/parser.py
import re
from typing import Any

import json_repair

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*|\s*```")


class ResponseParser:
    """
    Parser for structured LLM replies.
    Strips Markdown fences and repairs near-JSON before decoding.
    """

    @classmethod
    def parse_object(cls, raw_text: str | None) -> Any:
        """
        Decode the reply into Python data.

        Returns whatever json_repair recovers; callers validate the shape.
        An empty reply yields None.
        """
        clean_text = cls._strip_fences(raw_text or "")
        if not clean_text:
            return None
        return json_repair.loads(clean_text)

    @classmethod
    def _strip_fences(cls, text: str) -> str:
        """Remove ```json code fences that models like to wrap around objects."""
        return _FENCE_PATTERN.sub("", text).strip()
