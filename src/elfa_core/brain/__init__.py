"""LLM orchestration (Brain): Gemini integration and reply parsing."""

from elfa_core.brain.gemini import GeminiBrain, build_response_schema
from elfa_core.brain.parser import ResponseParser

__all__ = ["GeminiBrain", "ResponseParser", "build_response_schema"]
