"""Error taxonomy for the extract -> dispatch -> summarize pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class ElfaError(Exception):
    """Base class for every failure the action orchestrator reports."""


class ConfigurationError(ElfaError):
    """Raised when required Elfa AI settings are missing or empty."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Elfa AI configuration validation failed:\n" + "\n".join(self.missing)
        )


@dataclass
class InvalidExtraction(ElfaError):
    schema_name: str
    errors: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        details = "; ".join(self.errors) or "no details"
        return f"Invalid {self.schema_name} content: {details}"


@dataclass
class UpstreamError(ElfaError):
    message: str
    status_code: int | None = None
    payload: Any = None

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"


class SummarizationError(ElfaError):
    """Raised when the text-generation call behind a summary fails."""
