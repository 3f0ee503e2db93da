"""
elfa-core: conversational adapter pipeline for the Elfa AI API.

One generic flow for every action:
Configuration -> Extraction (Brain) -> Dispatch (HTTP) -> Summary (Brain) -> Message.
"""

from elfa_core.errors import (
    ConfigurationError,
    ElfaError,
    InvalidExtraction,
    SummarizationError,
    UpstreamError,
)
from elfa_core.orchestrator import ActionContext, ActionOrchestrator

__version__ = "0.1.0"
__all__ = [
    "ActionContext",
    "ActionOrchestrator",
    "ConfigurationError",
    "ElfaError",
    "InvalidExtraction",
    "SummarizationError",
    "UpstreamError",
]
