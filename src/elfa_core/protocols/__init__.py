"""Protocols for the pluggable collaborators of an action run."""

from elfa_core.protocols.brain import Brain
from elfa_core.protocols.runtime import MessageCallback, SettingsLookup

__all__ = ["Brain", "MessageCallback", "SettingsLookup"]
