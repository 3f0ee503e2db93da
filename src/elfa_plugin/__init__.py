"""Elfa AI actions: descriptors, the plugin registry and its HTTP routes."""

from .actions import ELFA_ACTION_DESCRIPTORS
from .plugin import PLUGIN_NAME, ElfaPlugin, build_elfa_plugin

__all__ = ["ELFA_ACTION_DESCRIPTORS", "PLUGIN_NAME", "ElfaPlugin", "build_elfa_plugin"]
