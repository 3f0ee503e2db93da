# src/elfa_core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from pydantic_settings import BaseSettings, SettingsConfigDict

from elfa_core.errors import ConfigurationError
from elfa_core.protocols.runtime import SettingsLookup


class Settings(BaseSettings):
    """
    Elfa agent configuration.
    Loads variables from .env file or environment variables.
    """
    # --- Elfa AI API ---
    ELFA_AI_BASE_URL: str = ""
    ELFA_AI_API_KEY: str = ""

    # --- Language model ---
    GEMINI_API_KEY: str = ""
    ELFA_MODEL_NAME: str = "gemini-2.0-flash"

    # --- Observability ---
    ELFA_LOG_LEVEL: str = "INFO"

    # Tell pydantic to look for these in the .env file
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8",
    )

    def get_setting(self, key: str) -> str | None:
        value = getattr(self, key, None)
        return None if value is None else str(value)


# Initialize a global settings instance
settings = Settings()


@dataclass(frozen=True)
class ElfaConfig:
    base_url: str
    api_key: str


# (setting key, ElfaConfig attribute, reason reported when missing)
_REQUIRED_SETTINGS: tuple[tuple[str, str, str], ...] = (
    ("ELFA_AI_BASE_URL", "base_url", "Base URL is required for interacting with Elfa AI"),
    ("ELFA_AI_API_KEY", "api_key", "API key is required for interacting with Elfa AI"),
)


def resolve_elfa_config(
    lookup: SettingsLookup | None = None,
    environ: Mapping[str, str] | None = None,
) -> ElfaConfig:
    """
    Resolve the Elfa AI base URL and API key.

    The runtime setting wins; an empty or missing runtime value falls back to
    the environment variable of the same name. Every missing field is reported
    in a single ConfigurationError.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    missing: list[str] = []

    for key, attribute, reason in _REQUIRED_SETTINGS:
        runtime_value = lookup.get_setting(key) if lookup is not None else None
        value = str(runtime_value or "").strip() or str(env.get(key) or "").strip()
        if not value:
            missing.append(f"{key}: {reason}")
        values[attribute] = value

    if missing:
        raise ConfigurationError(missing)
    return ElfaConfig(**values)
