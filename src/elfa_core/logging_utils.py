from __future__ import annotations

import logging
import os
import sys
from typing import Any

from loguru import logger


_LEVEL_MAP: dict[str, int] = {
    "TRACE": logging.DEBUG,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "SUCCESS": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_VALID_LEVELS = set(_LEVEL_MAP.keys())
_SOURCE_WIDTH = 38
_FUNC_MAX_LEN = 30
_SECRET_MARKERS = ("api_key", "apikey", "secret", "token", "password")


def _normalize_level(value: str | None, fallback: str = "INFO") -> str:
    candidate = (value or "").strip().upper()
    if candidate in _VALID_LEVELS:
        return candidate
    return fallback


def _logging_level(level_name: str) -> int:
    return _LEVEL_MAP.get(level_name.upper(), logging.INFO)


def _short_module(module_name: Any) -> str:
    module = str(module_name or "-")
    return module.split(".")[-1] or "-"


def _short_function(function_name: Any) -> str:
    function = str(function_name or "-")
    if len(function) <= _FUNC_MAX_LEN:
        return function
    return function[: (_FUNC_MAX_LEN - 3)] + "..."


def _compact_source(module_name: Any, function_name: Any, line: Any) -> str:
    module = _short_module(module_name)
    function = _short_function(function_name)
    return f"{module}.{function}:{line}"


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    source_module = extra.get("py_name") or record.get("name")
    source_function = extra.get("py_func") or record.get("function")
    source_line = extra.get("py_line") or record.get("line")
    extra["src"] = _compact_source(source_module, source_function, source_line)


class InterceptHandler(logging.Handler):
    """Route stdlib logging records into Loguru with original call-site metadata."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(
            py_name=record.name,
            py_func=record.funcName,
            py_line=record.lineno,
        ).opt(
            exception=record.exc_info,
        ).log(level, record.getMessage())


def setup_logging(default_level: str = "INFO") -> str:
    """
    Configure unified logging for Loguru + stdlib logging + Uvicorn loggers.

    Environment variables:
    - ELFA_LOG_LEVEL: global level for app logs.
    - ELFA_ACCESS_LOG_LEVEL: level for uvicorn access logs.
    - ELFA_HTTPX_LOG_LEVEL: level for httpx/httpcore logs.
    """
    global_level = _normalize_level(
        os.getenv("ELFA_LOG_LEVEL"),
        fallback=_normalize_level(default_level),
    )
    access_level = _normalize_level(os.getenv("ELFA_ACCESS_LOG_LEVEL"), fallback="WARNING")
    httpx_level = _normalize_level(os.getenv("ELFA_HTTPX_LOG_LEVEL"), fallback="WARNING")

    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(
        sys.stderr,
        level=global_level,
        colorize=True,
        backtrace=False,
        diagnose=False,
        enqueue=False,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[src]: <" + str(_SOURCE_WIDTH) + "}</cyan> | "
            "<level>{message}</level>"
        ),
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [InterceptHandler()]
    root_logger.setLevel(_logging_level(global_level))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "httpx", "httpcore"):
        logging_logger = logging.getLogger(name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    logging.getLogger("uvicorn").setLevel(_logging_level(global_level))
    logging.getLogger("uvicorn.error").setLevel(_logging_level(global_level))
    logging.getLogger("uvicorn.access").setLevel(_logging_level(access_level))
    logging.getLogger("httpx").setLevel(_logging_level(httpx_level))
    logging.getLogger("httpcore").setLevel(_logging_level(httpx_level))

    return global_level


def _serialize_field(value: Any) -> str:
    if isinstance(value, str):
        compact = value.replace("\n", "\\n")
        if (not compact) or any(ch in compact for ch in (" ", "|", "'")):
            escaped = compact.replace("'", "\\'")
            return f"'{escaped}'"
        return compact
    if value is None:
        return "None"
    return str(value)


def _is_secret(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in _SECRET_MARKERS)


def log_event(event: str, **fields: Any) -> str:
    """Build a consistent `evt=... | key=value` log message. Secret-looking fields are masked."""
    parts = [f"evt={event}"]
    for key, value in fields.items():
        rendered = "***" if _is_secret(key) and value else _serialize_field(value)
        parts.append(f"{key}={rendered}")
    return " | ".join(parts)
