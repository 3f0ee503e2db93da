from __future__ import annotations

import os
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI
from loguru import logger

from elfa_core.logging_utils import log_event, setup_logging

# 1. Load environment variables at the very beginning (API keys, base URL)
load_dotenv()
setup_logging(default_level="INFO")
logger.info(log_event("logging.ready"))

from elfa_core.brain import GeminiBrain
from elfa_core.config import settings
from elfa_plugin import build_elfa_plugin
from elfa_plugin.router import router as elfa_router


# ============================================================
# Lifespan Management
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Builds the brain and the immutable action registry once per process.
    """
    logger.info(log_event("hub.startup.begin"))

    brain = GeminiBrain(
        model_name=settings.ELFA_MODEL_NAME,
        api_key=settings.GEMINI_API_KEY or None,
    )
    # One pooled client for every action; invocations never close it.
    http_client = httpx.AsyncClient()
    plugin = build_elfa_plugin(brain, http_client=http_client)
    app.state.elfa_plugin = plugin
    app.state.elfa_settings = settings
    logger.info(
        log_event(
            "plugin.online",
            plugin=plugin.name,
            actions=len(plugin.actions),
            model=settings.ELFA_MODEL_NAME,
        )
    )

    yield
    logger.info(log_event("hub.shutdown.begin"))
    await http_client.aclose()
    logger.info(log_event("hub.shutdown.done"))


# ============================================================
# FastAPI Application Setup
# ============================================================
app = FastAPI(
    title="Elfa AI Agent Actions",
    description="Conversational adapter actions for the Elfa AI social-analytics API",
    lifespan=lifespan,
)
app.include_router(elfa_router)


@app.get("/api/health")
async def healthcheck():
    return {"status": "ok"}


# ============================================================
# Execution Entry
# ============================================================
if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Run the Elfa AI action server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument(
        "--log-level",
        default=os.getenv("ELFA_LOG_LEVEL", "INFO"),
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
    )
    args = parser.parse_args()

    os.environ["ELFA_LOG_LEVEL"] = str(args.log_level).upper()
    setup_logging(default_level=str(args.log_level).upper())
    logger.info(
        log_event(
            "server.run",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=str(args.log_level).upper(),
        )
    )
    uvicorn.run(
        "app_api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )
