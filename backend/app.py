from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from api.errors import register_exception_handlers
from api.me import router as me_router
from api.search_conditions import router as search_conditions_router
from api.users import router as users_router
from infrastructure.config import get_app_version, get_repository_backend
from infrastructure.persistence.factory import (
    ensure_indexes,
    get_search_condition_repository,
    get_user_repository,
    reset_repositories,
)

_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Set at image build time (Docker ARG -> ENV APP_VERSION)
APP_VERSION = get_app_version()


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Application lifecycle: build repositories and indexes, release them on shutdown."""
    logger = _logging.getLogger("startup")

    logger.info(
        "lifespan.startup",
        extra={"backend": get_repository_backend(), "version": APP_VERSION},
    )
    get_user_repository()
    get_search_condition_repository()
    await ensure_indexes()

    logger.info("lifespan.ready", extra={"status": "serving"})
    yield

    logger.info("lifespan.shutdown", extra={"status": "cleanup"})
    reset_repositories()


app = FastAPI(
    title="Staff Directory Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)

register_exception_handlers(app)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


app.include_router(users_router)
app.include_router(search_conditions_router)
app.include_router(me_router)
