"""FastAPI application for contact list imports."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentlists.api.v1 import lists
from agentlists.core.config import settings
from agentlists.core.logging import get_logger, setup_logging
from agentlists.db.session import dispose_engine


def _log_level() -> str:
    if settings.LOG_LEVEL:
        return settings.LOG_LEVEL
    return "DEBUG" if settings.APP_ENV == "development" else "INFO"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(_log_level(), json_logs=settings.APP_ENV != "development")
    logger = get_logger("agentlists.startup")
    logger.info(
        "Service starting",
        env=settings.APP_ENV,
        agent_count=settings.DISTRIBUTION_AGENT_COUNT,
        max_upload_bytes=settings.MAX_UPLOAD_BYTES,
    )
    yield
    await dispose_engine()
    logger.info("Service stopped")


app = FastAPI(
    title="Agent Lists API",
    description="Upload contact lists and spread them round-robin across agents",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(lists.router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok", "env": settings.APP_ENV}
