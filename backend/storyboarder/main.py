from __future__ import annotations
"""Storyboarder — FastAPI application entry point.

Mounts the API routes, installs bearer authentication and CORS, renders
action errors into the failure envelope, and optionally creates tables on
startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from storyboarder import __version__
from storyboarder.api.router import api_router
from storyboarder.auth import BearerAuthMiddleware
from storyboarder.config import get_settings
from storyboarder.database import close_db, init_db
from storyboarder.errors import ActionError, action_error_handler, validation_error_handler

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: optionally create tables on startup, close the pool on shutdown."""
    logger.info("%s starting up...", settings.APP_NAME)
    if settings.AUTO_CREATE_TABLES:
        await init_db()
    else:
        logger.info("Skipping init_db (tables assumed to exist)")

    yield

    await close_db()
    logger.info("%s shut down", settings.APP_NAME)


app = FastAPI(
    title="Storyboarder API",
    description="Plan comic projects, pages and panels",
    version=__version__,
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_exception_handler(ActionError, action_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.add_middleware(BearerAuthMiddleware)
# CORS is added last so it wraps auth and answers preflight requests first
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "service": settings.APP_NAME,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": __version__,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storyboarder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
