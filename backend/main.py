"""
FastAPI application entry point for the justin backend service.

This module sets up the FastAPI application with logging, health endpoints,
and the Slack slash command route.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import settings
from modules.slack_gateway.handlers import slack_router
from utils.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown tasks."""
    setup_logging(settings.log_level, json_logs=not settings.debug)
    logging.info("Starting justin backend service")
    if not settings.justin_command or not settings.justin_token:
        logging.warning("Slash command or token check disabled; set JUSTIN_COMMAND and JUSTIN_TOKEN")

    yield

    logging.info("Shutting down justin backend service")


# Create FastAPI application
app = FastAPI(
    title="Justin Backend",
    description="Slack slash command that answers with a search link",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "justin-backend"}


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logging.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


# Include routers
app.include_router(slack_router, prefix="/slack", tags=["slack"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
