"""
Cart Shop Backend Application.

FastAPI application exposing product management, member lookup
and per-member shopping carts.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from loguru import logger

from cartshop.api.errors import register_exception_handlers
from cartshop.api.v1 import router as api_router
from cartshop.core.config import settings
from cartshop.core.database import check_db, close_db, init_db
from cartshop.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    setup_logging(settings.log_level)
    logger.info("Starting Cart Shop Backend...")

    # Initialize database
    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down Cart Shop Backend...")
    await close_db()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Cart Shop Backend

    ## Features

    - **Products**: create, list, partially update and delete products
    - **Members**: member listing and HTTP Basic credential lookup
    - **Cart**: per-member cart with duplicate protection
    """,
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health", tags=["System"])
async def health_check() -> dict:
    """Health check endpoint for monitoring."""
    database_ok = await check_db()
    return {
        "status": "healthy" if database_ok else "degraded",
        "version": settings.app_version,
        "database": "up" if database_ok else "down",
    }


@app.get("/", tags=["System"])
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "cartshop.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
