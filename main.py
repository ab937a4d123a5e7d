import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.infrastructure.config.settings import get_settings
from src.infrastructure.persistence.database import (create_tables,
                                                     get_engine,
                                                     get_sessionmaker)
from src.presentation.api.errors import register_exception_handlers
from src.presentation.api.v1.routes import messages, timeline
from src.presentation.middleware.correlation import CorrelationIDMiddleware
from src.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    # Initialize logging
    setup_logging()
    logger.info("Message store: %s", settings.message_store)

    if settings.message_store == "database" and settings.database_auto_create:
        await create_tables(get_engine())
        logger.info("Database tables created")

    yield

    # Shutdown: close connections
    if settings.message_store == "database":
        await get_engine().dispose()
        logger.info("Database engine disposed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Correlation ID for request tracing
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(messages.router, prefix="/api/messages", tags=["messages"])
app.include_router(timeline.router, prefix="/api/timeline", tags=["timeline"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for load balancers and monitoring.

    Validates:
    - API is responsive
    - Message store availability (database connectivity for the database store)

    Returns:
    - 200 OK if healthy
    - 503 Service Unavailable if unhealthy
    """
    checks: dict[str, Any] = {
        "api": True,  # If we got here, API is responding
        "message_store": False,
    }

    try:
        if settings.message_store == "database":
            async with get_sessionmaker()() as session:
                await session.execute(text("SELECT 1"))
        checks["message_store"] = True
        return {"status": "healthy", "checks": checks}
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        checks["error"] = str(e)
        return JSONResponse(status_code=503, content={"status": "unhealthy", "checks": checks})
