"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, interview_coach.api, interview_coach.observability, interview_coach.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_coach.configs import get_settings
from interview_coach.api import api_router
from interview_coach.api.deps import get_service_cache
from interview_coach.boundary.db.connection import get_async_engine
from interview_coach.boundary.db.create_tables import create_all_tables
from interview_coach.observability.logger import configure_logging
from interview_coach.observability.middleware import (
    RequestLoggingMiddleware,
    CorrelationMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and creates the schema on startup. In-flight
    analysis runs are not awaited on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    try:
        await create_all_tables()
        logger.info("Application startup complete: database schema ready")
    except Exception as e:
        logger.exception(
            "Failed to initialize database schema",
            extra={"error": str(e)},
        )
        raise

    yield

    active = get_service_cache().analysis_runner.active_count
    if active:
        logger.warning("Shutting down with analysis runs in flight", extra={"active": active})
    await get_async_engine().dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Mock interviews grounded in a resume and a job description, with post-interview analysis",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "interview_coach.main:app",
        host="localhost",
        port=8082,
        reload=get_settings().debug,
    )
