"""API routers."""

from .analysis import router as analysis_router
from .health import router as health_router
from .interview import router as interview_router
from .sessions import router as sessions_router

__all__ = [
    "analysis_router",
    "health_router",
    "interview_router",
    "sessions_router",
]
