"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that expose the
forecast state and the manual trigger, plus the system endpoints.
"""

from .forecast_controller import router as forecast_router
from .system_controller import router as system_router

__all__ = ["forecast_router", "system_router"]
