"""
API routes module.
Contains FastAPI route definitions.
"""

# Export all routers for easy import in main.py
from .healthcheck import router as healthcheck_router
from .cards import router as cards_router

__all__ = ["healthcheck_router", "cards_router"]
