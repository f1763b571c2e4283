"""
Card Audio Processor FastAPI Application.
Local HTTP front end for the serverless card processing function.
"""
from fastapi import FastAPI

from app.api.routes.cards import router as cards_router
from app.api.routes.healthcheck import router as healthcheck_router
from app.config.settings import settings


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    CORS is answered by the function handler itself, so no CORS
    middleware is installed here.
    """
    app = FastAPI(
        title="Card Audio Processor",
        version=settings.service_version,
        description="Extracts and validates audio links from board cards"
    )

    # Route registration
    app.include_router(healthcheck_router, prefix="/api")
    app.include_router(cards_router)

    return app


app = create_app()
