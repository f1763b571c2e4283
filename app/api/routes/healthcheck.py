"""
Health check routes for the card audio processor.
"""
import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.presentation.lambda_handler import health_check_handler


router = APIRouter()


@router.get("/ping", tags=["Health"])
async def ping():
    """
    Basic health check endpoint.

    Returns:
        dict: Simple pong response
    """
    return {"message": "pong"}


@router.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Service health reported by the function's health check handler.
    """
    result = health_check_handler({"httpMethod": request.method}, None)
    return JSONResponse(status_code=result["statusCode"], content=json.loads(result["body"]))
