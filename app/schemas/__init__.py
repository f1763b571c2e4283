"""
Schemas module for the card audio processor.
Contains Pydantic models for request/response validation.
"""

from .card import CardProcessRequest, CardProcessResponse, ErrorResponse

__all__ = [
    "CardProcessRequest",
    "CardProcessResponse",
    "ErrorResponse",
]
