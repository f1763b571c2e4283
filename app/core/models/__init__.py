"""
Domain models for the card audio processor.
"""
from .card import (
    ParsedCardInfo,
    ProcessingErrorType,
    CardProcessingSuccess,
    CardProcessingFailure,
    CardProcessingResult,
)

__all__ = [
    "ParsedCardInfo",
    "ProcessingErrorType",
    "CardProcessingSuccess",
    "CardProcessingFailure",
    "CardProcessingResult",
]
