"""
Process card use case for the card audio processor.
Pure domain logic: extract fields from the description, validate the audio
link and shape the outcome.
"""
from typing import Any, Optional

from app.core.models.card import (
    CardProcessingFailure,
    CardProcessingResult,
    CardProcessingSuccess,
    ProcessingErrorType,
)
from app.core.services.audio_url_validator import validate_audio_url
from app.core.services.card_description_parser import extract_fields


MISSING_AUDIO_URL_MESSAGE = (
    'No audio URL found in card description. Please include "Audio URL: your-url-here"'
)
INVALID_AUDIO_URL_MESSAGE = "Invalid audio URL format or unsupported file type"


class ProcessCardUseCase:
    """
    Use case for turning a card into a playable audio entry.

    """

    def execute(
        self,
        card_name: Any,
        card_desc: Optional[str],
        card_id: Any
    ) -> CardProcessingResult:
        """
        Process a single card.

        Args:
            card_name: Card title, passed through as-is
            card_desc: Free-text description to extract fields from
            card_id: Card identifier, passed through as-is

        Returns:
            CardProcessingSuccess with the response payload, or
            CardProcessingFailure when the audio link is missing or invalid
        """
        parsed = extract_fields(card_desc)

        if not parsed.audio_url:
            return CardProcessingFailure(
                error_type=ProcessingErrorType.MISSING_AUDIO_URL,
                message=MISSING_AUDIO_URL_MESSAGE,
                status_code=400
            )

        if not validate_audio_url(parsed.audio_url):
            return CardProcessingFailure(
                error_type=ProcessingErrorType.INVALID_AUDIO_URL,
                message=INVALID_AUDIO_URL_MESSAGE,
                status_code=400
            )

        return CardProcessingSuccess(payload={
            "title": card_name,
            "description": parsed.description or "",
            "audio_url": parsed.audio_url,
            "tags": parsed.tags or "",
            "card_id": card_id,
        })
