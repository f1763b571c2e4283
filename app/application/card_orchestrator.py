"""
Card orchestrator for the card audio processor.

Turns a raw request body into a processing result: JSON decoding, schema
validation, delegation to the process card use case and response shaping.
Parse and processing errors are returned as failure results, never raised.
"""
import json
from typing import Any, Dict, Optional

from app.core.models.card import (
    CardProcessingFailure,
    CardProcessingResult,
    CardProcessingSuccess,
    ProcessingErrorType,
)
from app.core.usecases.process_card import ProcessCardUseCase
from app.infrastructure.logging.log_config import get_logger
from app.schemas.card import CardProcessRequest, CardProcessResponse

logger = get_logger(__name__)

PROCESSING_ERROR_MESSAGE = "Failed to process card data"


def processing_failure(error: Exception) -> CardProcessingFailure:
    """Build the catch-all failure reported for an unexpected error."""
    return CardProcessingFailure(
        error_type=ProcessingErrorType.PROCESSING_ERROR,
        message=PROCESSING_ERROR_MESSAGE,
        status_code=500,
        details=str(error)
    )


class CardOrchestrator:
    """
    Orchestrates card processing for a single request body.
    """

    def __init__(self, use_case: Optional[ProcessCardUseCase] = None):
        self.use_case = use_case or ProcessCardUseCase()

    def process_body(self, body: Optional[str]) -> CardProcessingResult:
        """
        Process a raw JSON request body.

        Args:
            body: Request body text, expected to be a JSON object

        Returns:
            CardProcessingSuccess whose payload is the wire response body,
            or CardProcessingFailure
        """
        try:
            request = CardProcessRequest.model_validate(self._decode_body(body))
        except (TypeError, ValueError) as e:
            # JSONDecodeError and pydantic ValidationError are ValueErrors
            logger.error("Processing error: invalid request body", extra={
                "extra_fields": {
                    "error": str(e),
                    "error_type": type(e).__name__
                }
            })
            return processing_failure(e)

        logger.debug("Card request parsed", extra={
            "extra_fields": {
                "card_id": request.card_id,
                "has_description": bool(request.card_desc)
            }
        })

        result = self.use_case.execute(
            card_name=request.card_name,
            card_desc=request.card_desc,
            card_id=request.card_id
        )

        if isinstance(result, CardProcessingFailure):
            logger.warning("Card rejected", extra={
                "extra_fields": {
                    "card_id": request.card_id,
                    "error_type": result.error_type.value,
                    "status_code": result.status_code
                }
            })
            return result

        # Pass-through fields absent from the request stay absent from the response
        payload = dict(result.payload)
        if "card_name" not in request.model_fields_set:
            payload.pop("title", None)
        if "card_id" not in request.model_fields_set:
            payload.pop("card_id", None)

        response = CardProcessResponse(**payload, success=True)
        logger.info("Card processed successfully", extra={
            "extra_fields": {
                "card_id": request.card_id,
                "audio_url": response.audio_url
            }
        })
        return CardProcessingSuccess(
            payload=response.model_dump(by_alias=True, exclude_unset=True),
            status_code=result.status_code
        )

    @staticmethod
    def _decode_body(body: Optional[str]) -> Dict[str, Any]:
        """
        Decode the body into the mapping validated as a card request.

        JSON values other than objects carry no card fields and decode to
        an empty mapping; a JSON null is rejected.

        Raises:
            TypeError: If the body is missing or decodes to null
            ValueError: If the body is not valid JSON
        """
        data = json.loads(body)
        if data is None:
            raise TypeError("Cannot read card fields from null")
        if not isinstance(data, dict):
            return {}
        return data
