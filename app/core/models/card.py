"""
Card domain models for the card audio processor.
Pure domain entities without infrastructure dependencies.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, Union


class ProcessingErrorType(str, Enum):
    """Failure categories a card processing request can end in."""
    METHOD_NOT_ALLOWED = "method_not_allowed"
    MISSING_AUDIO_URL = "missing_audio_url"
    INVALID_AUDIO_URL = "invalid_audio_url"
    PROCESSING_ERROR = "processing_error"


@dataclass
class ParsedCardInfo:
    """Fields extracted from a card's free-text description."""
    audio_url: Optional[str] = None
    description: str = ""
    tags: str = ""


@dataclass
class CardProcessingSuccess:
    """Successful outcome carrying the response payload."""
    payload: Dict[str, Any]
    status_code: int = 200
    success: bool = field(default=True, init=False)


@dataclass
class CardProcessingFailure:
    """Failed outcome carrying the error reported to the caller."""
    error_type: ProcessingErrorType
    message: str
    status_code: int
    details: Optional[str] = None
    success: bool = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert failure to the error body sent on the wire."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


CardProcessingResult = Union[CardProcessingSuccess, CardProcessingFailure]
