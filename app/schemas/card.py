"""
Card schemas for the card audio processor.
Request and response bodies exchanged with board clients.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class CardProcessRequest(BaseModel):
    """
    Request body describing a card exported from a board.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    card_name: Optional[Any] = Field(default=None, alias="cardName", description="Card title, passed through untyped")
    card_desc: Optional[str] = Field(default=None, alias="cardDesc", description="Free-text card description")
    card_id: Optional[Any] = Field(default=None, alias="cardId", description="Card identifier, passed through untyped")


class CardProcessResponse(BaseModel):
    """
    Response body for a successfully processed card.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[Any] = Field(default=None, description="Card title")
    description: str = Field(default="", description="Extracted or derived description")
    audio_url: str = Field(..., alias="audioUrl", description="Validated audio URL")
    tags: str = Field(default="", description="Extracted tags")
    card_id: Optional[Any] = Field(default=None, alias="cardId", description="Card identifier, passed through untyped")
    success: bool = Field(default=True, description="Processing outcome flag")


class ErrorResponse(BaseModel):
    """
    Response body for a rejected or failed request.
    """
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Diagnostic detail")
