"""Response models for the planner API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    """Text recognized from an uploaded recording."""

    transcription: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    details: str | None = None


class MessageResponse(BaseModel):
    message: str


class ItineraryResponse(BaseModel):
    """A saved itinerary."""

    id: int
    user_id: str
    title: str | None
    plan_data: dict[str, Any]
    created_at: datetime


class ExpenseResponse(BaseModel):
    """An expense recorded against an itinerary."""

    id: int
    user_id: str
    itinerary_id: int
    category: str | None
    description: str | None
    amount: float
    created_at: datetime
