"""Request bodies for the planner API.

Required fields are optional here so missing values produce the API's own
400 responses instead of a validation error.
"""

from typing import Any

from pydantic import BaseModel


class ExtractRequest(BaseModel):
    text: str | None = None


class SavePlanRequest(BaseModel):
    user_id: str | None = None
    title: str | None = None
    plan_data: dict[str, Any] | None = None


class CreateExpenseRequest(BaseModel):
    user_id: str | None = None
    itinerary_id: int | None = None
    category: str | None = None
    description: str | None = None
    amount: float | None = None
