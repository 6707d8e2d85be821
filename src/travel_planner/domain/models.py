"""Domain models for transcription and trip planning."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class FrameStatus(IntEnum):
    """Position of an audio frame within a dictation session."""

    FIRST = 0
    MIDDLE = 1
    LAST = 2


class RecognitionFragment(BaseModel, frozen=True):
    """A recognized text segment pushed by the speech vendor."""

    text: str
    replace: bool = False


class TravelRequest(BaseModel):
    """Trip description submitted from the planning form."""

    destination: str = Field(min_length=1)
    days: int = Field(ge=1)
    budget: float | None = None
    companions: str | None = None
    preferences: str | None = None


class TravelInfo(BaseModel):
    """Trip fields extracted from a free-form (usually spoken) description."""

    destination: str | None = None
    days: int | None = None
    budget: float | None = None
    companions: str | None = None
    preferences: str | None = None


class Location(BaseModel):
    name: str
    lat: float | None = None
    lng: float | None = None


class Activity(BaseModel):
    time: str
    activity: str
    description: str | None = None
    location: Location | None = None


class DayPlan(BaseModel):
    day: int
    theme: str | None = None
    activities: list[Activity] = []


class BudgetItem(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    category: str
    cost: str
    notes: str | None = None


class BudgetAnalysis(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    total_estimate: str
    breakdown: list[BudgetItem] = []


class TravelPlan(BaseModel):
    """Structured itinerary produced by the LLM."""

    title: str
    budget_analysis: BudgetAnalysis
    daily_plan: list[DayPlan]
