"""LLM-backed itinerary generation and travel-info extraction."""

from typing import Annotated

from fastapi import APIRouter, Depends

from travel_planner.dependencies import get_planner
from travel_planner.domain import TravelInfo, TravelPlan, TravelPlanner, TravelRequest
from travel_planner.exceptions import LLMServiceError
from travel_planner.request_models import ExtractRequest

from .errors import ERROR_RESPONSES, api_error

router = APIRouter(prefix="/api/llm", tags=["llm"])

PlannerDep = Annotated[TravelPlanner, Depends(get_planner)]


@router.post("/plan", response_model=TravelPlan, responses=ERROR_RESPONSES)
def generate_plan(request: TravelRequest, planner: PlannerDep) -> TravelPlan:
    """Generates a day-by-day itinerary with a budget breakdown."""
    try:
        return planner.generate_plan(request)
    except LLMServiceError:
        raise api_error(500, "Failed to generate plan")


@router.post("/extract", response_model=TravelInfo, responses=ERROR_RESPONSES)
def extract_travel_info(body: ExtractRequest, planner: PlannerDep) -> TravelInfo:
    """Pulls destination, days, budget, companions and preferences out of text."""
    if not body.text:
        raise api_error(400, "Missing text")

    try:
        return planner.extract_travel_info(body.text)
    except LLMServiceError:
        raise api_error(500, "Failed to extract travel info")
