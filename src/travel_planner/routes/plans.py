"""Saved itinerary endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from travel_planner.dependencies import get_itinerary_repository
from travel_planner.exceptions import ItineraryNotFoundError, PersistenceError
from travel_planner.repositories import ItineraryRepository
from travel_planner.request_models import SavePlanRequest
from travel_planner.response_models import ItineraryResponse, MessageResponse

from .errors import ERROR_RESPONSES, api_error

router = APIRouter(prefix="/api/plans", tags=["plans"])

RepositoryDep = Annotated[ItineraryRepository, Depends(get_itinerary_repository)]


@router.post(
    "/save",
    status_code=201,
    response_model=ItineraryResponse,
    responses=ERROR_RESPONSES,
)
def save_plan(body: SavePlanRequest, repo: RepositoryDep) -> ItineraryResponse:
    """Stores a generated plan for a user and returns the new row."""
    if not body.user_id or body.plan_data is None:
        raise api_error(400, "Missing user_id or plan_data")

    try:
        itinerary = repo.save(body.user_id, body.title, body.plan_data)
    except PersistenceError as e:
        raise api_error(500, str(e))

    return ItineraryResponse.model_validate(itinerary, from_attributes=True)


@router.get("/{user_id}", response_model=List[ItineraryResponse])
def list_plans(user_id: str, repo: RepositoryDep) -> List[ItineraryResponse]:
    """Returns a user's plans, newest first."""
    try:
        itineraries = repo.list_for_user(user_id)
    except PersistenceError as e:
        raise api_error(500, str(e))

    return [
        ItineraryResponse.model_validate(itinerary, from_attributes=True)
        for itinerary in itineraries
    ]


@router.delete(
    "/{plan_id}", response_model=MessageResponse, responses=ERROR_RESPONSES
)
def delete_plan(plan_id: int, repo: RepositoryDep) -> MessageResponse:
    """Deletes a plan and its expenses."""
    try:
        repo.delete(plan_id)
    except ItineraryNotFoundError:
        raise api_error(404, "Plan not found")
    except PersistenceError as e:
        raise api_error(500, str(e))

    return MessageResponse(message="Plan deleted")
