"""Expense tracking endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from travel_planner.dependencies import get_expense_repository
from travel_planner.exceptions import PersistenceError
from travel_planner.repositories import ExpenseRepository
from travel_planner.request_models import CreateExpenseRequest
from travel_planner.response_models import ExpenseResponse

from .errors import ERROR_RESPONSES, api_error

router = APIRouter(prefix="/api/expenses", tags=["expenses"])

RepositoryDep = Annotated[ExpenseRepository, Depends(get_expense_repository)]


@router.post(
    "",
    status_code=201,
    response_model=ExpenseResponse,
    responses=ERROR_RESPONSES,
)
def add_expense(body: CreateExpenseRequest, repo: RepositoryDep) -> ExpenseResponse:
    """Records an expense against a saved itinerary."""
    if not body.user_id or not body.itinerary_id or not body.amount:
        raise api_error(400, "Missing user_id, itinerary_id or amount")

    try:
        expense = repo.add(
            user_id=body.user_id,
            itinerary_id=body.itinerary_id,
            amount=body.amount,
            category=body.category,
            description=body.description,
        )
    except PersistenceError as e:
        raise api_error(500, str(e))

    return ExpenseResponse.model_validate(expense, from_attributes=True)


@router.get("/{itinerary_id}", response_model=List[ExpenseResponse])
def list_expenses(itinerary_id: int, repo: RepositoryDep) -> List[ExpenseResponse]:
    """Returns the expenses of an itinerary, newest first."""
    try:
        expenses = repo.list_for_itinerary(itinerary_id)
    except PersistenceError as e:
        raise api_error(500, str(e))

    return [
        ExpenseResponse.model_validate(expense, from_attributes=True)
        for expense in expenses
    ]
