"""Repository for itinerary expenses."""

from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session as DBSession
from sqlmodel import select

from travel_planner.db_models import Expense
from travel_planner.exceptions import PersistenceError
from travel_planner.logging import setup_logging

logger = setup_logging()


class ExpenseRepository:
    """Handles all database operations for expenses."""

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def add(
        self,
        user_id: str,
        itinerary_id: int,
        amount: float,
        category: str | None = None,
        description: str | None = None,
    ) -> Expense:
        """
        Records an expense and returns the persisted row.

        Raises:
            PersistenceError: If the insert fails.
        """
        expense = Expense(
            user_id=user_id,
            itinerary_id=itinerary_id,
            amount=amount,
            category=category,
            description=description,
        )
        try:
            self._db.add(expense)
            self._db.commit()
            self._db.refresh(expense)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(
                "Failed to save expense", extra={"itinerary_id": itinerary_id}
            )
            raise PersistenceError("expense", cause=e) from e

        logger.info(
            "Expense recorded",
            extra={"expense_id": expense.id, "itinerary_id": itinerary_id},
        )
        return expense

    def list_for_itinerary(self, itinerary_id: int) -> List[Expense]:
        """Returns the itinerary's expenses, newest first."""
        statement = (
            select(Expense)
            .where(Expense.itinerary_id == itinerary_id)
            .order_by(Expense.created_at.desc(), Expense.id.desc())
        )
        try:
            return list(self._db.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to list expenses", extra={"itinerary_id": itinerary_id}
            )
            raise PersistenceError("expense", cause=e) from e
