"""Repository for saved itineraries."""

from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session as DBSession
from sqlmodel import select

from travel_planner.db_models import Itinerary
from travel_planner.exceptions import ItineraryNotFoundError, PersistenceError
from travel_planner.logging import setup_logging

logger = setup_logging()


class ItineraryRepository:
    """
    Handles all database operations for itineraries.

    Encapsulates SQL queries and transaction management,
    keeping the HTTP layer free of database concerns.
    """

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def save(
        self, user_id: str, title: str | None, plan_data: dict[str, Any]
    ) -> Itinerary:
        """
        Stores a new itinerary and returns the persisted row.

        Raises:
            PersistenceError: If the insert fails.
        """
        itinerary = Itinerary(user_id=user_id, title=title, plan_data=plan_data)
        try:
            self._db.add(itinerary)
            self._db.commit()
            self._db.refresh(itinerary)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception("Failed to save itinerary", extra={"user_id": user_id})
            raise PersistenceError("itinerary", cause=e) from e

        logger.info(
            "Itinerary saved",
            extra={"itinerary_id": itinerary.id, "user_id": user_id},
        )
        return itinerary

    def list_for_user(self, user_id: str) -> List[Itinerary]:
        """Returns the user's itineraries, newest first."""
        statement = (
            select(Itinerary)
            .where(Itinerary.user_id == user_id)
            .order_by(Itinerary.created_at.desc(), Itinerary.id.desc())
        )
        try:
            return list(self._db.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception("Failed to list itineraries", extra={"user_id": user_id})
            raise PersistenceError("itinerary", cause=e) from e

    def delete(self, itinerary_id: int) -> None:
        """
        Deletes an itinerary.

        Raises:
            ItineraryNotFoundError: If no itinerary has this id.
            PersistenceError: If the delete fails.
        """
        try:
            itinerary = self._db.get(Itinerary, itinerary_id)
            if itinerary is None:
                raise ItineraryNotFoundError(itinerary_id)
            self._db.delete(itinerary)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception(
                "Failed to delete itinerary", extra={"itinerary_id": itinerary_id}
            )
            raise PersistenceError("itinerary", cause=e) from e

        logger.info("Itinerary deleted", extra={"itinerary_id": itinerary_id})
