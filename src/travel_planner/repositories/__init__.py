"""Repository layer exports."""

from .expense_repository import ExpenseRepository
from .itinerary_repository import ItineraryRepository

__all__ = ["ExpenseRepository", "ItineraryRepository"]
