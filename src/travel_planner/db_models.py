from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Itinerary(SQLModel, table=True):
    __tablename__ = "itineraries"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, max_length=255)
    title: str | None = Field(default=None, max_length=255)
    plan_data: dict[str, Any] = Field(
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    )
    created_at: datetime = Field(default_factory=_utcnow, index=True)


class Expense(SQLModel, table=True):
    __tablename__ = "expenses"

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(index=True, max_length=255)
    itinerary_id: int = Field(
        foreign_key="itineraries.id", index=True, ondelete="CASCADE"
    )
    category: str | None = Field(default=None, max_length=255)
    description: str | None = None
    amount: float
    created_at: datetime = Field(default_factory=_utcnow, index=True)
