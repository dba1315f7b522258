"""Borrowing policy model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lmsadmin.constants.defaults import (
    FINE_PER_DAY_DEFAULT,
    MAX_BOOKS_DEFAULT,
    REISSUE_PERIOD_DAYS_DEFAULT,
)
from lmsadmin.constants.limits import (
    BORROW_DAYS_MAX,
    BORROW_DAYS_MIN,
    MAX_BOOKS_MAX,
    MAX_BOOKS_MIN,
)


class Policy(BaseModel):
    """Library-wide borrowing policy record.

    Unknown keys coming from the store are kept so that a save writes back
    everything it read.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    policy_id: str | None = None
    library_id: str | None = None

    max_books_per_user: int = Field(
        default=MAX_BOOKS_DEFAULT,
        ge=MAX_BOOKS_MIN,
        le=MAX_BOOKS_MAX,
    )
    max_borrow_days: int = Field(
        default=REISSUE_PERIOD_DAYS_DEFAULT,
        ge=BORROW_DAYS_MIN,
        le=BORROW_DAYS_MAX,
    )
    fine_per_day: float = Field(default=FINE_PER_DAY_DEFAULT, ge=0)

    updated_at: datetime | None = None

    def with_limits(self, *, max_books_per_user: int, max_borrow_days: int) -> Policy:
        """Return a validated copy with the two borrowing limits replaced."""
        data = self.model_dump()
        data["max_books_per_user"] = max_books_per_user
        data["max_borrow_days"] = max_borrow_days
        return Policy.model_validate(data)


__all__ = ["Policy"]
