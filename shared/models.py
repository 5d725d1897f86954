"""Pydantic contracts for payment records and query arguments."""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


_YEAR_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


class QueryErrorCode(str, Enum):
    """Stable error codes for payment query contracts."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class QueryError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: QueryErrorCode
    message: str
    details: dict[str, object] | None = None


class User(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    email: str
    first_name: str | None = None
    last_name: str | None = None


class PaymentItem(BaseModel):
    """One purchased line item of a payment."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    price: Decimal = Field(ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0)

    def final_price(self) -> Decimal:
        return self.price - self.discount


class Payment(BaseModel):
    """A single transaction: when it happened, who paid and what was bought.

    Instances are frozen and compare structurally: two payments with the same
    date (including its recorded UTC offset), user and items collapse into one
    element of a set.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    payment_date: AwareDatetime
    user: User
    payment_items: tuple[PaymentItem, ...] = ()

    def total_sum(self) -> Decimal:
        """Return the sum of ``price - discount`` over all items."""
        return sum((item.final_price() for item in self.payment_items), Decimal("0"))

    def discount_sum(self) -> Decimal:
        """Return the sum of discounts over all items."""
        return sum((item.discount for item in self.payment_items), Decimal("0"))

    def item_count(self) -> int:
        return len(self.payment_items)

    def _identity(self) -> tuple[object, ...]:
        # Aware datetimes compare by instant; the recorded offset decides the
        # calendar month, so it is part of the identity too.
        return (self.payment_date, self.payment_date.utcoffset(), self.user, self.payment_items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Payment):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


class YearMonth(BaseModel):
    """Calendar month of a given year, e.g. ``2023-06``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    month: int = Field(ge=1, le=12)

    @classmethod
    def of(cls, value: datetime) -> YearMonth:
        """Return the year-month of ``value`` as recorded, without zone conversion."""
        return cls(year=value.year, month=value.month)

    @classmethod
    def parse(cls, value: str) -> YearMonth:
        """Parse a ``YYYY-MM`` string."""
        match = _YEAR_MONTH_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Invalid year-month: {value!r} (expected YYYY-MM)")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, value: datetime) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
