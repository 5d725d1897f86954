"""Payment repository contract and in-memory adapter."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Protocol

from shared.models import Payment, PaymentItem, User


class PaymentRepository(Protocol):
    def find_all(self) -> list[Payment]:
        """Return every payment currently known to the source, unfiltered."""


def _sample_payments() -> list[Payment]:
    anna = User(email="anna.kowalska@example.com", first_name="Anna", last_name="Kowalska")
    jan = User(email="jan.nowak@example.com", first_name="Jan", last_name="Nowak")
    return [
        Payment(
            payment_date=datetime(2025, 1, 3, 9, 15, tzinfo=timezone.utc),
            user=anna,
            payment_items=(
                PaymentItem(name="Coffee beans", price=Decimal("42.00"), discount=Decimal("2.00")),
                PaymentItem(name="Milk", price=Decimal("3.49")),
            ),
        ),
        Payment(
            payment_date=datetime(2025, 1, 17, 18, 40, tzinfo=timezone.utc),
            user=jan,
            payment_items=(PaymentItem(name="Headphones", price=Decimal("199.99"), discount=Decimal("20.00")),),
        ),
        Payment(
            payment_date=datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc),
            user=anna,
            payment_items=(
                PaymentItem(name="Notebook", price=Decimal("8.50")),
                PaymentItem(name="Pen", price=Decimal("2.10"), discount=Decimal("0.10")),
                PaymentItem(name="Milk", price=Decimal("3.49")),
            ),
        ),
        Payment(
            payment_date=datetime(2025, 2, 14, 20, 5, tzinfo=timezone.utc),
            user=jan,
            payment_items=(PaymentItem(name="Flowers", price=Decimal("55.00"), discount=Decimal("5.00")),),
        ),
    ]


class InMemoryPaymentRepository:
    """In-memory repository used for local dev/tests when no other source is wired."""

    def __init__(self, payments: list[Payment] | None = None) -> None:
        self._payments: list[Payment] = list(payments) if payments is not None else _sample_payments()

    def find_all(self) -> list[Payment]:
        return list(self._payments)
