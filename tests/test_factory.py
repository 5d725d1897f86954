"""Integration-like tests for the backend composition root."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from backend.factory import build_payment_service
from backend.repositories.payments_repository import InMemoryPaymentRepository
from backend.services.clock import FixedDateTimeProvider
from backend.services.payment_service import PaymentService


def test_build_payment_service_with_seeded_repository(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "dev")
    monkeypatch.delenv("PAYMENTS_SEED_ENABLED", raising=False)
    clock = FixedDateTimeProvider(datetime(2025, 2, 20, tzinfo=timezone.utc))

    service = build_payment_service(date_time_provider=clock)

    assert isinstance(service, PaymentService)
    assert len(service.sorted_by_date_ascending()) == 4
    assert service.products_sold_in_current_month() == {"Notebook", "Pen", "Milk", "Flowers"}
    assert service.total_for_month("2025-01") == Decimal("223.48")


def test_build_payment_service_without_seed(monkeypatch) -> None:
    monkeypatch.setenv("PAYMENTS_SEED_ENABLED", "false")

    service = build_payment_service()

    assert service.sorted_by_date_ascending() == []


def test_build_payment_service_uses_given_repository() -> None:
    repository = InMemoryPaymentRepository(payments=[])
    clock = FixedDateTimeProvider(datetime(2025, 1, 1, tzinfo=timezone.utc))

    service = build_payment_service(payment_repository=repository, date_time_provider=clock)

    assert service.for_current_month() == []
