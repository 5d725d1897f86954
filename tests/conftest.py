"""Shared pytest fixtures for payment query tests."""

from __future__ import annotations

import pytest

from backend.services.clock import FixedDateTimeProvider
from backend.services.payment_service import PaymentService
from tests.fakes import NOW, FakePaymentRepository


@pytest.fixture
def repository() -> FakePaymentRepository:
    return FakePaymentRepository()


@pytest.fixture
def clock() -> FixedDateTimeProvider:
    return FixedDateTimeProvider(NOW)


@pytest.fixture
def service(repository: FakePaymentRepository, clock: FixedDateTimeProvider) -> PaymentService:
    return PaymentService(payment_repository=repository, date_time_provider=clock)
