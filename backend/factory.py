"""Composition root for backend services."""

from __future__ import annotations

import logging

from backend.repositories.payments_repository import InMemoryPaymentRepository, PaymentRepository
from backend.services.clock import DateTimeProvider, SystemDateTimeProvider
from backend.services.payment_service import PaymentService
from shared import config


logger = logging.getLogger(__name__)


def build_payment_service(
    payment_repository: PaymentRepository | None = None,
    date_time_provider: DateTimeProvider | None = None,
) -> PaymentService:
    """Build the payment query service with its repository and clock.

    Without explicit collaborators the service reads from an in-memory
    repository (seeded with sample payments unless disabled through
    ``PAYMENTS_SEED_ENABLED``) and a system clock in ``PAYMENTS_TIMEZONE``.
    """

    if payment_repository is None:
        payment_repository = (
            InMemoryPaymentRepository() if config.payments_seed_enabled() else InMemoryPaymentRepository(payments=[])
        )

    if date_time_provider is None:
        date_time_provider = SystemDateTimeProvider(config.payments_timezone())

    logger.info(
        "payment_service_built repository=%s clock=%s",
        payment_repository.__class__.__name__,
        date_time_provider.__class__.__name__,
    )
    return PaymentService(payment_repository=payment_repository, date_time_provider=date_time_provider)
