"""Read-only queries over the full payment record set.

Every query fetches a fresh snapshot from the repository, never caches it and
never mutates the returned payments. The clock is read at most once per call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from backend.repositories.payments_repository import PaymentRepository
from backend.services.clock import DateTimeProvider
from shared.models import Payment, PaymentItem, QueryError, QueryErrorCode, YearMonth


logger = logging.getLogger(__name__)


class InvalidQueryArgumentError(ValueError):
    """Raised when a query receives an argument outside its domain."""

    code = QueryErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, **details: object) -> None:
        super().__init__(message)
        self.details = details

    def to_query_error(self) -> QueryError:
        return QueryError(code=self.code, message=str(self), details=self.details or None)


def _item_count(payment: Payment) -> int:
    return payment.item_count()


def _payment_date(payment: Payment) -> datetime:
    return payment.payment_date


def _in_month(year_month: YearMonth) -> Callable[[Payment], bool]:
    return lambda payment: year_month.contains(payment.payment_date)


def _flatten_items(payments: Iterable[Payment]) -> list[PaymentItem]:
    return [item for payment in payments for item in payment.payment_items]


class PaymentService:
    """Stateless query facade over a payment repository and a clock."""

    def __init__(self, payment_repository: PaymentRepository, date_time_provider: DateTimeProvider) -> None:
        self._payment_repository = payment_repository
        self._date_time_provider = date_time_provider

    def _payments(self) -> list[Payment]:
        return self._payment_repository.find_all()

    def _sorted(self, key: Callable[[Payment], Any], *, descending: bool) -> list[Payment]:
        # ``reverse=True`` keeps ties in their original order.
        return sorted(self._payments(), key=key, reverse=descending)

    def _filtered(self, predicate: Callable[[Payment], bool]) -> list[Payment]:
        return [payment for payment in self._payments() if predicate(payment)]

    def sorted_by_date_ascending(self) -> list[Payment]:
        return self._sorted(_payment_date, descending=False)

    def sorted_by_date_descending(self) -> list[Payment]:
        return self._sorted(_payment_date, descending=True)

    def sorted_by_item_count_ascending(self) -> list[Payment]:
        return self._sorted(_item_count, descending=False)

    def sorted_by_item_count_descending(self) -> list[Payment]:
        return self._sorted(_item_count, descending=True)

    def for_month(self, year_month: YearMonth | str) -> list[Payment]:
        """Return payments dated within ``year_month``, in repository order.

        Accepts either a :class:`YearMonth` or a ``YYYY-MM`` string. The month
        is matched against each payment's date as recorded, without converting
        it to another zone.
        """
        if isinstance(year_month, str):
            year_month = YearMonth.parse(year_month)
        payments = self._filtered(_in_month(year_month))
        logger.debug("payment_query_completed query=for_month year_month=%s count=%s", year_month, len(payments))
        return payments

    def for_current_month(self) -> list[Payment]:
        # One clock reading for both year and month.
        current = YearMonth.of(self._date_time_provider.now())
        return self.for_month(current)

    def for_last_days(self, days: int) -> list[Payment]:
        """Return payments strictly between ``now - days`` and ``now``.

        Both bounds are exclusive: a payment dated exactly ``now`` or exactly
        ``days`` days earlier is left out.
        """
        if days < 0:
            logger.warning("payment_query_rejected query=for_last_days days=%s", days)
            raise InvalidQueryArgumentError("days must be zero or positive", days=days)

        now = self._date_time_provider.now()
        since = now - timedelta(days=days)
        payments = self._filtered(lambda payment: since < payment.payment_date < now)
        logger.debug("payment_query_completed query=for_last_days days=%s count=%s", days, len(payments))
        return payments

    def with_exactly_one_item(self) -> set[Payment]:
        return set(self._filtered(lambda payment: payment.item_count() == 1))

    def products_sold_in_current_month(self) -> set[str]:
        return {item.name for item in _flatten_items(self.for_current_month())}

    def total_for_month(self, year_month: YearMonth | str) -> Decimal:
        return sum((payment.total_sum() for payment in self.for_month(year_month)), Decimal("0"))

    def discount_for_month(self, year_month: YearMonth | str) -> Decimal:
        return sum((payment.discount_sum() for payment in self.for_month(year_month)), Decimal("0"))

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Return the items of every payment made by ``email``.

        The match is exact and case-sensitive. Items keep the order of their
        payment, and payments keep repository order.
        """
        return _flatten_items(self._filtered(lambda payment: payment.user.email == email))

    def with_value_over(self, threshold: int) -> set[Payment]:
        limit = Decimal(threshold)
        return set(self._filtered(lambda payment: payment.total_sum() > limit))
