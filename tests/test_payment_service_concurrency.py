"""Queries run side by side over per-call snapshots."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

from backend.repositories.payments_repository import InMemoryPaymentRepository
from backend.services.clock import FixedDateTimeProvider
from backend.services.payment_service import PaymentService
from tests.fakes import ANNA, JAN, NOW, item, payment


def _run_all(service: PaymentService) -> tuple[object, ...]:
    return (
        service.sorted_by_date_ascending(),
        service.sorted_by_item_count_descending(),
        service.for_last_days(30),
        service.with_exactly_one_item(),
        service.products_sold_in_current_month(),
        service.total_for_month("2023-06"),
        service.discount_for_month("2023-06"),
        service.items_for_user_email("jan@example.com"),
        service.with_value_over(5),
    )


def test_concurrent_queries_match_sequential_results() -> None:
    payments = []
    for day in range(1, 40):
        items = [item(f"P{n}", f"{n}.50", "0.25") for n in range(day % 4)]
        payments.append(payment(NOW - timedelta(days=day), *items, user=JAN if day % 2 else ANNA))
    repository = InMemoryPaymentRepository(payments=payments)
    service = PaymentService(payment_repository=repository, date_time_provider=FixedDateTimeProvider(NOW))
    expected = _run_all(service)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: _run_all(service), range(32)))

    assert all(result == expected for result in results)
    assert repository.find_all() == payments
