"""Tests for InMemoryOrderRepository.

Tests cover:
- Copy-on-read and copy-on-save detachment
- Response group projection
- Search filters, ordering and paging
"""

from decimal import Decimal

import pytest

from orders_core.domain.entities import CustomerOrder, Shipment
from orders_core.domain.value_objects import OrderSearchCriteria, ResponseGroup
from orders_core.infrastructure.order_repository import InMemoryOrderRepository


@pytest.fixture
def repository(order: CustomerOrder) -> InMemoryOrderRepository:
    order.shipments.append(Shipment(id="shipment-1"))
    repository = InMemoryOrderRepository()
    repository.save([order])
    return repository


class TestInMemoryOrderRepositoryReads:
    def test_get_by_ids_skips_unknown_ids(self, repository: InMemoryOrderRepository) -> None:
        result = repository.get_by_ids(["missing", "order-1"])

        assert [order.id for order in result] == ["order-1"]

    def test_reads_return_copies(self, repository: InMemoryOrderRepository) -> None:
        first = repository.get_by_ids(["order-1"])[0]
        first.in_payments[0].outer_id = "changed"

        second = repository.get_by_ids(["order-1"])[0]

        assert first is not second
        assert second.in_payments[0].outer_id is None

    def test_save_stores_a_copy_without_scopes(
        self, repository: InMemoryOrderRepository, order: CustomerOrder
    ) -> None:
        order.scopes = ("store:store-a",)
        repository.save([order])
        order.number = "changed-after-save"

        stored = repository.get_by_ids(["order-1"])[0]

        assert stored.scopes == ()
        assert stored.number == "ORD-1001"

    def test_full_group_loads_everything(self, repository: InMemoryOrderRepository) -> None:
        order = repository.get_by_ids(["order-1"], ResponseGroup.FULL)[0]

        assert len(order.in_payments) == 1
        assert len(order.shipments) == 1
        assert order.total == Decimal("150.00")

    def test_documents_are_only_loaded_when_requested(
        self, repository: InMemoryOrderRepository
    ) -> None:
        order = repository.get_by_ids(["order-1"], ResponseGroup.WITH_SHIPMENTS)[0]

        assert order.in_payments == []
        assert len(order.shipments) == 1

    def test_prices_are_zeroed_without_price_flag(
        self, repository: InMemoryOrderRepository
    ) -> None:
        group = ResponseGroup.FULL.without_prices()

        order = repository.get_by_ids(["order-1"], group)[0]

        assert order.total == Decimal("0")
        assert order.in_payments[0].amount == Decimal("0")


class TestInMemoryOrderRepositorySearch:
    @pytest.fixture(autouse=True)
    def more_orders(self, repository: InMemoryOrderRepository) -> None:
        repository.save(
            [
                CustomerOrder(id="o2", number="ORD-0900", store_id="store-b", customer_id="c2"),
                CustomerOrder(id="o3", number="ORD-2000", store_id="store-a", employee_id="e1"),
            ]
        )

    def _numbers(self, repository: InMemoryOrderRepository, **criteria) -> list[str]:
        result = repository.search(OrderSearchCriteria(**criteria))
        return [order.number for order in result.results]

    def test_no_filter_returns_all_ordered_by_number(
        self, repository: InMemoryOrderRepository
    ) -> None:
        assert self._numbers(repository) == ["ORD-0900", "ORD-1001", "ORD-2000"]

    def test_filters_by_number(self, repository: InMemoryOrderRepository) -> None:
        assert self._numbers(repository, number="ORD-2000") == ["ORD-2000"]

    def test_filters_by_store_ids(self, repository: InMemoryOrderRepository) -> None:
        assert self._numbers(repository, store_ids=("store-a",)) == ["ORD-1001", "ORD-2000"]

    def test_empty_store_ids_match_nothing(self, repository: InMemoryOrderRepository) -> None:
        result = repository.search(OrderSearchCriteria(store_ids=()))

        assert result.results == []
        assert result.total_count == 0

    def test_filters_by_employee_and_customer(self, repository: InMemoryOrderRepository) -> None:
        assert self._numbers(repository, employee_id="e1") == ["ORD-2000"]
        assert self._numbers(repository, customer_id="c2") == ["ORD-0900"]

    def test_pages_results(self, repository: InMemoryOrderRepository) -> None:
        result = repository.search(OrderSearchCriteria(skip=2, take=5))

        assert [order.number for order in result.results] == ["ORD-2000"]
        assert result.total_count == 3

    def test_results_are_projected(self, repository: InMemoryOrderRepository) -> None:
        criteria = OrderSearchCriteria(number="ORD-1001", response_group=ResponseGroup.DEFAULT)

        order = repository.search(criteria).results[0]

        assert order.in_payments == []
        assert order.total == Decimal("0")
