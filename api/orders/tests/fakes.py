"""In-memory fake repository wrapper for API tests.

Same interface as ``orders.repository.RepositoryWrapper`` but keeps rows in
dicts. Reads hand out copies so a handler cannot change stored state without
calling the mutation methods, and ``saves`` counts commits.
"""

from __future__ import annotations

import copy

from core.paging import PagedList, offset_for
from orders.entities import Order, OrderDetail
from orders.schemas import OrderParameters


class FakeStore:
    def __init__(self) -> None:
        self.orders: dict[int, Order] = {}
        self.details: list[OrderDetail] = []
        self._next_id = 1

    def add_order(self, order: Order) -> Order:
        if not order.order_id:
            order.order_id = self._next_id
        self._next_id = max(self._next_id, order.order_id + 1)
        self.orders[order.order_id] = order
        return order

    def next_id(self) -> int:
        order_id = self._next_id
        self._next_id += 1
        return order_id


class FakeOrderRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def _matching(self, parameters: OrderParameters) -> list[Order]:
        rows = sorted(self._store.orders.values(), key=lambda o: o.order_id)
        if parameters.customer_id is not None:
            rows = [o for o in rows if o.customer_id == parameters.customer_id]
        if parameters.ship_country is not None:
            rows = [o for o in rows if o.ship_country == parameters.ship_country]
        return rows

    async def get_all_orders(self) -> list[Order]:
        return [copy.deepcopy(o) for o in sorted(self._store.orders.values(), key=lambda o: o.order_id)]

    async def get_orders(self, parameters: OrderParameters) -> list[Order]:
        start = offset_for(parameters.page_number, parameters.page_size)
        rows = self._matching(parameters)[start : start + parameters.page_size]
        return [copy.deepcopy(o) for o in rows]

    async def get_orders_paged_list(self, parameters: OrderParameters) -> PagedList[Order]:
        return PagedList(
            items=await self.get_orders(parameters),
            current_page=parameters.page_number,
            total_count=len(self._matching(parameters)),
            page_size=parameters.page_size,
        )

    async def get_order_by_id(self, order_id: int) -> Order | None:
        order = self._store.orders.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    async def get_order_with_details(self, order_id: int) -> Order | None:
        order = await self.get_order_by_id(order_id)
        if order is None:
            return None
        order.order_details = [copy.deepcopy(d) for d in self._store.details if d.order_id == order_id]
        return order

    async def create_order(self, order: Order) -> None:
        order.order_id = self._store.next_id()
        self._store.orders[order.order_id] = copy.deepcopy(order)

    async def update_order(self, order: Order) -> None:
        self._store.orders[order.order_id] = copy.deepcopy(order)

    async def delete_order(self, order: Order) -> None:
        del self._store.orders[order.order_id]


class FakeOrderDetailRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    async def get_order_details_by_order_id(self, order_id: int) -> list[OrderDetail]:
        return [copy.deepcopy(d) for d in self._store.details if d.order_id == order_id]


class FakeRepositoryWrapper:
    def __init__(self, store: FakeStore) -> None:
        self.orders = FakeOrderRepository(store)
        self.order_details = FakeOrderDetailRepository(store)
        self.saves = 0

    async def save(self) -> None:
        self.saves += 1
