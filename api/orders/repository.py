"""
Orders persistence (raw SQL).

`RepositoryWrapper` groups the per-table repositories around one connection
and one transaction. Queries and mutations run inside that transaction;
nothing is durable until `save()` commits it.
"""

from __future__ import annotations

from typing import Any

from core import db
from core.paging import PagedList, offset_for

from .entities import ORDER_COLUMNS, Order, OrderDetail, order_detail_from_row, order_from_row
from .schemas import OrderParameters

_ORDER_SELECT = """
    SELECT order_id, customer_id, employee_id, order_date, required_date, shipped_date,
           ship_via, freight, ship_name, ship_address, ship_city, ship_region,
           ship_postal_code, ship_country
    FROM orders
"""

# $1 = customer_id, $2 = ship_country; NULL disables the filter.
_ORDER_FILTER = """
    WHERE ($1::text IS NULL OR customer_id = $1)
      AND ($2::text IS NULL OR ship_country = $2)
"""


def _filter_args(parameters: OrderParameters) -> tuple[Any, ...]:
    return (parameters.customer_id, parameters.ship_country)


class OrderRepository:
    def __init__(self, conn: db.Executor) -> None:
        self._conn = conn

    async def get_all_orders(self) -> list[Order]:
        rows = await db.fetch_all(_ORDER_SELECT + " ORDER BY order_id", conn=self._conn)
        return [order_from_row(r) for r in rows]

    async def get_orders(self, parameters: OrderParameters) -> list[Order]:
        """
        One page of matching orders, without counting the total.
        """
        rows = await db.fetch_all(
            _ORDER_SELECT + _ORDER_FILTER + " ORDER BY order_id LIMIT $3 OFFSET $4",
            *_filter_args(parameters),
            parameters.page_size,
            offset_for(parameters.page_number, parameters.page_size),
            conn=self._conn,
        )
        return [order_from_row(r) for r in rows]

    async def get_orders_paged_list(self, parameters: OrderParameters) -> PagedList[Order]:
        total = await db.fetch_value(
            "SELECT count(*) FROM orders" + _ORDER_FILTER,
            *_filter_args(parameters),
            conn=self._conn,
        )
        items = await self.get_orders(parameters)
        return PagedList(
            items=items,
            current_page=parameters.page_number,
            total_count=int(total or 0),
            page_size=parameters.page_size,
        )

    async def get_order_by_id(self, order_id: int) -> Order | None:
        row = await db.fetch_one(_ORDER_SELECT + " WHERE order_id = $1", order_id, conn=self._conn)
        return order_from_row(row) if row is not None else None

    async def get_order_with_details(self, order_id: int) -> Order | None:
        order = await self.get_order_by_id(order_id)
        if order is None:
            return None
        rows = await db.fetch_all(
            """
            SELECT d.order_id, d.product_id, d.unit_price, d.quantity, d.discount,
                   p.product_name, p.supplier_id, p.category_id, p.quantity_per_unit,
                   p.unit_price AS product_unit_price, p.units_in_stock, p.units_on_order,
                   p.reorder_level, p.discontinued
            FROM order_details d
            LEFT JOIN products p ON p.product_id = d.product_id
            WHERE d.order_id = $1
            ORDER BY d.product_id
            """,
            order_id,
            conn=self._conn,
        )
        order.order_details = [order_detail_from_row(r) for r in rows]
        return order

    async def create_order(self, order: Order) -> None:
        """
        Insert the order and set its server-assigned `order_id`.
        """
        placeholders = ", ".join(f"${i}" for i in range(1, len(ORDER_COLUMNS) + 1))
        order_id = await db.fetch_value(
            f"INSERT INTO orders ({', '.join(ORDER_COLUMNS)}) VALUES ({placeholders}) RETURNING order_id",
            *(getattr(order, name) for name in ORDER_COLUMNS),
            conn=self._conn,
        )
        if order_id is None:
            raise RuntimeError("Failed to insert order.")
        order.order_id = int(order_id)

    async def update_order(self, order: Order) -> None:
        assignments = ", ".join(f"{name} = ${i}" for i, name in enumerate(ORDER_COLUMNS, start=2))
        await db.execute(
            f"UPDATE orders SET {assignments} WHERE order_id = $1",
            order.order_id,
            *(getattr(order, name) for name in ORDER_COLUMNS),
            conn=self._conn,
        )

    async def delete_order(self, order: Order) -> None:
        await db.execute("DELETE FROM orders WHERE order_id = $1", order.order_id, conn=self._conn)


class OrderDetailRepository:
    def __init__(self, conn: db.Executor) -> None:
        self._conn = conn

    async def get_order_details_by_order_id(self, order_id: int) -> list[OrderDetail]:
        rows = await db.fetch_all(
            """
            SELECT order_id, product_id, unit_price, quantity, discount
            FROM order_details
            WHERE order_id = $1
            ORDER BY product_id
            """,
            order_id,
            conn=self._conn,
        )
        return [order_detail_from_row(r) for r in rows]


class RepositoryWrapper:
    def __init__(self, uow: db.UnitOfWork) -> None:
        self._uow = uow
        self.orders = OrderRepository(uow.conn)
        self.order_details = OrderDetailRepository(uow.conn)

    async def save(self) -> None:
        await self._uow.commit()
