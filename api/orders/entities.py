"""
Persistence entities for the Northwind order tables.

Plain objects: the repository builds them from rows and writes them back;
the API never exposes them directly (see `schemas.py` and `mapping.py`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Product:
    product_id: int
    product_name: str
    supplier_id: int | None = None
    category_id: int | None = None
    quantity_per_unit: str | None = None
    unit_price: float | None = None
    units_in_stock: int | None = None
    units_on_order: int | None = None
    reorder_level: int | None = None
    discontinued: bool = False


@dataclass
class OrderDetail:
    order_id: int
    product_id: int
    unit_price: float
    quantity: int
    discount: float = 0.0
    product: Product | None = None


@dataclass
class Order:
    order_id: int = 0
    customer_id: str | None = None
    employee_id: int | None = None
    order_date: datetime | None = None
    required_date: datetime | None = None
    shipped_date: datetime | None = None
    ship_via: int | None = None
    freight: float | None = None
    ship_name: str | None = None
    ship_address: str | None = None
    ship_city: str | None = None
    ship_region: str | None = None
    ship_postal_code: str | None = None
    ship_country: str | None = None
    order_details: list[OrderDetail] = field(default_factory=list)


# Columns written on insert/update, in SQL placeholder order.
ORDER_COLUMNS: tuple[str, ...] = (
    "customer_id",
    "employee_id",
    "order_date",
    "required_date",
    "shipped_date",
    "ship_via",
    "freight",
    "ship_name",
    "ship_address",
    "ship_city",
    "ship_region",
    "ship_postal_code",
    "ship_country",
)


def order_from_row(row: dict[str, Any]) -> Order:
    return Order(order_id=int(row["order_id"]), **{name: row.get(name) for name in ORDER_COLUMNS})


def order_detail_from_row(row: dict[str, Any]) -> OrderDetail:
    product = None
    if row.get("product_name") is not None:
        product = Product(
            product_id=int(row["product_id"]),
            product_name=str(row["product_name"]),
            supplier_id=row.get("supplier_id"),
            category_id=row.get("category_id"),
            quantity_per_unit=row.get("quantity_per_unit"),
            unit_price=row.get("product_unit_price"),
            units_in_stock=row.get("units_in_stock"),
            units_on_order=row.get("units_on_order"),
            reorder_level=row.get("reorder_level"),
            discontinued=bool(row.get("discontinued") or False),
        )
    return OrderDetail(
        order_id=int(row["order_id"]),
        product_id=int(row["product_id"]),
        unit_price=row["unit_price"],
        quantity=int(row["quantity"]),
        discount=float(row.get("discount") or 0.0),
        product=product,
    )
