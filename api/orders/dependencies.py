"""
FastAPI dependencies for the orders routes.
"""

from __future__ import annotations

import os
from typing import AsyncIterator

from fastapi import Query

from core import db

from .repository import RepositoryWrapper
from .schemas import OrderParameters

DEFAULT_MAX_PAGE_SIZE = 50

# Range of the int4 `orders.order_id` column; ids outside it are client errors.
MIN_ORDER_ID = -2_147_483_648
MAX_ORDER_ID = 2_147_483_647


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def max_page_size() -> int:
    return max(_env_int("ORDERS_MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE), 1)


async def get_repository() -> AsyncIterator[RepositoryWrapper]:
    """
    Request-scoped repository wrapper. Rolled back unless the handler saves.
    """
    async with db.transaction() as uow:
        yield RepositoryWrapper(uow)


def order_parameters(
    page_number: int = Query(1, ge=1, le=MAX_ORDER_ID),
    page_size: int = Query(10, ge=1, le=MAX_ORDER_ID),
    customer_id: str | None = Query(default=None, min_length=1, max_length=5),
    ship_country: str | None = Query(default=None, min_length=1, max_length=15),
) -> OrderParameters:
    # Oversized pages are clamped, not rejected.
    return OrderParameters(
        page_number=page_number,
        page_size=min(page_size, max_page_size()),
        customer_id=customer_id,
        ship_country=ship_country,
    )
