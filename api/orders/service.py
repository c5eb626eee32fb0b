"""
Orders request logic.

Each function takes the request's `RepositoryWrapper`, performs at most one
mutation followed by one `save()`, and returns transfer objects. Client
errors are raised as `core.errors` exceptions before anything is written.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from core.errors import BadRequestError, NotFoundError
from core.paging import PagedList

from . import entities, mapping, schemas
from .repository import RepositoryWrapper

logger = logging.getLogger(__name__)

DELETE_BLOCKED_MESSAGE = (
    "Cannot delete order. It has related order details. Delete those order details first"
)


async def get_orders(
    repository: RepositoryWrapper,
    parameters: schemas.OrderParameters,
) -> list[schemas.OrderDto]:
    logger.info(
        "get_orders page_number=%s page_size=%s",
        parameters.page_number,
        parameters.page_size,
    )
    orders = await repository.orders.get_orders(parameters)
    return mapping.map_many(schemas.OrderDto, orders)


async def get_orders_paged_list(
    repository: RepositoryWrapper,
    parameters: schemas.OrderParameters,
) -> PagedList[schemas.OrderDto]:
    paged = await repository.orders.get_orders_paged_list(parameters)
    logger.info("get_orders_paged_list returned=%s total_count=%s", len(paged.items), paged.total_count)
    return PagedList(
        items=mapping.map_many(schemas.OrderDto, paged.items),
        current_page=paged.current_page,
        total_count=paged.total_count,
        page_size=paged.page_size,
    )


async def get_all_orders(repository: RepositoryWrapper) -> list[schemas.OrderDto]:
    logger.info("get_all_orders")
    orders = await repository.orders.get_all_orders()
    return mapping.map_many(schemas.OrderDto, orders)


async def get_order_by_id(repository: RepositoryWrapper, order_id: int) -> schemas.OrderDto:
    order = await repository.orders.get_order_by_id(order_id)
    if order is None:
        logger.error("order_not_found order_id=%s", order_id)
        raise NotFoundError()

    order_dto = mapping.map_to(schemas.OrderDto, order)
    logger.info("order_returned order_id=%s ship_name=%s", order_dto.order_id, order_dto.ship_name)
    return order_dto


async def get_order_with_details(repository: RepositoryWrapper, order_id: int) -> schemas.OrderDto:
    order = await repository.orders.get_order_with_details(order_id)
    if order is None:
        logger.error("order_with_details_not_found order_id=%s", order_id)
        raise NotFoundError()

    order_dto = mapping.map_to(schemas.OrderDto, order)
    logger.info(
        "order_with_details_returned order_id=%s details=%s",
        order_dto.order_id,
        len(order_dto.order_details),
    )
    return order_dto


def _validate(
    payload: dict[str, Any] | None,
    model: type[schemas.OrderForManipulationDto],
    *,
    null_message: str,
    invalid_message: str,
) -> schemas.OrderForManipulationDto:
    if payload is None:
        logger.error("order_payload_null schema=%s", model.__name__)
        raise BadRequestError(null_message)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.error("order_payload_invalid schema=%s errors=%s", model.__name__, exc.error_count())
        raise BadRequestError(invalid_message) from exc


async def create_order(
    repository: RepositoryWrapper,
    payload: dict[str, Any] | None,
) -> schemas.OrderDto:
    creation = _validate(
        payload,
        schemas.OrderForCreationDto,
        null_message="Order object sent from client is null.",
        invalid_message="Invalid Order Object sent.",
    )

    order = mapping.map_to(entities.Order, creation)
    await repository.orders.create_order(order)
    await repository.save()

    created = mapping.map_to(schemas.OrderDto, order)
    logger.info("order_created order_id=%s", created.order_id)
    return created


async def update_order(
    repository: RepositoryWrapper,
    order_id: int,
    payload: dict[str, Any] | None,
) -> None:
    update = _validate(
        payload,
        schemas.OrderForUpdateDto,
        null_message="Order for Update is Null.",
        invalid_message="Invalid Order to Update.",
    )

    order = await repository.orders.get_order_by_id(order_id)
    if order is None:
        logger.error("order_update_not_found order_id=%s", order_id)
        raise NotFoundError()

    mapping.map_onto(update, order)
    await repository.orders.update_order(order)
    await repository.save()
    logger.info("order_updated order_id=%s", order_id)


async def delete_order(repository: RepositoryWrapper, order_id: int) -> None:
    order = await repository.orders.get_order_by_id(order_id)
    if order is None:
        logger.error("order_delete_not_found order_id=%s", order_id)
        raise NotFoundError()

    if await repository.order_details.get_order_details_by_order_id(order_id):
        logger.error("order_delete_blocked order_id=%s reason=has_order_details", order_id)
        raise BadRequestError(DELETE_BLOCKED_MESSAGE)

    await repository.orders.delete_order(order)
    await repository.save()
    logger.info("order_deleted order_id=%s", order_id)
