"""
Orders API endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from core.paging import PAGINATION_HEADER

from . import schemas, service
from .dependencies import MAX_ORDER_ID, MIN_ORDER_ID, get_repository, order_parameters
from .repository import RepositoryWrapper

router = APIRouter(prefix="/api/Orders")


@router.get("/GetOrders")
async def get_orders(
    parameters: schemas.OrderParameters = Depends(order_parameters),
    repository: RepositoryWrapper = Depends(get_repository),
) -> list[schemas.OrderDto]:
    return await service.get_orders(repository, parameters)


@router.get("/GetOrdersPagedList")
async def get_orders_paged_list(
    response: Response,
    parameters: schemas.OrderParameters = Depends(order_parameters),
    repository: RepositoryWrapper = Depends(get_repository),
) -> schemas.OrderPageDto:
    paged = await service.get_orders_paged_list(repository, parameters)
    response.headers[PAGINATION_HEADER] = paged.header_value()
    return schemas.OrderPageDto(
        items=paged.items,
        current_page=paged.current_page,
        total_count=paged.total_count,
        total_pages=paged.total_pages,
        page_size=paged.page_size,
        has_previous=paged.has_previous,
        has_next=paged.has_next,
    )


@router.get("")
async def get_all_orders(
    repository: RepositoryWrapper = Depends(get_repository),
) -> list[schemas.OrderDto]:
    return await service.get_all_orders(repository)


@router.get("/GetOrderWithDetails/{order_id}")
async def get_order_with_details(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID),
    repository: RepositoryWrapper = Depends(get_repository),
) -> schemas.OrderDto:
    return await service.get_order_with_details(repository, order_id)


@router.get("/{order_id}", name="get_order_by_id")
async def get_order_by_id(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID),
    repository: RepositoryWrapper = Depends(get_repository),
) -> schemas.OrderDto:
    return await service.get_order_by_id(repository, order_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(
    request: Request,
    response: Response,
    payload: dict[str, Any] | None = Body(default=None),
    repository: RepositoryWrapper = Depends(get_repository),
) -> schemas.OrderDto:
    created = await service.create_order(repository, payload)
    response.headers["Location"] = str(request.url_for("get_order_by_id", order_id=created.order_id))
    return created


@router.put("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_order(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID),
    payload: dict[str, Any] | None = Body(default=None),
    repository: RepositoryWrapper = Depends(get_repository),
) -> Response:
    await service.update_order(repository, order_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: int = Path(..., ge=MIN_ORDER_ID, le=MAX_ORDER_ID),
    repository: RepositoryWrapper = Depends(get_repository),
) -> Response:
    await service.delete_order(repository, order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
