"""
Pydantic schemas (transfer objects) for the orders API.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProductDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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


class OrderDetailsDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: int
    product_id: int
    unit_price: float
    quantity: int
    discount: float = 0.0
    product: ProductDto | None = None


class OrderDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: int
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
    order_details: list[OrderDetailsDto] = Field(default_factory=list)


class OrderForManipulationDto(BaseModel):
    """
    Client-writable order fields. Lengths follow the Northwind `orders` columns.
    """

    customer_id: str = Field(..., min_length=1, max_length=5)
    employee_id: int | None = Field(default=None, ge=1)
    order_date: datetime | None = None
    required_date: datetime | None = None
    shipped_date: datetime | None = None
    ship_via: int | None = Field(default=None, ge=1)
    freight: float | None = Field(default=None, ge=0)
    ship_name: str = Field(..., min_length=1, max_length=40)
    ship_address: str | None = Field(default=None, max_length=60)
    ship_city: str | None = Field(default=None, max_length=15)
    ship_region: str | None = Field(default=None, max_length=15)
    ship_postal_code: str | None = Field(default=None, max_length=10)
    ship_country: str | None = Field(default=None, max_length=15)

    @model_validator(mode="after")
    def _check_dates(self) -> "OrderForManipulationDto":
        if self.order_date is None or self.required_date is None:
            return self
        if (self.order_date.tzinfo is None) != (self.required_date.tzinfo is None):
            raise ValueError("order_date and required_date must both be naive or both timezone-aware")
        if self.required_date < self.order_date:
            raise ValueError("required_date must not be before order_date")
        return self


class OrderForCreationDto(OrderForManipulationDto):
    pass


class OrderForUpdateDto(OrderForManipulationDto):
    pass


class OrderPageDto(BaseModel):
    items: list[OrderDto]
    current_page: int
    total_count: int
    total_pages: int
    page_size: int
    has_previous: bool
    has_next: bool


@dataclass(frozen=True)
class OrderParameters:
    """
    Paging and filter options for order list queries.
    """

    page_number: int = 1
    page_size: int = 10
    customer_id: str | None = None
    ship_country: str | None = None
