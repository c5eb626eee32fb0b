"""
Field mapping between order entities and transfer objects.

Every supported (source, destination) pair is listed in `PROFILE`. Fields are
matched by name; the field list for each pair is computed once at import.
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from pydantic import BaseModel

from . import entities, schemas

T = TypeVar("T")


class MappingError(RuntimeError):
    pass


PROFILE: tuple[tuple[type, type], ...] = (
    (entities.Order, schemas.OrderDto),
    (entities.OrderDetail, schemas.OrderDetailsDto),
    (entities.Product, schemas.ProductDto),
    (schemas.OrderForCreationDto, entities.Order),
    (schemas.OrderForUpdateDto, entities.Order),
)


def _field_names(cls: type) -> tuple[str, ...]:
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    if issubclass(cls, BaseModel):
        return tuple(cls.model_fields)
    raise MappingError(f"{cls.__name__} is neither a dataclass nor a pydantic model.")


def _shared_fields(source: type, destination: type) -> tuple[str, ...]:
    destination_fields = set(_field_names(destination))
    return tuple(name for name in _field_names(source) if name in destination_fields)


FIELD_MAPS: dict[tuple[type, type], tuple[str, ...]] = {
    (source, destination): _shared_fields(source, destination) for source, destination in PROFILE
}


def _fields_for(source: type, destination: type) -> tuple[str, ...]:
    try:
        return FIELD_MAPS[(source, destination)]
    except KeyError:
        raise MappingError(
            f"No mapping configured from {source.__name__} to {destination.__name__}."
        ) from None


def _values(source: Any, names: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(source, name) for name in names}


def map_to(destination: type[T], source: Any) -> T:
    """
    Build a new `destination` object from the matching fields of `source`.
    """
    values = _values(source, _fields_for(type(source), destination))
    if issubclass(destination, BaseModel):
        # Nested entities (details, product) validate through from_attributes.
        return destination.model_validate(values)  # type: ignore[return-value]
    return destination(**values)


def map_many(destination: type[T], sources: list[Any]) -> list[T]:
    return [map_to(destination, source) for source in sources]


def map_onto(source: Any, destination: T) -> T:
    """
    Copy the matching fields of `source` onto an existing `destination`.
    """
    for name, value in _values(source, _fields_for(type(source), type(destination))).items():
        setattr(destination, name, value)
    return destination
