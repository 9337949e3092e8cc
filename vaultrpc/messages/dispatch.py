"""Structural (untagged) dispatch of JSON objects onto record types.

A record's wire shape is the set of its member names together with the JSON
kind of each member. An incoming object matches a record when both agree
exactly; there is no type tag. Variants of one union must therefore have
pairwise distinct shapes, which `check_distinct_shapes` enforces.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Generic, Iterable, Sequence, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

from vaultrpc.utils.exceptions import ShapeCollisionError, UnknownShape


class WireRecord(BaseModel):
    """Base of every params/result record: immutable, no unknown members."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    @classmethod
    def wire_shape(cls) -> frozenset[tuple[str, str]]:
        return _shape_of(cls)


R = TypeVar("R", bound=WireRecord)


@lru_cache(maxsize=None)
def _shape_of(cls: type[WireRecord]) -> frozenset[tuple[str, str]]:
    properties = cls.model_json_schema(mode="serialization").get("properties", {})
    return frozenset((name, schema["type"]) for name, schema in properties.items())


def json_kind(value: Any) -> str:
    """JSON Schema type name of a decoded JSON value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def shape_of_value(value: dict[str, Any]) -> frozenset[tuple[str, str]]:
    return frozenset((name, json_kind(member)) for name, member in value.items())


def check_distinct_shapes(variants: Iterable[type[WireRecord]]) -> None:
    """Raise ShapeCollisionError if two variants cannot be told apart on the wire."""
    seen: dict[frozenset[tuple[str, str]], type[WireRecord]] = {}
    for variant in variants:
        shape = variant.wire_shape()
        if shape in seen:
            raise ShapeCollisionError(_qualname(seen[shape]), _qualname(variant))
        seen[shape] = variant


def _qualname(cls: type) -> str:
    return f"{cls.__module__.rsplit('.', 1)[-1]}.{cls.__name__}"


class ShapeDispatcher(Generic[R]):
    """Decode a JSON object into the first variant, in priority order, whose shape matches."""

    def __init__(self, name: str, variants: Sequence[type[R]]):
        check_distinct_shapes(variants)
        self.name = name
        self.variants = tuple(variants)

    def match(self, value: Any) -> type[R]:
        if not isinstance(value, dict):
            raise UnknownShape(f"{self.name} must be a JSON object", got=json_kind(value))
        shape = shape_of_value(value)
        for variant in self.variants:
            if variant.wire_shape() == shape:
                return variant
        raise UnknownShape(
            f"{self.name} matches no known shape",
            members=sorted(value),
        )

    def decode(self, value: Any) -> R:
        variant = self.match(value)
        try:
            record = variant.model_validate(value)
        except ValidationError as e:
            raise UnknownShape(f"{self.name} members do not fit {_qualname(variant)}", errors=e.error_count()) from e
        logger.debug("Matched {} shape {}", self.name, _qualname(variant))
        return record
