"""Filters exclude records from results.

Filters compose into a predicate tree which the service evaluates.

Examples:
    Records whose ``url`` starts with "https://www.sajari.com"::

        FieldFilter("url ^", "https://www.sajari.com")

    Records whose ``count`` is at least 10 and whose ``name`` contains
    "Sajari" or "Search"::

        all_filters(
            FieldFilter("count >=", 10),
            any_filter(FieldFilter("name ~", "Sajari"), FieldFilter("name ~", "Search")),
        )
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from sajari_sdk.base import value_object
from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.records.values import encode_value
from sajari_sdk.wire import query

_OPERATOR_CHARS = " <>=!~^$"

FIELD_OPERATORS: dict[str, query.FieldOperator] = {
    "=": query.FieldOperator.EQUAL_TO,
    "!=": query.FieldOperator.NOT_EQUAL_TO,
    ">": query.FieldOperator.GREATER_THAN,
    ">=": query.FieldOperator.GREATER_THAN_OR_EQUAL_TO,
    "<": query.FieldOperator.LESS_THAN,
    "<=": query.FieldOperator.LESS_THAN_OR_EQUAL_TO,
    "~": query.FieldOperator.CONTAINS,
    "!~": query.FieldOperator.DOES_NOT_CONTAIN,
    "^": query.FieldOperator.HAS_PREFIX,
    "$": query.FieldOperator.HAS_SUFFIX,
}


class Filter(ABC):
    """A predicate on records, evaluated by the service."""

    @abstractmethod
    def to_wire(self) -> query.Filter:
        """Project the filter onto its wire message.

        Raises:
            ValidationError: If the filter cannot be represented.
        """
        ...


@value_object
class FieldFilter(Filter):
    """Compares a field against a value.

    ``field_op`` is a field name followed by optional space and one of
    ``=``, ``!=``, ``>``, ``>=``, ``<``, ``<=``, ``~`` (contains),
    ``!~`` (does not contain), ``^`` (prefix) or ``$`` (suffix).
    """

    field_op: str
    value: Any

    @property
    def field(self) -> str:
        return self.field_op.rstrip(_OPERATOR_CHARS)

    @property
    def operator(self) -> str:
        return self.field_op[len(self.field):].strip()

    def to_wire(self) -> query.Filter:
        op = FIELD_OPERATORS.get(self.operator)
        if op is None:
            raise ValidationError(
                f"invalid field filter operator: {self.operator!r}",
                code=ErrorCode.INVALID_OPERATOR,
                details={"field_op": self.field_op},
            )

        try:
            value = encode_value(self.value)
        except ValidationError as e:
            raise ValidationError(
                f"error marshalling value: {e.message}",
                code=e.code,
                details={"field_op": self.field_op, **e.details},
            ) from e

        return query.Filter(
            field=query.FieldFilter(field=self.field, operator=op, value=value)
        )


@value_object
class CombinatorFilter(Filter):
    """Joins filters with a boolean operator."""

    operator: query.CombinatorOperator
    filters: tuple[Filter, ...] = ()

    def to_wire(self) -> query.Filter:
        return query.Filter(
            combinator=query.CombinatorFilter(
                operator=self.operator,
                filters=[f.to_wire() for f in self.filters],
            )
        )


def all_filters(*filters: Filter) -> CombinatorFilter:
    """Match records satisfying all filters (AND)."""
    return CombinatorFilter(query.CombinatorOperator.ALL, filters)


def any_filter(*filters: Filter) -> CombinatorFilter:
    """Match records satisfying any filter (OR)."""
    return CombinatorFilter(query.CombinatorOperator.ANY, filters)


def one_of_filters(*filters: Filter) -> CombinatorFilter:
    """Match records satisfying exactly one filter (XOR)."""
    return CombinatorFilter(query.CombinatorOperator.ONE, filters)


def none_of_filters(*filters: Filter) -> CombinatorFilter:
    """Match records satisfying none of the filters (NOR)."""
    return CombinatorFilter(query.CombinatorOperator.NONE, filters)


class GeoFilterRegion(str, Enum):
    """Which points a geo filter matches."""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"


@value_object
class GeoFilter(Filter):
    """Matches records by distance from a point.

    The record's latitude and longitude are read from two numeric fields.
    Points within 10km of Sydney (33.8688° S, 151.2093° E)::

        GeoFilter("lat", "lng", -33.8688, 151.2093, 10.0, GeoFilterRegion.INSIDE)
    """

    field_lat: str
    field_lng: str
    lat: float
    lng: float
    radius: float
    region: GeoFilterRegion = GeoFilterRegion.INSIDE

    def to_wire(self) -> query.Filter:
        return query.Filter(
            geo=query.GeoFilter(
                field_lat=self.field_lat,
                field_lng=self.field_lng,
                lat=self.lat,
                lng=self.lng,
                radius=self.radius,
                region=query.GeoRegion(self.region.value),
            )
        )
