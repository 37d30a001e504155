"""Boosts influence record scoring.

Field boosts score records on their field data and are normalised by the
service to a value between 0 and 1. Instance boosts change the weight of
individual term instances in the index.
"""

from abc import ABC, abstractmethod

from sajari_sdk.base import value_object
from sajari_sdk.query.filters import Filter
from sajari_sdk.wire import query


class FieldBoost(ABC):
    """A boost computed from a record's field values."""

    @abstractmethod
    def to_wire(self) -> query.FieldBoost:
        ...


@value_object
class FilterFieldBoost(FieldBoost):
    """Boosts records which satisfy filter by value (greater than 0)."""

    filter: Filter
    value: float

    def to_wire(self) -> query.FieldBoost:
        return query.FieldBoost(
            filter=query.FilterBoost(filter=self.filter.to_wire(), value=self.value)
        )


@value_object
class IntervalPoint:
    """Boost value at a point of an interval."""

    point: float
    value: float


@value_object
class IntervalFieldBoost(FieldBoost):
    """Piecewise-linear boost over a numeric field.

    Between two points the boost is interpolated linearly by the service;
    only the points themselves are sent.
    """

    field: str
    points: tuple[IntervalPoint, ...] = ()

    def to_wire(self) -> query.FieldBoost:
        return query.FieldBoost(
            interval=query.IntervalBoost(
                field=self.field,
                points=[query.IntervalPoint(point=p.point, value=p.value) for p in self.points],
            )
        )


def interval_field_boost(field: str, *points: IntervalPoint) -> IntervalFieldBoost:
    """Build an IntervalFieldBoost from points given as arguments."""
    return IntervalFieldBoost(field, points)


@value_object
class ElementFieldBoost(FieldBoost):
    """Boosts by the proportion of elts found in a repeated field."""

    field: str
    elts: tuple[str, ...] = ()

    def to_wire(self) -> query.FieldBoost:
        return query.FieldBoost(
            element=query.ElementBoost(field=self.field, elts=list(self.elts))
        )


@value_object
class TextFieldBoost(FieldBoost):
    """Boosts by bag-of-words similarity between text and a string field."""

    field: str
    text: str

    def to_wire(self) -> query.FieldBoost:
        return query.FieldBoost(text=query.TextBoost(field=self.field, text=self.text))


@value_object
class FeatureFieldBoost:
    """Uses the normalised boost as a share (0 to 1) of the overall score."""

    boost: FieldBoost
    value: float

    def to_wire(self) -> query.FeatureFieldBoost:
        return query.FeatureFieldBoost(field_boost=self.boost.to_wire(), value=self.value)


class InstanceBoost(ABC):
    """A boost applied to term instances in the index."""

    @abstractmethod
    def to_wire(self) -> query.InstanceBoost:
        ...


@value_object
class FieldInstanceBoost(InstanceBoost):
    """Boosts index terms which originate in field."""

    field: str
    value: float

    def to_wire(self) -> query.InstanceBoost:
        return query.InstanceBoost(
            field=query.FieldInstanceBoost(field=self.field, value=self.value)
        )


@value_object
class ScoreInstanceBoost(InstanceBoost):
    """Applies interaction scores to index terms.

    A term's score takes effect once it has received at least min_count
    updates and has fallen below threshold (between 0 and 1).
    """

    min_count: int
    threshold: float

    def to_wire(self) -> query.InstanceBoost:
        return query.InstanceBoost(
            score=query.ScoreInstanceBoost(min_count=self.min_count, threshold=self.threshold)
        )
