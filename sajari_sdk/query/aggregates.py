"""Aggregates computed over a result set.

Aggregates are requested under caller-chosen names; the response carries
each result under the same name.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from sajari_sdk.base import value_object
from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.query.filters import Filter
from sajari_sdk.wire import query


class Aggregate(ABC):
    """An aggregate to compute over the results of a query."""

    @abstractmethod
    def to_wire(self) -> query.Aggregate:
        ...


@value_object
class CountAggregate(Aggregate):
    """Counts occurrences of each distinct value of field."""

    field: str

    def to_wire(self) -> query.Aggregate:
        return query.Aggregate(count=query.CountAggregate(field=self.field))


@value_object
class Bucket:
    """A named bucket; records satisfying filter fall into it."""

    name: str
    filter: Filter

    def to_wire(self) -> query.Bucket:
        return query.Bucket(name=self.name, filter=self.filter.to_wire())


@value_object
class BucketAggregate(Aggregate):
    """Counts records falling into each bucket."""

    buckets: tuple[Bucket, ...] = ()

    def to_wire(self) -> query.Aggregate:
        return query.Aggregate(
            bucket=query.BucketAggregate(buckets=[b.to_wire() for b in self.buckets])
        )


def bucket_aggregate(*buckets: Bucket) -> BucketAggregate:
    """Build a BucketAggregate from buckets given as arguments."""
    return BucketAggregate(buckets)


@value_object
class MetricAggregate(Aggregate):
    """Computes a metric over a numeric field."""

    field: str
    type: query.MetricType

    def to_wire(self) -> query.Aggregate:
        return query.Aggregate(metric=query.MetricAggregate(field=self.field, type=self.type))


def max_aggregate(field: str) -> MetricAggregate:
    """Maximum value of field over the result set."""
    return MetricAggregate(field, query.MetricType.MAX)


def min_aggregate(field: str) -> MetricAggregate:
    """Minimum value of field over the result set."""
    return MetricAggregate(field, query.MetricType.MIN)


def avg_aggregate(field: str) -> MetricAggregate:
    """Average value of field over the result set."""
    return MetricAggregate(field, query.MetricType.AVG)


def sum_aggregate(field: str) -> MetricAggregate:
    """Sum of field over the result set."""
    return MetricAggregate(field, query.MetricType.SUM)


CountResponse = dict[str, int]


class BucketResponse(BaseModel):
    """Number of records in a bucket."""

    name: str = Field(description="Bucket name")
    count: int = Field(description="Number of records")


BucketsResponse = dict[str, BucketResponse]


def aggregate_response_from_wire(
    response: query.AggregateResponse,
) -> CountResponse | BucketsResponse | float:
    """Decode one aggregate result.

    Returns:
        Value counts for count aggregates, buckets by name for bucket
        aggregates, or the metric value.
    """
    if response.count is not None:
        return dict(response.count.counts)
    if response.buckets is not None:
        return {
            key: BucketResponse(name=b.name, count=b.count)
            for key, b in response.buckets.buckets.items()
        }
    if response.metric is not None:
        return response.metric.value
    raise ValidationError(
        "aggregate response has no member set", code=ErrorCode.INVALID_RESPONSE
    )


def aggregates_from_wire(
    responses: dict[str, query.AggregateResponse],
) -> dict[str, Any]:
    """Decode aggregate results, keyed by the names used in the request."""
    return {name: aggregate_response_from_wire(r) for name, r in responses.items()}
