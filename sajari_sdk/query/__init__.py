"""Query model and search handler."""

from sajari_sdk.query.aggregates import (
    Aggregate,
    Bucket,
    BucketAggregate,
    BucketResponse,
    BucketsResponse,
    CountAggregate,
    CountResponse,
    MetricAggregate,
    avg_aggregate,
    bucket_aggregate,
    max_aggregate,
    min_aggregate,
    sum_aggregate,
)
from sajari_sdk.query.boosts import (
    ElementFieldBoost,
    FeatureFieldBoost,
    FieldBoost,
    FieldInstanceBoost,
    FilterFieldBoost,
    InstanceBoost,
    IntervalFieldBoost,
    IntervalPoint,
    ScoreInstanceBoost,
    TextFieldBoost,
    interval_field_boost,
)
from sajari_sdk.query.filters import (
    CombinatorFilter,
    FieldFilter,
    Filter,
    GeoFilter,
    GeoFilterRegion,
    all_filters,
    any_filter,
    none_of_filters,
    one_of_filters,
)
from sajari_sdk.query.request import (
    Body,
    FeatureQuery,
    IndexQuery,
    Request,
    Term,
    Tracking,
    TrackingType,
)
from sajari_sdk.query.results import Result, Results, parse_duration
from sajari_sdk.query.service import Query
from sajari_sdk.query.sorts import Sort, SortByField

__all__ = [
    "Aggregate",
    "Body",
    "Bucket",
    "BucketAggregate",
    "BucketResponse",
    "BucketsResponse",
    "CombinatorFilter",
    "CountAggregate",
    "CountResponse",
    "ElementFieldBoost",
    "FeatureFieldBoost",
    "FeatureQuery",
    "FieldBoost",
    "FieldFilter",
    "FieldInstanceBoost",
    "Filter",
    "FilterFieldBoost",
    "GeoFilter",
    "GeoFilterRegion",
    "IndexQuery",
    "InstanceBoost",
    "IntervalFieldBoost",
    "IntervalPoint",
    "MetricAggregate",
    "Query",
    "Request",
    "Result",
    "Results",
    "ScoreInstanceBoost",
    "Sort",
    "SortByField",
    "Term",
    "TextFieldBoost",
    "Tracking",
    "TrackingType",
    "all_filters",
    "any_filter",
    "avg_aggregate",
    "bucket_aggregate",
    "interval_field_boost",
    "max_aggregate",
    "min_aggregate",
    "none_of_filters",
    "one_of_filters",
    "parse_duration",
    "sum_aggregate",
]
