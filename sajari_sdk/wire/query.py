"""Engine query messages: filters, boosts, aggregates, sorts and searches."""

from enum import Enum

from pydantic import Field

from sajari_sdk.wire.base import OneOfMessage, WireMessage
from sajari_sdk.wire.engine import Key, Status, Transform, Value


class FieldOperator(str, Enum):
    """Comparison applied by a field filter."""

    EQUAL_TO = "EQUAL_TO"
    NOT_EQUAL_TO = "NOT_EQUAL_TO"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL_TO = "GREATER_THAN_OR_EQUAL_TO"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL_TO = "LESS_THAN_OR_EQUAL_TO"
    CONTAINS = "CONTAINS"
    DOES_NOT_CONTAIN = "DOES_NOT_CONTAIN"
    HAS_PREFIX = "HAS_PREFIX"
    HAS_SUFFIX = "HAS_SUFFIX"


class CombinatorOperator(str, Enum):
    """How the filters of a combinator are joined."""

    ALL = "ALL"
    ANY = "ANY"
    ONE = "ONE"
    NONE = "NONE"


class GeoRegion(str, Enum):
    """Which side of a geo radius matches."""

    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"


class FieldFilter(WireMessage):
    field: str
    operator: FieldOperator
    value: Value


class CombinatorFilter(WireMessage):
    operator: CombinatorOperator
    filters: list["Filter"] = Field(default_factory=list)


class GeoFilter(WireMessage):
    field_lat: str
    field_lng: str
    lat: float
    lng: float
    radius: float
    region: GeoRegion


class Filter(OneOfMessage):
    ONEOF = ("field", "combinator", "geo")

    field: FieldFilter | None = None
    combinator: CombinatorFilter | None = None
    geo: GeoFilter | None = None


CombinatorFilter.model_rebuild()


class FilterBoost(WireMessage):
    filter: Filter
    value: float


class IntervalPoint(WireMessage):
    point: float
    value: float


class IntervalBoost(WireMessage):
    field: str
    points: list[IntervalPoint] = Field(default_factory=list)


class ElementBoost(WireMessage):
    field: str
    elts: list[str] = Field(default_factory=list)


class TextBoost(WireMessage):
    field: str
    text: str


class FieldBoost(OneOfMessage):
    ONEOF = ("filter", "interval", "element", "text")

    filter: FilterBoost | None = None
    interval: IntervalBoost | None = None
    element: ElementBoost | None = None
    text: TextBoost | None = None


class FieldInstanceBoost(WireMessage):
    field: str
    value: float


class ScoreInstanceBoost(WireMessage):
    min_count: int
    threshold: float


class InstanceBoost(OneOfMessage):
    ONEOF = ("field", "score")

    field: FieldInstanceBoost | None = None
    score: ScoreInstanceBoost | None = None


class MetricType(str, Enum):
    """Metric computed over a numeric field."""

    MAX = "MAX"
    MIN = "MIN"
    AVG = "AVG"
    SUM = "SUM"


class CountAggregate(WireMessage):
    field: str


class Bucket(WireMessage):
    name: str
    filter: Filter


class BucketAggregate(WireMessage):
    buckets: list[Bucket] = Field(default_factory=list)


class MetricAggregate(WireMessage):
    field: str
    type: MetricType


class Aggregate(OneOfMessage):
    ONEOF = ("count", "bucket", "metric")

    count: CountAggregate | None = None
    bucket: BucketAggregate | None = None
    metric: MetricAggregate | None = None


class CountResponse(WireMessage):
    counts: dict[str, int] = Field(default_factory=dict)


class BucketCount(WireMessage):
    name: str = ""
    count: int = 0


class BucketsResponse(WireMessage):
    buckets: dict[str, BucketCount] = Field(default_factory=dict)


class MetricResponse(WireMessage):
    value: float = 0.0


class AggregateResponse(OneOfMessage):
    ONEOF = ("count", "buckets", "metric")

    count: CountResponse | None = None
    buckets: BucketsResponse | None = None
    metric: MetricResponse | None = None


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Sort(OneOfMessage):
    ONEOF = ("field",)

    field: str | None = None
    order: SortOrder = SortOrder.ASC


class Body(WireMessage):
    text: str
    weight: float


class Term(WireMessage):
    value: str
    field: str = ""
    pos: int = 0
    neg: int = 0
    weight: float = 0.0
    word_offset: int = 0
    para_offset: int = 0


class IndexQuery(WireMessage):
    body: list[Body] = Field(default_factory=list)
    terms: list[Term] = Field(default_factory=list)
    field_boosts: list[FieldBoost] = Field(default_factory=list)
    instance_boosts: list[InstanceBoost] = Field(default_factory=list)


class FeatureFieldBoost(WireMessage):
    field_boost: FieldBoost
    value: float


class FeatureQuery(WireMessage):
    field_boosts: list[FeatureFieldBoost] = Field(default_factory=list)


class SearchRequest(WireMessage):
    filter: Filter | None = None
    index_query: IndexQuery | None = None
    feature_query: FeatureQuery | None = None
    offset: int = 0
    limit: int = 0
    sort: list[Sort] = Field(default_factory=list)
    fields: list[str] = Field(default_factory=list)
    aggregates: dict[str, Aggregate] = Field(default_factory=dict)
    transforms: list[Transform] = Field(default_factory=list)


class SearchResult(WireMessage):
    values: dict[str, Value] = Field(default_factory=dict)
    score: float = 0.0
    index_score: float = 0.0


class SearchResponse(WireMessage):
    reads: int = 0
    total_results: int = 0
    time: str = "0s"
    aggregates: dict[str, AggregateResponse] = Field(default_factory=dict)
    results: list[SearchResult] = Field(default_factory=list)


class AnalyseRequest(WireMessage):
    search_request: SearchRequest
    keys: list[Key] = Field(default_factory=list)


class AnalyseTerms(WireMessage):
    terms: list[str] = Field(default_factory=list)


class AnalyseResponse(WireMessage):
    terms: list[AnalyseTerms] = Field(default_factory=list)
    status: list[Status] = Field(default_factory=list)
