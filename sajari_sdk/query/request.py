"""Search requests."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from sajari_sdk.query.aggregates import Aggregate
from sajari_sdk.query.boosts import FeatureFieldBoost, FieldBoost, InstanceBoost
from sajari_sdk.query.filters import Filter
from sajari_sdk.query.sorts import Sort
from sajari_sdk.transforms import Transform
from sajari_sdk.wire import api, engine, query

_UINT16_MAX = 65535


class QueryModel(BaseModel):
    """Base for immutable request components."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class TrackingType(str, Enum):
    """Kind of tracking tokens returned with results."""

    NONE = ""
    CLICK = "CLICK"
    POS_NEG = "POS_NEG"


_TRACKING_TYPES = {
    TrackingType.NONE: api.TrackingType.NONE,
    TrackingType.CLICK: api.TrackingType.CLICK,
    TrackingType.POS_NEG: api.TrackingType.POS_NEG,
}


class Tracking(QueryModel):
    """Tracking configuration for a search.

    Attributes:
        type: Which tokens (if any) are generated and returned with results.
        query_id: Identifies a single search; live queries re-run as a user
            types share one ID.
        sequence: Position of this search within its query ID.
        field: Field used to add identifier information to tokens.
        data: Values recorded along with the tracking data.
    """

    type: TrackingType = Field(default=TrackingType.NONE, description="Token kind")
    query_id: str = Field(default="", description="Search identifier")
    sequence: int = Field(default=0, description="Sequence within the query ID")
    field: str = Field(default="", description="Identifier field for tokens")
    data: dict[str, str] = Field(default_factory=dict, description="Recorded values")

    def to_wire(self) -> api.Tracking:
        return api.Tracking(
            type=_TRACKING_TYPES[self.type],
            query_id=self.query_id,
            sequence=self.sequence,
            field=self.field,
            data=dict(self.data),
        )


class Body(QueryModel):
    """Weighted free text."""

    text: str = Field(description="Text to search for")
    weight: float = Field(description="Significance of the text")

    def to_wire(self) -> query.Body:
        return query.Body(text=self.text, weight=self.weight)


class Term(QueryModel):
    """A pre-split, scored term."""

    value: str = Field(description="Term text")
    field: str = Field(default="", description="Field the term belongs to")
    pos: int = Field(default=0, ge=0, le=_UINT16_MAX, description="Positive interactions")
    neg: int = Field(default=0, ge=0, le=_UINT16_MAX, description="Negative interactions")
    weight: float = Field(default=0.0, description="Significance of the term")
    word_offset: int = Field(default=0, ge=0, le=_UINT16_MAX, description="Word offset")
    para_offset: int = Field(default=0, ge=0, le=_UINT16_MAX, description="Paragraph offset")

    def to_wire(self) -> query.Term:
        return query.Term(
            value=self.value,
            field=self.field,
            pos=self.pos,
            neg=self.neg,
            weight=self.weight,
            word_offset=self.word_offset,
            para_offset=self.para_offset,
        )


class IndexQuery(QueryModel):
    """A query run against the search index."""

    text: str = Field(default="", description="Free text, sent with weight 1.0")
    body: list[Body] = Field(default_factory=list, description="Weighted free text")
    terms: list[Term] = Field(default_factory=list, description="Pre-split terms")
    field_boosts: list[FieldBoost] = Field(default_factory=list, description="Index score boosts")
    instance_boosts: list[InstanceBoost] = Field(
        default_factory=list, description="Term instance boosts"
    )

    def to_wire(self) -> query.IndexQuery:
        body = list(self.body)
        if self.text:
            body.append(Body(text=self.text, weight=1.0))

        return query.IndexQuery(
            body=[b.to_wire() for b in body],
            terms=[t.to_wire() for t in self.terms],
            field_boosts=[b.to_wire() for b in self.field_boosts],
            instance_boosts=[b.to_wire() for b in self.instance_boosts],
        )


class FeatureQuery(QueryModel):
    """Feature boosts contributing to record scores."""

    field_boosts: list[FeatureFieldBoost] = Field(default_factory=list)

    def to_wire(self) -> query.FeatureQuery:
        return query.FeatureQuery(field_boosts=[b.to_wire() for b in self.field_boosts])


class Request(QueryModel):
    """A search request.

    Attributes:
        tracking: Tracking configuration.
        filter: Excludes records from results.
        index_query: Query run against the search index.
        feature_query: Feature-based scoring.
        offset: Offset of the first result returned.
        limit: Number of results to return.
        sort: Orderings applied to results.
        fields: Fields returned in results; all fields if empty.
        aggregates: Aggregates to compute, by name.
        transforms: Transforms applied to the query before it runs.
    """

    tracking: Tracking = Field(default_factory=Tracking)
    filter: Filter | None = None
    index_query: IndexQuery = Field(default_factory=IndexQuery)
    feature_query: FeatureQuery = Field(default_factory=FeatureQuery)
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    sort: list[Sort] = Field(default_factory=list)
    fields: list[str] = Field(default_factory=list)
    aggregates: dict[str, Aggregate] = Field(default_factory=dict)
    transforms: list[Transform] = Field(default_factory=list)

    def engine_request(self) -> query.SearchRequest:
        """Build the engine search message, without tracking."""
        return query.SearchRequest(
            filter=self.filter.to_wire() if self.filter is not None else None,
            index_query=self.index_query.to_wire(),
            feature_query=self.feature_query.to_wire(),
            offset=self.offset,
            limit=self.limit,
            sort=[s.to_wire() for s in self.sort],
            fields=list(self.fields),
            aggregates={name: a.to_wire() for name, a in self.aggregates.items()},
            transforms=[engine.Transform(identifier=t.value) for t in self.transforms],
        )

    def to_wire(self) -> api.SearchRequest:
        """Build the tracked search message.

        Raises:
            ValidationError: If any component cannot be represented.
        """
        return api.SearchRequest(
            tracking=self.tracking.to_wire(),
            search_request=self.engine_request(),
        )
