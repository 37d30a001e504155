"""Public query API messages: tracked searches and pipeline searches."""

from enum import Enum

from pydantic import Field

from sajari_sdk.wire import query
from sajari_sdk.wire.base import OneOfMessage, WireMessage


class TrackingType(str, Enum):
    """Kind of tracking tokens generated for results."""

    NONE = "NONE"
    CLICK = "CLICK"
    POS_NEG = "POS_NEG"


class Tracking(WireMessage):
    type: TrackingType = TrackingType.NONE
    query_id: str = ""
    sequence: int = 0
    field: str = ""
    data: dict[str, str] = Field(default_factory=dict)


class SearchRequest(WireMessage):
    tracking: Tracking
    search_request: query.SearchRequest


class ClickToken(WireMessage):
    token: str = ""


class PosNegToken(WireMessage):
    pos: str = ""
    neg: str = ""


class Token(OneOfMessage):
    ONEOF = ("click", "pos_neg")
    ONEOF_OPTIONAL = True

    click: ClickToken | None = None
    pos_neg: PosNegToken | None = None


class SearchResponse(WireMessage):
    search_response: query.SearchResponse = Field(default_factory=query.SearchResponse)
    tokens: list[Token] = Field(default_factory=list)


class PipelineRef(WireMessage):
    name: str


class PipelineSearchRequest(WireMessage):
    pipeline: PipelineRef
    tracking: Tracking
    values: dict[str, str] = Field(default_factory=dict)


class PipelineSearchResponse(SearchResponse):
    values: dict[str, str] = Field(default_factory=dict)
