"""Search results."""

import re
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, Field

from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.query.aggregates import aggregates_from_wire
from sajari_sdk.records.values import decode_values
from sajari_sdk.wire import api, query

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1.5ms"`` or ``"1h2m3s"``.

    Raises:
        ValidationError: If text is not a valid duration.
    """
    sign = 1.0
    rest = text
    if rest[:1] in ("-", "+"):
        sign = -1.0 if rest[0] == "-" else 1.0
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)

    seconds = 0.0
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if match is None:
            break
        seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if not rest or pos != len(rest):
        raise ValidationError(
            f"invalid duration: {text!r}",
            code=ErrorCode.INVALID_RESPONSE,
            details={"duration": text},
        )
    return timedelta(seconds=sign * seconds)


class Result(BaseModel):
    """An individual search result.

    Attributes:
        values: Field values of the record, as strings or string lists.
        tokens: Tracking tokens; ``{"click": ...}`` or ``{"pos": ..., "neg": ...}``.
        score: Overall score.
        index_score: Index-matched score.
    """

    values: dict[str, Any] = Field(default_factory=dict, description="Record field values")
    tokens: dict[str, str] = Field(default_factory=dict, description="Tracking tokens")
    score: float = Field(default=0.0, description="Overall score")
    index_score: float = Field(default=0.0, description="Index score")


class Results(BaseModel):
    """Results of a search.

    Attributes:
        reads: Number of index values read.
        total_results: Total number of matching records.
        time: Time taken to run the query.
        aggregates: Aggregate results, keyed by the requested names.
        results: Ordered results.
    """

    reads: int = Field(default=0, description="Index values read")
    total_results: int = Field(default=0, description="Total matching records")
    time: timedelta = Field(default=timedelta(0), description="Query time")
    aggregates: dict[str, Any] = Field(default_factory=dict, description="Aggregate results")
    results: list[Result] = Field(default_factory=list, description="Ordered results")


def _tokens_from_wire(token: api.Token) -> dict[str, str]:
    if token.click is not None:
        return {"click": token.click.token}
    if token.pos_neg is not None:
        return {"pos": token.pos_neg.pos, "neg": token.pos_neg.neg}
    return {}


def results_from_wire(
    response: query.SearchResponse,
    tokens: list[api.Token] | None = None,
) -> Results:
    """Decode a search response.

    Tokens are matched to results by position.

    Raises:
        ValidationError: If the response time is not a valid duration.
    """
    tokens = tokens or []
    results: list[Result] = []
    for i, r in enumerate(response.results):
        results.append(
            Result(
                values=decode_values(r.values),
                tokens=_tokens_from_wire(tokens[i]) if i < len(tokens) else {},
                score=r.score,
                index_score=r.index_score,
            )
        )

    return Results(
        reads=response.reads,
        total_results=response.total_results,
        time=parse_duration(response.time),
        aggregates=aggregates_from_wire(response.aggregates),
        results=results,
    )
