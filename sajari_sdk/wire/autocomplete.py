"""Autocomplete model messages."""

from pydantic import Field

from sajari_sdk.wire.base import WireMessage


class Model(WireMessage):
    name: str


class TrainCorpusRequest(WireMessage):
    model: Model
    terms: list[str] = Field(default_factory=list)


class TrainQueryRequest(WireMessage):
    model: Model
    phrase: str


class AutoCompleteRequest(WireMessage):
    model: Model
    phrase: str
    terms: list[str] = Field(default_factory=list)


class AutoCompleteResponse(WireMessage):
    phrases: list[str] = Field(default_factory=list)
