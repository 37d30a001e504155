"""Bayes training set, training and query messages."""

from pydantic import Field

from sajari_sdk.wire.base import WireMessage


class CreateRequest(WireMessage):
    name: str


class AddClassRequest(WireMessage):
    name: str
    class_name: str = Field(alias="class")


class UploadRequest(WireMessage):
    name: str
    class_name: str = Field(alias="class")
    data: list[str] = Field(default_factory=list)


class UploadResponse(WireMessage):
    hash: str = ""


class InfoRequest(WireMessage):
    name: str


class InfoResponse(WireMessage):
    classes: list[str] = Field(default_factory=list)


class TrainRequest(WireMessage):
    name: str
    model: str


class TrainError(WireMessage):
    got: str = ""
    count: int = 0


class TrainResponse(WireMessage):
    correct: int = 0
    incorrect: int = 0
    errors: list[TrainError] = Field(default_factory=list)


class QueryRequest(WireMessage):
    model: str
    data: list[str] = Field(default_factory=list)


class QueryResponse(WireMessage):
    best: str = ""
