"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest

from sajari_sdk.client import Client
from sajari_sdk.config import ClientSettings
from sajari_sdk.transport.service import RPCTransport


class FakeTransport(RPCTransport):
    """Transport returning canned responses and recording every call."""

    def __init__(self) -> None:
        self.responses: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, dict[str, Any], dict[str, str]]] = []
        self.closed = False

    def respond(self, method: str, *responses: dict[str, Any]) -> None:
        """Queue responses for method, returned in order."""
        self.responses.setdefault(method, []).extend(responses)

    def requests(self, method: str) -> list[dict[str, Any]]:
        """Request bodies sent to method, in call order."""
        return [request for m, request, _ in self.calls if m == method]

    async def call(
        self,
        method: str,
        request: dict[str, Any],
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        self.calls.append((method, request, metadata))
        queued = self.responses.get(method)
        if not queued:
            return {}
        return queued.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    """Recording transport with no canned responses."""
    return FakeTransport()


@pytest.fixture
def settings() -> ClientSettings:
    """Client settings independent of the environment."""
    return ClientSettings(endpoint="http://test", project="", collection="")


@pytest.fixture
async def client(
    transport: FakeTransport, settings: ClientSettings
) -> AsyncGenerator[Client, None]:
    """Client bound to a test project and collection.

    Yields:
        Client that sends calls through the recording transport.
    """
    async with Client("test-project", "test-collection", settings=settings, transport=transport) as c:
        yield c
