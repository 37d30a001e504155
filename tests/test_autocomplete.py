"""Tests for the autocomplete model handler."""

import pytest

from sajari_sdk.autocomplete.service import (
    AUTOCOMPLETE_METHOD,
    TRAIN_CORPUS_METHOD,
    TRAIN_QUERY_METHOD,
)
from sajari_sdk.client import Client

from tests.conftest import FakeTransport


class TestAutocompleteModel:
    """Tests for autocomplete Model."""

    @pytest.mark.asyncio
    async def test_train_corpus(self, client: Client, transport: FakeTransport) -> None:
        """Corpus terms are sent for the named model."""
        await client.autocomplete("spelling").train_corpus(["shoe", "boot"])

        [sent] = transport.requests(TRAIN_CORPUS_METHOD)
        assert sent == {"model": {"name": "spelling"}, "terms": ["shoe", "boot"]}

    @pytest.mark.asyncio
    async def test_train_query(self, client: Client, transport: FakeTransport) -> None:
        """Query phrases are sent for the named model."""
        await client.autocomplete("spelling").train_query("red shoes")

        [sent] = transport.requests(TRAIN_QUERY_METHOD)
        assert sent == {"model": {"name": "spelling"}, "phrase": "red shoes"}

    @pytest.mark.asyncio
    async def test_complete(self, client: Client, transport: FakeTransport) -> None:
        """Completions are returned in service order."""
        transport.respond(AUTOCOMPLETE_METHOD, {"phrases": ["red shoes", "red shirt"]})

        phrases = await client.autocomplete("spelling").complete("red sh", ["red", "sh"])

        assert phrases == ["red shoes", "red shirt"]
        [sent] = transport.requests(AUTOCOMPLETE_METHOD)
        assert sent == {"model": {"name": "spelling"}, "phrase": "red sh", "terms": ["red", "sh"]}

    @pytest.mark.asyncio
    async def test_complete_no_suggestions(self, client: Client, transport: FakeTransport) -> None:
        """An empty response means no completions."""
        assert await client.autocomplete("spelling").complete("zzz") == []
