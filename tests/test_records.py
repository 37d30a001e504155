"""Tests for record models and the record store handler."""

import pytest

from sajari_sdk.client import Client
from sajari_sdk.config import ClientSettings
from sajari_sdk.exceptions import (
    ErrorCode,
    MultiError,
    RecordNotFoundError,
    RemoteStatusError,
    StatusCode,
    ValidationError,
)
from sajari_sdk.query.request import IndexQuery, Request
from sajari_sdk.query.service import ANALYSE_METHOD
from sajari_sdk.records.models import (
    BODY_FIELD,
    Key,
    RecordMutation,
    SetField,
    keys_to_wire,
    new_record,
    set_fields,
)
from sajari_sdk.records.service import (
    ADD_METHOD,
    DELETE_METHOD,
    EXISTS_METHOD,
    GET_METHOD,
    INCREMENT_METHOD,
    MUTATE_METHOD,
)
from sajari_sdk.transforms import Transform
from sajari_sdk.wire import engine

from tests.conftest import FakeTransport

OK = {"code": 0}
NOT_FOUND = {"code": 5, "message": "no such record"}


def _key(value: str) -> dict:
    return {"field": "_id", "value": {"single": value}}


class TestRecordModels:
    """Tests for records, keys and mutations."""

    def test_new_record(self) -> None:
        """The body is stored in the reserved body field."""
        values = {"title": "Shoe"}
        record = new_record("A red shoe", values)
        assert record == {"title": "Shoe", BODY_FIELD: "A red shoe"}
        assert values == {"title": "Shoe"}

    def test_key_str(self) -> None:
        """Keys render field and value."""
        assert str(Key("_id", "abc")) == 'Key{Field: "_id", Value: "abc"}'

    def test_key_str_escapes_quotes(self) -> None:
        """Quotes and backslashes in keys are escaped."""
        assert str(Key("_id", 'a"b\\c')) == 'Key{Field: "_id", Value: "a\\"b\\\\c"}'

    def test_key_equality(self) -> None:
        """Keys compare by value."""
        assert Key("_id", 1) == Key("_id", 1)
        assert Key("_id", 1) != Key("url", 1)

    def test_key_to_wire(self) -> None:
        """Key values are encoded as single values."""
        assert Key("_id", 12).to_wire().to_json() == {"field": "_id", "value": {"single": "12"}}

    def test_key_list_value_rejected(self) -> None:
        """Key values must be single scalars."""
        with pytest.raises(ValidationError, match="error marshalling key value"):
            Key("_id", ["a"]).to_wire()

    def test_key_from_wire(self) -> None:
        """Wire keys decode with string values."""
        key = Key.from_wire(engine.Key.model_validate(_key("abc")))
        assert key == Key("_id", "abc")

    def test_empty_key_from_wire(self) -> None:
        """An empty wire key decodes to None."""
        assert Key.from_wire(engine.Key()) is None

    def test_none_key_rejected(self) -> None:
        """A missing key in a list is an error."""
        with pytest.raises(ValidationError) as exc_info:
            keys_to_wire([Key("_id", "a"), None])
        assert exc_info.value.code == ErrorCode.EMPTY_KEY
        assert exc_info.value.details == {"index": 1}

    def test_set_fields(self) -> None:
        """set_fields builds one SetField per pair."""
        assert set_fields({"a": 1, "b": "x"}) == [SetField("a", 1), SetField("b", "x")]

    def test_set_field_none_rejected(self) -> None:
        """Setting a field to None cannot be marshalled."""
        with pytest.raises(ValidationError, match="'title'"):
            SetField("title", None).to_wire()

    def test_record_mutation_to_wire(self) -> None:
        """Record mutations carry the key and field mutations."""
        mutation = RecordMutation(Key("_id", "a"), (SetField("tags", ["x", "y"]),))
        assert mutation.to_wire().to_json() == {
            "key": _key("a"),
            "fieldMutations": [{"field": "tags", "set": {"repeated": {"values": ["x", "y"]}}}],
        }


class TestAdd:
    """Tests for RecordStore.add and add_multi."""

    @pytest.mark.asyncio
    async def test_add_multi(self, client: Client, transport: FakeTransport) -> None:
        """Keys are returned per record with the default transform applied."""
        transport.respond(
            ADD_METHOD,
            {"keys": [_key("a"), _key("b")], "status": [OK, OK]},
        )
        batch = await client.records().add_multi([{"title": "A"}, {"title": "B", "price": 1.5}])

        assert batch.ok
        assert batch.values == [Key("_id", "a"), Key("_id", "b")]

        [sent] = transport.requests(ADD_METHOD)
        assert sent["transforms"] == [{"identifier": "split-stop-stem-indexed-fields"}]
        assert sent["records"][1]["values"]["price"] == {"single": "1.5"}

    @pytest.mark.asyncio
    async def test_add_with_transforms(self, client: Client, transport: FakeTransport) -> None:
        """Explicit transforms replace the default."""
        transport.respond(ADD_METHOD, {"keys": [_key("a")], "status": [OK]})
        key = await client.records().add({"title": "A"}, [Transform.STOP_STEM])

        assert key == Key("_id", "a")
        [sent] = transport.requests(ADD_METHOD)
        assert sent["transforms"] == [{"identifier": "stop-stem"}]

    @pytest.mark.asyncio
    async def test_configured_default_transforms(self, transport: FakeTransport) -> None:
        """The client's configured transforms are used when none are given."""
        settings = ClientSettings(default_add_transforms=(Transform.SPLIT_INDEXED_FIELDS,))
        client = Client("p", "c", settings=settings, transport=transport)
        transport.respond(ADD_METHOD, {"keys": [_key("a")], "status": [OK]})

        await client.records().add({"title": "A"})

        [sent] = transport.requests(ADD_METHOD)
        assert sent["transforms"] == [{"identifier": "split-indexed-fields"}]

    @pytest.mark.asyncio
    async def test_add_invalid_record_makes_no_call(self, client: Client, transport: FakeTransport) -> None:
        """Records with unsupported values are rejected locally."""
        with pytest.raises(ValidationError, match="'tags'"):
            await client.records().add({"tags": [1, "a"]})
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_add_empty(self, client: Client, transport: FakeTransport) -> None:
        """An empty batch makes no call."""
        batch = await client.records().add_multi([])
        assert len(batch) == 0
        assert transport.calls == []


class TestGet:
    """Tests for RecordStore.get and get_multi."""

    @pytest.mark.asyncio
    async def test_get_multi_partial_failure(self, client: Client, transport: FakeTransport) -> None:
        """A missing record fails only its own position."""
        transport.respond(
            GET_METHOD,
            {
                "records": [
                    {"values": {"title": {"single": "A"}}},
                    {},
                    {"values": {"tags": {"repeated": {"values": ["x"]}}}},
                ],
                "status": [OK, NOT_FOUND, OK],
            },
        )
        keys = [Key("_id", "a"), Key("_id", "b"), Key("_id", "c")]
        batch = await client.records().get_multi(keys)

        assert len(batch) == 3
        assert batch[0].value == {"title": "A"}
        assert batch[1].value is None
        assert isinstance(batch[1].error, RecordNotFoundError)
        assert batch[2].value == {"tags": ["x"]}

        error = batch.error
        assert isinstance(error, MultiError)
        assert error[0] is None
        assert isinstance(error[1], RecordNotFoundError)
        assert error[2] is None

    @pytest.mark.asyncio
    async def test_get_not_found(self, client: Client, transport: FakeTransport) -> None:
        """The singular form raises RecordNotFoundError."""
        transport.respond(GET_METHOD, {"records": [{}], "status": [NOT_FOUND]})
        with pytest.raises(RecordNotFoundError):
            await client.records().get(Key("_id", "a"))

    @pytest.mark.asyncio
    async def test_empty_status_means_ok(self, client: Client, transport: FakeTransport) -> None:
        """An empty status list means every item succeeded."""
        transport.respond(GET_METHOD, {"records": [{"values": {"a": {"single": "1"}}}]})
        record = await client.records().get(Key("_id", "a"))
        assert record == {"a": "1"}

    @pytest.mark.asyncio
    async def test_status_count_mismatch(self, client: Client, transport: FakeTransport) -> None:
        """A status count different from the key count is an invalid response."""
        transport.respond(GET_METHOD, {"records": [{}], "status": [OK, OK]})
        with pytest.raises(ValidationError) as exc_info:
            await client.records().get(Key("_id", "a"))
        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    @pytest.mark.asyncio
    async def test_none_key_makes_no_call(self, client: Client, transport: FakeTransport) -> None:
        """A None key is rejected locally."""
        with pytest.raises(ValidationError):
            await client.records().get_multi([Key("_id", "a"), None])  # type: ignore[list-item]
        assert transport.calls == []


class TestExists:
    """Tests for RecordStore.exists and exists_multi."""

    @pytest.mark.asyncio
    async def test_exists_multi(self, client: Client, transport: FakeTransport) -> None:
        """NOT_FOUND is False, other failures are errors."""
        transport.respond(
            EXISTS_METHOD,
            {"status": [OK, NOT_FOUND, {"code": 13, "message": "boom"}]},
        )
        keys = [Key("_id", "a"), Key("_id", "b"), Key("_id", "c")]
        batch = await client.records().exists_multi(keys)

        assert batch[0].value is True
        assert batch[1].value is False
        assert batch[1].ok
        assert isinstance(batch[2].error, RemoteStatusError)
        assert batch[2].error.status == StatusCode.INTERNAL

    @pytest.mark.asyncio
    async def test_exists_false(self, client: Client, transport: FakeTransport) -> None:
        """The singular form returns False for a missing record."""
        transport.respond(EXISTS_METHOD, {"status": [NOT_FOUND]})
        assert await client.records().exists(Key("_id", "a")) is False


class TestDelete:
    """Tests for RecordStore.delete and delete_multi."""

    @pytest.mark.asyncio
    async def test_delete_multi(self, client: Client, transport: FakeTransport) -> None:
        """Deletes report per-key outcomes."""
        transport.respond(DELETE_METHOD, {"status": [OK, NOT_FOUND]})
        batch = await client.records().delete_multi([Key("_id", "a"), Key("_id", "b")])

        assert batch[0].ok
        assert isinstance(batch[1].error, RecordNotFoundError)
        with pytest.raises(MultiError):
            batch.raise_for_errors()

        [sent] = transport.requests(DELETE_METHOD)
        assert sent == {"keys": [_key("a"), _key("b")]}

    @pytest.mark.asyncio
    async def test_delete(self, client: Client, transport: FakeTransport) -> None:
        """The singular form succeeds silently."""
        transport.respond(DELETE_METHOD, {"status": [OK]})
        assert await client.records().delete(Key("_id", "a")) is None


class TestMutate:
    """Tests for RecordStore.mutate and mutate_multi."""

    @pytest.mark.asyncio
    async def test_mutate(self, client: Client, transport: FakeTransport) -> None:
        """Field mutations are sent for the key."""
        transport.respond(MUTATE_METHOD, {"status": [OK]})
        await client.records().mutate(Key("_id", "a"), SetField("price", 10), SetField("on_sale", True))

        [sent] = transport.requests(MUTATE_METHOD)
        assert sent == {
            "recordMutations": [
                {
                    "key": _key("a"),
                    "fieldMutations": [
                        {"field": "price", "set": {"single": "10"}},
                        {"field": "on_sale", "set": {"single": "true"}},
                    ],
                }
            ]
        }

    @pytest.mark.asyncio
    async def test_mutate_multi_partial(self, client: Client, transport: FakeTransport) -> None:
        """Each record mutation has its own outcome."""
        transport.respond(MUTATE_METHOD, {"status": [NOT_FOUND, OK]})
        batch = await client.records().mutate_multi(
            [
                RecordMutation(Key("_id", "a"), (SetField("x", 1),)),
                RecordMutation(Key("_id", "b"), (SetField("x", 2),)),
            ]
        )
        assert isinstance(batch[0].error, RecordNotFoundError)
        assert batch[1].ok

    @pytest.mark.asyncio
    async def test_mutate_none_value_makes_no_call(self, client: Client, transport: FakeTransport) -> None:
        """None values are rejected before any call."""
        with pytest.raises(ValidationError):
            await client.records().mutate(Key("_id", "a"), SetField("x", None))
        assert transport.calls == []


class TestLearn:
    """Tests for RecordStore.learn and learn_multi."""

    @pytest.mark.asyncio
    async def test_length_mismatch(self, client: Client, transport: FakeTransport) -> None:
        """Keys, counts and scores must have equal lengths."""
        with pytest.raises(ValidationError) as exc_info:
            await client.records().learn_multi([Key("_id", "a")], Request(), [1, 2], [0.5])
        assert exc_info.value.code == ErrorCode.BATCH_LENGTH_MISMATCH
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_learn_multi(self, client: Client, transport: FakeTransport) -> None:
        """Analysed terms are incremented; analysis failures keep their error."""
        transport.respond(
            ANALYSE_METHOD,
            {
                "terms": [{"terms": ["red"]}, {}, {"terms": ["blue", "shoe"]}],
                "status": [OK, NOT_FOUND, OK],
            },
        )
        transport.respond(INCREMENT_METHOD, {"status": [OK, {"code": 13, "message": "boom"}]})

        keys = [Key("_id", "a"), Key("_id", "b"), Key("_id", "c")]
        request = Request(index_query=IndexQuery(text="red blue shoe"))
        batch = await client.records().learn_multi(keys, request, [1, 2, 3], [1.0, 0.5, -1.0])

        assert batch[0].ok
        assert isinstance(batch[1].error, RecordNotFoundError)
        assert isinstance(batch[2].error, RemoteStatusError)

        [sent] = transport.requests(INCREMENT_METHOD)
        assert sent == {
            "keysScores": [
                {"key": _key("a"), "scores": [{"terms": ["red"], "count": 1, "score": 1.0}]},
                {"key": _key("c"), "scores": [{"terms": ["blue", "shoe"], "count": 3, "score": -1.0}]},
            ]
        }

    @pytest.mark.asyncio
    async def test_learn_all_analysis_failed(self, client: Client, transport: FakeTransport) -> None:
        """No increment call is made when nothing was analysed."""
        transport.respond(ANALYSE_METHOD, {"terms": [{}], "status": [NOT_FOUND]})
        with pytest.raises(RecordNotFoundError):
            await client.records().learn(Key("_id", "a"), Request(), 1, 1.0)
        assert transport.requests(INCREMENT_METHOD) == []
