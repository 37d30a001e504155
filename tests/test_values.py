"""Tests for record value marshaling."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.records.values import (
    decode_value,
    encode_single,
    encode_value,
    encode_values,
    format_scalar,
)
from sajari_sdk.wire import engine


class TestFormatScalar:
    """Tests for format_scalar."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("hello", "hello"),
            (42, "42"),
            (-7, "-7"),
            (True, "true"),
            (False, "false"),
            (1.5, "1.5"),
            (3.0, "3"),
            (1e20, "1e+20"),
        ],
    )
    def test_scalars(self, value: object, expected: str) -> None:
        """Scalars render in the service's string form."""
        assert format_scalar(value) == expected

    def test_datetime_as_unix_seconds(self) -> None:
        """Datetimes render as integer Unix seconds."""
        when = datetime(2017, 1, 1, tzinfo=UTC)
        assert format_scalar(when) == "1483228800"

    def test_datetime_rounds_down(self) -> None:
        """Fractional seconds round toward the past, also before the epoch."""
        assert format_scalar(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=UTC)) == "-1"
        assert format_scalar(datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=UTC)) == "1"

    def test_datetime_offset_applied(self) -> None:
        """Aware datetimes in other zones encode the same instant."""
        when = datetime(2017, 1, 1, 10, tzinfo=timezone(timedelta(hours=10)))
        assert format_scalar(when) == "1483228800"

    def test_naive_datetime_rejected(self) -> None:
        """Naive datetimes are rejected."""
        with pytest.raises(ValidationError, match="timezone-aware") as exc_info:
            format_scalar(datetime(2017, 1, 1))
        assert exc_info.value.code == ErrorCode.INVALID_VALUE

    def test_unsupported(self) -> None:
        """Other types are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            format_scalar(object())
        assert exc_info.value.code == ErrorCode.INVALID_VALUE


class TestEncodeValue:
    """Tests for encode_value."""

    def test_single(self) -> None:
        """Scalars encode as single values."""
        assert encode_value(10) == engine.Value(single="10")

    def test_repeated(self) -> None:
        """Homogeneous lists encode as repeated values."""
        value = encode_value(["a", "b"])
        assert value.repeated is not None
        assert value.repeated.values == ["a", "b"]

    def test_repeated_tuple(self) -> None:
        """Tuples are accepted like lists."""
        assert encode_value((1, 2)).repeated == engine.RepeatedValue(values=["1", "2"])

    def test_empty_list(self) -> None:
        """An empty list is an empty repeated value."""
        assert encode_value([]).repeated == engine.RepeatedValue(values=[])

    def test_mixed_list_rejected(self) -> None:
        """Lists must not mix element types."""
        with pytest.raises(ValidationError, match="share one type"):
            encode_value([1, "a"])

    def test_bool_and_int_not_mixed(self) -> None:
        """Booleans do not count as integers in lists."""
        with pytest.raises(ValidationError):
            encode_value([1, True])

    def test_unsupported_element(self) -> None:
        """Unsupported list elements are rejected."""
        with pytest.raises(ValidationError, match="unsupported list element"):
            encode_value([{"a": 1}])

    def test_none_rejected(self) -> None:
        """None is not a value."""
        with pytest.raises(ValidationError):
            encode_value(None)

    def test_values_name_the_field(self) -> None:
        """Errors from encode_values name the failing field."""
        with pytest.raises(ValidationError) as exc_info:
            encode_values({"ok": 1, "bad": {"x": 1}})
        assert "'bad'" in exc_info.value.message
        assert exc_info.value.details["field"] == "bad"


class TestEncodeSingle:
    """Tests for encode_single."""

    def test_scalar(self) -> None:
        """Scalars are accepted."""
        assert encode_single("abc") == engine.Value(single="abc")

    def test_list_rejected(self) -> None:
        """Lists are not single values."""
        with pytest.raises(ValidationError, match="expected single value"):
            encode_single(["a"])

    def test_datetime_rejected(self) -> None:
        """Datetimes are not valid single values."""
        with pytest.raises(ValidationError):
            encode_single(datetime.now(UTC))


class TestDecodeValue:
    """Tests for decode_value."""

    def test_single(self) -> None:
        """Single values decode to strings."""
        assert decode_value(engine.Value(single="42")) == "42"

    def test_repeated(self) -> None:
        """Repeated values decode to string lists."""
        value = engine.Value(repeated=engine.RepeatedValue(values=["1", "2"]))
        assert decode_value(value) == ["1", "2"]

    def test_lossy(self) -> None:
        """Numbers come back as strings."""
        assert decode_value(encode_value(1.5)) == "1.5"


class TestValueRoundTrip:
    """Tests for encoding then decoding values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (7, "7"),
            (True, "true"),
            ("shoe", "shoe"),
            (2.25, "2.25"),
            (4.0, "4"),
            (datetime(2017, 1, 1, tzinfo=UTC), "1483228800"),
            ([1, 2], ["1", "2"]),
            ([True, False], ["true", "false"]),
            (["red", "blue"], ["red", "blue"]),
            ([0.5, 1.0], ["0.5", "1"]),
            ([datetime(1970, 1, 1, 0, 1, tzinfo=UTC)], ["60"]),
        ],
    )
    def test_decodes_to_string_form(self, value: object, expected: str | list[str]) -> None:
        """Decoding an encoded value yields its string form."""
        assert decode_value(encode_value(value)) == expected
