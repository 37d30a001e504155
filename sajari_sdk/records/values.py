"""Conversion between Python values and wire values.

Scalars and datetimes encode to single strings, homogeneous lists to
repeated string lists. Decoding is lossy: the service returns strings,
so values come back as ``str`` or ``list[str]`` whatever their field type.
"""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.wire import engine

# Integral floats below this magnitude are written without a fractional part.
_INTEGRAL_FLOAT_LIMIT = 1e16

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _kind(x: Any) -> str | None:
    # bool is checked before int since it is a subclass.
    if isinstance(x, bool):
        return "bool"
    if isinstance(x, int):
        return "int"
    if isinstance(x, float):
        return "float"
    if isinstance(x, str):
        return "str"
    if isinstance(x, datetime):
        return "datetime"
    return None


def format_scalar(x: Any) -> str:
    """Render a scalar or datetime the way the service expects.

    Datetimes are written as whole Unix seconds, rounded down. They must be
    timezone-aware; naive datetimes are rejected rather than read in the
    host's local zone.

    Args:
        x: A str, int, float, bool or datetime.

    Returns:
        String form of the value.

    Raises:
        ValidationError: If x is not a supported scalar or is a naive
            datetime.
    """
    kind = _kind(x)
    if kind == "bool":
        return "true" if x else "false"
    if kind == "int" or kind == "str":
        return str(x)
    if kind == "float":
        if x.is_integer() and abs(x) < _INTEGRAL_FLOAT_LIMIT:
            return str(int(x))
        return repr(x)
    if kind == "datetime":
        if x.tzinfo is None or x.utcoffset() is None:
            raise ValidationError(
                "datetime values must be timezone-aware",
                code=ErrorCode.INVALID_VALUE,
                details={"value": x.isoformat()},
            )
        return str((x - _EPOCH) // timedelta(seconds=1))
    raise ValidationError(
        f"unsupported value: {type(x).__name__}",
        code=ErrorCode.INVALID_VALUE,
        details={"type": type(x).__name__},
    )


def encode_single(x: Any) -> engine.Value:
    """Encode a plain scalar (str, int, float or bool) as a single value.

    Raises:
        ValidationError: If x is not a plain scalar.
    """
    if _kind(x) in (None, "datetime"):
        raise ValidationError(
            f"expected single value, got {type(x).__name__}",
            code=ErrorCode.INVALID_VALUE,
            details={"type": type(x).__name__},
        )
    return engine.Value(single=format_scalar(x))


def encode_value(x: Any) -> engine.Value:
    """Encode a field value.

    Args:
        x: A scalar, datetime, or a list/tuple of values of one kind.

    Returns:
        The wire value.

    Raises:
        ValidationError: If x has an unsupported shape or a mixed list.
    """
    if _kind(x) is not None:
        return engine.Value(single=format_scalar(x))

    if isinstance(x, (list, tuple)):
        kinds = {_kind(v) for v in x}
        if None in kinds:
            bad = next(v for v in x if _kind(v) is None)
            raise ValidationError(
                f"unsupported list element: {type(bad).__name__}",
                code=ErrorCode.INVALID_VALUE,
                details={"type": type(bad).__name__},
            )
        if len(kinds) > 1:
            raise ValidationError(
                f"list values must share one type, got {sorted(kinds)}",
                code=ErrorCode.INVALID_VALUE,
                details={"types": sorted(kinds)},
            )
        return engine.Value(repeated=engine.RepeatedValue(values=[format_scalar(v) for v in x]))

    raise ValidationError(
        f"unsupported value: {type(x).__name__}",
        code=ErrorCode.INVALID_VALUE,
        details={"type": type(x).__name__},
    )


def encode_values(values: Mapping[str, Any]) -> dict[str, engine.Value]:
    """Encode a mapping of field values, naming the field on failure."""
    out: dict[str, engine.Value] = {}
    for field, value in values.items():
        try:
            out[field] = encode_value(value)
        except ValidationError as e:
            raise ValidationError(
                f"field {field!r}: {e.message}",
                code=e.code,
                details={"field": field, **e.details},
            ) from e
    return out


def decode_value(v: engine.Value) -> str | list[str]:
    """Decode a wire value to a string or list of strings."""
    if v.single is not None:
        return v.single
    if v.repeated is not None:
        return list(v.repeated.values)
    raise ValidationError("value has no member set", code=ErrorCode.INVALID_RESPONSE)


def decode_values(values: Mapping[str, engine.Value]) -> dict[str, str | list[str]]:
    """Decode a mapping of wire values."""
    return {field: decode_value(v) for field, v in values.items()}
