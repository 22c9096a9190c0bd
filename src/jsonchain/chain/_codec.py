"""
JSON encode/decode helpers shared by JsonChain.

Decoding has two paths:
- Untyped chains parse with the json module and only check the shape
  (a JSON object, or null for "no entries").
- Typed chains parse and validate in one step with a pydantic TypeAdapter
  in strict mode, so "1" never silently becomes 1.

Both paths finish before the chain is touched, which makes decoding
all-or-nothing.
"""

from __future__ import annotations

import functools as _functools
import json as _json
import math as _math
import typing as _typing

import pydantic as _pydantic

import jsonchain.chain._errors as _errors

if _typing.TYPE_CHECKING:
    import jsonchain.config as config

# Compact separators, no whitespace between tokens
_SEPARATORS = (",", ":")


def reject_constant(name: str) -> _typing.NoReturn:
    """Refuse NaN/Infinity, which are not valid JSON."""
    raise ValueError(f"invalid JSON constant: {name}")


def parse_finite_float(text: str) -> float:
    """Parse a JSON number, refusing values that overflow to infinity (1e400)."""
    value = float(text)
    if not _math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _encode_default(value: _typing.Any) -> _typing.Any:
    """Serialize pydantic models; refuse everything else json can't handle."""
    if isinstance(value, _pydantic.BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def is_untyped(value_type: _typing.Any) -> bool:
    """Check if a value type needs no validation."""
    return value_type is None or value_type is _typing.Any


@_functools.lru_cache(maxsize=128)
def mapping_adapter(value_type: _typing.Any) -> _pydantic.TypeAdapter[_typing.Any]:
    """
    Return a cached adapter validating a JSON object of value_type values.

    The adapter also accepts null, which decodes to no entries. Floats must
    be finite, so out-of-range numbers fail here rather than in to_json().
    """
    return _pydantic.TypeAdapter(
        dict[str, value_type] | None,  # type: ignore[valid-type]
        config=_pydantic.ConfigDict(allow_inf_nan=False),
    )


def decode_object(
    data: bytes | bytearray | str,
    value_type: _typing.Any = None,
) -> dict[str, _typing.Any]:
    """
    Decode a JSON object into a plain dict.

    Args:
        data: JSON text or UTF-8 bytes.
        value_type: Expected type of every value, or None to accept any
            JSON value.

    Returns:
        Dict of decoded entries. JSON null yields an empty dict.

    Raises:
        DecodeError: If data is not valid JSON, is not an object, or a value
            does not match value_type.
    """
    if is_untyped(value_type):
        try:
            parsed = _json.loads(
                data,
                parse_constant=reject_constant,
                parse_float=parse_finite_float,
            )
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise _errors.DecodeError(f"invalid JSON: {e}") from e
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise _errors.DecodeError(
                f"cannot decode JSON {type(parsed).__name__} into a chain, expected an object"
            )
        return parsed

    try:
        validated = mapping_adapter(value_type).validate_json(data, strict=True)
    except _pydantic.ValidationError as e:
        raise _errors.DecodeError(f"JSON does not fit the chain: {e}") from e
    return validated or {}


def encode_object(
    data: _typing.Mapping[str, _typing.Any],
    settings: config.Settings,
) -> bytes:
    """
    Encode a mapping as a JSON object.

    Args:
        data: The entries to encode.
        settings: Supplies key ordering, ASCII escaping and the trailing
            newline.

    Returns:
        UTF-8 encoded JSON.

    Raises:
        EncodeError: If a value is not serializable, is NaN/Infinity, or the
            structure contains a circular reference.
    """
    try:
        text = _json.dumps(
            data,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
            separators=_SEPARATORS,
            allow_nan=False,
            default=_encode_default,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise _errors.EncodeError(f"cannot encode chain: {e}") from e

    if settings.trailing_newline:
        text += "\n"
    return text.encode("utf-8")
