"""
JsonChain: a JSON-serializable mapping with a fluent mutation API.

Reads:
- get() returns the zero value of the value type for missing keys
- get_with_error() raises KeyNotExistError when the value is the zero value
- lookup() reports presence explicitly as (value, found)

Writes:
- set() overwrites and returns the chain, so calls can be chained
- set_with_error() refuses to overwrite

Merges are shallow, key by key:
- copy(other): last writer wins
- append(other): first writer wins
- append_from_bytes(data): last writer wins, keys from data

Thread safety: NOT thread-safe. Guard shared chains with an external lock.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import jsonchain.chain._codec as _codec
import jsonchain.chain._equality as _equality
import jsonchain.chain._errors as _errors
import jsonchain.chain._output as _output
import jsonchain.chain._zero as _zero
import jsonchain.config as config

_logger = _logging.getLogger(__name__)

K = _typing.TypeVar("K", bound=str)
V = _typing.TypeVar("V")


class _MissingType:
    """Sentinel type for "no default given"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


_MISSING = _MissingType()


def _validate_key(key: object) -> None:
    """
    Check that a key can become a JSON object field name.

    Raises:
        TypeError: If key is not a string.
    """
    if not isinstance(key, str):
        raise TypeError(f"Chain keys must be strings, got {type(key).__name__}")


class JsonChain(_typing.MutableMapping[K, V]):
    """
    A mapping of string keys to JSON-serializable values.

    The optional value_type drives two things: the zero value returned for
    missing keys, and validation of decoded JSON.

    Example:
        >>> chain = JsonChain(value_type=str)
        >>> chain.set("name", "Ada").set("language", "Python").get("name")
        'Ada'
        >>> chain.get("missing")
        ''
        >>> chain.to_json()
        JsonOutput(b'{"language":"Python","name":"Ada"}\\n')

    Args:
        data: Initial entries (a Mapping), copied into the chain. Passed
            positionally, like dict(); value_type is keyword-only.
        value_type: Type of the values. Scalars (str, int, float, bool)
            zero to their empty value; anything else zeroes to None.
        zero_factory: Callable producing the zero value, overriding the
            one derived from value_type.
        strict_presence: If True, get_with_error() checks presence instead
            of comparing against the zero value.
        settings: Encoding settings. Defaults to the process-wide settings.

    Raises:
        TypeError: If data is not a Mapping (for example JsonChain(str);
            use JsonChain(value_type=str) or new_chain(str)).

    Note:
        **Zero values:** get_with_error() cannot tell a missing key from a
        key holding the zero value, and raises for both. Use lookup(), ``in``,
        or strict_presence=True when stored zeros are meaningful.

        **Shallow copies:** clone(), copy() and load() copy entries, not
        values. Mutable values (lists, dicts) are shared with the source.
    """

    def __init__(
        self,
        data: _typing.Mapping[K, V] | None = None,
        /,
        *,
        value_type: _typing.Any = None,
        zero_factory: _typing.Callable[[], V] | None = None,
        strict_presence: bool = False,
        settings: config.Settings | None = None,
    ) -> None:
        if data is not None and not isinstance(data, _abc.Mapping):
            raise TypeError(
                f"JsonChain data must be a mapping, got {type(data).__name__}; "
                "pass value_type=... to type the values"
            )
        self._data: dict[K, V] = {}
        self._value_type = value_type
        self._zero_factory = _zero.make_zero_factory(value_type, zero_factory)
        self._strict_presence = strict_presence
        self._settings = settings
        if data:
            self.copy(data)

    @classmethod
    def from_bytes(
        cls,
        data: bytes | bytearray | str,
        **kwargs: _typing.Any,
    ) -> JsonChain[str, _typing.Any]:
        """
        Create a chain from JSON bytes.

        Args:
            data: A JSON object.
            **kwargs: Constructor options (value_type, zero_factory, ...).

        Raises:
            DecodeError: If data cannot be decoded into a chain.
        """
        chain: JsonChain[str, _typing.Any] = cls(**kwargs)
        chain.load_from_bytes(data)
        return chain

    @property
    def value_type(self) -> _typing.Any:
        """The value type given at construction, or None."""
        return self._value_type

    @property
    def settings(self) -> config.Settings:
        """The encoding settings in effect for this chain."""
        return self._settings if self._settings is not None else config.get_settings()

    def zero(self) -> V:
        """Return a fresh zero value for this chain's value type."""
        return self._zero_factory()

    # =========================================================================
    # Basic access
    # =========================================================================

    def set(self, key: K, value: V) -> JsonChain[K, V]:
        """
        Set a value, overwriting any existing one.

        Returns:
            This chain, so calls can be chained.

        Raises:
            TypeError: If key is not a string.
        """
        _validate_key(key)
        self._data[key] = value
        return self

    def get(self, key: K, default: _typing.Any = _MISSING) -> V:  # type: ignore[override]
        """
        Get a value.

        Args:
            key: The key to look up.
            default: Returned for missing keys. If omitted, the chain's zero
                value is returned instead.

        Returns:
            The stored value, or the default/zero value if key is missing.
        """
        if key in self._data:
            return self._data[key]
        if default is _MISSING:
            return self._zero_factory()
        return _typing.cast(V, default)

    def set_with_error(self, key: K, value: V) -> None:
        """
        Set a value only if the key is not present yet.

        Raises:
            KeyAlreadyExistError: If key is already present. The chain is
                left unchanged.
            TypeError: If key is not a string.
        """
        _validate_key(key)
        if key in self._data:
            raise _errors.KeyAlreadyExistError(key)
        self._data[key] = value

    def get_with_error(self, key: K) -> V:
        """
        Get a value, refusing missing or zero values.

        By default a stored zero value ("", 0, False, None...) is treated as
        missing. With strict_presence=True only absent keys raise.

        Raises:
            KeyNotExistError: If there is no usable value. The error's
                ``zero`` attribute holds the zero value.
        """
        zero = self._zero_factory()
        if self._strict_presence:
            if key not in self._data:
                raise _errors.KeyNotExistError(key, zero)
            return self._data[key]

        value = self._data.get(key, zero)
        if _equality.deep_equal(value, zero):
            raise _errors.KeyNotExistError(key, zero)
        return value

    def lookup(self, key: K) -> tuple[V, bool]:
        """
        Get a value along with whether the key is present.

        Returns:
            (value, True) if present, (zero value, False) otherwise.
        """
        if key in self._data:
            return self._data[key], True
        return self._zero_factory(), False

    # =========================================================================
    # Bulk mutation
    # =========================================================================

    def clear(self) -> JsonChain[K, V]:
        """
        Remove all entries.

        Returns:
            This chain (now empty), so calls can be chained.
        """
        self._data = {}
        return self

    def load(self, other: _typing.Mapping[K, V]) -> None:
        """
        Replace all entries with those of another mapping.

        The chain gets fresh storage; later changes to other are not seen.

        Raises:
            TypeError: If other contains a non-string key.
        """
        data = dict(other)
        for key in data:
            _validate_key(key)
        self._data = data

    def load_from_bytes(self, data: bytes | bytearray | str) -> None:
        """
        Replace all entries with a JSON object.

        Raises:
            DecodeError: If data is not valid JSON, is not an object, or a
                value does not match the value type. The chain is left
                unchanged.
        """
        decoded = _codec.decode_object(data, self._value_type)
        self._data = decoded
        _logger.debug("Loaded %d entries from JSON", len(decoded))

    def copy(self, other: _typing.Mapping[K, V]) -> None:
        """
        Merge another mapping in, overwriting colliding keys.

        Last writer wins: for a chain {a: 1}, copy({a: 2, b: 2}) gives
        {a: 2, b: 2}. Use clone() for a copy of this chain.
        """
        for key, value in other.items():
            self.set(key, value)

    def append(self, other: _typing.Mapping[K, V]) -> None:
        """
        Merge another mapping in, keeping existing values.

        First writer wins: for a chain {a: 1}, append({a: 2, b: 2}) gives
        {a: 1, b: 2}. Colliding keys are skipped silently; call
        set_with_error() per key to detect them.
        """
        skipped = 0
        for key, value in other.items():
            try:
                self.set_with_error(key, value)
            except _errors.KeyAlreadyExistError:
                skipped += 1
        if skipped:
            _logger.debug("Append kept %d existing entries", skipped)

    def append_from_bytes(self, data: bytes | bytearray | str) -> None:
        """
        Merge a JSON object in, overwriting colliding keys.

        Raises:
            DecodeError: Same conditions as load_from_bytes(). The chain is
                left unchanged.
        """
        decoded = _codec.decode_object(data, self._value_type)
        self._data.update(decoded)
        _logger.debug("Appended %d entries from JSON", len(decoded))

    def each(self, fn: _typing.Callable[[K, V], object]) -> None:
        """
        Call fn(key, value) for every entry.

        Order is unspecified. Do not add or remove keys from fn.
        """
        for key, value in self._data.items():
            fn(key, value)

    # =========================================================================
    # Derived values
    # =========================================================================

    def clone(self) -> JsonChain[K, V]:
        """
        Return an independent chain with the same entries.

        Values are not deep-copied: mutable values are shared.
        """
        new: JsonChain[K, V] = type(self)(
            value_type=self._value_type,
            zero_factory=self._zero_factory,
            strict_presence=self._strict_presence,
            settings=self._settings,
        )
        new._data = dict(self._data)
        return new

    def equal(self, other: _typing.Mapping[str, _typing.Any]) -> bool:
        """
        Check if another mapping has the same keys and deep-equal values.

        Booleans never equal numbers, and tuples equal lists with the same
        items, matching how the values would compare as JSON.
        """
        return _equality.deep_equal(self._data, other)

    def to_json(self) -> _output.JsonOutput:
        """
        Serialize the chain as a JSON object.

        Raises:
            EncodeError: If a value is not JSON-serializable, is NaN or
                infinite, or contains a circular reference.
        """
        return _output.JsonOutput(_codec.encode_object(self._data, self.settings))

    def to_dict(self) -> dict[K, V]:
        """Return a shallow copy of the entries as a plain dict."""
        return dict(self._data)

    # =========================================================================
    # Mapping protocol
    # =========================================================================

    def __getitem__(self, key: K) -> V:
        """
        Get a value.

        Raises:
            KeyError: If key is missing (no zero-value fallback here).
        """
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def __iter__(self) -> _typing.Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"JsonChain({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare equal to any Mapping with deep-equal content."""
        if isinstance(other, _abc.Mapping):
            return self.equal(other)
        return NotImplemented

    def __hash__(self) -> int:
        """JsonChain is not hashable (it is mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def __copy__(self) -> JsonChain[K, V]:
        return self.clone()


def new_chain(value_type: _typing.Any = None, **kwargs: _typing.Any) -> JsonChain[str, _typing.Any]:
    """
    Create an empty chain.

    Args:
        value_type: Type of the values (see JsonChain).
        **kwargs: Other constructor options.

    Example:
        >>> chain = new_chain(int)
        >>> chain.get("count")
        0
    """
    return JsonChain(value_type=value_type, **kwargs)
