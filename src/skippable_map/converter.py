"""Per-entry conversion for permissive map decoding."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from functools import cached_property
from typing import Annotated, Any, Generic, TypeVar, get_args, get_origin

import srsly
from pydantic import TypeAdapter, ValidationError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def describe_type(tp: Any) -> str:
    if get_origin(tp) is Annotated:
        return describe_type(get_args(tp)[0])
    if isinstance(tp, type):
        return tp.__name__
    return repr(tp).removeprefix("typing.")


def _json_encode(value: Any) -> str | None:
    try:
        return srsly.json_dumps(value)
    except (TypeError, ValueError, OverflowError):
        return None


class EntryConverter(Generic[K, V]):
    """Converts raw key/value entries to ``K``/``V``, dropping the ones that fail.

    Keys are always validated in lax mode: most text formats can only carry
    string keys, so an ``int`` key type has to accept ``"1"``. Value
    strictness is chosen per call.

    Strict values follow the rules of the format the value came from. Python
    objects are checked as they are; anything that fails is re-checked with
    pydantic's strict JSON rules, so an ISO string still becomes a
    ``datetime`` and a list still becomes a ``tuple``, while ``"1"`` and
    ``true`` are still rejected for ``int``.
    """

    def __init__(self, key_type: Any = Any, value_type: Any = Any) -> None:
        self.key_type = key_type
        self.value_type = value_type

    @cached_property
    def key_adapter(self) -> TypeAdapter[K]:
        return TypeAdapter(self.key_type)

    @cached_property
    def value_adapter(self) -> TypeAdapter[V]:
        return TypeAdapter(self.value_type)

    def describe(self) -> str:
        return f"{describe_type(self.key_type)} to {describe_type(self.value_type)}"

    def _validate_value(self, raw_value: Any, *, strict: bool) -> V:
        if not strict:
            return self.value_adapter.validate_python(raw_value, strict=False)
        try:
            return self.value_adapter.validate_python(raw_value, strict=True)
        except ValidationError:
            encoded = _json_encode(raw_value)
            if encoded is None:
                raise
            return self.value_adapter.validate_json(encoded, strict=True)

    def convert(
        self, raw_key: Any, raw_value: Any, *, strict: bool = True
    ) -> tuple[K, V] | None:
        """Return the converted entry, or ``None`` if either side fails."""
        try:
            key = self.key_adapter.validate_python(raw_key, strict=False)
            value = self._validate_value(raw_value, strict=strict)
        except ValidationError:
            return None
        return key, value

    def collect(self, raw: Mapping[Any, Any], *, strict: bool = True) -> dict[K, V]:
        result: dict[K, V] = {}
        for raw_key, raw_value in raw.items():
            entry = self.convert(raw_key, raw_value, strict=strict)
            if entry is None:
                continue
            key, value = entry
            result[key] = value
        return result


__all__ = ["EntryConverter", "describe_type"]
