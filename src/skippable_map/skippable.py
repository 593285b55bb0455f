"""A ``dict`` wrapper whose decoding skips entries that don't fit ``K``/``V``.

Useful for pulling a typed subset out of a mixed payload you don't control::

    >>> from pydantic import TypeAdapter
    >>> from skippable_map import SkippableMap, U64
    >>> payload = '{"string": "b", "number": 1, "other_number": 2, "negative_number": -44}'
    >>> just_numbers = TypeAdapter(SkippableMap[str, U64]).validate_json(payload)
    >>> just_numbers.into_map()
    {'number': 1, 'other_number': 2}
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, ValidationInfo
from pydantic_core import core_schema

from skippable_map.config import load_settings
from skippable_map.converter import EntryConverter

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SkippableMap(Mapping[K, V], Generic[K, V]):
    """Owns exactly one ``dict``; equal only to another ``SkippableMap`` with an equal dict."""

    def __init__(self, data: dict[K, V] | None = None) -> None:
        self.data: dict[K, V] = {} if data is None else data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkippableMap):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"

    @classmethod
    def from_map(cls, mapping: Mapping[K, V]) -> SkippableMap[K, V]:
        """Wrap an existing mapping without converting anything."""
        return cls(mapping if isinstance(mapping, dict) else dict(mapping))

    def as_map(self) -> Mapping[K, V]:
        return MappingProxyType(self.data)

    def into_map(self) -> dict[K, V]:
        """Hand the inner dict to the caller, leaving this wrapper empty."""
        inner, self.data = self.data, {}
        return inner

    def copy(self) -> SkippableMap[K, V]:
        return type(self)(dict(self.data))

    def __getitem__(self, key: K) -> V:
        return self.data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        key_type, value_type = get_args(source) or (Any, Any)
        converter: EntryConverter[Any, Any] = EntryConverter(key_type, value_type)

        def unwrap(value: Any) -> Any:
            return value.data if isinstance(value, SkippableMap) else value

        def filter_entries(
            raw: Mapping[Any, Any], info: ValidationInfo
        ) -> SkippableMap[Any, Any]:
            strict = (info.config or {}).get("strict")
            if strict is None:
                strict = load_settings().strict_values
            return cls(converter.collect(raw, strict=strict))

        shape = core_schema.custom_error_schema(
            core_schema.dict_schema(),
            custom_error_type="skippable_map_type",
            custom_error_message=f"Input should be a mapping from {converter.describe()}",
        )
        return core_schema.no_info_before_validator_function(
            unwrap,
            core_schema.with_info_after_validator_function(filter_entries, shape),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.data,
                return_schema=core_schema.dict_schema(
                    handler.generate_schema(key_type),
                    handler.generate_schema(value_type),
                ),
            ),
        )


__all__ = ["SkippableMap"]
