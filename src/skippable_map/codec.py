"""Format-agnostic decoding and re-encoding of skippable maps."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from os import PathLike
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import ConfigDict, TypeAdapter

from skippable_map.config import load_settings
from skippable_map.formats import get_format_handler
from skippable_map.skippable import SkippableMap
from skippable_map.types import Format

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def resolve_format(path: str | PathLike[str]) -> Format:
    suffix = Path(path).suffix
    fmt = load_settings().format_for_suffix(suffix)
    if fmt is None:
        raise ValueError(f"Cannot infer format from suffix {suffix!r} of {path}")
    return fmt


class SkippableMapDecoder(Generic[K, V]):
    """Decodes map-shaped data into ``SkippableMap[K, V]`` from any registered format.

    Entries whose key or value does not convert are dropped. Input that is not
    a mapping raises ``pydantic.ValidationError``; errors from the underlying
    parser (truncated or corrupt payloads) propagate untouched.

    ``strict`` controls value conversion. ``None`` defers to the
    ``strict_values`` setting.
    """

    def __init__(
        self,
        key_type: Any = Any,
        value_type: Any = Any,
        *,
        strict: bool | None = None,
    ) -> None:
        self.key_type = key_type
        self.value_type = value_type
        self.strict = strict
        config = ConfigDict(strict=strict) if strict is not None else None
        self._adapter: TypeAdapter[SkippableMap[K, V]] = TypeAdapter(
            SkippableMap[key_type, value_type],  # type: ignore[valid-type]
            config=config,
        )

    def decode(self, raw: Any) -> SkippableMap[K, V]:
        return self._adapter.validate_python(raw)

    def loads(
        self, payload: str | bytes, fmt: Format | str | None = None
    ) -> SkippableMap[K, V]:
        fmt = Format(fmt or load_settings().default_format)
        return self.decode(get_format_handler(fmt).loads(payload))

    def read(
        self, path: str | PathLike[str], fmt: Format | str | None = None
    ) -> SkippableMap[K, V]:
        path = Path(path)
        fmt = Format(fmt) if fmt else resolve_format(path)
        logger.debug("Reading %s as %s", path, fmt)
        return self.decode(get_format_handler(fmt).read(path))

    def to_builtins(self, smap: SkippableMap[K, V]) -> dict[Any, Any]:
        return self._adapter.dump_python(smap, mode="json")

    def dumps(
        self, smap: SkippableMap[K, V], fmt: Format | str | None = None
    ) -> str | bytes:
        fmt = Format(fmt or load_settings().default_format)
        return get_format_handler(fmt).dumps(self.to_builtins(smap))

    def write(
        self,
        path: str | PathLike[str],
        smap: SkippableMap[K, V],
        fmt: Format | str | None = None,
    ) -> None:
        path = Path(path)
        fmt = Format(fmt) if fmt else resolve_format(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        get_format_handler(fmt).write(path, self.to_builtins(smap))
        logger.info("Wrote %s (%d entries)", path, len(smap))


def decode(
    source: Any,
    key_type: Any = Any,
    value_type: Any = Any,
    *,
    fmt: Format | str | None = None,
    strict: bool | None = None,
) -> SkippableMap[Any, Any]:
    """Decode ``source`` by type: paths are read, text/bytes parsed, anything else validated."""
    decoder: SkippableMapDecoder[Any, Any] = SkippableMapDecoder(
        key_type, value_type, strict=strict
    )
    if isinstance(source, PathLike):
        return decoder.read(source, fmt)
    if isinstance(source, str | bytes):
        return decoder.loads(source, fmt)
    return decoder.decode(source)


__all__ = ["SkippableMapDecoder", "decode", "resolve_format"]
