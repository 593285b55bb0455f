from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import catalogue
import srsly
from confection import registry as cfg_registry

from skippable_map.types import Format

format_handlers = catalogue.create(
    "skippable_map", "format_handlers", entry_points=False
)

cfg_registry.format_handlers = format_handlers


@dataclass(frozen=True)
class FormatHandler:
    """Raw read/write functions for one encoding.

    ``loads`` and ``read`` must raise on malformed input; decoding relies on
    them to surface unreadable data instead of returning something partial.
    """

    loads: Callable[[str | bytes], Any]
    dumps: Callable[[Any], str | bytes]
    read: Callable[[Path], Any]
    write: Callable[[Path, Any], None]


def get_format_handler(fmt: Format | str) -> FormatHandler:
    name = str(fmt)
    if name not in format_handlers:
        raise ValueError(
            f"Unsupported format: {name!r} (registered: {sorted(format_handlers.get_all())})"
        )
    return format_handlers.get(name)


def _json_write(path: Path, data: Any) -> None:
    srsly.write_json(path, data, indent=2)


def _msgpack_loads(payload: str | bytes) -> Any:
    if isinstance(payload, str):
        raise TypeError("msgpack payloads must be bytes")
    return srsly.msgpack_loads(payload)


format_handlers.register(Format.JSON.value)(
    FormatHandler(
        loads=srsly.json_loads,
        dumps=srsly.json_dumps,
        read=srsly.read_json,
        write=_json_write,
    )
)
format_handlers.register(Format.YAML.value)(
    FormatHandler(
        loads=srsly.yaml_loads,
        dumps=srsly.yaml_dumps,
        read=srsly.read_yaml,
        write=srsly.write_yaml,
    )
)
format_handlers.register(Format.MSGPACK.value)(
    FormatHandler(
        loads=_msgpack_loads,
        dumps=srsly.msgpack_dumps,
        read=srsly.read_msgpack,
        write=srsly.write_msgpack,
    )
)


__all__ = ["FormatHandler", "format_handlers", "get_format_handler"]
