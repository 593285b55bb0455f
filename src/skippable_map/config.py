"""Configuration utilities for skippable map decoding."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from confection import Config
from pydantic import BaseModel, Field

from skippable_map.types import Format

CONFIG_PATH = Path(__file__).resolve().parent / "config.cfg"


class DecoderSettings(BaseModel):
    strict_values: bool = True
    default_format: Format = Format.JSON

    # Lower-cased file suffix (with the dot) -> format, filled from config.cfg
    suffixes: dict[str, Format] = Field(default_factory=dict)

    def format_for_suffix(self, suffix: str) -> Format | None:
        return self.suffixes.get(suffix.lower())


@lru_cache(maxsize=1)
def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load the Confection configuration from disk."""
    return Config().from_disk(path, interpolate=False)


@lru_cache(maxsize=1)
def load_settings(path: Path = CONFIG_PATH) -> DecoderSettings:
    """Validate the on-disk configuration into ``DecoderSettings``."""
    cfg = load_config(path)
    decoding_cfg = dict(cfg.get("decoding", {}))  # type: ignore[arg-type]
    suffixes_cfg = dict(cfg.get("suffixes", {}))  # type: ignore[arg-type]
    if suffixes_cfg:
        decoding_cfg["suffixes"] = {
            suffix.lower(): fmt
            for fmt, suffixes in suffixes_cfg.items()
            for suffix in suffixes
        }
    return DecoderSettings(**decoding_cfg)


__all__ = ["CONFIG_PATH", "DecoderSettings", "load_config", "load_settings"]
