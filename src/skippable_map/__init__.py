from .codec import SkippableMapDecoder, decode, resolve_format
from .config import DecoderSettings, load_settings
from .converter import EntryConverter
from .formats import FormatHandler, format_handlers, get_format_handler
from .skippable import SkippableMap
from .types import I8, I16, I32, I64, U8, U16, U32, U64, Format

__all__ = [
    "DecoderSettings",
    "EntryConverter",
    "Format",
    "FormatHandler",
    "I8",
    "I16",
    "I32",
    "I64",
    "SkippableMap",
    "SkippableMapDecoder",
    "U8",
    "U16",
    "U32",
    "U64",
    "decode",
    "format_handlers",
    "get_format_handler",
    "load_settings",
    "resolve_format",
]
