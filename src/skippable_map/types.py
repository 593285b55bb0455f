from enum import StrEnum
from typing import Annotated

from annotated_types import Interval


class Format(StrEnum):
    JSON = "json"
    YAML = "yaml"
    MSGPACK = "msgpack"

    @property
    def is_binary(self) -> bool:
        match self:
            case Format.MSGPACK:
                return True
            case Format.JSON | Format.YAML:
                return False
            case _:
                raise ValueError(f"Invalid format: {self}")


def _int_range(bits: int, *, signed: bool) -> Interval:
    if signed:
        return Interval(ge=-(2 ** (bits - 1)), le=2 ** (bits - 1) - 1)
    return Interval(ge=0, le=2**bits - 1)


U8 = Annotated[int, _int_range(8, signed=False)]
U16 = Annotated[int, _int_range(16, signed=False)]
U32 = Annotated[int, _int_range(32, signed=False)]
U64 = Annotated[int, _int_range(64, signed=False)]
I8 = Annotated[int, _int_range(8, signed=True)]
I16 = Annotated[int, _int_range(16, signed=True)]
I32 = Annotated[int, _int_range(32, signed=True)]
I64 = Annotated[int, _int_range(64, signed=True)]

__all__ = ["Format", "I8", "I16", "I32", "I64", "U8", "U16", "U32", "U64"]
