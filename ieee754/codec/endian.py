# ieee754/codec/endian.py
from __future__ import annotations

from enum import Enum
from typing import Union


class Endianness(str, Enum):
    """Byte order of a serialized value. Values match ``int.to_bytes`` byteorder names."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def coerce(cls, value: Union["Endianness", str]) -> "Endianness":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid endianness {value!r} (expected 'little' or 'big')")


EndiannessLike = Union[Endianness, str]


def reorder(data: bytes, endianness: EndiannessLike = Endianness.LITTLE) -> bytes:
    """
    Move a little-endian byte run into the requested order (or back).

    Little is the canonical internal order, so LITTLE is the identity and BIG
    is a plain reversal. Applying it twice with the same order is a no-op.
    """
    if Endianness.coerce(endianness) is Endianness.BIG:
        return bytes(reversed(data))
    return bytes(data)
