# ieee754/accessors.py
"""
Convenience spellings over the codec core.

Every function here delegates to ``Binary32``/``Binary64`` or the matching
sequence codec; default byte order is little-endian.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from ieee754.codec import (
    Binary32,
    Binary64,
    BinaryFormat,
    Fields,
    Float32Sequence,
    Float64Sequence,
    classify,
    codec_for,
    decompose,
    format_for,
)
from ieee754.codec.endian import Endianness, EndiannessLike
from ieee754.codec.scalar import ByteInput, as_byte_view

LITTLE = Endianness.LITTLE


# ---------------- scalar ----------------

def double_to_bytes(value: float, endianness: EndiannessLike = LITTLE) -> bytes:
    return Binary64.encode(value, endianness)


def bytes_to_double(data: ByteInput, endianness: EndiannessLike = LITTLE) -> Optional[float]:
    return Binary64.decode(data, endianness)


def float_to_bytes(value: float, endianness: EndiannessLike = LITTLE) -> bytes:
    return Binary32.encode(value, endianness)


def bytes_to_float(data: ByteInput, endianness: EndiannessLike = LITTLE) -> Optional[float]:
    return Binary32.decode(data, endianness)


def double_bit_pattern(value: float) -> int:
    return Binary64.bit_pattern(value)


def float_bit_pattern(value: float) -> int:
    return Binary32.bit_pattern(value)


# ---------------- sequences ----------------

def doubles_to_bytes(values: Iterable[float], endianness: EndiannessLike = LITTLE) -> bytes:
    return Float64Sequence.encode(values, endianness)


def bytes_to_doubles(data: ByteInput, endianness: EndiannessLike = LITTLE) -> Optional[List[float]]:
    return Float64Sequence.decode(data, endianness)


def floats_to_bytes(values: Iterable[float], endianness: EndiannessLike = LITTLE) -> bytes:
    return Float32Sequence.encode(values, endianness)


def bytes_to_floats(data: ByteInput, endianness: EndiannessLike = LITTLE) -> Optional[List[float]]:
    return Float32Sequence.decode(data, endianness)


# ---------------- views ----------------

class ByteView:
    """Read a byte sequence as binary32/binary64 values."""

    def __init__(self, data: ByteInput):
        self.data = as_byte_view(data)

    def __len__(self) -> int:
        return len(self.data)

    def as_double(self, endianness: EndiannessLike = LITTLE) -> Optional[float]:
        return Binary64.decode(self.data, endianness)

    def as_float(self, endianness: EndiannessLike = LITTLE) -> Optional[float]:
        return Binary32.decode(self.data, endianness)

    def as_doubles(self, endianness: EndiannessLike = LITTLE) -> Optional[List[float]]:
        return Float64Sequence.decode(self.data, endianness)

    def as_floats(self, endianness: EndiannessLike = LITTLE) -> Optional[List[float]]:
        return Float32Sequence.decode(self.data, endianness)


class FloatView:
    """Serialization view of one value in a given format (binary64 unless told otherwise)."""

    def __init__(self, value: float, fmt: Union[str, int, BinaryFormat] = "binary64"):
        self.value = float(value)
        self.fmt = format_for(fmt)
        self._codec = codec_for(self.fmt)

    def bytes(self, endianness: EndiannessLike = LITTLE) -> bytes:
        return self._codec.encode(self.value, endianness)

    @property
    def bit_pattern(self) -> int:
        return self._codec.bit_pattern(self.value)

    @property
    def fields(self) -> Fields:
        return decompose(self.bit_pattern, self.fmt)

    @property
    def classification(self) -> str:
        return classify(self.bit_pattern, self.fmt)
