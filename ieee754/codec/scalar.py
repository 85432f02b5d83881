# ieee754/codec/scalar.py
from __future__ import annotations

import math
import struct
from typing import Iterable, Optional, Union

from .endian import Endianness, EndiannessLike, reorder
from .formats import BINARY32, BINARY64, BinaryFormat

ByteInput = Union[bytes, bytearray, memoryview, Iterable[int]]


def as_byte_view(data: ByteInput) -> bytes:
    """Normalize any contiguous byte source (buffer or iterable of 0..255) to bytes."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, memoryview):
        return data.tobytes()
    if isinstance(data, (int, str)):
        raise TypeError(f"Expected a byte sequence, got {type(data).__name__}")
    return bytes(data)


class ScalarCodec:
    """
    Canonical encode/decode of a single IEEE 754 binary value.

    The value is reinterpreted as its unsigned bit pattern, laid out least
    significant byte first, then reordered for the requested endianness.
    No arithmetic is performed on the value.
    """

    def __init__(self, fmt: BinaryFormat):
        self.fmt = fmt
        self._float = struct.Struct("<" + fmt.float_code)
        self._bits = struct.Struct("<" + fmt.bits_code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fmt.name})"

    @property
    def width(self) -> int:
        return self.fmt.width

    # --- bit pattern ---
    def bit_pattern(self, value: float) -> int:
        return self._bits.unpack(self._float.pack(float(value)))[0]

    def from_bit_pattern(self, bits: int) -> float:
        return self._float.unpack(self._bits.pack(self._check_bits(bits)))[0]

    def _check_bits(self, bits: int) -> int:
        bits = int(bits)
        if not 0 <= bits < (1 << self.fmt.bits):
            raise ValueError(f"Bit pattern 0x{bits:X} out of range for {self.fmt.name}")
        return bits

    # --- bytes ---
    def encode(self, value: float, endianness: EndiannessLike = Endianness.LITTLE) -> bytes:
        order = Endianness.coerce(endianness)
        raw = self.bit_pattern(value).to_bytes(self.fmt.width, "little")
        return reorder(raw, order)

    def decode(self, data: ByteInput, endianness: EndiannessLike = Endianness.LITTLE) -> Optional[float]:
        order = Endianness.coerce(endianness)
        raw = as_byte_view(data)
        if len(raw) != self.fmt.width:
            return None
        bits = int.from_bytes(reorder(raw, order), "little")
        return self.from_bit_pattern(bits)


class Binary32Codec(ScalarCodec):
    """
    binary32 codec over Python's binary64 ``float``.

    Finite values round to nearest binary32; values that round past the
    largest finite binary32 encode as infinity of the same sign. NaNs are
    widened/narrowed by hand so the payload and the quiet bit survive a
    decode/encode cycle unchanged.
    """

    _NAN_SHIFT = BINARY64.mantissa_bits - BINARY32.mantissa_bits

    def __init__(self) -> None:
        super().__init__(BINARY32)

    def bit_pattern(self, value: float) -> int:
        value = float(value)
        if math.isnan(value):
            return self._narrow_nan(Binary64.bit_pattern(value))
        try:
            packed = self._float.pack(value)
        except OverflowError:
            packed = self._float.pack(math.copysign(math.inf, value))
        return self._bits.unpack(packed)[0]

    def from_bit_pattern(self, bits: int) -> float:
        bits = self._check_bits(bits)
        f = self.fmt
        if (bits & f.exponent_mask) == f.exponent_mask and bits & f.mantissa_mask:
            return Binary64.from_bit_pattern(self._widen_nan(bits))
        return self._float.unpack(self._bits.pack(bits))[0]

    def _widen_nan(self, bits32: int) -> int:
        sign = 1 if bits32 & BINARY32.sign_mask else 0
        mantissa = (bits32 & BINARY32.mantissa_mask) << self._NAN_SHIFT
        return (sign << (BINARY64.bits - 1)) | BINARY64.exponent_mask | mantissa

    def _narrow_nan(self, bits64: int) -> int:
        sign = 1 if bits64 & BINARY64.sign_mask else 0
        mantissa = (bits64 & BINARY64.mantissa_mask) >> self._NAN_SHIFT
        if mantissa == 0:
            # payload only in the dropped low bits; keep it a NaN
            mantissa = BINARY32.quiet_bit
        return (sign << (BINARY32.bits - 1)) | BINARY32.exponent_mask | mantissa


Binary64 = ScalarCodec(BINARY64)
Binary32 = Binary32Codec()


def codec_for(fmt: BinaryFormat) -> ScalarCodec:
    if fmt == BINARY64:
        return Binary64
    if fmt == BINARY32:
        return Binary32
    raise NotImplementedError(f"No scalar codec for {fmt.name}")
