# ieee754/codec/sequence.py
from __future__ import annotations

from typing import Iterable, List, Optional

from .endian import Endianness, EndiannessLike
from .scalar import Binary32, Binary64, ByteInput, ScalarCodec, as_byte_view


class SequenceCodec:
    """Contiguous run of same-width values: scalar codec applied per fixed-size chunk."""

    def __init__(self, scalar: ScalarCodec):
        self.scalar = scalar

    def __repr__(self) -> str:
        return f"SequenceCodec({self.scalar.fmt.name})"

    @property
    def width(self) -> int:
        return self.scalar.width

    def encode(self, values: Iterable[float], endianness: EndiannessLike = Endianness.LITTLE) -> bytes:
        order = Endianness.coerce(endianness)
        return b"".join(self.scalar.encode(v, order) for v in values)

    def decode(self, data: ByteInput, endianness: EndiannessLike = Endianness.LITTLE) -> Optional[List[float]]:
        """
        Decode every chunk in input order.

        Returns None (and no partial result) when the length is not a multiple
        of the scalar width. Empty input decodes to an empty list.
        """
        order = Endianness.coerce(endianness)
        raw = as_byte_view(data)
        width = self.width
        if len(raw) % width:
            return None

        out: List[float] = []
        for pos in range(0, len(raw), width):
            value = self.scalar.decode(raw[pos: pos + width], order)
            assert value is not None  # chunk length is exact
            out.append(value)
        return out

    def count(self, data: ByteInput) -> Optional[int]:
        """Number of values in ``data``, or None on a length mismatch."""
        n = len(as_byte_view(data))
        return None if n % self.width else n // self.width


Float64Sequence = SequenceCodec(Binary64)
Float32Sequence = SequenceCodec(Binary32)
