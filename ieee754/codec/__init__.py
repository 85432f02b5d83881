# ieee754/codec/__init__.py

from .endian import Endianness, reorder
from .formats import BINARY32, BINARY64, BinaryFormat, Fields, classify, compose, decompose, format_for
from .scalar import Binary32, Binary64, ScalarCodec, codec_for
from .sequence import Float32Sequence, Float64Sequence, SequenceCodec

__all__ = [
    "Endianness", "reorder",
    "BinaryFormat", "BINARY32", "BINARY64", "Fields",
    "format_for", "decompose", "compose", "classify",
    "ScalarCodec", "Binary32", "Binary64", "codec_for",
    "SequenceCodec", "Float32Sequence", "Float64Sequence",
]
