# ieee754/__init__.py

from .codec import (
    BINARY32,
    BINARY64,
    Binary32,
    Binary64,
    Endianness,
    Float32Sequence,
    Float64Sequence,
)
from .accessors import (
    ByteView,
    FloatView,
    bytes_to_double,
    bytes_to_doubles,
    bytes_to_float,
    bytes_to_floats,
    double_bit_pattern,
    double_to_bytes,
    doubles_to_bytes,
    float_bit_pattern,
    float_to_bytes,
    floats_to_bytes,
)

__all__ = [
    "Endianness", "BINARY32", "BINARY64",
    "Binary32", "Binary64", "Float32Sequence", "Float64Sequence",
    "ByteView", "FloatView",
    "double_to_bytes", "bytes_to_double", "float_to_bytes", "bytes_to_float",
    "doubles_to_bytes", "bytes_to_doubles", "floats_to_bytes", "bytes_to_floats",
    "double_bit_pattern", "float_bit_pattern",
]
