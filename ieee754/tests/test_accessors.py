from __future__ import annotations

import math

import pytest

import ieee754
from ieee754 import (
    ByteView,
    Endianness,
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

PI_APPROX_LE = bytes([0x6E, 0x86, 0x1B, 0xF0, 0xF9, 0x21, 0x09, 0x40])


def test_double_helpers_delegate_to_binary64():
    assert double_to_bytes(3.14159) == PI_APPROX_LE
    assert double_to_bytes(3.14159, "big") == PI_APPROX_LE[::-1]
    assert bytes_to_double(PI_APPROX_LE) == 3.14159
    assert bytes_to_double(PI_APPROX_LE[::-1], Endianness.BIG) == 3.14159
    assert bytes_to_double(PI_APPROX_LE[:7]) is None


def test_float_helpers_delegate_to_binary32():
    assert float_to_bytes(1.0) == b"\x00\x00\x80\x3F"
    assert bytes_to_float(b"\x3F\x80\x00\x00", "big") == 1.0
    assert bytes_to_float(b"\x00\x00\x80") is None


def test_bit_pattern_helpers():
    assert double_bit_pattern(1.0) == 0x3FF0000000000000
    assert float_bit_pattern(1.0) == 0x3F800000


def test_sequence_helpers():
    raw = doubles_to_bytes([1.0, 2.0])
    assert bytes_to_doubles(raw) == [1.0, 2.0]
    assert bytes_to_doubles(raw[:-1]) is None
    raw32 = floats_to_bytes([1.0, 2.0], "big")
    assert bytes_to_floats(raw32, "big") == [1.0, 2.0]
    assert bytes_to_floats(b"") == []


def test_byte_view():
    view = ByteView(list(PI_APPROX_LE))
    assert len(view) == 8
    assert view.as_double() == 3.14159
    assert view.as_float() is None
    assert view.as_doubles() == [3.14159]
    assert len(view.as_floats()) == 2


def test_byte_view_big_endian():
    view = ByteView(b"\x3F\x80\x00\x00")
    assert view.as_float("big") == 1.0
    assert view.as_double("big") is None


def test_float_view_defaults_to_binary64():
    fv = FloatView(3.14159)
    assert fv.fmt.name == "binary64"
    assert fv.bytes() == PI_APPROX_LE
    assert fv.bytes(Endianness.BIG) == PI_APPROX_LE[::-1]
    assert fv.bit_pattern == int.from_bytes(PI_APPROX_LE, "little")
    assert fv.classification == "normal"


@pytest.mark.parametrize("fmt", ["binary32", "float", 32])
def test_float_view_binary32(fmt):
    fv = FloatView(-0.0, fmt)
    assert fv.bytes() == b"\x00\x00\x00\x80"
    assert fv.fields.negative
    assert fv.classification == "zero"


def test_float_view_nan_and_infinity():
    assert FloatView(math.nan).classification == "quiet_nan"
    assert FloatView(math.inf, "float").classification == "infinity"


def test_float_view_unknown_format():
    with pytest.raises(NotImplementedError):
        FloatView(1.0, "binary128")


def test_package_exports():
    assert ieee754.Binary64.width == 8
    assert ieee754.Binary32.width == 4
    assert ieee754.Float64Sequence.width == 8
    assert ieee754.BINARY32.bits == 32
