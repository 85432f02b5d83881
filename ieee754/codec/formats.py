# ieee754/codec/formats.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class BinaryFormat:
    name: str
    width: int           # bytes
    exponent_bits: int
    mantissa_bits: int
    float_code: str      # struct code for the floating value
    bits_code: str       # struct code for the unsigned bit pattern

    @property
    def bits(self) -> int:
        return self.width * 8

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    @property
    def exponent_mask(self) -> int:
        return ((1 << self.exponent_bits) - 1) << self.mantissa_bits

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_bits) - 1

    @property
    def quiet_bit(self) -> int:
        # IEEE 754-2008: top mantissa bit set means quiet NaN
        return 1 << (self.mantissa_bits - 1)

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def max_exponent(self) -> int:
        return (1 << self.exponent_bits) - 1


BINARY32 = BinaryFormat(
    name="binary32", width=4, exponent_bits=8, mantissa_bits=23,
    float_code="f", bits_code="I",
)
BINARY64 = BinaryFormat(
    name="binary64", width=8, exponent_bits=11, mantissa_bits=52,
    float_code="d", bits_code="Q",
)

FORMATS: Dict[str, BinaryFormat] = {
    "binary32": BINARY32,
    "float32":  BINARY32,
    "float":    BINARY32,
    "binary64": BINARY64,
    "float64":  BINARY64,
    "double":   BINARY64,
}


def format_for(key: Union[str, int, BinaryFormat]) -> BinaryFormat:
    """Resolve a format by name/alias or by bit width (32 or 64)."""
    if isinstance(key, BinaryFormat):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        for fmt in (BINARY32, BINARY64):
            if fmt.bits == key:
                return fmt
        raise NotImplementedError(f"Unsupported floating width {key} bits")
    name = str(key).strip().lower()
    if name not in FORMATS:
        raise NotImplementedError(f"Unknown floating format '{key}'")
    return FORMATS[name]


@dataclass(frozen=True)
class Fields:
    sign: int
    exponent: int   # biased
    mantissa: int

    @property
    def negative(self) -> bool:
        return bool(self.sign)


def _check_bits(bits: int, fmt: BinaryFormat) -> int:
    bits = int(bits)
    if not 0 <= bits < (1 << fmt.bits):
        raise ValueError(f"Bit pattern 0x{bits:X} out of range for {fmt.name}")
    return bits


def decompose(bits: int, fmt: BinaryFormat) -> Fields:
    bits = _check_bits(bits, fmt)
    return Fields(
        sign=1 if bits & fmt.sign_mask else 0,
        exponent=(bits & fmt.exponent_mask) >> fmt.mantissa_bits,
        mantissa=bits & fmt.mantissa_mask,
    )


def compose(fields: Fields, fmt: BinaryFormat) -> int:
    if fields.sign not in (0, 1):
        raise ValueError(f"Sign must be 0 or 1, got {fields.sign}")
    if not 0 <= fields.exponent <= fmt.max_exponent:
        raise ValueError(f"Exponent {fields.exponent} out of range for {fmt.name}")
    if not 0 <= fields.mantissa <= fmt.mantissa_mask:
        raise ValueError(f"Mantissa 0x{fields.mantissa:X} out of range for {fmt.name}")
    return (
        (fields.sign << (fmt.bits - 1))
        | (fields.exponent << fmt.mantissa_bits)
        | fields.mantissa
    )


def classify(bits: int, fmt: BinaryFormat) -> str:
    f = decompose(bits, fmt)
    if f.exponent == 0:
        return "zero" if f.mantissa == 0 else "subnormal"
    if f.exponent == fmt.max_exponent:
        if f.mantissa == 0:
            return "infinity"
        return "quiet_nan" if f.mantissa & fmt.quiet_bit else "signaling_nan"
    return "normal"
