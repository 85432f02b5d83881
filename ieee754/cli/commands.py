# ieee754/cli/commands.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ieee754.app.config import CodecConfig
from ieee754.app.hexfmt import format_hex, parse_hex
from ieee754.cli.args import parse_value
from ieee754.codec import SequenceCodec, classify, codec_for, decompose, format_for
from ieee754.codec.endian import Endianness
from ieee754.errors import InputFormatError, LengthMismatchError

log = logging.getLogger(__name__)


# ---------------- Logging ----------------

def configure_logging(level: str) -> None:
    """
    Attach a stderr handler to the root logger (idempotent).
    Kept in CLI (presentation-layer concern).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for h in root.handlers:
        if getattr(h, "_ieee754_cli", False):
            return

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    sh._ieee754_cli = True  # type: ignore[attr-defined]
    root.addHandler(sh)


# ---------------- Commands ----------------

def cmd_encode(args: argparse.Namespace, config: CodecConfig) -> int:
    fmt = format_for(config.width_bits)
    codec = codec_for(fmt)
    values = [parse_value(v) for v in args.values]

    if args.out:
        data = SequenceCodec(codec).encode(values, config.endianness)
        Path(args.out).write_bytes(data)
        log.info("ENCODE_WRITTEN path=%s count=%d bytes=%d", args.out, len(values), len(data))
        return 0

    for v in values:
        print(format_hex(codec.encode(v, config.endianness), config.hex_separator, config.uppercase))
    return 0


def _read_input(args: argparse.Namespace) -> bytes:
    if args.infile and args.hex:
        raise InputFormatError("Give hex arguments or --in, not both")
    if args.infile:
        path = Path(args.infile)
        if not path.exists():
            raise InputFormatError(f"Input file not found: {path}")
        return path.read_bytes()
    if not args.hex:
        raise InputFormatError("Nothing to decode", hint="Pass hex bytes or --in FILE.")
    return parse_hex(" ".join(args.hex))


def cmd_decode(args: argparse.Namespace, config: CodecConfig) -> int:
    fmt = format_for(config.width_bits)
    data = _read_input(args)

    values = SequenceCodec(codec_for(fmt)).decode(data, config.endianness)
    if values is None:
        log.warning("DECODE_LENGTH_MISMATCH len=%d width=%d", len(data), fmt.width)
        raise LengthMismatchError(
            f"{len(data)} bytes is not a multiple of {fmt.width} ({fmt.name})",
            hint="Check --width, or whether the input was truncated.",
            details={"length": len(data), "width": fmt.width},
        )

    log.debug("DECODED count=%d endianness=%s", len(values), config.endianness.value)
    for v in values:
        print(repr(v))
    return 0


def cmd_inspect(args: argparse.Namespace, config: CodecConfig) -> int:
    fmt = format_for(config.width_bits)
    codec = codec_for(fmt)
    value = parse_value(args.value)
    bits = codec.bit_pattern(value)
    fields = decompose(bits, fmt)
    digits = fmt.bits // 4

    print(f"Format:    {fmt.name}")
    print(f"Value:     {codec.from_bit_pattern(bits)!r}")
    print(f"Bits:      0x{bits:0{digits}X}")
    print(f"Sign:      {fields.sign}")
    print(f"Exponent:  {fields.exponent} (unbiased {fields.exponent - fmt.bias})")
    print(f"Mantissa:  0x{fields.mantissa:X}")
    print(f"Class:     {classify(bits, fmt)}")
    for order in Endianness:
        print(f"{order.value + ':':<10} {format_hex(codec.encode(value, order), config.hex_separator, config.uppercase)}")
    return 0
