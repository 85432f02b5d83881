# ieee754/cli/args.py
from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Optional

from ieee754.app.config import CodecConfig, load_config
from ieee754.codec.endian import Endianness
from ieee754.errors import InputFormatError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_value(text: str) -> float:
    """
    Parse a float literal. Accepts decimal ("3.14159", "-0.0", "nan", "-inf")
    and C99 hex-float ("0x1.921fb54442d18p+1") spellings.
    """
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float.fromhex(text)
    except ValueError:
        raise InputFormatError(
            f"Not a floating-point literal: {text!r}",
            hint="Use decimal (1.5, -0.0, nan, inf) or hex-float (0x1.8p+0).",
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ieee754", description="IEEE 754 binary32/binary64 byte codec.")
    parser.add_argument("--config", default=None, help="YAML file with codec defaults.")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, type=str.upper)
    sub = parser.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--width", type=int, choices=(32, 64), default=None,
                        help="Element width in bits (default from config, else 64).")
    common.add_argument("--endian", choices=[e.value for e in Endianness], default=None,
                        help="Byte order (default from config, else little).")

    p_enc = sub.add_parser("encode", parents=[common], help="Encode values to bytes.")
    p_enc.add_argument("values", nargs="+")
    p_enc.add_argument("--out", default=None, help="Write raw bytes to this file instead of printing hex.")

    p_dec = sub.add_parser("decode", parents=[common], help="Decode bytes to values.")
    p_dec.add_argument("hex", nargs="*", help="Hex bytes; several arguments are concatenated.")
    p_dec.add_argument("--in", dest="infile", default=None, help="Read raw bytes from this file.")

    p_ins = sub.add_parser("inspect", parents=[common], help="Show bit pattern and fields of a value.")
    p_ins.add_argument("value")

    return parser


def resolve_config(args: argparse.Namespace) -> CodecConfig:
    """Config file defaults, overridden by explicit flags."""
    config = load_config(args.config)
    overrides = {}
    if getattr(args, "width", None) is not None:
        overrides["width_bits"] = int(args.width)
    if getattr(args, "endian", None) is not None:
        overrides["endianness"] = Endianness.coerce(args.endian)
    return replace(config, **overrides) if overrides else config


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
