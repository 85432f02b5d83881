# ieee754/app/hexfmt.py
from __future__ import annotations

import re

from ieee754.errors import InputFormatError

_SEPARATORS = re.compile(r"[\s:,\-]+")


def parse_hex(text: str) -> bytes:
    """
    Parse hex text into bytes.

    Accepts whitespace or ':', ',', '-' between bytes and an optional 0x
    prefix per token, e.g. "6E 86 1B F0", "0x6e:0x86", "6e861bf0".
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    digits = []
    for tok in tokens:
        if tok[:2].lower() == "0x":
            tok = tok[2:]
        digits.append(tok)
    joined = "".join(digits)

    if len(joined) % 2:
        raise InputFormatError(
            f"Odd number of hex digits in {text!r}",
            hint="Each byte needs exactly two hex digits.",
        )
    try:
        return bytes.fromhex(joined)
    except ValueError as e:
        raise InputFormatError(f"Invalid hex input {text!r}") from e


def format_hex(data: bytes, separator: str = " ", uppercase: bool = True) -> str:
    fmt = "{:02X}" if uppercase else "{:02x}"
    return separator.join(fmt.format(b) for b in data)
