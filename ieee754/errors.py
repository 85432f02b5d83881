# ieee754/errors.py
from __future__ import annotations


class Ieee754Error(Exception):
    """
    Base class for expected operational errors at the outer surfaces
    (configuration, command line). The codec core itself never raises for
    a length mismatch; it returns None.
    """

    #: Stable machine-readable identifier (for CLI exit mapping etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(Ieee754Error):
    """
    Configuration file is missing or invalid.

    Examples:
      - file not found
      - root is not a mapping
      - unknown endianness / width
    """
    code = "config_error"


class InputFormatError(Ieee754Error):
    """
    User-supplied text could not be turned into bytes or values.

    Examples:
      - odd number of hex digits
      - non-hex characters
      - value that is not a float literal
    """
    code = "input_format_error"


class LengthMismatchError(Ieee754Error):
    """Byte count is not a multiple of the element width."""
    code = "length_mismatch"
