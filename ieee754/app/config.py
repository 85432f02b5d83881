# ieee754/app/config.py
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ieee754.codec.endian import Endianness
from ieee754.codec.formats import format_for
from ieee754.errors import ConfigError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecConfig:
    endianness: Endianness = Endianness.LITTLE
    width_bits: int = 64
    hex_separator: str = " "
    uppercase: bool = True


DEFAULTS = CodecConfig()


class ConfigLoader:
    """
    Load CLI defaults from a YAML file.

    Expected shape (every key optional):

        codec:
          endianness: big
          width: 32
          hex_separator: ":"
          uppercase: false

    After calling load(), exposes:
        self.config    : CodecConfig
        self.file_hash : sha256 hex of the file
    """

    KEYS = ("endianness", "width", "hex_separator", "uppercase")

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.config: CodecConfig = DEFAULTS
        self.file_hash: Optional[str] = None

    def _load_yaml(self) -> Any:
        if not self.path.exists():
            raise ConfigError(
                f"Config file not found: {self.path}",
                hint="Pass an existing YAML file to --config or drop the flag.",
            )
        raw = self.path.read_bytes()
        self.file_hash = hashlib.sha256(raw).hexdigest()
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.path}: {e}") from e

    def load(self) -> CodecConfig:
        doc = self._load_yaml()
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise ConfigError(f"{self.path.name}: root must be a mapping")

        section = doc.get("codec") or {}
        if not isinstance(section, dict):
            raise ConfigError(f"{self.path.name}: 'codec' must be a mapping")

        unknown = sorted(set(section) - set(self.KEYS))
        if unknown:
            raise ConfigError(
                f"{self.path.name}: unknown codec key(s) {', '.join(map(str, unknown))}",
                hint=f"Allowed keys: {', '.join(self.KEYS)}",
            )

        self.config = replace(DEFAULTS, **self._parse_section(section))
        log.info(
            "CONFIG_LOADED path=%s endianness=%s width=%d sha256=%s",
            self.path, self.config.endianness.value, self.config.width_bits, self.file_hash,
        )
        return self.config

    def _parse_section(self, section: Dict[str, Any]) -> Dict[str, Any]:
        out: Dict[str, Any] = {}

        if "endianness" in section:
            try:
                out["endianness"] = Endianness.coerce(section["endianness"])
            except ValueError as e:
                raise ConfigError(f"{self.path.name}: {e}") from e

        if "width" in section:
            width = section["width"]
            if isinstance(width, bool) or not isinstance(width, int):
                raise ConfigError(f"{self.path.name}: 'width' must be an integer (32 or 64)")
            try:
                out["width_bits"] = format_for(width).bits
            except NotImplementedError as e:
                raise ConfigError(f"{self.path.name}: {e}", hint="Supported widths: 32, 64") from e

        if "hex_separator" in section:
            sep = section["hex_separator"]
            if not isinstance(sep, str):
                raise ConfigError(f"{self.path.name}: 'hex_separator' must be a string")
            out["hex_separator"] = sep

        if "uppercase" in section:
            upper = section["uppercase"]
            if not isinstance(upper, bool):
                raise ConfigError(f"{self.path.name}: 'uppercase' must be true or false")
            out["uppercase"] = upper

        return out


def load_config(path: str | Path | None = None) -> CodecConfig:
    if path is None:
        return DEFAULTS
    return ConfigLoader(path).load()
