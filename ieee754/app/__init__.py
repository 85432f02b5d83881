# ieee754/app/__init__.py

from .config import CodecConfig, ConfigLoader, load_config
from .hexfmt import format_hex, parse_hex

__all__ = ["CodecConfig", "ConfigLoader", "load_config", "format_hex", "parse_hex"]
