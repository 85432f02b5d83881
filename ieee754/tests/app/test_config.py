from __future__ import annotations

import hashlib
import logging

import pytest

from ieee754.app.config import DEFAULTS, CodecConfig, ConfigLoader, load_config
from ieee754.codec.endian import Endianness
from ieee754.errors import ConfigError


def _write(tmp_path, text: str):
    p = tmp_path / "codec.yml"
    p.write_text(text, encoding="utf-8")
    return p


def test_load_config_none_returns_defaults():
    assert load_config(None) == CodecConfig()
    assert DEFAULTS.endianness is Endianness.LITTLE
    assert DEFAULTS.width_bits == 64


def test_load_full_section(tmp_path):
    p = _write(tmp_path, "codec:\n  endianness: big\n  width: 32\n  hex_separator: ':'\n  uppercase: false\n")
    cfg = load_config(p)
    assert cfg == CodecConfig(
        endianness=Endianness.BIG, width_bits=32, hex_separator=":", uppercase=False,
    )


def test_partial_section_keeps_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "codec:\n  endianness: BIG\n"))
    assert cfg.endianness is Endianness.BIG
    assert cfg.width_bits == 64
    assert cfg.hex_separator == " "


def test_empty_document_is_defaults(tmp_path):
    assert load_config(_write(tmp_path, "")) == DEFAULTS


def test_file_hash_recorded(tmp_path):
    text = "codec:\n  width: 64\n"
    p = _write(tmp_path, text)
    loader = ConfigLoader(p)
    loader.load()
    assert loader.file_hash == hashlib.sha256(text.encode("utf-8")).hexdigest()


def test_load_logs_event(tmp_path, caplog):
    p = _write(tmp_path, "codec:\n  width: 32\n")
    with caplog.at_level(logging.INFO, logger="ieee754.app.config"):
        load_config(p)
    assert "CONFIG_LOADED" in caplog.text


def test_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path / "nope.yml")
    assert ei.value.code == "config_error"
    assert ei.value.hint


@pytest.mark.parametrize("text", [
    "- a\n- b\n",                      # root not a mapping
    "codec: [1, 2]\n",                 # section not a mapping
    "codec:\n  endianness: middle\n",
    "codec:\n  width: 16\n",
    "codec:\n  width: '64'\n",
    "codec:\n  width: true\n",
    "codec:\n  hex_separator: 5\n",
    "codec:\n  uppercase: 'yes'\n",
    "codec:\n  colour: red\n",
    "codec: {endianness: [\n",         # invalid YAML
])
def test_invalid_documents_raise_config_error(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))
