"""Tests for engine configuration."""

import dataclasses

import pytest

from hillform.config import DEFAULT_CONFIG, FormatConfig


def test_defaults():
    assert DEFAULT_CONFIG == FormatConfig("+", "-", ".")


def test_from_env_reads_prefixed_variables():
    config = FormatConfig.from_env(
        {"HILLFORM_NEGATIVE_SIGN": "−", "HILLFORM_DECIMAL_SEPARATOR": ",", "OTHER": "x"}
    )
    assert config == FormatConfig(negative_sign="−", decimal_separator=",")


def test_from_env_defaults_to_os_environ(monkeypatch):
    monkeypatch.setenv("HILLFORM_POSITIVE_SIGN", "＋")
    assert FormatConfig.from_env().positive_sign == "＋"


@pytest.mark.parametrize("name", ["positive_sign", "negative_sign", "decimal_separator"])
def test_empty_glyph_rejected(name):
    with pytest.raises(ValueError, match=name):
        FormatConfig(**{name: ""})


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.negative_sign = "~"
