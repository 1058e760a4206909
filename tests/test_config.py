"""Tests for src/dicecompile/config.py."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from dicecompile import config as dice_config
from dicecompile.config import (
    DEFAULT_LIMITS,
    MAX_CHUNKS,
    MAX_DICE,
    MAX_FACES,
    MAX_LENGTH,
    Limits,
    load_limits,
)


def test_named_constants():
    assert (MAX_LENGTH, MAX_CHUNKS, MAX_DICE, MAX_FACES) == (60, 10, 100, 1000)


def test_default_limits_match_constants():
    assert DEFAULT_LIMITS == Limits(max_length=60, max_chunks=10, max_dice=100, max_faces=1000)


def test_limits_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_LIMITS.max_dice = 5


def test_limits_must_be_positive():
    with pytest.raises(ValidationError):
        Limits(max_dice=0)


def test_missing_file_gives_defaults(tmp_path):
    assert load_limits(tmp_path / "nope.toml") == DEFAULT_LIMITS


def test_missing_table_gives_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[display]\nwidth = 80\n')
    assert load_limits(path) == DEFAULT_LIMITS


def test_dice_table_overrides(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[dice]\nmax_dice = 20\nmax_faces = 100\n')
    limits = load_limits(path)
    assert limits.max_dice == 20
    assert limits.max_faces == 100
    assert limits.max_length == MAX_LENGTH


def test_invalid_value_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[dice]\nmax_chunks = -1\n')
    with pytest.raises(ValidationError):
        load_limits(path)


def test_default_path_is_read(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[dice]\nmax_faces = 50\n')
    monkeypatch.setattr(dice_config, "DEFAULT_CONFIG_PATH", path)
    assert load_limits().max_faces == 50
