"""Tests for src/dicecompile/grammar.py."""
from __future__ import annotations

import pytest

from dicecompile.grammar import (
    DiceChunk,
    invalid_chunks,
    is_constant_chunk,
    is_valid_chunk,
    normalize,
    parse_dice_chunk,
    split_chunks,
)


class TestNormalize:
    def test_strips_whitespace_and_lowercases(self):
        assert normalize(" 3D6 +\t1 - 2d4KH1 ") == "3d6+1-2d4kh1"


class TestSplitChunks:
    @pytest.mark.parametrize("expr, expected", [
        ("3d6", ["3d6"]),
        ("3d6+1-2d2", ["3d6", "+1", "-2d2"]),
        ("-1+d4", ["-1", "+d4"]),
        ("4dfr-1+2", ["4dfr-1", "+2"]),
        ("d10t+10-3", ["d10t+10", "-3"]),
        ("3df!-1", ["3df!-1"]),
        ("4d6kh3-1", ["4d6kh3", "-1"]),
        ("+-2", ["+", "-2"]),
    ])
    def test_split(self, expr, expected):
        assert split_chunks(expr) == expected

    def test_empty_expression_is_one_empty_chunk(self):
        assert split_chunks("") == [""]


class TestChunkValidity:
    @pytest.mark.parametrize("chunk", [
        "1", "+1", "-12", "0",
        "d6", "3d6", "-3d6", "+d20",
        "df", "4df", "d%", "2d%",
        "d20r", "d20r1", "4dfr-1", "d10t", "d10t10", "d6!", "4d20!20", "3df!-1",
        "2d20kh", "2d20kh1", "2d20kl1", "8d6dh4", "8d6dl", "1d1dl1", "-1d1dh1",
    ])
    def test_valid(self, chunk):
        assert is_valid_chunk(chunk)

    @pytest.mark.parametrize("chunk", [
        "", "+", "garbage", "+garbage", "x6", "6x6", "f", "%",
        "d", "da", "3db", "d-6",
        "6d20f9", "4d10k", "4d10d", "4d10k1", "4d10d1", "4d10h", "4d10l2",
        "5/2", "2d20*2", "d20r+", "3d6kh3r",
    ])
    def test_invalid(self, chunk):
        assert not is_valid_chunk(chunk)

    def test_invalid_chunks_keeps_order(self):
        assert invalid_chunks(["3d6", "x", "+1", "y"]) == ["x", "y"]

    def test_constant_detection(self):
        assert is_constant_chunk("-4")
        assert not is_constant_chunk("4d6")
        assert not is_constant_chunk("junk")


class TestParseDiceChunk:
    def test_plain_pool(self):
        assert parse_dice_chunk("3d6") == DiceChunk(negative=False, count=3, faces="6")

    def test_count_defaults_to_one(self):
        assert parse_dice_chunk("d20").count == 1

    def test_negative_with_modifier(self):
        desc = parse_dice_chunk("-4d6kh3")
        assert desc.negative
        assert desc.modifier == "kh"
        assert desc.argument == "3"

    def test_signed_modifier_argument(self):
        desc = parse_dice_chunk("4dfr-1")
        assert desc.faces == "f"
        assert desc.modifier == "r"
        assert desc.argument == "-1"

    def test_modifier_without_argument(self):
        desc = parse_dice_chunk("4d10!")
        assert desc.modifier == "!"
        assert desc.argument is None

    def test_constant_is_rejected(self):
        with pytest.raises(ValueError):
            parse_dice_chunk("+5")
