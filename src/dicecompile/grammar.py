"""Chunk grammar: normalising, splitting and validating dice expressions.

An expression such as ``3d6 + 1 - 2d4r`` is tidied to ``3d6+1-2d4r`` and split
into signed chunks ``["3d6", "+1", "-2d4r"]``. Each chunk is either a constant
or a dice pool with at most one modifier:

- ``rN``  discard and reroll Ns once
- ``tN``  count Ns twice
- ``!N``  explode on N
- ``khN``, ``klN``, ``dhN``, ``dlN``  keep or drop the highest/lowest N

Reroll, twice and explode take an optional signed argument (``4dFr-1``) so a
sign directly after one of them belongs to the modifier, not a new chunk.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

_MODIFIER = r"[dk][lh]\d*|[rt!](?:[+-]?\d+)?"

_DICE_CHUNK = (
    r"(?P<count>\d*)d(?P<faces>\d+|f|%)"
    rf"(?P<modifier>{_MODIFIER})?"
)

_VALID_CHUNK_RE = re.compile(rf"^(?P<sign>[+-]?)(?:{_DICE_CHUNK}|(?P<constant>\d+))$")

_MODIFIER_RE = re.compile(r"^(?P<token>[a-z!]+)(?P<argument>.*)$")

# Split before a sign unless it is the argument of r, t or !.
_SPLIT_RE = re.compile(r"(?<![rt!])(?=[+-])")

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class DiceChunk:
    negative: bool
    count: int
    faces: str
    modifier: str | None = None
    argument: str | None = None


def normalize(expression: str) -> str:
    return _WHITESPACE_RE.sub("", str(expression)).lower()


def split_chunks(normalized: str) -> list[str]:
    """Split a normalised expression into signed chunks.

    A leading sign produces no empty chunk: ``-1+d4`` -> ``["-1", "+d4"]``.
    """
    chunks = _SPLIT_RE.split(normalized)
    if len(chunks) > 1 and chunks[0] == "":
        chunks = chunks[1:]
    return chunks


def is_valid_chunk(chunk: str) -> bool:
    return _VALID_CHUNK_RE.match(chunk) is not None


def invalid_chunks(chunks: list[str]) -> list[str]:
    return [c for c in chunks if not is_valid_chunk(c)]


def is_constant_chunk(chunk: str) -> bool:
    m = _VALID_CHUNK_RE.match(chunk)
    return m is not None and m.group("constant") is not None


def parse_dice_chunk(chunk: str) -> DiceChunk:
    """Extract the pool descriptor from a valid dice chunk.

    Raises:
        ValueError: If ``chunk`` is not a dice-pool chunk.
    """
    m = _VALID_CHUNK_RE.match(chunk.lower())
    if m is None or m.group("constant") is not None:
        raise ValueError(f"Not a dice chunk: {chunk!r}")

    count = int(m.group("count")) if m.group("count") else 1
    token = argument = None
    if m.group("modifier"):
        parts = _MODIFIER_RE.match(m.group("modifier"))
        token = parts.group("token")
        argument = parts.group("argument") or None

    return DiceChunk(
        negative=m.group("sign") == "-",
        count=count,
        faces=m.group("faces"),
        modifier=token,
        argument=argument,
    )
