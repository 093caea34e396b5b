"""Tokenizer and decoder for game lines.

Line format:
    Game <id>: <count> <color>, <count> <color>; <count> <color>, ...

Semicolons separate rounds and commas separate draws within a round, but
both are plain delimiters here: every draw of a line lands in one flat
sequence.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Sequence

from ..datatypes import Color, CubeDraw, GameRecord
from ..errors import (
    InvalidCountError,
    InvalidGameIdError,
    MissingGamePrefixError,
    TruncatedPairError,
    UnknownColorError,
)

GAME_PREFIX = "Game"
DELIMITERS = (" ", ",", ":", ";")

_DELIMITER_PATTERN = re.compile("[" + re.escape("".join(DELIMITERS)) + "]")
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
_COLORS = {color.value: color for color in Color}


def tokenize(line: str) -> List[str]:
    pieces = (piece.strip() for piece in _DELIMITER_PATTERN.split(line))
    return [piece for piece in pieces if piece]


def _parse_unsigned(token: str) -> int | None:
    if not _UNSIGNED_PATTERN.fullmatch(token):
        return None
    return int(token)


def parse_header(tokens: Sequence[str]) -> int:
    """Check the ``Game <id>`` prefix and return the id."""
    if not tokens or tokens[0] != GAME_PREFIX:
        first = tokens[0] if tokens else None
        raise MissingGamePrefixError(
            f"expected line to start with {GAME_PREFIX!r}, got {first!r}",
            token=first,
        )
    if len(tokens) < 2:
        raise InvalidGameIdError("missing game id")
    game_id = _parse_unsigned(tokens[1])
    if game_id is None:
        raise InvalidGameIdError(
            f"failed to parse game id {tokens[1]!r}", token=tokens[1]
        )
    return game_id


def iter_draws(tokens: Sequence[str]) -> Iterator[CubeDraw]:
    """Lazily decode the (count, colour) pairs that follow the header.

    Tokens are only inspected as the caller advances, so a consumer that
    stops early never sees errors further down the line.
    """
    for r in range(2, len(tokens), 2):
        count = _parse_unsigned(tokens[r])
        if count is None:
            raise InvalidCountError(
                f"failed to parse colour value {tokens[r]!r}", token=tokens[r]
            )
        if r + 1 >= len(tokens):
            raise TruncatedPairError(
                f"count {count} has no colour name", token=tokens[r]
            )
        color = _COLORS.get(tokens[r + 1])
        if color is None:
            raise UnknownColorError(
                f"failed to match colour name {tokens[r + 1]!r}", token=tokens[r + 1]
            )
        yield CubeDraw(count=count, color=color)


def parse_tokens(tokens: Sequence[str]) -> GameRecord:
    game_id = parse_header(tokens)
    return GameRecord(id=game_id, draws=list(iter_draws(tokens)))


def parse_record(line: str) -> GameRecord:
    return parse_tokens(tokenize(line))
