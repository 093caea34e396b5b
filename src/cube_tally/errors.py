"""Structural errors raised while decoding game lines.

Every violation of the line format has its own exception class and
``RecordErrorKind`` so callers can abort or report per kind. The pipeline
attaches the page/line coordinate of the offending line before re-raising.
"""

from __future__ import annotations

from enum import Enum


class RecordErrorKind(str, Enum):
    MISSING_GAME_PREFIX = "missing_game_prefix"
    INVALID_GAME_ID = "invalid_game_id"
    INVALID_COUNT = "invalid_count"
    UNKNOWN_COLOR = "unknown_color"
    TRUNCATED_PAIR = "truncated_pair"


class RecordError(ValueError):
    kind: RecordErrorKind

    def __init__(self, message: str, *, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.page: int | None = None
        self.line: int | None = None

    def at(self, page: int, line: int) -> RecordError:
        self.page = page
        self.line = line
        return self

    @property
    def location(self) -> str | None:
        if self.page is None or self.line is None:
            return None
        return f"{self.page}::{self.line}"

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.message} (input line {self.location})"


class MissingGamePrefixError(RecordError):
    kind = RecordErrorKind.MISSING_GAME_PREFIX


class InvalidGameIdError(RecordError):
    kind = RecordErrorKind.INVALID_GAME_ID


class InvalidCountError(RecordError):
    kind = RecordErrorKind.INVALID_COUNT


class UnknownColorError(RecordError):
    kind = RecordErrorKind.UNKNOWN_COLOR


class TruncatedPairError(RecordError):
    kind = RecordErrorKind.TRUNCATED_PAIR
