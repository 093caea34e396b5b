from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .datatypes import RecordOutcome


class AbstractEvaluator(ABC):
    """
    Abstract base class for per-record scoring.
    Decouples the aggregation rule (validity, power) from the line loop.
    """

    @property
    @abstractmethod
    def mode(self) -> str:
        """Registry name of this evaluation mode."""
        pass

    @abstractmethod
    def evaluate(self, tokens: Sequence[str], *, page: int, line: int) -> RecordOutcome:
        """
        Score one tokenized line. Raises RecordError on malformed input.
        """
        pass
