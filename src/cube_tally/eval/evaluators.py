from __future__ import annotations

from typing import Dict, Sequence

from ..datatypes import Limits, MinCounts, RecordOutcome
from ..interfaces import AbstractEvaluator
from ..logsetting import logger
from ..parsing.records import iter_draws, parse_header


class ValidityEvaluator(AbstractEvaluator):
    """Checks every draw of a game against the per-colour limits.

    Walking stops at the first draw over its limit; a valid game contributes
    its id to the total.
    """

    def __init__(self, limits: Limits | None = None) -> None:
        self.limits = limits or Limits()

    @property
    def mode(self) -> str:
        return "validity"

    def evaluate(self, tokens: Sequence[str], *, page: int, line: int) -> RecordOutcome:
        game_id = parse_header(tokens)

        violation = None
        for draw in iter_draws(tokens):
            logger.debug(f"colour: {draw.color.value} with count: {draw.count}")
            if not self.limits.allows(draw):
                violation = draw
                break

        valid = violation is None
        if valid:
            logger.info(f"game {game_id} is valid")
        else:
            logger.info(
                f"game {game_id} is not valid: {violation.count} {violation.color.value} "
                f"exceeds limit {self.limits.for_color(violation.color)}"
            )
        return RecordOutcome(
            page=page,
            line=line,
            game_id=game_id,
            valid=valid,
            violation=violation,
            contribution=game_id if valid else 0,
        )


class PowerEvaluator(AbstractEvaluator):
    """Multiplies the per-colour maxima of a game; unseen colours count as 0."""

    @property
    def mode(self) -> str:
        return "power"

    def evaluate(self, tokens: Sequence[str], *, page: int, line: int) -> RecordOutcome:
        game_id = parse_header(tokens)

        min_counts = MinCounts()
        for draw in iter_draws(tokens):
            logger.debug(f"colour: {draw.color.value} with count: {draw.count}")
            min_counts = min_counts.observe(draw)
            logger.debug(f"min counts: {min_counts.model_dump()}")

        power = min_counts.power()
        logger.info(
            f"game {game_id} power for min values {min_counts.model_dump()} is {power}"
        )
        return RecordOutcome(
            page=page,
            line=line,
            game_id=game_id,
            min_counts=min_counts,
            power=power,
            contribution=power,
        )


_EVALUATOR_REGISTRY: Dict[str, type[AbstractEvaluator]] = {
    "validity": ValidityEvaluator,
    "power": PowerEvaluator,
}


def available_modes() -> list[str]:
    return sorted(_EVALUATOR_REGISTRY)


def get_evaluator(mode: str, limits: Limits | None = None) -> AbstractEvaluator:
    """Factory function to get an evaluator instance.

    Args:
        mode: Evaluation mode (validity, power)
        limits: Per-colour ceilings, only used by validity mode

    Returns:
        Evaluator instance
    """
    if mode.lower() not in _EVALUATOR_REGISTRY:
        available = ", ".join(available_modes())
        raise ValueError(f"Unknown evaluation mode '{mode}'. Available modes: {available}")
    if mode.lower() == "validity":
        return ValidityEvaluator(limits)
    return PowerEvaluator()
