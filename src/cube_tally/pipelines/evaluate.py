from __future__ import annotations

from pathlib import Path

from ..datatypes import EvaluationResult, Limits
from ..errors import RecordError
from ..eval.evaluators import get_evaluator
from ..logsetting import logger
from ..parsing.records import tokenize
from ..utils.lines import LineSource
from ..utils.paging import PagedIterator
from .report_logger import RecordReportLogger


def run_evaluation(
    path: Path | str,
    mode: str,
    *,
    limits: Limits | None = None,
    page_length: int | None = None,
    report_out_dir: Path | None = None,
    run_id: str = "run",
) -> EvaluationResult:
    """Evaluate every line of ``path`` in file order and sum the contributions.

    I/O errors from loading the file propagate unchanged. The first malformed
    line aborts the run with a RecordError carrying its page/line coordinate;
    no partial total is returned and no report is written.
    """
    from ..settings import settings

    source = LineSource.init(path)
    evaluator = get_evaluator(mode, limits or settings.limits())
    if page_length is None:
        page_length = settings.page_length
    if page_length is None:
        page_length = max(source.length(), 1)

    result = EvaluationResult(mode=evaluator.mode, source=str(path))
    for page, line, text in PagedIterator(source.iterate(), page_length):
        logger.info(f"processing input line {page}::{line} {text}")
        try:
            outcome = evaluator.evaluate(tokenize(text), page=page, line=line)
        except RecordError as e:
            e.at(page, line)
            logger.error(f"aborting {evaluator.mode} evaluation: [{e.kind.value}] {e}")
            raise

        result.records.append(outcome)
        result.total += outcome.contribution

    logger.info(f"result {result.total}")
    if report_out_dir is not None:
        report = RecordReportLogger(
            out_dir=report_out_dir, run_id=run_id, mode=evaluator.mode
        )
        report.write_result(result)
    return result


def evaluate_validity(path: Path | str) -> int:
    """Sum of the ids of every game within the colour limits."""
    return run_evaluation(path, "validity").total


def evaluate_power(path: Path | str) -> int:
    """Sum of the per-game powers."""
    return run_evaluation(path, "power").total
