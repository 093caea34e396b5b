from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from ..datatypes import EvaluationResult


class RecordReportLogger:
    """Writes one JSON line per evaluated record plus a summary line.

    Reports are written once a run has finished; an existing report with the
    same run id and mode is replaced.
    """

    def __init__(self, *, out_dir: Path, run_id: str, mode: str) -> None:
        self._out_dir = out_dir
        self._out_dir.mkdir(parents=True, exist_ok=True)
        self._run_id = run_id

        self._records_path = self._out_dir / f"{run_id}.{mode}.records.jsonl"
        self._summary_path = self._out_dir / f"{run_id}.{mode}.summary.jsonl"

    @property
    def run_id(self) -> str:
        return self._run_id

    @property
    def records_path(self) -> Path:
        return self._records_path

    @property
    def summary_path(self) -> Path:
        return self._summary_path

    def write_result(self, result: EvaluationResult) -> None:
        self._write_jsonl(
            self._records_path,
            (outcome.model_dump(mode="json") for outcome in result.records),
        )
        self._write_jsonl(
            self._summary_path,
            [
                {
                    "run_id": self._run_id,
                    "mode": result.mode,
                    "source": result.source,
                    "records": len(result.records),
                    "total": result.total,
                }
            ],
        )

    def _write_jsonl(self, path: Path, rows: Iterable[dict]) -> None:
        with path.open("w", encoding="utf-8") as f:
            for obj in rows:
                f.write(json.dumps(obj, ensure_ascii=False) + "\n")
