from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import Optional

import typer

from .datatypes import Limits
from .errors import RecordError
from .parsing.records import parse_record
from .pipelines.evaluate import run_evaluation
from .settings import settings
from .utils.lines import LineSource
from .utils.paging import PagedIterator


app = typer.Typer(help="Score cube game records read from a text file")


def _load_source(path: Path) -> LineSource:
    try:
        return LineSource.init(path)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=2)


def _run(
    input_file: Path,
    mode: str,
    *,
    limits: Limits | None = None,
    page_length: Optional[int] = None,
    report_out_dir: Optional[Path] = None,
    run_id: str = "run",
) -> None:
    try:
        result = run_evaluation(
            input_file,
            mode,
            limits=limits,
            page_length=page_length,
            report_out_dir=report_out_dir,
            run_id=run_id,
        )
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot read {input_file}: {e}", err=True)
        raise typer.Exit(code=2)
    except RecordError as e:
        typer.echo(f"Malformed input [{e.kind.value}]: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(result.total))


@app.command("validity")
def validity(
    input_file: Path = typer.Argument(..., help="Text file with one game per line"),
    red: Optional[int] = typer.Option(None, "--red", min=0, help="Override red limit"),
    green: Optional[int] = typer.Option(
        None, "--green", min=0, help="Override green limit"
    ),
    blue: Optional[int] = typer.Option(None, "--blue", min=0, help="Override blue limit"),
    page_length: Optional[int] = typer.Option(
        None, "--page-length", min=1, help="Lines per diagnostic page"
    ),
    report_out_dir: Optional[Path] = typer.Option(
        None, "--report-out-dir", help="Write per-record JSONL reports here"
    ),
    run_id: str = typer.Option("run", "--run-id", help="Prefix for report files"),
):
    """Print the sum of ids of every game within the colour limits."""
    base = settings.limits()
    limits = Limits(
        red=base.red if red is None else red,
        green=base.green if green is None else green,
        blue=base.blue if blue is None else blue,
    )
    _run(
        input_file,
        "validity",
        limits=limits,
        page_length=page_length,
        report_out_dir=report_out_dir,
        run_id=run_id,
    )


@app.command("power")
def power(
    input_file: Path = typer.Argument(..., help="Text file with one game per line"),
    page_length: Optional[int] = typer.Option(
        None, "--page-length", min=1, help="Lines per diagnostic page"
    ),
    report_out_dir: Optional[Path] = typer.Option(
        None, "--report-out-dir", help="Write per-record JSONL reports here"
    ),
    run_id: str = typer.Option("run", "--run-id", help="Prefix for report files"),
):
    """Print the sum of per-game powers (product of per-colour maxima)."""
    _run(
        input_file,
        "power",
        page_length=page_length,
        report_out_dir=report_out_dir,
        run_id=run_id,
    )


@app.command("parse")
def parse(
    input_file: Path = typer.Argument(..., help="Text file with one game per line"),
):
    """Print every parsed game record as a JSON line."""
    source = _load_source(input_file)
    for page, line, text in PagedIterator(source, max(source.length(), 1)):
        try:
            record = parse_record(text)
        except RecordError as e:
            e.at(page, line)
            typer.echo(f"Malformed input [{e.kind.value}]: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(json.dumps(record.model_dump(mode="json"), ensure_ascii=False))


@app.command("head")
def head(
    input_file: Path = typer.Argument(..., help="Any text file"),
    count: int = typer.Option(10, "--count", "-n", min=0, help="Lines to print"),
    cycle: bool = typer.Option(
        False, "--cycle", help="Wrap around to the first line after the last"
    ),
    page_length: Optional[int] = typer.Option(
        None, "--page-length", min=1, help="Lines per page label"
    ),
):
    """Print the first lines of a file labelled with page::line coordinates."""
    source = _load_source(input_file)
    lines = source.cycle() if cycle else source.iterate()
    if page_length is None:
        page_length = max(source.length(), 1)
    for page, line, text in itertools.islice(PagedIterator(lines, page_length), count):
        typer.echo(f"{page}::{line} {text}")
