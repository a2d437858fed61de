"""Command-line interface for the order list."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import typer

from aggregation.export import build_export_rows
from aggregation.view import compute_view, default_sort_state
from config.logging import configure_logging, get_logger
from config.settings import DEFAULT_INPUT_PATH, LOG_LEVEL, OUTPUT_ROOT
from domain.records import SORT_COLUMNS, SORT_DIRECTIONS, NormalizedRecord, SortState, ViewParams, ViewResult
from interface.formatting import empty_state, records_frame, results_caption, total_label
from interface.processor import load_batch
from writers import suggested_filename, write_rows_to_csv, write_rows_to_xlsx

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Merge and list ordered goods from an order sheet")


@app.callback()
def _setup(log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level")) -> None:
    configure_logging(log_level)


def _parse_iso_date(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as exc:
        raise typer.BadParameter("Date must be in YYYY-MM-DD format") from exc


def _sort_state(column: Optional[str], direction: Optional[str]) -> SortState:
    default = default_sort_state()
    column = column or default.column
    direction = direction or default.direction
    if column not in SORT_COLUMNS:
        raise typer.BadParameter(f"--sort must be one of: {', '.join(SORT_COLUMNS)}")
    if direction not in SORT_DIRECTIONS:
        raise typer.BadParameter(f"--direction must be one of: {', '.join(SORT_DIRECTIONS)}")
    return SortState(column, direction)


def _load(path: Path, batch_date: Optional[str]) -> List[NormalizedRecord]:
    success, records, error = load_batch(path, _parse_iso_date(batch_date))
    if not success:
        typer.echo(error, err=True)
        raise typer.Exit(code=1)
    return records


def _compute(
    path: Path,
    batch_date: Optional[str],
    date_filter: Optional[str],
    search: str,
    sort: Optional[str],
    direction: Optional[str],
) -> ViewResult:
    records = _load(path, batch_date)
    params = ViewParams(date=date_filter, search_text=search, sort=_sort_state(sort, direction))
    return compute_view(records, params)


@app.command("view")
def view_command(
    path: Path = typer.Argument(DEFAULT_INPUT_PATH, help="Order sheet (.csv or .xlsx)"),
    batch_date: Optional[str] = typer.Option(None, "--batch-date", help="Date stamped on the batch (YYYY-MM-DD)"),
    date_filter: Optional[str] = typer.Option(None, "--date", help="Only show records of this date (YYYY-MM-DD)"),
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive product name filter"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Sort column: name or quantity"),
    direction: Optional[str] = typer.Option(None, "--direction", help="asc, desc or none"),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON"),
) -> None:
    view = _compute(path, batch_date, date_filter, search, sort, direction)

    if as_json:
        payload = {
            "total_count": view.total_count,
            "filtered_count": view.filtered_count,
            "total_magnitude": view.total_magnitude,
            "records": [dict(asdict(r), is_duplicate=r.is_duplicate) for r in view.records],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    typer.echo(total_label(view.total_count))
    if not view.records:
        title, message = empty_state(search)
        typer.echo(f"{title}: {message}")
        return

    typer.echo(records_frame(view.records).to_string(index=False))
    caption = results_caption(search, view.filtered_count)
    if caption:
        typer.echo(caption)


@app.command("export")
def export_command(
    path: Path = typer.Argument(DEFAULT_INPUT_PATH, help="Order sheet (.csv or .xlsx)"),
    output: Optional[Path] = typer.Option(None, "--out", "-o", help="Target .csv or .xlsx file"),
    batch_date: Optional[str] = typer.Option(None, "--batch-date", help="Date stamped on the batch (YYYY-MM-DD)"),
    date_filter: Optional[str] = typer.Option(None, "--date", help="Only export records of this date (YYYY-MM-DD)"),
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive product name filter"),
    sort: Optional[str] = typer.Option(None, "--sort", help="Sort column: name or quantity"),
    direction: Optional[str] = typer.Option(None, "--direction", help="asc, desc or none"),
) -> None:
    view = _compute(path, batch_date, date_filter, search, sort, direction)
    rows = build_export_rows(view.records)

    target = output or OUTPUT_ROOT / suggested_filename(".csv")
    if target.suffix.lower() == ".xlsx":
        write_rows_to_xlsx(target, rows)
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(write_rows_to_csv(rows).csv_bytes)

    logger.info("export_written", path=str(target), rows=len(rows))
    typer.echo(f"{len(rows)} row(s) written to {target}")


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
