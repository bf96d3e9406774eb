"""Export CLI commands.

Write the JSON snapshot, the Redmine CSV, or the report view model.
Pass ``-o -`` to print to stdout instead of writing a file.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from pertplan.application import (
    DEFAULT_JSON_FILENAME,
    build_report,
    csv_filename,
    export_csv,
    export_json,
    report_filename,
)
from pertplan.interfaces.cli.common import FileOption, load_project, print_error, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(help="Export the estimation as JSON, CSV or report data")

OutputOption = typer.Option(None, "--output", "-o", help="Output path, or - for stdout")


def _write(output: Path, content: str) -> None:
    if str(output) == "-":
        typer.echo(content, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write {output}: {e}")
        raise typer.Exit(1)
    logger.debug(f"Wrote {len(content)} characters to {output}")
    print_success(f"Wrote {output}")


@app.command("json")
def json_export(output: Optional[Path] = OutputOption, file: FileOption = None) -> None:
    """Export the full snapshot (re-importable with 'pertplan import')."""
    _, project = load_project(file)
    _write(output or Path(DEFAULT_JSON_FILENAME), export_json(project))


@app.command("csv")
def csv_export(output: Optional[Path] = OutputOption, file: FileOption = None) -> None:
    """Export enabled tasks as a Redmine import CSV."""
    _, project = load_project(file)
    _write(output or Path(csv_filename(project)), export_csv(project))


@app.command("report")
def report_export(output: Optional[Path] = OutputOption, file: FileOption = None) -> None:
    """Export the report view model as JSON for an external renderer."""
    _, project = load_project(file)
    default = Path(report_filename(project)).with_suffix(".json")
    _write(output or default, build_report(project).model_dump_json(indent=2))
