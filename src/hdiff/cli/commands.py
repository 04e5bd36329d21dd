"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from hdiff.config import Settings, load_config
from hdiff.core.errors import HdiffError
from hdiff.core.models import Numbering, Report
from hdiff.core.pipeline import build_report, run_report
from hdiff.util.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _numbering(number: bool, bracket: bool) -> Optional[Numbering]:
    if number and bracket:
        _fail("Options --number and --bracket are mutually exclusive.")
    if number:
        return Numbering.absolute
    if bracket:
        return Numbering.bracketed
    return None


def _echo_summary(report: Report) -> None:
    """Print per-operation counts and a total line."""
    for kind, count, lines in report.summary.items():
        typer.echo(f"  {kind.label:<8}{count:>6} operation(s) {lines:>6} line(s)")
    typer.echo(
        f"Total - {report.summary.total_count} operation(s), "
        f"{report.summary.total_lines} affected line(s)"
    )


def report_cmd(
    file1: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Original file")],
    file2: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="New file")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Report file")] = None,
    number: Annotated[bool, typer.Option("--number", "-n", help="Display lines with line numbers")] = False,
    bracket: Annotated[bool, typer.Option("--bracket", "-N", help="Display lines with [bracketed] line numbers")] = False,
    updates_only: Annotated[bool, typer.Option("--updates-only", "-u", help="Only show the updates")] = False,
    truncate: Annotated[Optional[int], typer.Option("--truncate", "-T", help="Text line truncation size")] = None,
    escape_html: Annotated[bool, typer.Option("--escape-html", "-X", help="Clean up lines containing HTML tags")] = False,
    add_color: Annotated[Optional[str], typer.Option("--add-color", "-a", help="Colour code for add blocks")] = None,
    change_color: Annotated[Optional[str], typer.Option("--change-color", "-c", help="Colour code for change blocks")] = None,
    delete_color: Annotated[Optional[str], typer.Option("--delete-color", "-d", help="Colour code for delete blocks")] = None,
    tab_width: Annotated[Optional[int], typer.Option("--tab-width", "-t", help="Width of tabstop spacing")] = None,
    show_script: Annotated[bool, typer.Option("--show-script", "-x", help="Show the actual diff output")] = False,
    script_width: Annotated[Optional[int], typer.Option("--script-width", "-w", help="Width of the diff output window")] = None,
    script_height: Annotated[Optional[int], typer.Option("--script-height", "-H", help="Height of the diff output window")] = None,
    font_size: Annotated[Optional[str], typer.Option("--font-size", "-s", help="Font size for displayed text")] = None,
    font_family: Annotated[Optional[str], typer.Option("--font-family", "-f", help="Font family for displayed text")] = None,
    diff_command: Annotated[Optional[str], typer.Option("--diff-command", help="Line-diff program to run")] = None,
    debug: Annotated[bool, typer.Option("--debug", "-D", help="Activate debug mode")] = False,
    ):
    """Generate a colour-coded 2-column HTML difference report of two files."""
    setup_logging(debug)
    settings = _settings(overrides={
        "output": out, "numbering": _numbering(number, bracket), "updates_only": updates_only or None,
        "truncate": truncate, "escape_html": escape_html or None,
        "add_color": add_color, "change_color": change_color, "delete_color": delete_color,
        "tab_width": tab_width, "show_script": show_script or None,
        "script_width": script_width, "script_height": script_height,
        "font_size": font_size, "font_family": font_family, "diff_command": diff_command,
    })
    try:
        path, report = run_report(file1, file2, settings)
    except HdiffError as e:
        _fail("Report failed", e)
    except OSError as e:
        _fail("Could not read or write a file", e)
    _echo_summary(report)
    typer.echo(f"Report written to {path} ({path.stat().st_size} bytes)")


def summary_cmd(
    file1: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Original file")],
    file2: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="New file")],
    diff_command: Annotated[Optional[str], typer.Option("--diff-command", help="Line-diff program to run")] = None,
    debug: Annotated[bool, typer.Option("--debug", "-D", help="Activate debug mode")] = False,
    ):
    """Print operation and affected-line counts without writing a report."""
    setup_logging(debug)
    settings = _settings(overrides={"diff_command": diff_command, "updates_only": True})
    try:
        report, _ = build_report(file1, file2, settings)
    except HdiffError as e:
        _fail("Diff failed", e)
    except OSError as e:
        _fail("Could not read a file", e)
    _echo_summary(report)
