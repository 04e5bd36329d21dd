"""CLI entrypoint: Typer app definition and command registration"""

import typer

from hdiff.cli.commands import report_cmd, summary_cmd


app = typer.Typer(name="hdiff", no_args_is_help=True, help="Side-by-side HTML difference reports")

app.command(name="report")(report_cmd)
app.command(name="summary")(summary_cmd)
