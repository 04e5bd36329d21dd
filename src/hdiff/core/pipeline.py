"""Pipeline step functions: read files, run diff, assemble and write the report"""

import logging
import shlex
import socket
import subprocess
import time
from pathlib import Path

from hdiff.config import Settings, highlight_colors
from hdiff.core.assemble import assemble_report
from hdiff.core.errors import ExternalToolFailure
from hdiff.core.models import Report
from hdiff.core.page import build_page
from hdiff.core.render import BlockRenderer
from hdiff.core.utils.fileinfo import build_file_info


logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only, the way diff counts lines; drop a trailing '\\r'."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Path, tab_width: int = 8) -> list[str]:
    """Read a file into tab-expanded lines."""
    text = path.read_bytes().decode("utf-8", errors="replace")
    return [line.expandtabs(tab_width) for line in split_lines(text)]


def run_diff(file1: Path, file2: Path, command: str = "diff") -> list[str]:
    """Run the external line-diff program and return its ed-style output lines."""
    cmd = [*shlex.split(command), str(file1), str(file2)]
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, check=False)
    except OSError as e:
        raise ExternalToolFailure(f"'{' '.join(cmd)}' could not be run: {e}") from e
    if proc.returncode > 1:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise ExternalToolFailure(f"'{' '.join(cmd)}' failed with status {proc.returncode}: {stderr}")
    script = split_lines(proc.stdout.decode("utf-8", errors="replace"))
    if not script:
        raise ExternalToolFailure(f"'{' '.join(cmd)}' produced no output")
    return script


def build_report(file1: Path, file2: Path, settings: Settings) -> tuple[Report, list[str]]:
    """Validate settings, read both files, diff them and assemble the report in memory."""
    colors = highlight_colors(settings)
    old_lines = read_lines(file1, settings.tab_width)
    new_lines = read_lines(file2, settings.tab_width)
    script = run_diff(file1, file2, settings.diff_command)
    renderer = BlockRenderer(
        numbering=settings.numbering,
        truncate=settings.truncate,
        escape_html=settings.escape_html,
    )
    report = assemble_report(
        old_lines, new_lines, script, renderer, colors,
        updates_only=settings.updates_only,
        old_name=str(file1),
        new_name=str(file2),
    )
    return report, script


def run_report(file1: Path, file2: Path, settings: Settings) -> tuple[Path, Report]:
    """Build the HTML report for file1 vs file2 and write it to settings.output."""
    report, script = build_report(file1, file2, settings)
    page = build_page(
        report, settings, str(file1), str(file2),
        info1=build_file_info(file1),
        info2=build_file_info(file2),
        script=script,
        host=socket.gethostname(),
        today=time.ctime(),
    )
    out = Path(settings.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(page, encoding="utf-8")
    logger.debug("wrote %s (%d bytes)", out, len(page))
    return out, report
