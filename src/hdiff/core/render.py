"""Block rendering: a run of lines to one formatted, optionally highlighted cell"""

from dataclasses import dataclass
from typing import Optional

from hdiff.core.models import BLANK_BLOCK, LineRun, Numbering


NUMBER_WIDTH = 6


def number_prefix(number: int, numbering: Numbering) -> str:
    """Left-justified line number column for the given numbering style."""
    if numbering is Numbering.absolute:
        return f"{number:<{NUMBER_WIDTH}}"
    if numbering is Numbering.bracketed:
        return f"{f'[{number}]':<{NUMBER_WIDTH}}"
    return ""


def escape_lt(text: str) -> str:
    """Escape '<' only; '&' and '>' pass through unchanged."""
    return text.replace("<", "&lt;")


def caption(label: str) -> str:
    return f'<center><span class="titleinfo">== {label} ==</span></center>\n'


@dataclass(frozen=True)
class BlockRenderer:
    """Formats LineRuns into report cells according to the display options."""
    numbering:   Numbering = Numbering.off
    truncate:    Optional[int] = None
    escape_html: bool = False

    def format_line(self, number: int, line: str) -> str:
        text = line or ""
        if self.truncate is not None and len(text) > self.truncate:
            text = text[:self.truncate]
        if self.escape_html:
            text = escape_lt(text)
        return number_prefix(number, self.numbering) + text

    def render(self, run: LineRun, label: str = "", color: str = "") -> str:
        """Render one block; an empty run gives the blank placeholder."""
        if not run.lines:
            return BLANK_BLOCK
        body = "\n".join(
            self.format_line(run.start + offset, line) for offset, line in enumerate(run.lines)
        )
        if color:
            body = f'<SPAN style="background-color:{color};">{body}</SPAN>'
        if label:
            body = caption(label) + body
        return body
