"""Ed-style diff script parsing: command lines to EditOperations"""

import logging
import re
from typing import Iterator, Sequence

from hdiff.core.errors import MalformedOperation, TruncatedScript, UnknownOperation
from hdiff.core.models import EditOperation, OpKind


logger = logging.getLogger(__name__)

COMMAND_RE = re.compile(r'^(\d+)(?:,(\d+))?([A-Za-z])(\d+)(?:,(\d+))?$')
NO_NEWLINE_MARKER = "\\"    # "\ No newline at end of file"


def parse_command(line: str) -> EditOperation:
    """Parse 'N1[,N2]<op>N3[,N4]' into an EditOperation; a missing end defaults to its start."""
    text = line.rstrip("\r\n")
    m = COMMAND_RE.match(text)
    if not m:
        raise MalformedOperation(f"Bad diff line : {text}")
    num1, num2, letter, num3, num4 = m.groups()
    try:
        kind = OpKind(letter)
    except ValueError:
        raise UnknownOperation(f"Bad diff operation : {text}") from None
    src_start = int(num1)
    dst_start = int(num3)
    return EditOperation(
        kind=kind,
        src_start=src_start,
        src_end=int(num2) if num2 is not None else src_start,
        dst_start=dst_start,
        dst_end=int(num4) if num4 is not None else dst_start,
    )


def _is_marker(line: str) -> bool:
    return line.startswith(NO_NEWLINE_MARKER)


def skip_content(script: Sequence[str], index: int, count: int) -> int:
    """Return the index just past `count` content lines starting at `index`.

    No-newline markers are not counted. Raises TruncatedScript when the
    script ends first.
    """
    remaining = count
    while remaining > 0:
        if index >= len(script):
            raise TruncatedScript(f"Premature EOF on diff script: {remaining} content line(s) missing")
        if not _is_marker(script[index]):
            remaining -= 1
        index += 1
    while index < len(script) and _is_marker(script[index]):
        index += 1
    return index


def iter_operations(script: Sequence[str]) -> Iterator[EditOperation]:
    """Yield each command of a diff script in order, skipping the content lines it owns."""
    index = 0
    while index < len(script):
        line = script[index]
        index += 1
        if _is_marker(line):
            continue
        op = parse_command(line)
        index = skip_content(script, index, op.script_lines)
        logger.debug("parsed %s (%d script lines)", op, op.script_lines)
        yield op
