"""Index-based read cursor over one file's line sequence"""

import logging
from typing import Sequence

from hdiff.core.errors import PrematureEOF
from hdiff.core.models import LineRun


logger = logging.getLogger(__name__)


class LineCursor:
    """Reads a file's lines front to back; each line is handed out at most once.

    `consumed` counts the lines read so far and never decreases, so the
    1-based number of the next unread line is always `consumed + 1`.
    """

    def __init__(self, lines: Sequence[str], name: str = "file"):
        self._lines = tuple(lines)
        self.name = name
        self.consumed = 0

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def remaining(self) -> int:
        return len(self._lines) - self.consumed

    def take_exactly(self, n: int) -> LineRun:
        """Return the next n lines; raise PrematureEOF if fewer remain."""
        if n > self.remaining:
            raise PrematureEOF(
                f"Premature EOF on {self.name}: wanted {n} line(s) after line "
                f"{self.consumed}, only {self.remaining} left"
            )
        start = self.consumed
        self.consumed += n
        return LineRun(start=start + 1, lines=self._lines[start:self.consumed])

    def drain_until(self, limit: int) -> LineRun:
        """Return the unread lines numbered below `limit`, leaving line `limit` unread."""
        count = max(0, limit - 1 - self.consumed)
        logger.debug("%s: drain until %d from %d (%d line(s))", self.name, limit, self.consumed, count)
        return self.take_exactly(count)

    def drain_rest(self) -> LineRun:
        """Return every line not yet read."""
        logger.debug("%s: %d remaining line(s)", self.name, self.remaining)
        return self.take_exactly(self.remaining)
