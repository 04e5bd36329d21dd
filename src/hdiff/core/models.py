"""Data models for diff operations, line runs and the assembled report"""

from dataclasses import dataclass, field
from enum import Enum
from itertools import zip_longest
from typing import Optional

from hdiff.core.errors import MalformedOperation


BLANK_BLOCK = " "   # placeholder rendered as an empty <PRE> cell


class OpKind(str, Enum):
    """Closed set of ed-style diff operations, keyed by their script letter"""
    add = "a"
    delete = "d"
    change = "c"

    @property
    def label(self) -> str:
        """Caption word used in the report, e.g. 'change'."""
        return self.name


class Numbering(str, Enum):
    """Line number prefix style for rendered blocks"""
    off = "off"
    absolute = "absolute"
    bracketed = "bracketed"


@dataclass(frozen=True)
class EditOperation:
    """One parsed diff command; ranges are 1-based and inclusive."""
    kind:      OpKind
    src_start: int
    src_end:   int
    dst_start: int
    dst_end:   int

    def __post_init__(self):
        if self.src_start > self.src_end or self.dst_start > self.dst_end:
            raise MalformedOperation(
                f"Reversed range in {self.src_start},{self.src_end}"
                f"{self.kind.value}{self.dst_start},{self.dst_end}"
            )

    @property
    def source_length(self) -> int:
        return self.src_end - self.src_start + 1

    @property
    def target_length(self) -> int:
        return self.dst_end - self.dst_start + 1

    @property
    def affected_lines(self) -> int:
        """Lines attributed to this operation in the summary."""
        return self.target_length if self.kind is OpKind.add else self.source_length

    @property
    def script_lines(self) -> int:
        """Number of literal content lines that follow this command in the script."""
        if self.kind is OpKind.add:
            return self.target_length
        if self.kind is OpKind.delete:
            return self.source_length
        return self.source_length + self.target_length + 1

    def __str__(self) -> str:
        return f"{self.src_start},{self.src_end} {self.kind.label} {self.dst_start},{self.dst_end}"


@dataclass(frozen=True)
class LineRun:
    """Contiguous lines taken from one file, with the number of the first line."""
    start: int
    lines: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)


@dataclass
class Summary:
    """Per-kind and total operation / affected-line counters."""
    counts:      dict[OpKind, int] = field(default_factory=dict)
    lines:       dict[OpKind, int] = field(default_factory=dict)
    total_count: int = 0
    total_lines: int = 0

    def record(self, op: EditOperation) -> None:
        self.counts[op.kind] = self.counts.get(op.kind, 0) + 1
        self.lines[op.kind] = self.lines.get(op.kind, 0) + op.affected_lines
        self.total_count += 1
        self.total_lines += op.affected_lines

    def items(self) -> list[tuple[OpKind, int, int]]:
        """(kind, operation count, affected lines) in first-seen order."""
        return [(kind, count, self.lines[kind]) for kind, count in self.counts.items()]


@dataclass
class Report:
    """Rendered old/new block columns plus the summary of the replayed script."""
    old_blocks: list[str] = field(default_factory=list)
    new_blocks: list[str] = field(default_factory=list)
    summary:    Summary = field(default_factory=Summary)
    operations: list[EditOperation] = field(default_factory=list)

    def rows(self) -> list[tuple[Optional[str], Optional[str]]]:
        """Pair blocks into table rows; the shorter column is padded with None."""
        return list(zip_longest(self.old_blocks, self.new_blocks))
