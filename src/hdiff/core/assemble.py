"""Report assembly: replay an edit script against both files in lock-step"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from hdiff.core.cursor import LineCursor
from hdiff.core.errors import LostSynchronization
from hdiff.core.models import BLANK_BLOCK, EditOperation, OpKind, Report, Summary
from hdiff.core.render import BlockRenderer
from hdiff.core.script import iter_operations


logger = logging.getLogger(__name__)


@dataclass
class ReplayState:
    """Everything the replay loop carries from one operation to the next."""
    old:        LineCursor
    new:        LineCursor
    old_blocks: list[str] = field(default_factory=list)
    new_blocks: list[str] = field(default_factory=list)
    summary:    Summary = field(default_factory=Summary)
    operations: list[EditOperation] = field(default_factory=list)

    def to_report(self) -> Report:
        return Report(
            old_blocks=self.old_blocks,
            new_blocks=self.new_blocks,
            summary=self.summary,
            operations=self.operations,
        )


def _check_position(cursor: LineCursor, expected: int, op: EditOperation) -> None:
    if cursor.consumed != expected:
        raise LostSynchronization(
            f"{cursor.name} at line {cursor.consumed} after '{op}', expected {expected}"
        )


def replay_operation(
    state: ReplayState,
    op: EditOperation,
    renderer: BlockRenderer,
    colors: Mapping[OpKind, str],
    updates_only: bool = False,
    ) -> ReplayState:
    """Render the unchanged run before `op` and both sides of `op` itself."""
    logger.debug("replaying %s", op)

    # unchanged lines since the previous operation
    old_pre = state.old.drain_until(op.src_start)
    # a delete's target number is an insertion point: the line itself is unchanged
    new_limit = op.dst_start + 1 if op.kind is OpKind.delete else op.dst_start
    new_pre = state.new.drain_until(new_limit)
    if not updates_only:
        state.old_blocks.append(renderer.render(old_pre))
        state.new_blocks.append(renderer.render(new_pre))

    # old side: the anchor line for an add, the affected lines otherwise
    if op.kind is OpKind.add:
        old_run = state.old.take_exactly(1 if op.src_start > 0 else 0)
        old_color = ""
    else:
        old_run = state.old.take_exactly(op.source_length)
        old_color = colors[op.kind]
    state.old_blocks.append(renderer.render(old_run, label=op.kind.label, color=old_color))
    _check_position(state.old, op.src_end, op)

    if op.kind is OpKind.delete:
        state.new_blocks.append(BLANK_BLOCK)
        _check_position(state.new, op.dst_start, op)
    else:
        new_run = state.new.take_exactly(op.target_length)
        state.new_blocks.append(renderer.render(new_run, label=op.kind.label, color=colors[op.kind]))
        _check_position(state.new, op.dst_end, op)

    state.summary.record(op)
    state.operations.append(op)
    return state


def finish(state: ReplayState, renderer: BlockRenderer, updates_only: bool = False) -> ReplayState:
    """Consume the trailing lines of both files, rendering any that remain."""
    old_rest = state.old.drain_rest()
    new_rest = state.new.drain_rest()
    if not updates_only:
        if old_rest.lines:
            state.old_blocks.append(renderer.render(old_rest))
        if new_rest.lines:
            state.new_blocks.append(renderer.render(new_rest))
    return state


def assemble_report(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    script: Sequence[str],
    renderer: BlockRenderer,
    colors: Mapping[OpKind, str],
    updates_only: bool = False,
    old_name: str = "file1",
    new_name: str = "file2",
    ) -> Report:
    """Replay `script` against both line sequences and return the rendered columns."""
    state = ReplayState(old=LineCursor(old_lines, old_name), new=LineCursor(new_lines, new_name))
    for op in iter_operations(script):
        state = replay_operation(state, op, renderer, colors, updates_only)
    state = finish(state, renderer, updates_only)
    logger.debug(
        "assembled %d operation(s): %d old block(s), %d new block(s)",
        state.summary.total_count, len(state.old_blocks), len(state.new_blocks),
    )
    return state.to_report()
