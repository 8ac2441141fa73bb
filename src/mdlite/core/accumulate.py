"""Fold classified lines into blocks, collapsing list-item runs"""

from typing import Iterable, NamedTuple

from mdlite.core.classify import ClassifiedLine, LineKind
from mdlite.core.models import Block, Heading, ListBlock, Paragraph


class ListRun(NamedTuple):
    """The currently open list: its kind and the items collected so far."""
    ordered: bool
    items: tuple[str, ...] = ()


def flush(pending: ListRun | None) -> list[Block]:
    """Close the open list run, if any. Never yields an empty ListBlock."""
    if pending is None or not pending.items:
        return []
    return [ListBlock(ordered=pending.ordered, items=pending.items)]


def step(pending: ListRun | None, line: ClassifiedLine) -> tuple[ListRun | None, list[Block]]:
    """Consume one classified line; return the next open list run and any finished blocks."""
    if line.is_list_item:
        ordered = line.kind == LineKind.ordered_item
        item = (line.content,) if line.content else ()     # empty items keep the run open
        if pending is not None and pending.ordered == ordered:
            return ListRun(ordered, pending.items + item), []
        return ListRun(ordered, item), flush(pending)

    emitted = flush(pending)
    if line.kind in (LineKind.heading, LineKind.bold_heading):
        emitted.append(Heading(level=line.level, text=line.content))
    elif line.kind == LineKind.text:
        emitted.append(Paragraph(runs=line.runs))
    return None, emitted


def accumulate(lines: Iterable[ClassifiedLine]) -> list[Block]:
    """Run step over every line in order and flush whatever list is still open."""
    blocks: list[Block] = []
    pending: ListRun | None = None

    for line in lines:
        pending, emitted = step(pending, line)
        blocks.extend(emitted)

    blocks.extend(flush(pending))
    return blocks
