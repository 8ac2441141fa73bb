"""Single-line classification into heading, list item, blank, or text"""

import re
from dataclasses import dataclass
from enum import Enum

from mdlite.core.inline import split_bold
from mdlite.core.models import InlineRun, Text
from mdlite.core.options import ParserOptions


class LineKind(str, Enum):
    heading = "heading"
    bold_heading = "bold_heading"
    ordered_item = "ordered_item"
    unordered_item = "unordered_item"
    blank = "blank"
    text = "text"


# Checked in order; '# ' shares rank 2 with '## '.
HEADING_PREFIXES: tuple[tuple[str, int], ...] = (
    ("### ", 3),
    ("## ",  2),
    ("# ",   2),
)
BOLD_HEADING_LEVEL = 3

BOLD_LINE_RE = re.compile(r'^\*\*((?:(?!\*\*).)+)\*\*$')
ORDERED_RE = re.compile(r'^\d+\.\s')
UNORDERED_PREFIX = "* "
# A backslash before a leading block marker, as written by to_markdown.
ESCAPED_MARKER_RE = re.compile(r'^(\d+)\\([.)])|^\\([#*>+\-_`~])')


def unescape_marker(line: str) -> str:
    """Drop the backslash from a leading '\\#', '\\*', 'N\\.' etc."""
    m = ESCAPED_MARKER_RE.match(line)
    if not m:
        return line
    prefix = m.group(1) + m.group(2) if m.group(1) else m.group(3)
    return prefix + line[m.end():]


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    content: str = ""
    level: int | None = None                 # heading rank; None for non-headings
    runs: tuple[InlineRun, ...] = ()         # text lines only

    @property
    def is_list_item(self) -> bool:
        return self.kind in (LineKind.ordered_item, LineKind.unordered_item)


BLANK = ClassifiedLine(LineKind.blank)


def _heading(line: str) -> ClassifiedLine | None:
    for prefix, level in HEADING_PREFIXES:
        if line.startswith(prefix):
            return ClassifiedLine(LineKind.heading, line[len(prefix):].strip(), level)
    return None


def _bold_heading(line: str) -> ClassifiedLine | None:
    m = BOLD_LINE_RE.match(line.strip())
    if m and m.group(1).strip():
        return ClassifiedLine(LineKind.bold_heading, m.group(1).strip(), BOLD_HEADING_LEVEL)
    return None


def _ordered_item(line: str) -> ClassifiedLine | None:
    m = ORDERED_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.ordered_item, line[m.end():].strip())
    return None


def _unordered_item(line: str) -> ClassifiedLine | None:
    if line.startswith(UNORDERED_PREFIX):
        return ClassifiedLine(LineKind.unordered_item, line[len(UNORDERED_PREFIX):].strip())
    return None


def _text(line: str, inline_bold: bool) -> ClassifiedLine:
    content = unescape_marker(line.strip())
    runs = split_bold(content) if inline_bold else ()
    if not any(r.value.strip() for r in runs):
        # e.g. '** **': whitespace-only emphasis stays literal
        runs = (Text(value=content),)
    return ClassifiedLine(LineKind.text, content, runs=runs)


def classify_line(line: str, options: ParserOptions = ParserOptions()) -> ClassifiedLine:
    """Classify one line (no trailing newline) by the first matching enabled rule.

    A heading with nothing after its marker is classified blank. An empty
    list item stays a list item so it does not break the open run.
    """
    rules = (
        (options.headings,        _heading),
        (options.bold_headings,   _bold_heading),
        (options.ordered_lists,   _ordered_item),
        (options.unordered_lists, _unordered_item),
    )
    for enabled, rule in rules:
        if not enabled:
            continue
        result = rule(line)
        if result is not None:
            return result if result.content or result.is_list_item else BLANK

    if not line.strip():
        return BLANK
    return _text(line, options.inline_bold)
