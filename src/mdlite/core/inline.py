"""Inline bold substitution for plain paragraph lines"""

import re

from mdlite.core.models import Bold, InlineRun, Text


# Non-empty content that never contains '**'; '****' and a lone '**' stay literal.
BOLD_RE = re.compile(r'\*\*((?:(?!\*\*).)+?)\*\*')


def split_bold(line: str) -> tuple[InlineRun, ...]:
    """Split line into alternating Text/Bold runs at each '**...**' span, left to right."""
    runs: list[InlineRun] = []
    cursor = 0

    for m in BOLD_RE.finditer(line):
        if m.start() > cursor:
            runs.append(Text(value=line[cursor:m.start()]))
        runs.append(Bold(value=m.group(1)))
        cursor = m.end()

    if cursor < len(line):
        runs.append(Text(value=line[cursor:]))
    return tuple(runs)
