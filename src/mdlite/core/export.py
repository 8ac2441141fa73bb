"""Export: normalized markdown, plain text, and JSON renderings of a Document"""

import json
import re
from pathlib import Path
from typing import Any

from mdlite.core.classify import BOLD_LINE_RE
from mdlite.core.models import Block, Bold, Document, Heading, ListBlock, Paragraph


FORMATS = ("json", "md")

# Leading text a markdown reader would take as a block marker.
LEADING_MARKER_RE = re.compile(r'^(?:[#>+\-_`~]|\*\s|(?:\*[ \t]*){3,}$)')
LEADING_NUMBER_RE = re.compile(r'^(\d+)([.)])')


def _escape_leading_marker(line: str) -> str:
    m = LEADING_NUMBER_RE.match(line)
    if m:
        return f"{m.group(1)}\\{line[m.end(1):]}"
    if LEADING_MARKER_RE.match(line) or BOLD_LINE_RE.match(line):
        return "\\" + line
    return line


def _runs_markdown(block: Paragraph) -> str:
    line = "".join(f"**{r.value}**" if isinstance(r, Bold) else r.value for r in block.runs)
    return _escape_leading_marker(line)


def _list_lines(block: ListBlock, bullets: bool = True) -> list[str]:
    if block.ordered:
        return [f"{i}. {item}" for i, item in enumerate(block.items, start=1)]
    return [f"* {item}" if bullets else item for item in block.items]


def block_markdown(block: Block) -> str:
    """Render one block in the marker subset the parser reads back."""
    if isinstance(block, Heading):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, Paragraph):
        return _runs_markdown(block)
    return "\n".join(_list_lines(block))


def to_markdown(doc: Document) -> str:
    """Return normalized markdown: blocks separated by one blank line, trailing newline."""
    if not doc.blocks:
        return ""
    return "\n\n".join(block_markdown(b) for b in doc.blocks) + "\n"


def to_plain_text(doc: Document) -> str:
    """Return the document text with every marker removed, one block per line group."""
    parts = []
    for b in doc.blocks:
        if isinstance(b, ListBlock):
            parts.append("\n".join(_list_lines(b, bullets=False)))
        else:
            parts.append(b.text)
    return "\n".join(parts)


def to_json(doc: Document, indent: int | None = 2) -> str:
    return doc.model_dump_json(indent=indent or None)


def _jsonable(value: Any) -> Any:
    if isinstance(value, Document):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    return [_jsonable(v) for v in value]


def fields_to_json(fields: dict[str, Any], indent: int | None = 2) -> str:
    """Serialize a parse_fields result (Documents nested in dicts/lists) to JSON."""
    return json.dumps(_jsonable(fields), indent=indent or None, ensure_ascii=False)


def write_doc(doc: Document, output_dir: Path, stem: str, fmt: str = "json", indent: int = 2) -> Path:
    """Write doc as output_dir/<stem>.<fmt> and return the path."""
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported output format '{fmt}' (expected one of: {', '.join(FORMATS)})")
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{stem}.{fmt}"
    content = to_markdown(doc) if fmt == "md" else to_json(doc, indent)
    out_path.write_text(content, encoding="utf-8")
    return out_path
