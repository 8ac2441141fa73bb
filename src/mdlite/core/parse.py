"""Public parse API: text -> Document, plus streamed and structured-payload variants"""

from typing import Any, Iterable, Iterator, Mapping

from mdlite.core.accumulate import accumulate
from mdlite.core.classify import classify_line
from mdlite.core.models import Document
from mdlite.core.options import ParserOptions


def parse(text: str, options: ParserOptions | None = None) -> Document:
    """Parse AI response text into a Document. Total: never raises for str input.

    Lines are split on '\\n', '\\r\\n' or '\\r'. Each call builds a fresh
    Document; nothing is cached between calls.
    """
    options = options or ParserOptions()
    lines = (classify_line(line, options) for line in text.splitlines())
    return Document(blocks=accumulate(lines))


def parse_stream(chunks: Iterable[str], options: ParserOptions | None = None) -> Iterator[Document]:
    """Yield a full re-parse of the accumulated text after each chunk arrives."""
    text = ""
    for chunk in chunks:
        text += chunk
        yield parse(text, options)


def _parse_value(value: Any, options: ParserOptions | None) -> Any:
    """Parse strings, recurse into mappings and lists; None for anything else."""
    if isinstance(value, str):
        return parse(value, options)
    if isinstance(value, Mapping):
        return parse_fields(value, options)
    if isinstance(value, list):
        parsed = (_parse_value(v, options) for v in value)
        return [p for p in parsed if p is not None]
    return None


def parse_fields(payload: Mapping[str, Any], options: ParserOptions | None = None) -> dict[str, Any]:
    """Run every string-valued field of a JSON payload through parse, preserving key order.

    Lists are parsed element-wise and nested objects recursively; numbers,
    booleans and nulls are dropped.
    """
    result: dict[str, Any] = {}
    for key, value in payload.items():
        parsed = _parse_value(value, options)
        if parsed is not None:
            result[key] = parsed
    return result
