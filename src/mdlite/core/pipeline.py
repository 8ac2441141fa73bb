"""Pipeline step functions: discover response files, render them, parse JSON payloads"""

import json
import logging
from pathlib import Path
from typing import Any

from mdlite.core.export import write_doc
from mdlite.core.options import ParserOptions
from mdlite.core.parse import parse, parse_fields


logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {'.md', '.txt'}


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.txt files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in TEXT_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in TEXT_EXTENSIONS)


def run_render(
    path: str,
    options: ParserOptions,
    output_dir: Path,
    fmt: str = "json",
    indent: int = 2,
    ) -> list[tuple[Path, Path]]:
    """Parse each response file under path and write it to output_dir. Returns (source, output) pairs."""
    files = discover_files(Path(path))
    logger.info("Rendering %d file(s) from %s", len(files), path)
    results = []
    for p in files:
        try:
            doc = parse(p.read_text(encoding='utf-8'), options)
            out_file = write_doc(doc, output_dir, p.stem, fmt, indent)
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.debug("Rendered %s: %d block(s) -> %s", p, len(doc), out_file)
        results.append((p, out_file))
    return results


def run_fields(path: Path, options: ParserOptions) -> dict[str, Any]:
    """Load a JSON object from path and parse each of its string fields."""
    try:
        payload = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON payload in {path}: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid JSON payload in {path}: expected an object, got {type(payload).__name__}")
    logger.debug("Parsing %d field(s) from %s", len(payload), path)
    return parse_fields(payload, options)
