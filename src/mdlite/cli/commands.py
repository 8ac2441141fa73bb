"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdlite.config import Settings, load_config
from mdlite.core.export import fields_to_json, to_json, to_markdown, to_plain_text
from mdlite.core.options import PRESETS
from mdlite.core.parse import parse
from mdlite.core.pipeline import run_fields, run_render


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def render_cmd(
    path: Annotated[str, typer.Argument(help="Response file or directory of .md/.txt files")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    preset: Annotated[Optional[str], typer.Option("--preset", help="Parser preset name")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or md")] = None,
    ):
    """Parse response files and write one rendered document per file."""
    settings = _settings(overrides={"output_dir": out, "preset": preset, "output_format": fmt})
    output_dir = Path(settings.output_dir)
    try:
        results = run_render(
            path, settings.parser_options, output_dir, settings.output_format, settings.json_indent,
        )
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .md/.txt files found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def show_cmd(
    path: Annotated[str, typer.Argument(help="Response file, or '-' to read stdin")],
    preset: Annotated[Optional[str], typer.Option("--preset", help="Parser preset name")] = None,
    fmt: Annotated[str, typer.Option("--format", help="json, md, or text")] = "json",
    ):
    """Parse a single response and print it to stdout."""
    settings = _settings(overrides={"preset": preset})
    if fmt not in ("json", "md", "text"):
        _fail(f"Unsupported format '{fmt}' (expected json, md, or text)")

    if path == "-":
        text = typer.get_text_stream("stdin").read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot read {path}", e)

    doc = parse(text, settings.parser_options)
    logger.info("Parsed %s: %d block(s)", path, len(doc))
    if fmt == "md":
        typer.echo(to_markdown(doc), nl=False)
    elif fmt == "text":
        typer.echo(to_plain_text(doc))
    else:
        typer.echo(to_json(doc, settings.json_indent))


def fields_cmd(
    path: Annotated[str, typer.Argument(help="JSON object whose string fields are AI-generated text")],
    preset: Annotated[Optional[str], typer.Option("--preset", help="Parser preset name")] = None,
    ):
    """Parse every string field of a JSON payload and print the result as JSON."""
    settings = _settings(overrides={"preset": preset})
    try:
        fields = run_fields(Path(path), settings.parser_options)
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    except ValueError as e:
        _fail(str(e))
    typer.echo(fields_to_json(fields, settings.json_indent))


def presets_cmd():
    """List parser presets and the rules each one enables."""
    for name, options in PRESETS.items():
        enabled = [flag for flag, on in options.model_dump().items() if on]
        typer.echo(f"{name}: {', '.join(enabled)}")
