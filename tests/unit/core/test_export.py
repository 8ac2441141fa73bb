"""Unit tests for core/export.py"""

import json

import pytest
from markdown_it import MarkdownIt

from mdlite.core.export import fields_to_json, to_json, to_markdown, to_plain_text, write_doc
from mdlite.core.models import Document
from mdlite.core.options import get_preset
from mdlite.core.parse import parse, parse_fields


@pytest.fixture(name="md_parser")
def md_parser_fixture():
    return MarkdownIt("commonmark")


def test_to_markdown_normalizes(sample_text):
    md = to_markdown(parse(sample_text))
    assert md == (
        "## Overview\n\n"
        "Tomatoes need full sun.\n\n"
        "* Water daily\n* Mulch the base\n\n"
        "1. Prepare soil\n2. Plant seedlings\n\n"
        "### Harvest in 60 days\n"
    )


def test_to_markdown_renumbers_ordered_items():
    assert to_markdown(parse("7. a\n7. b")) == "1. a\n2. b\n"


def test_to_markdown_empty_document():
    assert to_markdown(Document()) == ""


def test_to_markdown_reparses_to_same_document(sample_text):
    """Bold-only headings come back as '###' headings of the same level."""
    doc = parse(sample_text)
    assert parse(to_markdown(doc)) == doc


MARKER_LED_PARAGRAPHS = "  * not a list\n  # not a heading\n  5. not a step\n  *** stars\n"


def test_to_markdown_escapes_marker_led_paragraphs():
    md = to_markdown(parse(MARKER_LED_PARAGRAPHS))
    assert md == "\\* not a list\n\n\\# not a heading\n\n5\\. not a step\n\n*** stars\n"


def test_marker_led_paragraphs_reparse_to_same_document():
    doc = parse(MARKER_LED_PARAGRAPHS)
    assert [b.kind for b in doc.blocks] == ["paragraph"] * 4
    assert parse(to_markdown(doc)) == doc


def test_bold_only_paragraph_is_escaped():
    """With bold headings off, a lone bold run must not come back as a heading."""
    doc = parse("**Title**", get_preset("info"))
    assert to_markdown(doc) == "\\**Title**\n"
    assert parse(to_markdown(doc)) == doc


@pytest.mark.parametrize("line", ["- dash", "+ plus", "> quote", "1) paren", "***", "---", "# hash"])
def test_escaped_paragraphs_stay_paragraphs_in_commonmark(md_parser, line):
    doc = parse(f"  {line}", get_preset("qa"))
    assert [b.kind for b in doc.blocks] == ["paragraph"]
    tokens = md_parser.parse(to_markdown(doc))
    assert [t.type for t in tokens if t.level == 0] == ["paragraph_open", "paragraph_close"]
    assert parse(to_markdown(doc), get_preset("qa")) == doc


def test_to_markdown_is_commonmark_structure(md_parser, sample_text):
    """A CommonMark parser sees the same heading/paragraph/list sequence."""
    tokens = md_parser.parse(to_markdown(parse(sample_text)))
    opened = [t.type for t in tokens if t.level == 0 and t.type.endswith("_open")]
    assert opened == [
        "heading_open", "paragraph_open", "bullet_list_open", "ordered_list_open", "heading_open",
    ]
    headings = [t.tag for t in tokens if t.type == "heading_open"]
    assert headings == ["h2", "h3"]


def test_inline_bold_survives_commonmark(md_parser):
    tokens = md_parser.parse(to_markdown(parse("Grow **faster** with sun")))
    inline = next(t for t in tokens if t.type == "inline")
    assert [c.type for c in inline.children] == ["text", "strong_open", "text", "strong_close", "text"]


def test_to_plain_text():
    doc = parse("# Care\nGrow **faster**\n* water\n1. dig")
    assert to_plain_text(doc) == "Care\nGrow faster\nwater\n1. dig"


def test_to_json_round_trip():
    doc = parse("# Care\n* water")
    assert Document.model_validate_json(to_json(doc)) == doc
    assert "\n" not in to_json(doc, indent=0)


def test_fields_to_json(analysis_payload):
    data = json.loads(fields_to_json(parse_fields(analysis_payload)))
    assert data["plant_name"] == {"blocks": [{"kind": "paragraph", "runs": [{"kind": "text", "value": "Tomato"}]}]}
    assert len(data["organic_solutions"]) == 2
    assert data["details"]["notes"]["blocks"][0] == {"kind": "heading", "level": 2, "text": "Notes"}


@pytest.mark.parametrize("fmt,suffix", [("json", ".json"), ("md", ".md")])
def test_write_doc(tmp_path, fmt, suffix):
    out = write_doc(parse("# Hi"), tmp_path / "out", "answer", fmt)
    assert out == tmp_path / "out" / f"answer{suffix}"
    assert out.read_text(encoding="utf-8")


def test_write_doc_unknown_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_doc(Document(), tmp_path, "x", "html")
