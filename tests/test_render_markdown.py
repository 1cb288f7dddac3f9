"""Tests for docstring rendering and summaries."""

from modoc.render_markdown import extract_summary, render_markdown


def test_render_empty() -> None:
    """Verify that blank docstrings render to nothing."""
    assert render_markdown("") == ""
    assert render_markdown("   \n  ") == ""


def test_render_example_as_code() -> None:
    """Verify that Example sections end up as highlighted code blocks."""
    html = render_markdown("Does a thing.\n\nExample:\n    foo(1)")
    assert "<strong>Example:</strong>" in html
    assert 'class="language-mojo"' in html
    assert "foo(1)" in html


def test_render_generic_syntax_as_inline_code() -> None:
    """Verify that parameter syntax is not rendered as a link."""
    html = render_markdown("Calls SIMD[dtype=DType.int8](x).")
    assert "<code>SIMD[dtype=DType.int8](x)</code>" in html
    assert "<a " not in html


def test_render_note_callout() -> None:
    """Verify that Note sections become block quotes."""
    html = render_markdown("Text.\nNote: mind the gap.")
    assert "<blockquote>" in html
    assert "<strong>Note:</strong> mind the gap." in html


def test_extract_summary() -> None:
    """Verify first-paragraph extraction and truncation."""
    assert extract_summary("") == ""
    assert extract_summary("First line.\nStill first.\n\nSecond.") == (
        "First line.\nStill first."
    )
    long_text = "x" * 250
    summary = extract_summary(long_text)
    assert len(summary) == 200
    assert summary.endswith("...")
    assert extract_summary("abcdef", max_length=5) == "ab..."
