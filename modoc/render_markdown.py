"""Logic for rendering docstrings to HTML."""

import markdown

from modoc.preprocess_docstring import preprocess_docstring

SUMMARY_MAX_LENGTH = 200


def render_markdown(text: str, code_lang: str = "mojo") -> str:
    """Normalize a docstring and convert it to HTML."""
    if not text or not text.strip():
        return ""
    md = markdown.Markdown(extensions=["fenced_code", "tables"])
    return md.convert(preprocess_docstring(text, code_lang))


def extract_summary(text: str, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """Return the first paragraph of a docstring, truncated with an ellipsis."""
    if not text:
        return ""
    summary = text.split("\n\n", 1)[0].strip()
    if len(summary) > max_length:
        return summary[: max_length - 3] + "..."
    return summary
