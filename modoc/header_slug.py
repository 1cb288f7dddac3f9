"""Utility for generating item anchors."""

import re


def header_slug(s: str) -> str:
    """Generate an anchor slug: lower, hyphenate non-alnum, trim hyphens."""
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    return s.strip("-") or "section"
