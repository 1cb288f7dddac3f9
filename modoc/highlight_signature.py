"""Logic for rendering signatures as HTML with per-type cross-reference links."""

import html

from modoc.build_type_registry import TypeRegistry, leading_type_name
from modoc.infer_stdlib_url import STDLIB_BASE, infer_stdlib_url
from modoc.resolve_type_path import resolve_type_path
from modoc.signature_token import KEYWORD, NAME, PUNCTUATION, TYPE
from modoc.tokenize_signature import tokenize_signature

TOKEN_CSS_CLASSES = {
    KEYWORD: "sig-keyword",
    TYPE: "sig-type",
    NAME: "sig-name",
    PUNCTUATION: "sig-punct",
}


def escape_html(text: str) -> str:
    """Escape HTML special characters, quotes included."""
    return html.escape(text, quote=True)


def highlight_signature(
    signature: str,
    type_registry: TypeRegistry | None = None,
    stdlib_root: str = STDLIB_BASE,
) -> str:
    """Render a signature as highlighted HTML.

    Type tokens are linked when a registry is given and the name is in it or
    matches a known stdlib naming convention; anything else stays plain.
    """
    parts = []
    for token in tokenize_signature(signature or ""):
        text = escape_html(token.text)
        css_class = TOKEN_CSS_CLASSES.get(token.kind)
        if css_class is None:
            parts.append(text)
            continue

        span = f'<span class="{css_class}">{text}</span>'
        if token.kind == TYPE and type_registry is not None:
            href = type_registry.get(token.text) or infer_stdlib_url(
                token.text, stdlib_root
            )
            if href:
                span = f'<a href="{escape_html(href)}" class="type-link">{span}</a>'
        parts.append(span)
    return "".join(parts)


def highlight_type(
    type_expr: str,
    path: str | None = None,
    base_url: str = "/",
    package_name: str = "",
    type_registry: TypeRegistry | None = None,
    stdlib_root: str = STDLIB_BASE,
) -> str:
    """Render a type expression with one link per type component.

    The occurrence's own origin hint links the outermost type; inner types of
    e.g. `List[Value]` resolve through the shared registry.
    """
    merged: TypeRegistry = dict(type_registry or {})
    href = resolve_type_path(path, base_url, package_name, stdlib_root)
    outer = leading_type_name(type_expr or "")
    if href and outer:
        merged[outer] = href
    return highlight_signature(type_expr, merged, stdlib_root)
