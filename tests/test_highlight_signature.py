"""Tests for link-aware signature and type highlighting."""

from modoc.highlight_signature import escape_html, highlight_signature, highlight_type
from modoc.infer_stdlib_url import STDLIB_BASE

LIST_URL = "https://ext/builtin/list/List"
ITEM_URL = "https://site/pkg/types/index.html#Item"


def test_composite_type_gets_independent_links() -> None:
    """Verify that List[Item] renders two separate links."""
    registry = {"List": LIST_URL, "Item": ITEM_URL}
    assert highlight_signature("List[Item]", registry) == (
        f'<a href="{LIST_URL}" class="type-link"><span class="sig-type">List</span></a>'
        '<span class="sig-punct">[</span>'
        f'<a href="{ITEM_URL}" class="type-link"><span class="sig-type">Item</span></a>'
        '<span class="sig-punct">]</span>'
    )


def test_unknown_type_is_unlinked() -> None:
    """Verify that an unresolvable type renders as a plain styled span."""
    assert highlight_signature("Frobnicator", {}) == '<span class="sig-type">Frobnicator</span>'


def test_naming_convention_fallback() -> None:
    """Verify that unregistered stdlib names link via the naming table."""
    html = highlight_signature("x: Int", {})
    assert f'<a href="{STDLIB_BASE}/builtin/int/Int" class="type-link">' in html


def test_registry_beats_naming_convention() -> None:
    """Verify that a registered URL is preferred over the naming table."""
    html = highlight_signature("Int", {"Int": "/pkg/num/index.html#Int"})
    assert 'href="/pkg/num/index.html#Int"' in html
    assert STDLIB_BASE not in html


def test_no_registry_means_no_links() -> None:
    """Verify that highlighting without a registry only styles tokens."""
    html = highlight_signature("fn f(x: Int) -> Value")
    assert "<a " not in html
    assert '<span class="sig-keyword">fn</span>' in html
    assert '<span class="sig-name">f</span>' in html
    assert '<span class="sig-type">Value</span>' in html


def test_text_is_escaped() -> None:
    """Verify that HTML special characters never leak into the markup."""
    html = highlight_signature('x: "a<b"', {})
    assert "&quot;" in html
    assert "&lt;" in html
    assert "<b" not in html
    assert escape_html("a&'\"<>") == "a&amp;&#x27;&quot;&lt;&gt;"


def test_empty_input() -> None:
    """Verify that empty input renders as empty output."""
    assert highlight_signature("", {}) == ""
    assert highlight_type("", "/std/builtin/int/Int", "/", "pkg", {}) == ""


def test_highlight_type_uses_own_hint_for_outer_type() -> None:
    """Verify that the occurrence hint links the container, the registry the element."""
    registry = {"Value": "/mojson/value/index.html#Value"}
    html = highlight_type(
        "List[Value]", "/std/collections/list/List", "/", "mojson", registry
    )
    assert f'<a href="{STDLIB_BASE}/collections/list/List" class="type-link">' in html
    assert '<a href="/mojson/value/index.html#Value" class="type-link">' in html
    assert html.count("<a ") == 2
    # The shared registry is left untouched
    assert registry == {"Value": "/mojson/value/index.html#Value"}


def test_highlight_type_hint_overrides_registry_locally() -> None:
    """Verify that an occurrence hint wins over the shared entry for that render."""
    registry = {"Item": "/pkg/types/index.html#Item"}
    html = highlight_type("Item", "/pkg/other/#Item", "/", "pkg", registry)
    assert 'href="/pkg/other/index.html#Item"' in html


def test_highlight_type_bad_hint_falls_back() -> None:
    """Verify that a malformed hint degrades to registry lookup."""
    html = highlight_type("Frobnicator", "garbage", "/", "pkg", {})
    assert html == '<span class="sig-type">Frobnicator</span>'
