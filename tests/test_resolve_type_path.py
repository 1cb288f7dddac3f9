"""Tests for origin hint and naming-convention URL resolution."""

from modoc.infer_stdlib_url import STDLIB_BASE, infer_stdlib_url
from modoc.resolve_type_path import local_type_url, resolve_type_path


def test_resolve_stdlib_path() -> None:
    """Verify that /std/ hints point at the external stdlib docs."""
    url = resolve_type_path("/std/collections/string/String", "/", "mypkg")
    assert url == f"{STDLIB_BASE}/collections/string/String"


def test_resolve_stdlib_path_custom_root() -> None:
    """Verify that the external root is configurable."""
    url = resolve_type_path("/std/builtin/int/Int", "/", "p", "https://ext")
    assert url == "https://ext/builtin/int/Int"


def test_resolve_local_anchor_path() -> None:
    """Verify the module/#Type hint shape."""
    assert (
        resolve_type_path("/mypkg/types/#Result", "/", "mypkg")
        == "/mypkg/types/index.html#Result"
    )


def test_resolve_local_type_path() -> None:
    """Verify the module/.../Type hint shape, nested modules included."""
    assert (
        resolve_type_path("/mypkg/a/b/Foo", "/docs/", "mypkg")
        == "/docs/mypkg/a/b/index.html#Foo"
    )


def test_resolve_unknown_shapes() -> None:
    """Verify that unrecognized hints resolve to None without raising."""
    assert resolve_type_path("", "/", "mypkg") is None
    assert resolve_type_path(None, "/", "mypkg") is None
    assert resolve_type_path("/other/types/Foo", "/", "mypkg") is None
    assert resolve_type_path("/mypkg/Foo", "/", "mypkg") is None
    assert resolve_type_path("/mypkg/types/", "/", "mypkg") is None
    assert resolve_type_path("mypkg/types/Foo", "/", "mypkg") is None
    assert resolve_type_path("/types/Foo", "/", "") is None
    assert resolve_type_path("/mypkg/types/#", "/", "mypkg") is None


def test_local_type_url() -> None:
    """Verify same-site URLs, with and without a module path."""
    assert local_type_url("/", "pkg", "cpu/simd", "Vec") == "/pkg/cpu/simd/index.html#Vec"
    assert local_type_url("/", "single", "", "Foo") == "/single/index.html#Foo"


def test_infer_stdlib_url_families() -> None:
    """Verify the naming-convention table."""
    assert infer_stdlib_url("Float32") == f"{STDLIB_BASE}/builtin/simd/"
    assert infer_stdlib_url("Scalar") == f"{STDLIB_BASE}/builtin/simd/"
    assert infer_stdlib_url("DType") == f"{STDLIB_BASE}/builtin/dtype/DType"
    assert infer_stdlib_url("Int") == f"{STDLIB_BASE}/builtin/int/Int"
    assert infer_stdlib_url("Hashable") == f"{STDLIB_BASE}/builtin/hash/Hashable"
    assert infer_stdlib_url("List", "https://ext") == "https://ext/collections/list/List"


def test_infer_stdlib_url_unknown() -> None:
    """Verify that unknown names are not guessed."""
    assert infer_stdlib_url("Frobnicator") is None
    assert infer_stdlib_url("Int128") is None
    assert infer_stdlib_url("") is None
