"""Tests for signature tokenization."""

from modoc.signature_token import (
    KEYWORD,
    NAME,
    PUNCTUATION,
    TEXT,
    TYPE,
    WHITESPACE,
    SignatureToken,
)
from modoc.tokenize_signature import tokenize_signature


def test_tokenize_function_signature() -> None:
    """Verify classification of a simple function signature."""
    tokens = tokenize_signature("fn greet(name: String) -> String")
    assert tokens == [
        SignatureToken(KEYWORD, "fn"),
        SignatureToken(WHITESPACE, " "),
        SignatureToken(NAME, "greet"),
        SignatureToken(PUNCTUATION, "("),
        SignatureToken(NAME, "name"),
        SignatureToken(PUNCTUATION, ":"),
        SignatureToken(WHITESPACE, " "),
        SignatureToken(TYPE, "String"),
        SignatureToken(PUNCTUATION, ")"),
        SignatureToken(WHITESPACE, " "),
        SignatureToken(PUNCTUATION, "-"),
        SignatureToken(PUNCTUATION, ">"),
        SignatureToken(WHITESPACE, " "),
        SignatureToken(TYPE, "String"),
    ]


def test_tokenize_classification_priority() -> None:
    """Verify keywords, builtins, capitalized names and private names."""
    kinds = {t.text: t.kind for t in tokenize_signature("out self: Self, _Hidden, Foo, mut")}
    assert kinds["out"] == KEYWORD
    assert kinds["mut"] == KEYWORD
    assert kinds["Self"] == TYPE
    assert kinds["Foo"] == TYPE
    assert kinds["_Hidden"] == NAME
    assert kinds["self"] == NAME


def test_tokenize_unmatched_characters_become_text() -> None:
    """Verify dots, digits and operators are kept as text tokens."""
    tokens = tokenize_signature("SIMD[DType.float32, 4]")
    assert SignatureToken(TEXT, ".") in tokens
    assert SignatureToken(TEXT, "4") in tokens
    assert SignatureToken(NAME, "float32") in tokens


def test_tokenize_is_lossless() -> None:
    """Verify that token texts always reconstruct the input."""
    samples = [
        "",
        "   ",
        "fn f[*Ts: AnyType](x: Int, *args: Int) raises",
        "owned x: UnsafePointer[UInt8, mut=True]",
        'fn f(s: StringLiteral = "a\\tb") -> None',
        "fn ü(é: Ω) -> {}",
        "\tstruct  Foo[T: Copyable & Movable]\n",
    ]
    for s in samples:
        assert "".join(t.text for t in tokenize_signature(s)) == s


def test_tokenize_empty() -> None:
    """Verify that empty input yields no tokens."""
    assert tokenize_signature("") == []
