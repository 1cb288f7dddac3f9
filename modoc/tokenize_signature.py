"""Logic for splitting Mojo signatures into classified tokens."""

import re

from modoc.signature_token import (
    KEYWORD,
    NAME,
    PUNCTUATION,
    TEXT,
    TYPE,
    WHITESPACE,
    SignatureToken,
)

KEYWORDS = frozenset(
    {
        "fn",
        "def",
        "struct",
        "trait",
        "alias",
        "comptime",
        "var",
        "let",
        "mut",
        "owned",
        "ref",
        "out",
        "inout",
        "read",
        "raises",
        "async",
        "staticmethod",
    }
)

BUILTIN_TYPES = frozenset(
    {
        "Int",
        "Int8",
        "Int16",
        "Int32",
        "Int64",
        "UInt",
        "UInt8",
        "UInt16",
        "UInt32",
        "UInt64",
        "Float16",
        "Float32",
        "Float64",
        "Bool",
        "String",
        "List",
        "Dict",
        "Optional",
        "Tuple",
        "Self",
        "None",
    }
)

SIGNATURE_TOKEN_RE = re.compile(
    r"(?P<ident>[A-Za-z_][A-Za-z0-9_]*)|(?P<punct>[()\[\]{}<>:,=\->])|(?P<space>\s+)"
)


def tokenize_signature(signature: str) -> list[SignatureToken]:
    """Split a signature into tokens whose texts concatenate back to the input."""
    tokens: list[SignatureToken] = []
    last = 0
    for m in SIGNATURE_TOKEN_RE.finditer(signature):
        if m.start() > last:
            tokens.append(SignatureToken(TEXT, signature[last : m.start()]))

        if m.group("ident"):
            tokens.append(SignatureToken(_classify(m.group("ident")), m.group(0)))
        elif m.group("punct"):
            tokens.append(SignatureToken(PUNCTUATION, m.group(0)))
        else:
            tokens.append(SignatureToken(WHITESPACE, m.group(0)))
        last = m.end()

    if last < len(signature):
        tokens.append(SignatureToken(TEXT, signature[last:]))
    return tokens


def _classify(identifier: str) -> str:
    """Classify an identifier by keyword set, builtin set, then capitalization."""
    if identifier in KEYWORDS:
        return KEYWORD
    if identifier in BUILTIN_TYPES:
        return TYPE
    # Capitalized identifiers are likely types
    if identifier[0].isupper():
        return TYPE
    return NAME
