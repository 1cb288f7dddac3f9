"""Data models for representing signature tokens."""

from dataclasses import dataclass

KEYWORD = "keyword"
TYPE = "type"
NAME = "name"  # value identifier: argument, parameter or function name
PUNCTUATION = "punctuation"
WHITESPACE = "whitespace"
TEXT = "text"  # anything no other rule matched (digits, dots, operators)


@dataclass(frozen=True)
class SignatureToken:
    """A classified lexeme of a signature or type expression."""

    kind: str
    text: str
