"""Tests for reading re-exports and docstrings from `__init__.mojo`."""

from modoc.parse_init_file import InitImport, extract_init_docstring, parse_init_file


def test_single_line_imports() -> None:
    """Verify comma-separated re-exports, aliases included."""
    content = "from .value import Value, parse as parse_json\nfrom .cpu import *\n"
    assert parse_init_file(content) == [
        InitImport(module="value", items=["Value", "parse"]),
    ]


def test_parenthesized_single_line_import() -> None:
    """Verify that parentheses on one line do not leak into names."""
    assert parse_init_file("from .value import (Value, parse)") == [
        InitImport(module="value", items=["Value", "parse"]),
    ]


def test_multi_line_imports() -> None:
    """Verify imports spread over several lines."""
    content = (
        "from .value import (\n"
        "    Value,\n"
        "    # internal helpers stay hidden\n"
        "    parse,  # main entry point\n"
        ")\n"
        "from .writer import (\n"
        "    write,\n"
        "    dumps)\n"
    )
    assert parse_init_file(content) == [
        InitImport(module="value", items=["Value", "parse"]),
        InitImport(module="writer", items=["write", "dumps"]),
    ]


def test_section_comments() -> None:
    """Verify that short comments name the sections of following imports."""
    content = (
        "#!/usr/bin/env mojo\n"
        "# Core API\n"
        "from .value import Value\n"
        "\n"
        "from .parser import parse\n"
        "# Note: this comment has a colon and is ignored\n"
        "from .writer import write\n"
        "comptime VERSION = 1\n"
        "from .simd import scan\n"
    )
    assert parse_init_file(content) == [
        InitImport(module="value", items=["Value"], comment="Core API"),
        InitImport(module="parser", items=["parse"], comment="Core API"),
        InitImport(module="writer", items=["write"], comment="Core API"),
        InitImport(module="simd", items=["scan"]),
    ]


def test_absolute_imports_are_ignored() -> None:
    """Verify that only relative imports count as re-exports."""
    assert parse_init_file("from collections import List\nimport os\n") == []


def test_triple_quoted_docstring_after_license() -> None:
    """Verify that the docstring after a license header is found and dedented."""
    content = (
        "# ===----------------------------------------------------------------===\n"
        "# Licensed under the Apache License v2.0.\n"
        "# ===----------------------------------------------------------------===\n"
        '"""JSON for Mojo.\n'
        "\n"
        "    Fast parsing.\n"
        '    """\n'
        "from .value import Value\n"
    )
    assert extract_init_docstring(content) == "JSON for Mojo.\n\nFast parsing."


def test_single_line_docstring() -> None:
    """Verify a docstring opened and closed on one line."""
    assert extract_init_docstring('"""Short."""\nfrom .a import b') == "Short."


def test_comment_docstring_fallback() -> None:
    """Verify the leading comment block when there is no docstring."""
    content = (
        "# mojson: JSON for Mojo.\n"
        "# Parses and writes JSON.\n"
        "# Usage:\n"
        "#   var v = parse(text)\n"
        "from .value import Value\n"
    )
    assert extract_init_docstring(content) == (
        "mojson: JSON for Mojo.\nParses and writes JSON."
    )
    assert extract_init_docstring("from .value import Value\n") == ""
