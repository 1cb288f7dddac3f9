"""Logic for reading the public API and package docstring of an `__init__.mojo`."""

import re
import textwrap
from dataclasses import dataclass, field

SINGLE_IMPORT_RE = re.compile(r"^from\s+\.(\w+)\s+import\s+(.+)$")
MULTI_IMPORT_RE = re.compile(r"^from\s+\.(\w+)\s+import\s+\(\s*$")
IMPORT_ITEM_RE = re.compile(r"^\(?\s*(\w+)")
SECTION_COMMENT_MAX_LENGTH = 50
COMMENT_DOCSTRING_MAX_LINES = 3
COMMENT_DOCSTRING_STOP_RE = re.compile(r"^(?:Usage:|Example:|See also:)", re.IGNORECASE)
COMMENT_CODE_RE = re.compile(r"^\s*(?:var |from |with |import )")
TRIPLE_QUOTE = '"""'


@dataclass(frozen=True)
class InitImport:
    """A `from .module import a, b` re-export, with the section comment above it."""

    module: str
    items: list[str] = field(default_factory=list)
    comment: str = ""


def parse_init_file(content: str) -> list[InitImport]:
    """Extract relative re-exports from `__init__.mojo` content.

    A short comment line such as ``# Core API`` names the section of the
    imports that follow it, until the next line that is neither a comment,
    an import, nor blank.
    """
    imports: list[InitImport] = []
    lines = content.split("\n")
    comment = ""
    i = 0
    while i < len(lines):
        stripped = lines[i].strip()
        i += 1

        if stripped.startswith("#") and not stripped.startswith("#!"):
            text = stripped[1:].strip()
            if text and ":" not in text and len(text) < SECTION_COMMENT_MAX_LENGTH:
                comment = text
            continue

        multi = MULTI_IMPORT_RE.match(stripped)
        if multi:
            items = []
            while i < len(lines):
                cont = lines[i].strip()
                i += 1
                m = IMPORT_ITEM_RE.match(cont)
                if m:
                    items.append(m.group(1))
                if ")" in cont:
                    break
            if items:
                imports.append(InitImport(multi.group(1), items, comment))
            continue

        single = SINGLE_IMPORT_RE.match(stripped)
        if single:
            items = [_import_name(part) for part in single.group(2).split(",")]
            items = [name for name in items if name]
            if items:
                imports.append(InitImport(single.group(1), items, comment))
            continue

        if stripped and not stripped.startswith("from"):
            comment = ""
    return imports


def _import_name(part: str) -> str:
    """Return the imported name of `name` or `name as alias`."""
    m = IMPORT_ITEM_RE.match(part.strip())
    return m.group(1) if m else ""


def extract_init_docstring(content: str) -> str:
    """Return the package docstring of `__init__.mojo` content.

    A triple-quoted docstring after any leading comment block (a license
    header, usually) is preferred. Otherwise the first lines of the leading
    comment block are used.
    """
    lines = content.split("\n")
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith(TRIPLE_QUOTE):
            return _triple_quoted(lines, i)
        break
    return _comment_block(lines)


def _triple_quoted(lines: list[str], start: int) -> str:
    first = lines[start].strip()[len(TRIPLE_QUOTE) :]
    if first.endswith(TRIPLE_QUOTE):
        return first[: -len(TRIPLE_QUOTE)].strip()

    rest = []
    for line in lines[start + 1 :]:
        if line.rstrip().endswith(TRIPLE_QUOTE):
            rest.append(line.rstrip()[: -len(TRIPLE_QUOTE)])
            break
        rest.append(line)
    body = textwrap.dedent("\n".join(rest))
    return f"{first.strip()}\n{body}".strip()


def _comment_block(lines: list[str]) -> str:
    out: list[str] = []
    started = False
    for line in lines:
        stripped = line.strip()
        if not stripped.startswith("#") or stripped.startswith("#!"):
            if started:
                break
            continue
        text = stripped[1:].removeprefix(" ")
        # Rulers such as "# ====" carry no text
        if not started and (not text or set(text) == {"="}):
            continue
        started = True
        if COMMENT_DOCSTRING_STOP_RE.match(text) or COMMENT_CODE_RE.match(text):
            break
        out.append(text)
        if sum(1 for t in out if t.strip()) >= COMMENT_DOCSTRING_MAX_LINES:
            break
    return "\n".join(out).strip()
