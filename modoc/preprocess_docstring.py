"""Logic for normalizing Mojo docstrings before Markdown rendering.

Docstrings written for `mojo doc` use a few ad hoc conventions that a generic
Markdown renderer gets wrong:

1. ``Example:`` sections hold bare code; they become fenced code blocks.
2. A one-line ``Example: foo(x=1)`` is fenced too, when it looks like code.
3. Parameter syntax such as ``SIMD[dtype=DType.int8](x)`` reads like a
   Markdown link; it is wrapped in an inline code span.
4. ``Note:`` and ``Warning:`` line starts become block-quote callouts.

Rules 3 and 4 never touch lines inside a fenced code block. Every rule leaves
its own output alone, so the whole pass is idempotent.
"""

import re
import textwrap

from modoc.md_codeblock import md_codeblock

FENCE = "```"

EXAMPLE_HEADER_RE = re.compile(r"^(Examples?:)\s*$", re.IGNORECASE)
INLINE_EXAMPLE_RE = re.compile(r"^(Examples?:)[ \t]+(\S.*)$", re.IGNORECASE)
SECTION_HEADER_RE = re.compile(
    r"^(?:Args?|Returns?|Raises?|Note|Warning|See Also|Parameters?):",
    re.IGNORECASE,
)
INLINE_STOP_RE = re.compile(r"^(?:Args?|Returns?|Raises?|Note|Warning)[:\s]", re.IGNORECASE)

# A backtick run closed by a run of the same length; a lone backtick is literal
INLINE_CODE_RE = re.compile(r"(?<!`)(`+)(?!`)(.+?)(?<!`)\1(?!`)")
GENERIC_SYNTAX_RE = re.compile(
    r"(?<![`\w])(\w+)\[([^\]]*[=:][^\]]*)\]\(([^)]+)\)(?!`)"  # name[p=v](args)
    r"|(?<![`\w])(\w+)\[([^\]]*[=:\"][^\]]*)\](?![(`])"  # name[p=v] not followed by (
)
CALLOUT_RE = re.compile(r"^(Note|Warning):[ \t]*(.*)$", re.IGNORECASE)
CALLOUT_PREFIXES = {
    "note": "> **Note:** ",
    "warning": "> ⚠️ **Warning:** ",
}


def is_fence(line: str) -> bool:
    """Check if a line opens or closes a fenced code block."""
    return line.strip().startswith(FENCE)


def preprocess_docstring(markdown: str, code_lang: str = "mojo") -> str:
    """Rewrite Mojo docstring conventions into plain Markdown."""
    if not markdown:
        return ""
    lines = markdown.split("\n")
    lines = _rewrite_examples(lines, code_lang)
    lines = _rewrite_prose(lines)
    return "\n".join(lines)


def _rewrite_examples(lines: list[str], code_lang: str) -> list[str]:
    """Turn Example sections (header-only and inline) into fenced blocks."""
    out: list[str] = []
    in_fence = False
    i = 0
    while i < len(lines):
        line = lines[i]
        if is_fence(line):
            in_fence = not in_fence
        if in_fence:
            out.append(line)
            i += 1
            continue

        header = EXAMPLE_HEADER_RE.match(line)
        if header:
            end = _section_end(lines, i + 1)
            code = textwrap.dedent("\n".join(lines[i + 1 : end])).strip()
            if code:
                out.extend(_example_block(header.group(1), code, code_lang))
                if end < len(lines):
                    out.append("")
                i = end
                continue

        inline = INLINE_EXAMPLE_RE.match(line)
        if inline:
            end = _inline_end(lines, i + 1)
            code = "\n".join([inline.group(2), *lines[i + 1 : end]]).strip()
            if _looks_like_code(code):
                out.extend(_example_block(inline.group(1), code, code_lang))
                i = end
                continue

        out.append(line)
        i += 1
    return out


def _section_end(lines: list[str], start: int) -> int:
    """Index of the next section header after an Example header, fences skipped."""
    in_fence = False
    for j in range(start, len(lines)):
        if is_fence(lines[j]):
            in_fence = not in_fence
        elif not in_fence and SECTION_HEADER_RE.match(lines[j]):
            return j
    return len(lines)


def _inline_end(lines: list[str], start: int) -> int:
    """Index after the continuation lines of an inline example."""
    j = start
    while j < len(lines):
        line = lines[j]
        if not line.strip() or INLINE_STOP_RE.match(line) or is_fence(line):
            break
        j += 1
    return j


def _looks_like_code(code: str) -> bool:
    if code.startswith(("**", FENCE)):
        return False
    return "=" in code or "(" in code


def _example_block(header: str, code: str, code_lang: str) -> list[str]:
    # A body that carries its own fences is kept as written
    if any(is_fence(line) for line in code.split("\n")):
        body = code
    else:
        body = md_codeblock(code_lang, code)
    return [f"**{header}**", "", *body.split("\n")]


def _rewrite_prose(lines: list[str]) -> list[str]:
    """Escape generic parameter syntax and build callouts outside fences."""
    out: list[str] = []
    in_fence = False
    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if is_fence(line):
            in_fence = not in_fence
            out.append(line)
            continue
        if in_fence:
            out.append(line)
            continue

        line = escape_generic_syntax(line)
        callout = CALLOUT_RE.match(line)
        if callout:
            text = callout.group(2)
            # "Note:" alone on its line takes the next line as its text
            if not text and i < len(lines) and lines[i].strip() and not is_fence(lines[i]):
                text = escape_generic_syntax(lines[i].strip())
                i += 1
            if out and out[-1].strip():
                out.append("")
            line = CALLOUT_PREFIXES[callout.group(1).lower()] + text
        out.append(line)
    return out


def escape_generic_syntax(line: str) -> str:
    """Wrap `name[param=value](args)` style syntax in inline code spans."""
    code_spans = [m.span() for m in INLINE_CODE_RE.finditer(line)]

    def repl(m: re.Match) -> str:
        # Already inside an inline code span
        if any(start < m.end() and m.start() < end for start, end in code_spans):
            return m.group(0)
        return f"`{m.group(0)}`"

    return GENERIC_SYNTAX_RE.sub(repl, line)
