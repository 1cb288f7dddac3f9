"""Utility for generating fenced Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Wrap code in a fence tagged with a language."""
    return f"```{lang}\n{code.rstrip()}\n```"
