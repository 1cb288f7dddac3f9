"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from modoc.deep_merge import deep_merge
from modoc.infer_stdlib_url import STDLIB_BASE
from modoc.render_markdown import SUMMARY_MAX_LENGTH
from modoc.transform import TransformOptions

DEFAULT_CONFIG: dict[str, Any] = {
    "package": {
        "name": "",
        "version": "",
    },
    "site": {
        "title": "",
        "description": "",
        "base_url": "/",
        "repository": None,
        "edit_link": False,
    },
    "links": {
        "stdlib_root": STDLIB_BASE,
    },
    "docs": {
        "code_language": "mojo",
        "summary_max_length": SUMMARY_MAX_LENGTH,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file {p} must contain a mapping"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            msg = f"Config section '{section}' must be a mapping"
            raise ValueError(msg)
    return config


def options_from_config(config: dict[str, Any]) -> TransformOptions:
    """Build transformation options from a merged configuration."""
    site = config["site"]
    return TransformOptions(
        name=site.get("title") or config["package"].get("name") or None,
        version=config["package"].get("version") or None,
        description=site.get("description") or None,
        base_url=site.get("base_url") or "/",
        repository=site.get("repository"),
        edit_link=bool(site.get("edit_link")),
        stdlib_root=config["links"].get("stdlib_root") or STDLIB_BASE,
        code_language=config["docs"].get("code_language") or "mojo",
        summary_max_length=int(
            config["docs"].get("summary_max_length") or SUMMARY_MAX_LENGTH
        ),
    )
