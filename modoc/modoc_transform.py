"""Convert `mojo doc` JSON output into a cross-referenced site description.

Reads the declaration tree, builds the type registry, highlights every
signature and type with per-component links, renders docstrings, and writes
the result as JSON for the page renderer.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

from modoc.declarations import PackageDecl
from modoc.load_config import load_config, options_from_config
from modoc.parse_doc_json import ParseError, count_items, load_doc_json
from modoc.transform import transform


def run_transform(args: argparse.Namespace) -> int:
    """Execute the transformation and write the output file."""
    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    options = options_from_config(config)
    if args.base_url:
        options = replace(options, base_url=args.base_url)
    if args.init_file:
        if not args.init_file.is_file():
            msg = f"No such file: {args.init_file}"
            raise SystemExit(msg)
        content = args.init_file.read_text(encoding="utf-8")
        options = replace(options, init_file_content=content)

    if not args.doc_json.is_file():
        msg = f"No such file: {args.doc_json}"
        raise SystemExit(msg)

    try:
        doc = load_doc_json(args.doc_json)
    except ParseError as e:
        where = f" (at {e.path})" if e.path else ""
        print(f"Error: {e}{where}", file=sys.stderr)
        return 1

    if isinstance(doc.decl, PackageDecl):
        print(f"Loaded {doc.decl.name}: {count_items(doc.decl)} documented items")

    site = transform(doc, options)

    out_file: Path = args.out_file
    out_file.parent.mkdir(parents=True, exist_ok=True)
    payload = site.type_registry if args.dump_registry else asdict(site)
    out_file.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False),
        encoding="utf-8",
    )
    print(
        f"Wrote {len(site.all_modules)} modules and "
        f"{len(site.type_registry)} type links to: {out_file}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Cross-reference and highlight `mojo doc` JSON output.",
    )
    ap.add_argument("doc_json", type=Path, help="JSON file produced by `mojo doc`")
    ap.add_argument("out_file", type=Path, help="Output JSON file")
    ap.add_argument("--config", help="Path to YAML configuration file")
    ap.add_argument(
        "--base-url",
        help="Site base URL for same-package links (default: from config, or /)",
    )
    ap.add_argument(
        "--init-file",
        type=Path,
        help="Package __init__.mojo whose re-exports form the public API",
    )
    ap.add_argument(
        "--dump-registry",
        action="store_true",
        help="Write only the type name -> URL registry",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_transform(args)


if __name__ == "__main__":
    raise SystemExit(main())
