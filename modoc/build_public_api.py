"""Logic for grouping a package's re-exported items into public API sections."""

import logging

from modoc.parse_init_file import InitImport
from modoc.site_models import Module, PublicApiItem, PublicApiSection

logger = logging.getLogger(__name__)

DEFAULT_SECTION_TITLE = "Public API"


def build_public_api(
    imports: list[InitImport], modules: list[Module]
) -> list[PublicApiSection]:
    """Resolve re-exported names against the package's own modules.

    Sections keep the order in which their titles first appear; names that
    no module declares are skipped.
    """
    by_name = {m.name: m for m in modules}
    sections: dict[str, list[PublicApiItem]] = {}

    for imp in imports:
        mod = by_name.get(imp.module)
        if mod is None:
            logger.debug("Skipping re-export from unknown module %s", imp.module)
            continue
        items = sections.setdefault(imp.comment or DEFAULT_SECTION_TITLE, [])
        for name in imp.items:
            item = _find_item(mod, name)
            if item is None:
                logger.debug("No item %s in module %s", name, mod.name)
            else:
                items.append(item)

    return [
        PublicApiSection(title=title, items=items)
        for title, items in sections.items()
        if items
    ]


def _find_item(mod: Module, name: str) -> PublicApiItem | None:
    """Look the name up among functions, structs, traits and aliases, in that order."""
    for fn in mod.functions:
        if fn.name == name:
            summary = fn.overloads[0].summary if fn.overloads else ""
            return _item("function", fn.name, fn.anchor, summary, mod)
    for group in (mod.structs, mod.traits, mod.aliases):
        for decl in group:
            if decl.name == name:
                return _item(decl.kind, decl.name, decl.anchor, decl.summary, mod)
    return None


def _item(
    kind: str, name: str, anchor: str, summary: str, mod: Module
) -> PublicApiItem:
    return PublicApiItem(
        kind=kind,
        name=name,
        source_module=mod.name,
        url_path=mod.url_path,
        anchor=anchor,
        summary=summary or "",
    )
