"""Logic for mapping every discoverable type name to a documentation URL."""

import logging
import re
from collections.abc import Iterator

from modoc.declarations import (
    FunctionDecl,
    ModuleDecl,
    PackageDecl,
    TraitConstraint,
    TypeParameterDecl,
)
from modoc.infer_stdlib_url import STDLIB_BASE
from modoc.resolve_type_path import local_type_url, resolve_type_path

logger = logging.getLogger(__name__)

# Leading capitalized identifier of a type expression: List in List[Item].
LEADING_TYPE_RE = re.compile(r"^([A-Z][A-Za-z0-9_]*)")

TypeRegistry = dict[str, str]


def leading_type_name(type_expr: str) -> str | None:
    """Return the simple type name a type expression is registered under."""
    m = LEADING_TYPE_RE.match(type_expr.strip())
    return m.group(1) if m else None


def build_type_registry(
    decl: PackageDecl | ModuleDecl,
    package_name: str,
    base_url: str,
    stdlib_root: str = STDLIB_BASE,
) -> TypeRegistry:
    """Build the registry shared by every highlighting call of one run.

    Declaration sites (structs, traits, capitalized aliases) are registered in
    a first pass over the whole tree, incidental uses with an origin hint
    (fields, arguments, returns, parameters, parent traits) in a second one.
    The first URL registered for a name is kept.
    """
    registry: TypeRegistry = {}
    modules = list(_iter_modules(decl))
    for module_path, mod in modules:
        _add_declaration_targets(
            registry, mod, module_path, package_name, base_url, stdlib_root
        )
    for _module_path, mod in modules:
        _add_usage_targets(registry, mod, package_name, base_url, stdlib_root)

    logger.info("Type registry built with %d entries", len(registry))
    return registry


def _iter_modules(
    decl: PackageDecl | ModuleDecl, prefix: str = ""
) -> Iterator[tuple[str, ModuleDecl]]:
    """Yield (module_path, module) pairs; the root package is not part of the path."""
    if isinstance(decl, ModuleDecl):
        yield prefix, decl
        return
    for mod in decl.modules:
        yield (f"{prefix}/{mod.name}" if prefix else mod.name), mod
    for sub in decl.packages:
        yield from _iter_modules(sub, f"{prefix}/{sub.name}" if prefix else sub.name)


def _register(registry: TypeRegistry, name: str | None, url: str | None) -> None:
    """Record a URL for a name unless one is already known."""
    if not name or not url:
        return
    existing = registry.get(name)
    if existing is None:
        registry[name] = url
    elif existing != url:
        logger.debug("Keeping %s -> %s, ignoring %s", name, existing, url)


def _add_declaration_targets(
    registry: TypeRegistry,
    mod: ModuleDecl,
    module_path: str,
    package_name: str,
    base_url: str,
    stdlib_root: str,
) -> None:
    """Register structs, traits and type-like aliases at their declaration site."""
    declared = [(s.name, s.path) for s in mod.structs]
    declared += [(t.name, t.path) for t in mod.traits]
    # Lowercase aliases are values, not types
    declared += [(a.name, a.path) for a in mod.aliases if leading_type_name(a.name)]

    for name, path in declared:
        url = resolve_type_path(path, base_url, package_name, stdlib_root)
        if url is None:
            if path:
                logger.debug("Unrecognized path %r for %s", path, name)
            url = local_type_url(base_url, package_name, module_path, name)
        _register(registry, name, url)


def _add_usage_targets(
    registry: TypeRegistry,
    mod: ModuleDecl,
    package_name: str,
    base_url: str,
    stdlib_root: str,
) -> None:
    """Register every type occurrence that carries an explicit origin hint."""

    def add(type_expr: str, path: str) -> None:
        if not path:
            return
        url = resolve_type_path(path, base_url, package_name, stdlib_root)
        if url is None:
            logger.debug("Unrecognized path %r for %r", path, type_expr)
            return
        _register(registry, leading_type_name(type_expr), url)

    def add_traits(traits: list[TraitConstraint]) -> None:
        for t in traits:
            add(t.type, t.path)

    def add_params(params: list[TypeParameterDecl]) -> None:
        for p in params:
            add(p.type, p.path)
            add_traits(p.traits)

    def add_functions(functions: list[FunctionDecl]) -> None:
        for fn in functions:
            for overload in fn.overloads:
                add_params(overload.parameters)
                for arg in overload.args:
                    add(arg.type, arg.path)
                if overload.returns:
                    add(overload.returns.type, overload.returns.path)

    for struct in mod.structs:
        add_traits(struct.parent_traits)
        add_params(struct.parameters)
        for f in struct.fields:
            add(f.type, f.path)
        add_functions(struct.functions)

    for trait in mod.traits:
        add_traits(trait.parent_traits)
        add_params(trait.parameters)
        add_functions(trait.functions)

    for alias in mod.aliases:
        add_params(alias.parameters)

    add_functions(mod.functions)
