"""Logic for loading and validating `mojo doc` JSON output."""

import json
from pathlib import Path
from typing import Any

from modoc.declarations import (
    AliasDecl,
    ArgumentDecl,
    DocOutput,
    FieldDecl,
    FunctionDecl,
    FunctionOverload,
    ModuleDecl,
    PackageDecl,
    ReturnDecl,
    StructDecl,
    TraitConstraint,
    TraitDecl,
    TypeParameterDecl,
)


class ParseError(ValueError):
    """Raised when the extractor output does not have the expected shape."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize with a message and the JSON path of the offending value."""
        super().__init__(message)
        self.path = path


def load_doc_json(path: Path) -> DocOutput:
    """Load and parse a `mojo doc` JSON file."""
    return parse_doc_json(path.read_text(encoding="utf-8"))


def parse_doc_json(json_string: str) -> DocOutput:
    """Parse the raw JSON string produced by `mojo doc`."""
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e.msg}"
        raise ParseError(msg) from e

    if not isinstance(data, dict):
        msg = "Expected object at root"
        raise ParseError(msg)
    if not isinstance(data.get("version"), str):
        msg = 'Missing or invalid "version" field'
        raise ParseError(msg, "version")

    decl = data.get("decl")
    if not isinstance(decl, dict):
        msg = 'Missing or invalid "decl" field'
        raise ParseError(msg, "decl")

    kind = decl.get("kind")
    if kind == "package":
        root: PackageDecl | ModuleDecl = _package(decl, "decl")
    elif kind == "module":
        root = _module(decl, "decl")
    else:
        msg = f"Invalid decl kind: {kind}"
        raise ParseError(msg, "decl.kind")

    return DocOutput(version=data["version"], decl=root)


def flatten_modules(pkg: PackageDecl) -> list[ModuleDecl]:
    """Flatten a package tree into a list of all modules."""
    modules = list(pkg.modules)
    for sub in pkg.packages:
        modules.extend(flatten_modules(sub))
    return modules


def count_items(pkg: PackageDecl) -> int:
    """Count documented items (including methods and fields) in a package."""
    count = 0
    for mod in pkg.modules:
        count += len(mod.functions) + len(mod.structs)
        count += len(mod.traits) + len(mod.aliases)
        for struct in mod.structs:
            count += len(struct.functions) + len(struct.fields)
        for trait in mod.traits:
            count += len(trait.functions)
    for sub in pkg.packages:
        count += count_items(sub)
    return count


# -----------------------------
# Field helpers
# -----------------------------


def _obj(value: object, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        msg = f"Expected object at {path}"
        raise ParseError(msg, path)
    return value


def _str(data: dict[str, Any], key: str, path: str, *, required: bool = False) -> str:
    value = data.get(key)
    if value is None and not required:
        return ""
    if not isinstance(value, str):
        msg = f"Expected string at {path}.{key}, got {type(value).__name__}"
        raise ParseError(msg, f"{path}.{key}")
    return value


def _list(data: dict[str, Any], key: str, path: str, *, required: bool = False) -> list:
    value = data.get(key)
    if value is None and not required:
        return []
    if not isinstance(value, list):
        msg = f"Expected array at {path}.{key}, got {type(value).__name__}"
        raise ParseError(msg, f"{path}.{key}")
    return value


def _each(data: dict[str, Any], key: str, path: str) -> list[tuple[dict, str]]:
    """Return (object, json_path) pairs for an optional array of objects."""
    out = []
    for i, value in enumerate(_list(data, key, path)):
        item_path = f"{path}.{key}[{i}]"
        out.append((_obj(value, item_path), item_path))
    return out


# -----------------------------
# Declarations
# -----------------------------


def _package(data: dict[str, Any], path: str) -> PackageDecl:
    _list(data, "modules", path, required=True)
    return PackageDecl(
        name=_str(data, "name", path, required=True),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        modules=[_module(m, p) for m, p in _each(data, "modules", path)],
        packages=[_package(s, p) for s, p in _each(data, "packages", path)],
    )


def _module(data: dict[str, Any], path: str) -> ModuleDecl:
    data = _obj(data, path)
    return ModuleDecl(
        name=_str(data, "name", path, required=True),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        functions=[_function(f, p) for f, p in _each(data, "functions", path)],
        structs=[_struct(s, p) for s, p in _each(data, "structs", path)],
        traits=[_trait(t, p) for t, p in _each(data, "traits", path)],
        aliases=[_alias(a, p) for a, p in _each(data, "aliases", path)],
    )


def _function(data: dict[str, Any], path: str) -> FunctionDecl:
    return FunctionDecl(
        name=_str(data, "name", path, required=True),
        overloads=[_overload(o, p) for o, p in _each(data, "overloads", path)],
    )


def _overload(data: dict[str, Any], path: str) -> FunctionOverload:
    returns = data.get("returns")
    return FunctionOverload(
        name=_str(data, "name", path),
        signature=_str(data, "signature", path),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        args=[_argument(a, p) for a, p in _each(data, "args", path)],
        parameters=[_type_param(t, p) for t, p in _each(data, "parameters", path)],
        returns=_return(returns, f"{path}.returns") if returns else None,
        raises=bool(data.get("raises")),
        raises_doc=_str(data, "raisesDoc", path),
        is_async=bool(data.get("async")),
        is_static=bool(data.get("isStatic")),
        deprecated=_str(data, "deprecated", path),
        constraints=_str(data, "constraints", path),
    )


def _argument(data: dict[str, Any], path: str) -> ArgumentDecl:
    default = data.get("default")
    return ArgumentDecl(
        name=_str(data, "name", path),
        type=_str(data, "type", path),
        description=_str(data, "description", path),
        convention=_str(data, "convention", path) or "read",
        passing_kind=_str(data, "passingKind", path) or "pos_or_kw",
        path=_str(data, "path", path),
        default=str(default) if default is not None else None,
    )


def _type_param(data: dict[str, Any], path: str) -> TypeParameterDecl:
    return TypeParameterDecl(
        name=_str(data, "name", path),
        type=_str(data, "type", path),
        description=_str(data, "description", path),
        passing_kind=_str(data, "passingKind", path),
        traits=_constraints(data, "traits", path),
        path=_str(data, "path", path),
    )


def _constraints(data: dict[str, Any], key: str, path: str) -> list[TraitConstraint]:
    """Read trait references, accepting bare strings or {type, path} objects."""
    out = []
    for i, value in enumerate(_list(data, key, path)):
        if isinstance(value, str):
            out.append(TraitConstraint(type=value))
            continue
        item_path = f"{path}.{key}[{i}]"
        obj = _obj(value, item_path)
        out.append(
            TraitConstraint(
                type=_str(obj, "type", item_path),
                path=_str(obj, "path", item_path),
            )
        )
    return out


def _return(data: object, path: str) -> ReturnDecl:
    obj = _obj(data, path)
    return ReturnDecl(
        type=_str(obj, "type", path),
        doc=_str(obj, "doc", path),
        path=_str(obj, "path", path),
    )


def _field(data: dict[str, Any], path: str) -> FieldDecl:
    return FieldDecl(
        name=_str(data, "name", path),
        type=_str(data, "type", path),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        path=_str(data, "path", path),
    )


def _struct(data: dict[str, Any], path: str) -> StructDecl:
    return StructDecl(
        name=_str(data, "name", path, required=True),
        signature=_str(data, "signature", path),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        parameters=[_type_param(t, p) for t, p in _each(data, "parameters", path)],
        fields=[_field(f, p) for f, p in _each(data, "fields", path)],
        functions=[_function(f, p) for f, p in _each(data, "functions", path)],
        parent_traits=_constraints(data, "parentTraits", path),
        deprecated=_str(data, "deprecated", path),
        path=_str(data, "path", path),
    )


def _trait(data: dict[str, Any], path: str) -> TraitDecl:
    return TraitDecl(
        name=_str(data, "name", path, required=True),
        signature=_str(data, "signature", path),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        parameters=[_type_param(t, p) for t, p in _each(data, "parameters", path)],
        functions=[_function(f, p) for f, p in _each(data, "functions", path)],
        parent_traits=_constraints(data, "parentTraits", path),
        deprecated=_str(data, "deprecated", path),
        path=_str(data, "path", path),
    )


def _alias(data: dict[str, Any], path: str) -> AliasDecl:
    return AliasDecl(
        name=_str(data, "name", path, required=True),
        signature=_str(data, "signature", path),
        summary=_str(data, "summary", path),
        description=_str(data, "description", path),
        value=_str(data, "value", path),
        parameters=[_type_param(t, p) for t, p in _each(data, "parameters", path)],
        path=_str(data, "path", path),
        deprecated=_str(data, "deprecated", path),
    )
