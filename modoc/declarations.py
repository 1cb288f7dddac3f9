"""Data models for the declaration tree emitted by `mojo doc`."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TraitConstraint:
    """A trait reference: a constraint on a type parameter or a parent trait."""

    type: str
    path: str = ""  # origin hint, e.g. /std/builtin/value/Copyable


@dataclass(frozen=True)
class TypeParameterDecl:
    """Represents a compile-time parameter of a function, struct, trait or alias."""

    name: str
    type: str = ""
    description: str = ""
    passing_kind: str = ""
    traits: list[TraitConstraint] = field(default_factory=list)
    path: str = ""


@dataclass(frozen=True)
class ArgumentDecl:
    """Represents a runtime argument of a function overload."""

    name: str
    type: str
    description: str = ""
    convention: str = "read"  # read/mut/owned/ref/out/inout
    passing_kind: str = "pos_or_kw"
    path: str = ""
    default: str | None = None


@dataclass(frozen=True)
class ReturnDecl:
    """Represents the return type of a function overload."""

    type: str
    doc: str = ""
    path: str = ""


@dataclass(frozen=True)
class FunctionOverload:
    """One overload of a function or method."""

    name: str
    signature: str
    summary: str = ""
    description: str = ""
    args: list[ArgumentDecl] = field(default_factory=list)
    parameters: list[TypeParameterDecl] = field(default_factory=list)
    returns: ReturnDecl | None = None
    raises: bool = False
    raises_doc: str = ""
    is_async: bool = False
    is_static: bool = False
    deprecated: str = ""
    constraints: str = ""


@dataclass(frozen=True)
class FunctionDecl:
    """A function (or method) with one or more overloads."""

    name: str
    overloads: list[FunctionOverload] = field(default_factory=list)


@dataclass(frozen=True)
class FieldDecl:
    """A struct field."""

    name: str
    type: str
    summary: str = ""
    description: str = ""
    path: str = ""


@dataclass(frozen=True)
class StructDecl:
    """A struct declaration with fields and methods."""

    name: str
    signature: str = ""
    summary: str = ""
    description: str = ""
    parameters: list[TypeParameterDecl] = field(default_factory=list)
    fields: list[FieldDecl] = field(default_factory=list)
    functions: list[FunctionDecl] = field(default_factory=list)
    parent_traits: list[TraitConstraint] = field(default_factory=list)
    deprecated: str = ""
    path: str = ""


@dataclass(frozen=True)
class TraitDecl:
    """A trait declaration with required methods."""

    name: str
    signature: str = ""
    summary: str = ""
    description: str = ""
    parameters: list[TypeParameterDecl] = field(default_factory=list)
    functions: list[FunctionDecl] = field(default_factory=list)
    parent_traits: list[TraitConstraint] = field(default_factory=list)
    deprecated: str = ""
    path: str = ""


@dataclass(frozen=True)
class AliasDecl:
    """A compile-time alias (`comptime` / `alias`) declaration."""

    name: str
    signature: str = ""
    summary: str = ""
    description: str = ""
    value: str = ""
    parameters: list[TypeParameterDecl] = field(default_factory=list)
    path: str = ""
    deprecated: str = ""


@dataclass(frozen=True)
class ModuleDecl:
    """A module and the items it declares."""

    name: str
    summary: str = ""
    description: str = ""
    functions: list[FunctionDecl] = field(default_factory=list)
    structs: list[StructDecl] = field(default_factory=list)
    traits: list[TraitDecl] = field(default_factory=list)
    aliases: list[AliasDecl] = field(default_factory=list)
    kind: str = "module"


@dataclass(frozen=True)
class PackageDecl:
    """A package containing modules and nested packages."""

    name: str
    summary: str = ""
    description: str = ""
    modules: list[ModuleDecl] = field(default_factory=list)
    packages: list[PackageDecl] = field(default_factory=list)
    kind: str = "package"


@dataclass(frozen=True)
class DocOutput:
    """Top-level `mojo doc` output."""

    version: str
    decl: PackageDecl | ModuleDecl
