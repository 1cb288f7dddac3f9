"""Data models for the renderable documentation site."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SiteConfig:
    """Site-wide settings passed to page rendering."""

    name: str
    version: str
    description: str
    base_url: str
    repository: str | None = None
    edit_link: bool = False


@dataclass
class ProcessedTypeParam:
    """A compile-time parameter with rendered description."""

    name: str
    type: str
    description: str
    description_html: str
    constraints: list[str] = field(default_factory=list)


@dataclass
class ProcessedArg:
    """A runtime argument with its highlighted type."""

    name: str
    type: str
    type_html: str
    type_path: str | None
    description: str
    description_html: str
    convention: str
    default: str | None


@dataclass
class ProcessedReturn:
    """A return type with its highlighted type."""

    type: str
    type_html: str
    type_path: str | None
    description: str
    description_html: str


@dataclass
class ProcessedRaises:
    """Documentation of what an overload may raise."""

    description: str
    description_html: str


@dataclass
class ProcessedOverload:
    """One function overload ready for rendering."""

    signature: str
    signature_html: str
    summary: str
    description: str
    description_html: str
    args: list[ProcessedArg]
    type_params: list[ProcessedTypeParam]
    returns: ProcessedReturn | None
    raises: ProcessedRaises | None
    is_static: bool
    is_async: bool
    deprecated: str | None


@dataclass
class FunctionItem:
    """A function or method with its overloads."""

    name: str
    anchor: str
    overloads: list[ProcessedOverload]
    kind: str = "function"


@dataclass
class ProcessedField:
    """A struct field with its highlighted type."""

    name: str
    type: str
    type_html: str
    type_path: str | None
    summary: str
    description: str
    description_html: str


@dataclass
class StructItem:
    """A struct ready for rendering."""

    name: str
    anchor: str
    signature: str
    signature_html: str
    summary: str
    description: str
    description_html: str
    type_params: list[ProcessedTypeParam]
    fields: list[ProcessedField]
    methods: list[FunctionItem]
    deprecated: str | None
    kind: str = "struct"


@dataclass
class TraitItem:
    """A trait ready for rendering."""

    name: str
    anchor: str
    signature: str
    signature_html: str
    summary: str
    description: str
    description_html: str
    type_params: list[ProcessedTypeParam]
    methods: list[FunctionItem]
    parent_traits: list[str]
    deprecated: str | None
    kind: str = "trait"


@dataclass
class AliasItem:
    """An alias ready for rendering."""

    name: str
    anchor: str
    signature: str
    signature_html: str
    summary: str
    description: str
    description_html: str
    value: str
    type_params: list[ProcessedTypeParam]
    deprecated: str | None
    kind: str = "alias"


@dataclass
class Module:
    """A module page."""

    name: str
    path: str
    full_path: str
    url_path: str  # mojson/cpu/simd_backend
    summary: str
    description: str
    description_html: str
    functions: list[FunctionItem]
    structs: list[StructItem]
    traits: list[TraitItem]
    aliases: list[AliasItem]
    parent_package: str


@dataclass
class PublicApiItem:
    """A re-exported item and where it is documented."""

    kind: str
    name: str
    source_module: str
    url_path: str
    anchor: str
    summary: str


@dataclass
class PublicApiSection:
    """A titled group of re-exported items, e.g. "Core API"."""

    title: str
    items: list[PublicApiItem]


@dataclass
class Package:
    """A package and everything below it."""

    name: str
    path: str
    summary: str
    description: str
    description_html: str
    modules: list[Module]
    subpackages: list[Package]
    public_api: list[PublicApiSection] = field(default_factory=list)


@dataclass
class DocSite:
    """Everything page rendering needs for one run."""

    config: SiteConfig
    root_package: Package
    all_modules: list[Module]
    type_registry: dict[str, str]
