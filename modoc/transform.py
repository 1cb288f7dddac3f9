"""Orchestration logic for turning a `mojo doc` tree into a renderable site."""

import logging
from dataclasses import dataclass

from modoc.build_public_api import build_public_api
from modoc.build_type_registry import TypeRegistry, build_type_registry
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
    TraitDecl,
    TypeParameterDecl,
)
from modoc.header_slug import header_slug
from modoc.highlight_signature import highlight_signature, highlight_type
from modoc.infer_stdlib_url import STDLIB_BASE
from modoc.parse_init_file import extract_init_docstring, parse_init_file
from modoc.render_markdown import SUMMARY_MAX_LENGTH, extract_summary, render_markdown
from modoc.site_models import (
    AliasItem,
    DocSite,
    FunctionItem,
    Module,
    Package,
    ProcessedArg,
    ProcessedField,
    ProcessedOverload,
    ProcessedRaises,
    ProcessedReturn,
    ProcessedTypeParam,
    SiteConfig,
    StructItem,
    TraitItem,
)

logger = logging.getLogger(__name__)

DEFAULT_RAISES_DOC = "May raise an exception."


@dataclass
class TransformOptions:
    """Settings for one transformation run."""

    name: str | None = None
    version: str | None = None
    description: str | None = None
    base_url: str = "/"
    repository: str | None = None
    edit_link: bool = False
    stdlib_root: str = STDLIB_BASE
    code_language: str = "mojo"
    summary_max_length: int = SUMMARY_MAX_LENGTH
    init_file_content: str | None = None


def transform(doc: DocOutput, options: TransformOptions | None = None) -> DocSite:
    """Transform parsed `mojo doc` output into a DocSite.

    The type registry is built from the whole tree before any module is
    processed, so references resolve regardless of module order.
    """
    options = options or TransformOptions()
    decl = doc.decl
    package_name = decl.name

    registry = build_type_registry(
        decl, package_name, options.base_url, options.stdlib_root
    )
    transformer = SiteTransformer(registry, package_name, options)

    if isinstance(decl, PackageDecl):
        root = transformer.package(decl, "")
    else:
        # Single module: wrap it in a synthetic package
        mod = transformer.module(decl, "", decl.name)
        root = Package(
            name=decl.name,
            path=decl.name,
            summary=decl.summary,
            description=decl.description,
            description_html="",
            modules=[mod],
            subpackages=[],
        )

    if options.init_file_content:
        content = options.init_file_content
        root.public_api = build_public_api(parse_init_file(content), root.modules)
        docstring = extract_init_docstring(content)
        if docstring:
            root.description = docstring
            root.description_html = transformer.html(docstring)

    config = SiteConfig(
        name=options.name or root.name,
        version=options.version or doc.version,
        description=options.description or root.summary,
        base_url=options.base_url,
        repository=options.repository,
        edit_link=options.edit_link,
    )
    all_modules = collect_all_modules(root)
    logger.info("Transformed %d modules of %s", len(all_modules), package_name)
    return DocSite(
        config=config,
        root_package=root,
        all_modules=all_modules,
        type_registry=registry,
    )


def collect_all_modules(pkg: Package) -> list[Module]:
    """Collect all modules from a package tree."""
    modules = list(pkg.modules)
    for sub in pkg.subpackages:
        modules.extend(collect_all_modules(sub))
    return modules


class SiteTransformer:
    """Converts declarations into processed items using a shared type registry."""

    def __init__(
        self, registry: TypeRegistry, package_name: str, options: TransformOptions
    ) -> None:
        """Initialize with the registry built for this run."""
        self.registry = registry
        self.package_name = package_name
        self.options = options

    # -----------------------------
    # Text helpers
    # -----------------------------

    def html(self, text: str) -> str:
        """Render a docstring to HTML."""
        return render_markdown(text, self.options.code_language)

    def _summary(self, summary: str, description: str) -> str:
        return summary or extract_summary(description, self.options.summary_max_length)

    def _signature(self, signature: str) -> str:
        return highlight_signature(signature, self.registry, self.options.stdlib_root)

    def _type(self, type_expr: str, path: str) -> str:
        return highlight_type(
            type_expr,
            path or None,
            self.options.base_url,
            self.package_name,
            self.registry,
            self.options.stdlib_root,
        )

    # -----------------------------
    # Containers
    # -----------------------------

    def package(self, pkg: PackageDecl, parent_path: str) -> Package:
        """Transform a package and everything below it."""
        path = f"{parent_path}.{pkg.name}" if parent_path else pkg.name
        return Package(
            name=pkg.name,
            path=path,
            summary=self._summary(pkg.summary, pkg.description),
            description=pkg.description,
            description_html=self.html(pkg.description),
            modules=[self.module(m, path, f"{path}.{m.name}") for m in pkg.modules],
            subpackages=[self.package(sub, path) for sub in pkg.packages],
        )

    def module(self, mod: ModuleDecl, parent_path: str, full_path: str) -> Module:
        """Transform a module."""
        return Module(
            name=mod.name,
            path=f"{parent_path}.{mod.name}" if parent_path else mod.name,
            full_path=full_path,
            url_path=full_path.replace(".", "/"),
            summary=self._summary(mod.summary, mod.description),
            description=mod.description,
            description_html=self.html(mod.description),
            functions=[self.function(f) for f in mod.functions],
            structs=[self.struct(s) for s in mod.structs],
            traits=[self.trait(t) for t in mod.traits],
            aliases=[self.alias(a) for a in mod.aliases],
            parent_package=parent_path,
        )

    # -----------------------------
    # Items
    # -----------------------------

    def function(self, fn: FunctionDecl) -> FunctionItem:
        """Transform a function or method."""
        return FunctionItem(
            name=fn.name,
            anchor=header_slug(fn.name),
            overloads=[self.overload(o) for o in fn.overloads],
        )

    def overload(self, overload: FunctionOverload) -> ProcessedOverload:
        """Transform one overload, highlighting its signature."""
        raises = None
        if overload.raises:
            raises_doc = overload.raises_doc or DEFAULT_RAISES_DOC
            raises = ProcessedRaises(
                description=raises_doc, description_html=self.html(raises_doc)
            )
        return ProcessedOverload(
            signature=overload.signature,
            signature_html=self._signature(overload.signature),
            summary=overload.summary,
            description=overload.description,
            description_html=self.html(overload.description),
            args=[self.argument(a) for a in overload.args],
            type_params=[self.type_param(p) for p in overload.parameters],
            returns=self.returns(overload.returns) if overload.returns else None,
            raises=raises,
            is_static=overload.is_static,
            is_async=overload.is_async,
            deprecated=overload.deprecated or None,
        )

    def argument(self, arg: ArgumentDecl) -> ProcessedArg:
        """Transform an argument."""
        return ProcessedArg(
            name=arg.name,
            type=arg.type,
            type_html=self._type(arg.type, arg.path),
            type_path=arg.path or None,
            description=arg.description,
            description_html=self.html(arg.description),
            convention=arg.convention,
            default=arg.default,
        )

    def type_param(self, param: TypeParameterDecl) -> ProcessedTypeParam:
        """Transform a compile-time parameter."""
        return ProcessedTypeParam(
            name=param.name,
            type=param.type,
            description=param.description,
            description_html=self.html(param.description),
            constraints=[t.type for t in param.traits],
        )

    def returns(self, ret: ReturnDecl) -> ProcessedReturn:
        """Transform a return value."""
        return ProcessedReturn(
            type=ret.type,
            type_html=self._type(ret.type, ret.path),
            type_path=ret.path or None,
            description=ret.doc,
            description_html=self.html(ret.doc),
        )

    def field(self, fld: FieldDecl) -> ProcessedField:
        """Transform a struct field."""
        return ProcessedField(
            name=fld.name,
            type=fld.type,
            type_html=self._type(fld.type, fld.path),
            type_path=fld.path or None,
            summary=fld.summary,
            description=fld.description,
            description_html=self.html(fld.description),
        )

    def struct(self, struct: StructDecl) -> StructItem:
        """Transform a struct."""
        signature = struct.signature or f"struct {struct.name}"
        return StructItem(
            name=struct.name,
            anchor=header_slug(struct.name),
            signature=signature,
            signature_html=self._signature(signature),
            summary=self._summary(struct.summary, struct.description),
            description=struct.description,
            description_html=self.html(struct.description),
            type_params=[self.type_param(p) for p in struct.parameters],
            fields=[self.field(f) for f in struct.fields],
            methods=[self.function(f) for f in struct.functions],
            deprecated=struct.deprecated or None,
        )

    def trait(self, trait: TraitDecl) -> TraitItem:
        """Transform a trait."""
        signature = trait.signature or f"trait {trait.name}"
        return TraitItem(
            name=trait.name,
            anchor=header_slug(trait.name),
            signature=signature,
            signature_html=self._signature(signature),
            summary=self._summary(trait.summary, trait.description),
            description=trait.description,
            description_html=self.html(trait.description),
            type_params=[self.type_param(p) for p in trait.parameters],
            methods=[self.function(f) for f in trait.functions],
            parent_traits=[self._type(t.type, t.path) for t in trait.parent_traits],
            deprecated=trait.deprecated or None,
        )

    def alias(self, alias: AliasDecl) -> AliasItem:
        """Transform an alias."""
        signature = alias.signature or f"comptime {alias.name}"
        return AliasItem(
            name=alias.name,
            anchor=header_slug(alias.name),
            signature=signature,
            signature_html=self._signature(signature),
            summary=self._summary(alias.summary, alias.description),
            description=alias.description,
            description_html=self.html(alias.description),
            value=alias.value,
            type_params=[self.type_param(p) for p in alias.parameters],
            deprecated=alias.deprecated or None,
        )
