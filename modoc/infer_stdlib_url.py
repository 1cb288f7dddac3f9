"""Naming-convention fallback for standard library documentation URLs."""

import re

STDLIB_BASE = "https://docs.modular.com/mojo/stdlib"

# SIMD numeric aliases all live on one page.
SIMD_FAMILY_RE = re.compile(
    r"^(Scalar|SIMD|Int8|Int16|Int32|Int64|UInt8|UInt16|UInt32|UInt64"
    r"|Float16|Float32|Float64)$"
)

BUILTIN_PATHS: dict[str, str] = {
    "Int": "builtin/int/Int",
    "UInt": "builtin/int/UInt",
    "Bool": "builtin/bool/Bool",
    "String": "collections/string/string/String",
    "StringLiteral": "builtin/string_literal/StringLiteral",
    "StringSlice": "utils/string_slice/StringSlice",
    "Error": "builtin/error/Error",
    "NoneType": "builtin/none/NoneType",
    "Tuple": "builtin/tuple/",
    "List": "collections/list/List",
    "Dict": "collections/dict/Dict",
    "Optional": "collections/optional/Optional",
    "Span": "memory/span/Span",
    "UnsafePointer": "memory/unsafe_pointer/UnsafePointer",
    "Variant": "utils/variant/Variant",
}

TRAIT_PATHS: dict[str, str] = {
    "Sized": "builtin/len/Sized",
    "Stringable": "builtin/str/Stringable",
    "Representable": "builtin/repr/Representable",
    "Writable": "utils/write/Writable",
    "Writer": "utils/write/Writer",
    "Formattable": "utils/format/Formattable",
    "Copyable": "builtin/value/Copyable",
    "Movable": "builtin/value/Movable",
    "ExplicitlyCopyable": "builtin/value/ExplicitlyCopyable",
    "CollectionElement": "builtin/value/CollectionElement",
    "EqualityComparable": "builtin/equality_comparable/EqualityComparable",
    "Hashable": "builtin/hash/Hashable",
    "Intable": "builtin/int/Intable",
    "Boolable": "builtin/bool/Boolable",
    "AnyType": "builtin/anytype/AnyType",
    "Defaultable": "builtin/value/Defaultable",
}


def infer_stdlib_url(type_name: str, stdlib_root: str = STDLIB_BASE) -> str | None:
    """Guess the stdlib page for a type whose URL follows a stable pattern.

    Only covers names that `mojo doc` never annotates with a path because the
    documented package does not use them as argument, return or field types.
    Returns None for anything else.
    """
    if SIMD_FAMILY_RE.match(type_name):
        return f"{stdlib_root}/builtin/simd/"
    if type_name == "DType":
        return f"{stdlib_root}/builtin/dtype/DType"
    if type_name in BUILTIN_PATHS:
        return f"{stdlib_root}/{BUILTIN_PATHS[type_name]}"
    if type_name in TRAIT_PATHS:
        return f"{stdlib_root}/{TRAIT_PATHS[type_name]}"
    return None
