"""Logic for turning `mojo doc` type paths into documentation URLs."""

import re

from modoc.infer_stdlib_url import STDLIB_BASE

STDLIB_PREFIX = "/std/"
ANCHOR_PATH_RE = re.compile(r"^(.+)/#(.+)$")  # module/path/#TypeName


def resolve_type_path(
    path: str | None,
    base_url: str,
    package_name: str,
    stdlib_root: str = STDLIB_BASE,
) -> str | None:
    """Resolve an origin hint to a URL, or None when it has no known shape.

    /std/collections/string/String -> <stdlib_root>/collections/string/String
    /pkg/types/#Value              -> <base_url>pkg/types/index.html#Value
    /pkg/types/Value               -> <base_url>pkg/types/index.html#Value
    """
    if not path:
        return None

    if path.startswith(STDLIB_PREFIX):
        return f"{stdlib_root}/{path[len(STDLIB_PREFIX) :]}"

    local_prefix = f"/{package_name}/"
    if not package_name or not path.startswith(local_prefix):
        return None

    local_path = path[len(local_prefix) :]
    m = ANCHOR_PATH_RE.match(local_path)
    if m:
        return local_type_url(base_url, package_name, m.group(1), m.group(2))

    parts = local_path.split("/")
    # An empty anchor such as /pkg/types/# is malformed
    if len(parts) >= 2 and all(parts) and not parts[-1].startswith("#"):
        return local_type_url(base_url, package_name, "/".join(parts[:-1]), parts[-1])
    return None


def local_type_url(base_url: str, package_name: str, module_path: str, name: str) -> str:
    """Build the same-site URL of a declaration anchored on its module page."""
    prefix = "/".join(p for p in (package_name, module_path) if p)
    return f"{base_url}{prefix}/index.html#{name}"
