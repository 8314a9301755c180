"""
Local path <-> remote object key mapping.

Remote layout: {prefix}/{build_id}/{category}/{relative_path}
Roots are matched in declaration order; the first root containing the path wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from cdnsync.domain.assets.entities import BuildContext


@dataclass(frozen=True)
class CategoryRoot:
    local_root: str
    category: str

    def contains(self, path: str) -> bool:
        return path == self.local_root or path.startswith(self.local_root + "/")


CategoryMapping = Sequence[CategoryRoot]

DEFAULT_CATEGORY_MAPPING: tuple[CategoryRoot, ...] = (
    CategoryRoot("public/locales", "locales"),
    CategoryRoot("public/images", "images"),
    CategoryRoot(".next/static", "_next/static"),
    CategoryRoot("public/fonts", "fonts"),
)


def normalize_path(path: str) -> str:
    """'./public\\images//a.png' -> 'public/images/a.png'"""
    p = path.strip().replace("\\", "/")
    while p.startswith("./"):
        p = p[2:]
    parts = [seg for seg in p.split("/") if seg and seg != "."]
    return "/".join(parts)


def resolve_category(path: str, mapping: CategoryMapping) -> Optional[CategoryRoot]:
    path = normalize_path(path)
    for root in mapping:
        if root.contains(path):
            return root
    return None


def remote_key_for(
    path: str,
    ctx: BuildContext,
    mapping: CategoryMapping,
) -> Optional[str]:
    """Remote key for a local path, or None when no root claims it."""
    path = normalize_path(path)
    root = resolve_category(path, mapping)
    if root is None:
        return None
    relative = path[len(root.local_root):].lstrip("/")
    base = f"{ctx.build_prefix}/{root.category}"
    return f"{base}/{relative}" if relative else base


def local_path_for(
    key: str,
    ctx: BuildContext,
    mapping: CategoryMapping,
) -> Optional[str]:
    """Inverse of remote_key_for. None when the key is outside this build or category."""
    head = ctx.build_prefix + "/"
    if not key.startswith(head):
        return None
    rest = key[len(head):]
    # longest category first so '_next/static' is not shadowed by a shorter segment
    for root in sorted(mapping, key=lambda r: len(r.category), reverse=True):
        if rest == root.category:
            return root.local_root
        if rest.startswith(root.category + "/"):
            return f"{root.local_root}/{rest[len(root.category) + 1:]}"
    return None
