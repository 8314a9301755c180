"""
Image URL rewriting for the framework's custom image loader.

Pure, no I/O. Published images live under the CDN base, so relative sources
are rewritten onto it with resize parameters.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_IMAGE_QUALITY = 75


def _is_passthrough(src: str, bucket_public_url: Optional[str]) -> bool:
    if src.startswith("/_next") or src.startswith("http"):
        return True
    return bool(bucket_public_url) and src.startswith(bucket_public_url)


def image_url(
    src: str,
    width: int,
    quality: Optional[int] = None,
    *,
    cdn_url: str,
    bucket_public_url: Optional[str] = None,
) -> str:
    if _is_passthrough(src, bucket_public_url):
        return src

    if not src.startswith("/"):
        src = "/" + src
    parts = urlsplit(cdn_url.rstrip("/") + src)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query["format"] = "auto"
    query["width"] = str(int(width))
    query["quality"] = str(int(quality or DEFAULT_IMAGE_QUALITY))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))
