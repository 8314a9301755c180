"""
Custom image loader entry: CDN base URLs come from the public env.
NEXT_PUBLIC_CDN_URL is required; an unset value fails loudly instead of
producing host-less URLs.
"""
from __future__ import annotations

import os
from typing import Optional

from cdnsync.domain.assets.image_urls import image_url
from cdnsync.framework.config import _require


def cloudfront_loader(src: str, width: int, quality: Optional[int] = None) -> str:
    return image_url(
        src,
        width,
        quality,
        cdn_url=_require("NEXT_PUBLIC_CDN_URL"),
        bucket_public_url=os.environ.get("NEXT_PUBLIC_BUCKET_PUBLIC_URL") or None,
    )
