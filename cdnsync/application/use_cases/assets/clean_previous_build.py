"""
Prebuild cleanup: remove everything under {prefix}/{build_id}, then rotate the build id.

list page -> delete page -> (truncated? next page) until the listing is exhausted.
Any storage failure propagates; the build id is only rotated after a full cleanup.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from cdnsync.application.ports.metadata import BuildMetadataPort
from cdnsync.application.ports.storage import ObjectStorage
from cdnsync.domain.assets.entities import BuildContext, CleanupResult
from cdnsync.domain.shared.ids import generate_build_id

logger = logging.getLogger("cdnsync.prebuild")

# delete_objects accepts at most 1000 keys
MAX_PAGE_SIZE = 1000


def delete_build_prefix(
    storage: ObjectStorage,
    ctx: BuildContext,
    page_size: int = MAX_PAGE_SIZE,
) -> tuple[int, int]:
    """Returns (deleted, pages_listed)."""
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValueError(f"page_size must be within 1..{MAX_PAGE_SIZE}, got {page_size}")

    prefix = ctx.build_prefix
    deleted = 0
    pages = 0
    token: Optional[str] = None

    while True:
        listing = storage.list_objects(ctx.bucket, prefix, page_size, token)
        pages += 1

        if not listing.keys:
            if pages == 1:
                logger.info("No objects found in %s/%s", ctx.bucket, prefix)
            break

        storage.delete_objects(ctx.bucket, listing.keys)
        deleted += len(listing.keys)
        logger.info("Deleted batch of %d objects under %s", len(listing.keys), prefix)

        if not listing.is_truncated:
            break
        token = listing.next_token

    return deleted, pages


def clean_previous_build(
    storage: ObjectStorage,
    metadata: BuildMetadataPort,
    ctx: BuildContext,
    page_size: int = MAX_PAGE_SIZE,
    new_build_id: Callable[[], str] = generate_build_id,
) -> CleanupResult:
    deleted, pages = delete_build_prefix(storage, ctx, page_size)
    if deleted:
        logger.info("Deleted %d objects from %s", deleted, ctx.build_prefix)

    build_id = new_build_id()
    metadata.write_build_id(build_id)
    logger.info("Updated buildID to %s", build_id)

    return CleanupResult(
        deleted=deleted,
        pages=pages,
        previous_build_id=ctx.build_id,
        build_id=build_id,
    )
