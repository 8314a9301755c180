"""
Asset sync use case: ports only (no boto3 / subprocess)

full:        every file under the asset root is treated as Added.
incremental: name-status diff of the asset root against the reference revision.

Changes are applied one at a time in enumeration order. The first storage
failure aborts the run; objects written before it stay in the bucket.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from cdnsync.application.ports.sources import ChangeSourcePort, LocalFilesPort
from cdnsync.application.ports.storage import ObjectStorage
from cdnsync.domain.assets.entities import (
    BuildContext,
    ChangeStatus,
    FileChange,
    SyncMode,
    SyncResult,
)
from cdnsync.domain.assets.errors import DiffUnavailableError
from cdnsync.domain.assets.keys import DEFAULT_CATEGORY_MAPPING, CategoryMapping, remote_key_for

logger = logging.getLogger("cdnsync.sync")

DEFAULT_ASSET_ROOT = "public"
DEFAULT_REFERENCE = "origin/main"


def collect_changes(
    mode: SyncMode,
    changes: ChangeSourcePort,
    files: LocalFilesPort,
    asset_root: str = DEFAULT_ASSET_ROOT,
    reference: str = DEFAULT_REFERENCE,
) -> list[FileChange]:
    if mode is SyncMode.FULL:
        if not files.exists(asset_root):
            logger.warning("asset root not found: %s", asset_root)
            return []
        return [FileChange(ChangeStatus.ADDED, path) for path in files.iter_files(asset_root)]

    try:
        return changes.diff(reference, asset_root)
    except DiffUnavailableError as e:
        logger.error("Failed to get git diffs against %s: %s", reference, e)
        return []


def apply_changes(
    storage: ObjectStorage,
    files: LocalFilesPort,
    ctx: BuildContext,
    file_changes: Iterable[FileChange],
    mapping: CategoryMapping = DEFAULT_CATEGORY_MAPPING,
    result: Optional[SyncResult] = None,
) -> SyncResult:
    result = result if result is not None else SyncResult()

    for change in file_changes:
        key = remote_key_for(change.path, ctx, mapping)
        if key is None:
            result.ignored.append(change.path)
            continue

        if change.status is ChangeStatus.DELETED:
            storage.delete_object(ctx.bucket, key)
            result.deleted.append(key)
            logger.info("Deleted from storage: %s", key)
            continue

        if not files.exists(change.path):
            # removed after the diff was taken
            result.skipped_missing.append(change.path)
            logger.debug("skip missing local file: %s", change.path)
            continue

        content_type = files.content_type(change.path)
        storage.put_object(ctx.bucket, key, files.read_bytes(change.path), content_type)
        result.uploaded.append(key)
        logger.info(
            "Uploaded %s to %s with content type: %s", change.path, key, content_type
        )

    return result


def synchronize_assets(
    storage: ObjectStorage,
    changes: ChangeSourcePort,
    files: LocalFilesPort,
    ctx: BuildContext,
    mode: SyncMode,
    mapping: CategoryMapping = DEFAULT_CATEGORY_MAPPING,
    asset_root: str = DEFAULT_ASSET_ROOT,
    reference: str = DEFAULT_REFERENCE,
) -> SyncResult:
    logger.info(
        "Syncing static assets to %s/%s (mode=%s)", ctx.bucket, ctx.build_prefix, mode.value
    )
    file_changes = collect_changes(mode, changes, files, asset_root, reference)
    result = apply_changes(storage, files, ctx, file_changes, mapping)
    logger.info("Sync finished: %s", result.summary())
    return result
