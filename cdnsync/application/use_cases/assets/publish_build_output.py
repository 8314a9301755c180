"""
Postbuild publish: upload every file under every mapped root.

Unlike incremental sync this also covers build output outside the asset root
(.next/static), which git never tracks.
"""
from __future__ import annotations

import logging

from cdnsync.application.ports.sources import LocalFilesPort
from cdnsync.application.ports.storage import ObjectStorage
from cdnsync.application.use_cases.assets.synchronize_assets import apply_changes
from cdnsync.domain.assets.entities import BuildContext, ChangeStatus, FileChange, SyncResult
from cdnsync.domain.assets.keys import DEFAULT_CATEGORY_MAPPING, CategoryMapping

logger = logging.getLogger("cdnsync.publish")


def publish_build_output(
    storage: ObjectStorage,
    files: LocalFilesPort,
    ctx: BuildContext,
    mapping: CategoryMapping = DEFAULT_CATEGORY_MAPPING,
) -> SyncResult:
    logger.info("Uploading static assets to %s/%s ...", ctx.bucket, ctx.build_prefix)

    seen: set[str] = set()
    file_changes: list[FileChange] = []
    for root in mapping:
        if not files.exists(root.local_root):
            logger.warning("Skipping missing path: %s", root.local_root)
            continue
        for path in files.iter_files(root.local_root):
            # nested roots enumerate the same file twice; the mapping decides its one key
            if path in seen:
                continue
            seen.add(path)
            file_changes.append(FileChange(ChangeStatus.ADDED, path))

    result = apply_changes(storage, files, ctx, file_changes, mapping)
    logger.info("All files and directories uploaded: %s", result.summary())
    return result
