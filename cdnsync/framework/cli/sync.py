"""
Sync static assets to the CDN bucket.

usage:
  cdnsync-sync          # incremental: git diff against the reference revision
  cdnsync-sync all      # full: every file under the asset root

Exit 0: success. Exit 1: any error.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from cdnsync.adapters.fs.local_files import LocalFiles
from cdnsync.adapters.storage.s3.object_storage import S3ObjectStorage
from cdnsync.adapters.vcs.git.diff import GitChangeSource
from cdnsync.application.use_cases.assets.synchronize_assets import synchronize_assets
from cdnsync.domain.assets.entities import SyncMode
from cdnsync.framework.config import load_config
from cdnsync.framework.context import build_context, metadata_store
from cdnsync.framework.logging_setup import configure_logging

logger = logging.getLogger("cdnsync.cli.sync")


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    mode = SyncMode.from_cli(args[0] if args else None)

    cfg = load_config()
    try:
        ctx = build_context(cfg, metadata_store(cfg))
        synchronize_assets(
            S3ObjectStorage.from_config(cfg),
            GitChangeSource(),
            LocalFiles(),
            ctx,
            mode,
            asset_root=cfg.ASSET_ROOT,
            reference=cfg.REFERENCE_REVISION,
        )
    except Exception:
        logger.exception("Error uploading files")
        return 1

    if mode is SyncMode.FULL:
        logger.info("All files uploaded successfully.")
    else:
        logger.info("Files synced successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
