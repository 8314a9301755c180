"""
Prebuild: delete the current build's objects from the bucket, then mint a new build id.

Exit 0: success. Exit 1: list/delete/metadata failure (build id left unchanged).
"""
from __future__ import annotations

import logging
import sys

from cdnsync.adapters.storage.s3.object_storage import S3ObjectStorage
from cdnsync.application.use_cases.assets.clean_previous_build import clean_previous_build
from cdnsync.framework.config import load_config
from cdnsync.framework.context import build_context, metadata_store
from cdnsync.framework.logging_setup import configure_logging

logger = logging.getLogger("cdnsync.cli.prebuild")


def main() -> int:
    configure_logging()
    cfg = load_config()
    try:
        store = metadata_store(cfg)
        result = clean_previous_build(
            S3ObjectStorage.from_config(cfg),
            store,
            build_context(cfg, store),
            page_size=cfg.LIST_PAGE_SIZE,
        )
    except Exception:
        logger.exception("Error during prebuild process")
        return 1

    logger.info(
        "Prebuild process completed: deleted=%d previous=%s new=%s",
        result.deleted, result.previous_build_id, result.build_id,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
