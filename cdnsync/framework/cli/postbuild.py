"""
Postbuild: upload every mapped root (locales, images, fonts, framework static output).

Exit 0: success. Exit 1: any error.
"""
from __future__ import annotations

import logging
import sys

from cdnsync.adapters.fs.local_files import LocalFiles
from cdnsync.adapters.storage.s3.object_storage import S3ObjectStorage
from cdnsync.application.use_cases.assets.publish_build_output import publish_build_output
from cdnsync.framework.config import load_config
from cdnsync.framework.context import build_context, metadata_store
from cdnsync.framework.logging_setup import configure_logging

logger = logging.getLogger("cdnsync.cli.postbuild")


def main() -> int:
    configure_logging()
    cfg = load_config()
    try:
        publish_build_output(
            S3ObjectStorage.from_config(cfg),
            LocalFiles(),
            build_context(cfg, metadata_store(cfg)),
        )
    except Exception:
        logger.exception("Upload failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
