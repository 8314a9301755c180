"""
Wiring: Config -> adapters -> BuildContext. The only place the metadata file path is resolved.
"""
from __future__ import annotations

from cdnsync.adapters.metadata.json_file import JsonBuildMetadataStore
from cdnsync.domain.assets.entities import BuildContext
from cdnsync.framework.config import Config


def metadata_store(cfg: Config) -> JsonBuildMetadataStore:
    return JsonBuildMetadataStore(cfg.BUILD_METADATA_PATH)


def build_context(cfg: Config, store: JsonBuildMetadataStore) -> BuildContext:
    return BuildContext(
        bucket=cfg.CDN_BUCKET_NAME,
        prefix=cfg.CDN_TARGET_PATH_PREFIX,
        build_id=store.read_build_id(),
    )
