from cdnsync.application.ports.storage import ObjectStorage
from cdnsync.application.ports.sources import ChangeSourcePort, LocalFilesPort
from cdnsync.application.ports.metadata import BuildMetadataPort
from cdnsync.application.ports.locales import LocaleBundleFetcher

__all__ = [
    "ObjectStorage",
    "ChangeSourcePort",
    "LocalFilesPort",
    "BuildMetadataPort",
    "LocaleBundleFetcher",
]
