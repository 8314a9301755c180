# PATH: cdnsync/adapters/storage/__init__.py
# S3-compatible object storage adapter: ObjectStorage implementation

from cdnsync.adapters.storage.s3.object_storage import S3ObjectStorage, create_s3_client

__all__ = ["S3ObjectStorage", "create_s3_client"]
