# PATH: cdnsync/adapters/storage/s3/object_storage.py
# S3-compatible object storage adapter: ObjectStorage implementation
# one boto3 client per process, reused sequentially

from __future__ import annotations

from typing import Any, Iterable, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from cdnsync.application.ports.storage import ObjectStorage
from cdnsync.domain.assets.entities import ObjectListing
from cdnsync.domain.assets.errors import StorageError


def create_s3_client(
    *,
    region: str,
    endpoint_url: Optional[str],
    access_key: str,
    secret_key: str,
) -> Any:
    return boto3.client(
        "s3",
        region_name=region,
        endpoint_url=endpoint_url or None,
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
    )


def _error_code(e: ClientError) -> str:
    return str((e.response.get("Error") or {}).get("Code") or "")


class S3ObjectStorage(ObjectStorage):
    """boto3-backed ObjectStorage. botocore errors surface as StorageError."""

    def __init__(self, client: Any) -> None:
        self._s3 = client

    @classmethod
    def from_config(cls, cfg) -> "S3ObjectStorage":
        return cls(
            create_s3_client(
                region=cfg.CDN_REGION,
                endpoint_url=cfg.CDN_ENDPOINT_URL,
                access_key=cfg.CDN_ACCESS_KEY_ID,
                secret_key=cfg.CDN_SECRET_ACCESS_KEY,
            )
        )

    # ---------------------------------------------------------------------
    # single object
    # ---------------------------------------------------------------------

    def put_object(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        try:
            self._s3.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type or "application/octet-stream",
            )
        except ClientError as e:
            raise StorageError(f"put_object failed key={key} code={_error_code(e)}") from e
        except BotoCoreError as e:
            raise StorageError(f"put_object failed key={key}: {e}") from e

    def delete_object(self, bucket: str, key: str) -> None:
        try:
            self._s3.delete_object(Bucket=bucket, Key=key)
        except ClientError as e:
            raise StorageError(f"delete_object failed key={key} code={_error_code(e)}") from e
        except BotoCoreError as e:
            raise StorageError(f"delete_object failed key={key}: {e}") from e

    # ---------------------------------------------------------------------
    # listing / batch delete
    # ---------------------------------------------------------------------

    def list_objects(
        self,
        bucket: str,
        prefix: str,
        max_keys: int,
        continuation_token: Optional[str] = None,
    ) -> ObjectListing:
        list_kw: dict[str, Any] = {
            "Bucket": bucket,
            "Prefix": prefix,
            "MaxKeys": max_keys,
        }
        if continuation_token:
            list_kw["ContinuationToken"] = continuation_token

        try:
            resp = self._s3.list_objects_v2(**list_kw)
        except ClientError as e:
            raise StorageError(f"list_objects_v2 failed prefix={prefix} code={_error_code(e)}") from e
        except BotoCoreError as e:
            raise StorageError(f"list_objects_v2 failed prefix={prefix}: {e}") from e

        contents = resp.get("Contents") or []
        return ObjectListing(
            keys=tuple(obj["Key"] for obj in contents),
            is_truncated=bool(resp.get("IsTruncated")),
            next_token=resp.get("NextContinuationToken"),
        )

    def delete_objects(self, bucket: str, keys: Iterable[str]) -> None:
        objects = [{"Key": k} for k in keys]
        if not objects:
            return
        try:
            resp = self._s3.delete_objects(
                Bucket=bucket,
                Delete={"Objects": objects, "Quiet": True},
            )
        except ClientError as e:
            raise StorageError(f"delete_objects failed code={_error_code(e)}") from e
        except BotoCoreError as e:
            raise StorageError(f"delete_objects failed: {e}") from e

        errors = resp.get("Errors") or []
        if errors:
            first = errors[0]
            raise StorageError(
                f"delete_objects left {len(errors)} keys, first={first.get('Key')} code={first.get('Code')}"
            )
