# PATH: cdnsync/application/ports/storage.py
# Object storage port: put / delete / list (bucket passed at call time, never hardcoded)

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from cdnsync.domain.assets.entities import ObjectListing


class ObjectStorage(ABC):
    """Bucket operations used by the publishing pipeline. Failures raise StorageError."""

    @abstractmethod
    def put_object(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        """Write body under key with the given Content-Type."""
        ...

    @abstractmethod
    def delete_object(self, bucket: str, key: str) -> None:
        """Delete a single key."""
        ...

    @abstractmethod
    def list_objects(
        self,
        bucket: str,
        prefix: str,
        max_keys: int,
        continuation_token: Optional[str] = None,
    ) -> ObjectListing:
        """One page of keys under prefix."""
        ...

    @abstractmethod
    def delete_objects(self, bucket: str, keys: Iterable[str]) -> None:
        """Batch delete (provider limit: 1000 keys per call)."""
        ...
