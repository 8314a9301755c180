"""
Change source ports: where the list of files to publish comes from
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Iterator, Protocol

from cdnsync.domain.assets.entities import FileChange


class ChangeSourcePort(Protocol):
    """Files changed against a reference revision."""

    @abstractmethod
    def diff(self, reference: str, root: str) -> list[FileChange]:
        """name-status diff of root vs reference. Raises DiffUnavailableError."""
        ...


class LocalFilesPort(Protocol):
    """Read-only view of the working tree."""

    @abstractmethod
    def iter_files(self, root: str) -> Iterator[str]:
        """Every file under root (repo-relative paths, sorted). root may itself be a file."""
        ...

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        ...

    @abstractmethod
    def content_type(self, path: str) -> str:
        """MIME type by extension, application/octet-stream when unknown."""
        ...
