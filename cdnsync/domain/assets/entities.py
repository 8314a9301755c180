"""
Asset publishing entities: pure Python (no boto3/requests/subprocess)

A build's objects all live under {prefix}/{build_id}; BuildContext carries that
value explicitly instead of reading it from a global.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ChangeStatus(str, Enum):
    """git --name-status letters we act on."""
    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"

    @classmethod
    def parse(cls, letter: str) -> Optional["ChangeStatus"]:
        """'A' / 'M' / 'D' -> status, anything else (T, U, X, R100 ...) -> None."""
        try:
            return cls(letter.strip())
        except ValueError:
            return None


class SyncMode(str, Enum):
    FULL = "full"
    INCREMENTAL = "incremental"

    @classmethod
    def from_cli(cls, arg: Optional[str]) -> "SyncMode":
        """'all' -> FULL. anything else (including no argument) -> INCREMENTAL."""
        return cls.FULL if arg == "all" else cls.INCREMENTAL


@dataclass(frozen=True)
class FileChange:
    status: ChangeStatus
    path: str  # repo-relative, forward slashes


@dataclass(frozen=True)
class BuildContext:
    """bucket + target prefix + current build id, passed to every use case."""
    bucket: str
    prefix: str
    build_id: str

    @property
    def build_prefix(self) -> str:
        return f"{self.prefix.strip('/')}/{self.build_id}"


@dataclass(frozen=True)
class ObjectListing:
    """One page of a bucket listing."""
    keys: tuple[str, ...]
    is_truncated: bool = False
    next_token: Optional[str] = None


@dataclass
class SyncResult:
    uploaded: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    skipped_missing: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"uploaded={len(self.uploaded)} deleted={len(self.deleted)} "
            f"missing={len(self.skipped_missing)} ignored={len(self.ignored)}"
        )


@dataclass(frozen=True)
class CleanupResult:
    deleted: int
    pages: int
    previous_build_id: str
    build_id: str
