"""
Build metadata port: the only place the current build id is read/written
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class BuildMetadataPort(Protocol):

    @abstractmethod
    def read_build_id(self) -> str:
        ...

    @abstractmethod
    def write_build_id(self, build_id: str) -> None:
        ...
