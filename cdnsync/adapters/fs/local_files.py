"""
Working tree access: LocalFilesPort on top of pathlib
"""
from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Iterator, Optional, Union

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# font types are missing from older mimetypes tables
mimetypes.add_type("font/woff2", ".woff2")
mimetypes.add_type("font/woff", ".woff")


def guess_content_type(path: str) -> str:
    content_type, _ = mimetypes.guess_type(Path(path).name)
    return content_type or DEFAULT_CONTENT_TYPE


class LocalFiles:
    """Paths in and out are relative to base_dir, forward slashes."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        self._base = Path(base_dir) if base_dir is not None else Path.cwd()

    def _abs(self, path: str) -> Path:
        return self._base / path

    def iter_files(self, root: str) -> Iterator[str]:
        top = self._abs(root)
        if top.is_file():
            yield top.relative_to(self._base).as_posix()
            return
        for p in sorted(top.rglob("*")):
            if p.is_file():
                yield p.relative_to(self._base).as_posix()

    def exists(self, path: str) -> bool:
        return self._abs(path).exists()

    def read_bytes(self, path: str) -> bytes:
        return self._abs(path).read_bytes()

    def content_type(self, path: str) -> str:
        return guess_content_type(path)
