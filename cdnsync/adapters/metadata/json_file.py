"""
Build metadata in a JSON document (package.json) under the "buildID" key.

Other keys are preserved on write.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from cdnsync.domain.assets.errors import BuildMetadataError

logger = logging.getLogger("cdnsync.metadata")

BUILD_ID_KEY = "buildID"


class JsonBuildMetadataStore:

    def __init__(self, path: Union[str, Path], key: str = BUILD_ID_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise BuildMetadataError(f"build metadata not found: {self.path}") from e
        except (OSError, ValueError) as e:
            raise BuildMetadataError(f"cannot read build metadata {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise BuildMetadataError(f"build metadata is not a JSON object: {self.path}")
        return data

    def read_build_id(self) -> str:
        value = self._load().get(self.key)
        if not value or not isinstance(value, str):
            raise BuildMetadataError(f"{self.key} missing in {self.path}")
        return value

    def write_build_id(self, build_id: str) -> None:
        data = self._load()
        data[self.key] = build_id
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.debug("wrote %s=%s to %s", self.key, build_id, self.path)
