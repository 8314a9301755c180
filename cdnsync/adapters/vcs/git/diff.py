"""
git name-status diff -> FileChange list

Renames are disabled so a move shows up as D + A and both sides get synced.
Output is read in -z form: paths come back verbatim (no quoting or octal
escapes for non-ASCII names), NUL separated as STATUS\0path\0STATUS\0path\0...
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

from cdnsync.domain.assets.entities import ChangeStatus, FileChange
from cdnsync.domain.assets.errors import DiffUnavailableError
from cdnsync.domain.assets.keys import normalize_path

logger = logging.getLogger("cdnsync.git")

GIT_TIMEOUT_SECONDS = 60


def parse_name_status(output: str) -> list[FileChange]:
    """Parse `git diff --name-status --no-renames -z` output."""
    fields = output.split("\0")
    if fields and fields[-1] == "":
        fields.pop()

    changes: list[FileChange] = []
    for i in range(0, len(fields) - 1, 2):
        letter, path = fields[i].strip(), fields[i + 1]
        status = ChangeStatus.parse(letter)
        if status is None:
            logger.warning("skip unsupported diff status %s: %s", letter, path)
            continue
        changes.append(FileChange(status, normalize_path(path)))

    if len(fields) % 2:
        logger.warning("unparsable trailing diff field: %r", fields[-1])
    return changes


class GitChangeSource:
    """ChangeSourcePort over the git CLI."""

    def __init__(self, cwd: Optional[Union[str, Path]] = None, git_bin: str = "git") -> None:
        self._cwd = str(cwd) if cwd is not None else None
        self._git = git_bin

    def diff(self, reference: str, root: str) -> list[FileChange]:
        cmd = [
            self._git,
            "diff",
            "--name-status",
            "--no-renames",
            "-z",
            reference,
            "--",
            root.rstrip("/") + "/",
        ]
        try:
            r = subprocess.run(
                cmd,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise DiffUnavailableError(f"{' '.join(cmd)}: {e}") from e

        if r.returncode != 0:
            raise DiffUnavailableError((r.stderr or r.stdout or "").strip()[-500:] or f"exit {r.returncode}")

        return parse_name_status(r.stdout)
