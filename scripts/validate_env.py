#!/usr/bin/env python
"""
Deploy .env check: required CDN keys present and non-empty.

usage: python scripts/validate_env.py [.env or path]
ref:   cdnsync/framework/config.py
"""
from __future__ import annotations

import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# sync / prebuild / postbuild refuse to start without these
REQUIRED = [
    "CDN_BUCKET_NAME",
    "CDN_ACCESS_KEY_ID",
    "CDN_SECRET_ACCESS_KEY",
]

# have defaults in config.py, but a deploy should pin them
RECOMMENDED = [
    "CDN_REGION",
    "CDN_ENDPOINT_URL",
    "CDN_TARGET_PATH_PREFIX",
    "NEXT_PUBLIC_CDN_URL",
]


def parse_env(path: Path) -> dict[str, str]:
    out: dict[str, str] = {}
    if not path.exists():
        return out
    raw = path.read_text(encoding="utf-8", errors="replace")
    for line in raw.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        m = re.match(r"^([A-Za-z_][A-Za-z0-9_]*)=(.*)$", line)
        if m:
            key, val = m.group(1), m.group(2).strip()
            if val.startswith('"') and val.endswith('"'):
                val = val[1:-1].replace('\\"', '"')
            out[key] = val
    return out


def check_env(env: dict[str, str]) -> tuple[list[str], list[str]]:
    """(missing or empty required, missing or empty recommended)"""
    missing = [k for k in REQUIRED if not (env.get(k) or "").strip()]
    recommended_missing = [k for k in RECOMMENDED if not (env.get(k) or "").strip()]
    return missing, recommended_missing


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = ROOT / ".env"
    if argv:
        path = Path(argv[0])
        if not path.is_absolute():
            path = ROOT / path

    if not path.exists():
        print(f"ERROR: {path} not found")
        return 1

    missing, recommended_missing = check_env(parse_env(path))

    if missing:
        print(f"Missing required keys: {', '.join(missing)}")
    if recommended_missing:
        print(f"Recommended (defaults will be used): {', '.join(recommended_missing)}")

    if missing:
        return 1

    print("OK: required env vars present and non-empty.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
