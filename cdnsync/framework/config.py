from __future__ import annotations

import os
import sys
from dataclasses import dataclass


def _require(name: str) -> str:
    v = os.environ.get(name)
    if not v:
        raise RuntimeError(f"Missing required env: {name}")
    return v


def _float(name: str, default: str) -> float:
    try:
        return float(os.environ.get(name, default))
    except Exception:
        return float(default)


def _int(name: str, default: str) -> int:
    try:
        return int(os.environ.get(name, default))
    except Exception:
        return int(default)


@dataclass(frozen=True)
class Config:
    # bucket (S3 compatible)
    CDN_BUCKET_NAME: str
    CDN_REGION: str
    CDN_ENDPOINT_URL: str
    CDN_ACCESS_KEY_ID: str
    CDN_SECRET_ACCESS_KEY: str
    CDN_TARGET_PATH_PREFIX: str

    # local tree
    ASSET_ROOT: str
    REFERENCE_REVISION: str
    BUILD_METADATA_PATH: str

    # prebuild cleanup
    LIST_PAGE_SIZE: int


@dataclass(frozen=True)
class LocaleConfig:
    CDN_URL: str
    DEFAULT_LOCALE: str
    HTTP_TIMEOUT_SECONDS: float


def load_config() -> Config:
    try:
        return Config(
            CDN_BUCKET_NAME=_require("CDN_BUCKET_NAME"),
            CDN_REGION=os.environ.get("CDN_REGION", "ap-southeast-1"),
            CDN_ENDPOINT_URL=os.environ.get("CDN_ENDPOINT_URL", "https://s3.ap-southeast-1.amazonaws.com"),
            CDN_ACCESS_KEY_ID=_require("CDN_ACCESS_KEY_ID"),
            CDN_SECRET_ACCESS_KEY=_require("CDN_SECRET_ACCESS_KEY"),
            CDN_TARGET_PATH_PREFIX=os.environ.get("CDN_TARGET_PATH_PREFIX", "dev"),

            ASSET_ROOT=os.environ.get("CDN_ASSET_ROOT", "public"),
            REFERENCE_REVISION=os.environ.get("CDN_REFERENCE_REVISION", "origin/main"),
            BUILD_METADATA_PATH=os.environ.get("CDN_BUILD_METADATA_PATH", "package.json"),

            LIST_PAGE_SIZE=_int("CDN_LIST_PAGE_SIZE", "1000"),
        )
    except Exception as e:
        print(f"[fatal] config error: {e}", file=sys.stderr)
        sys.exit(1)


def load_locale_config() -> LocaleConfig:
    try:
        return LocaleConfig(
            CDN_URL=_require("NEXT_PUBLIC_CDN_URL").rstrip("/"),
            DEFAULT_LOCALE=os.environ.get("LOCALE_DEFAULT", "en"),
            HTTP_TIMEOUT_SECONDS=_float("LOCALE_HTTP_TIMEOUT", "10.0"),
        )
    except Exception as e:
        print(f"[fatal] config error: {e}", file=sys.stderr)
        sys.exit(1)
