from __future__ import annotations

import pytest

from cdnsync.framework.config import load_config, load_locale_config

REQUIRED = {
    "CDN_BUCKET_NAME": "cdn-bucket",
    "CDN_ACCESS_KEY_ID": "AKIA",
    "CDN_SECRET_ACCESS_KEY": "secret",
}

OPTIONAL = [
    "CDN_REGION", "CDN_ENDPOINT_URL", "CDN_TARGET_PATH_PREFIX", "CDN_ASSET_ROOT",
    "CDN_REFERENCE_REVISION", "CDN_BUILD_METADATA_PATH", "CDN_LIST_PAGE_SIZE",
]


@pytest.fixture
def env(monkeypatch):
    for k in OPTIONAL:
        monkeypatch.delenv(k, raising=False)
    for k, v in REQUIRED.items():
        monkeypatch.setenv(k, v)
    return monkeypatch


def test_defaults(env):
    cfg = load_config()
    assert cfg.CDN_BUCKET_NAME == "cdn-bucket"
    assert cfg.CDN_REGION == "ap-southeast-1"
    assert cfg.CDN_ENDPOINT_URL == "https://s3.ap-southeast-1.amazonaws.com"
    assert cfg.CDN_TARGET_PATH_PREFIX == "dev"
    assert cfg.ASSET_ROOT == "public"
    assert cfg.REFERENCE_REVISION == "origin/main"
    assert cfg.BUILD_METADATA_PATH == "package.json"
    assert cfg.LIST_PAGE_SIZE == 1000


def test_overrides(env):
    env.setenv("CDN_TARGET_PATH_PREFIX", "prod")
    env.setenv("CDN_LIST_PAGE_SIZE", "250")
    env.setenv("CDN_REFERENCE_REVISION", "origin/release")
    cfg = load_config()
    assert cfg.CDN_TARGET_PATH_PREFIX == "prod"
    assert cfg.LIST_PAGE_SIZE == 250
    assert cfg.REFERENCE_REVISION == "origin/release"


def test_bad_int_uses_default(env):
    env.setenv("CDN_LIST_PAGE_SIZE", "lots")
    assert load_config().LIST_PAGE_SIZE == 1000


@pytest.mark.parametrize("missing", sorted(REQUIRED))
def test_missing_required_is_fatal(env, capsys, missing):
    env.delenv(missing)
    with pytest.raises(SystemExit) as exc:
        load_config()
    assert exc.value.code == 1
    assert missing in capsys.readouterr().err


def test_locale_config(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_CDN_URL", "https://cdn.example.com/dev/b1/")
    monkeypatch.delenv("LOCALE_DEFAULT", raising=False)
    monkeypatch.delenv("LOCALE_HTTP_TIMEOUT", raising=False)
    cfg = load_locale_config()
    assert cfg.CDN_URL == "https://cdn.example.com/dev/b1"
    assert cfg.DEFAULT_LOCALE == "en"
    assert cfg.HTTP_TIMEOUT_SECONDS == 10.0


def test_locale_config_requires_cdn_url(monkeypatch):
    monkeypatch.delenv("NEXT_PUBLIC_CDN_URL", raising=False)
    with pytest.raises(SystemExit):
        load_locale_config()
