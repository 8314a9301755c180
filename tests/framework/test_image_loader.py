from __future__ import annotations

import pytest

from cdnsync.framework.images import cloudfront_loader


def test_loader_uses_public_env(monkeypatch):
    monkeypatch.setenv("NEXT_PUBLIC_CDN_URL", "https://cdn.example.com/dev/b1")
    monkeypatch.setenv("NEXT_PUBLIC_BUCKET_PUBLIC_URL", "https://bucket.example.com")

    assert cloudfront_loader("https://bucket.example.com/x.png", 100) == "https://bucket.example.com/x.png"
    assert cloudfront_loader("/images/a.png", 100, 50) == (
        "https://cdn.example.com/dev/b1/images/a.png?format=auto&width=100&quality=50"
    )


@pytest.mark.parametrize("value", [None, ""])
def test_loader_requires_cdn_url(monkeypatch, value):
    if value is None:
        monkeypatch.delenv("NEXT_PUBLIC_CDN_URL", raising=False)
    else:
        monkeypatch.setenv("NEXT_PUBLIC_CDN_URL", value)
    monkeypatch.delenv("NEXT_PUBLIC_BUCKET_PUBLIC_URL", raising=False)

    with pytest.raises(RuntimeError, match="NEXT_PUBLIC_CDN_URL"):
        cloudfront_loader("/images/a.png", 100)
