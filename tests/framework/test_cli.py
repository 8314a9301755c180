from __future__ import annotations

import json

import pytest

from cdnsync.domain.assets.entities import ObjectListing
from cdnsync.domain.assets.errors import StorageError
from cdnsync.framework.cli import postbuild, prebuild, sync
from fakes import FakeStorage


@pytest.fixture
def project(tmp_path, monkeypatch):
    """cwd = a tiny web project with package.json and public assets."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "web", "buildID": "b123"}), encoding="utf-8")
    img = tmp_path / "public" / "images"
    img.mkdir(parents=True)
    (img / "logo.png").write_bytes(b"png")
    (tmp_path / "public" / "robots.txt").write_text("x", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CDN_BUCKET_NAME", "cdn-bucket")
    monkeypatch.setenv("CDN_ACCESS_KEY_ID", "AKIA")
    monkeypatch.setenv("CDN_SECRET_ACCESS_KEY", "secret")
    monkeypatch.delenv("CDN_TARGET_PATH_PREFIX", raising=False)
    monkeypatch.delenv("CDN_BUILD_METADATA_PATH", raising=False)
    monkeypatch.delenv("CDN_ASSET_ROOT", raising=False)
    return tmp_path


def _use_storage(monkeypatch, module, storage):
    monkeypatch.setattr(module.S3ObjectStorage, "from_config", classmethod(lambda cls, cfg: storage))


def test_sync_all_uploads_full_tree(project, monkeypatch):
    storage = FakeStorage()
    _use_storage(monkeypatch, sync, storage)

    assert sync.main(["all"]) == 0
    assert storage.of("put") == [("put", "cdn-bucket", "dev/b123/images/logo.png", "image/png")]


def test_sync_default_is_incremental(project, monkeypatch):
    storage = FakeStorage()
    _use_storage(monkeypatch, sync, storage)
    seen = {}

    def fake_diff(self, reference, root):
        seen["args"] = (reference, root)
        return []

    monkeypatch.setattr(sync.GitChangeSource, "diff", fake_diff)

    assert sync.main([]) == 0
    assert seen["args"] == ("origin/main", "public")
    assert storage.calls == []


def test_sync_storage_failure_exits_1(project, monkeypatch):
    _use_storage(monkeypatch, sync, FakeStorage(fail_on="dev/b123/images/logo.png"))
    assert sync.main(["all"]) == 1


def test_sync_missing_metadata_exits_1(project, monkeypatch):
    (project / "package.json").unlink()
    _use_storage(monkeypatch, sync, FakeStorage())
    assert sync.main(["all"]) == 1


def test_sync_missing_config_exits_1(project, monkeypatch):
    monkeypatch.delenv("CDN_BUCKET_NAME")
    with pytest.raises(SystemExit) as exc:
        sync.main(["all"])
    assert exc.value.code == 1


def test_prebuild_cleans_and_rotates(project, monkeypatch):
    storage = FakeStorage(pages=[ObjectListing(keys=("dev/b123/images/logo.png",))])
    _use_storage(monkeypatch, prebuild, storage)

    assert prebuild.main() == 0

    assert storage.of("delete_batch") == [("delete_batch", "cdn-bucket", ("dev/b123/images/logo.png",))]
    data = json.loads((project / "package.json").read_text(encoding="utf-8"))
    assert data["name"] == "web"
    assert data["buildID"] != "b123"


def test_prebuild_failure_keeps_build_id(project, monkeypatch):
    class Denied(FakeStorage):
        def list_objects(self, *a, **kw):
            raise StorageError("AccessDenied")

    _use_storage(monkeypatch, prebuild, Denied())

    assert prebuild.main() == 1
    data = json.loads((project / "package.json").read_text(encoding="utf-8"))
    assert data["buildID"] == "b123"


def test_postbuild_uploads_mapped_roots(project, monkeypatch):
    static = project / ".next" / "static" / "chunks"
    static.mkdir(parents=True)
    (static / "main.js").write_bytes(b"js")
    storage = FakeStorage()
    _use_storage(monkeypatch, postbuild, storage)

    assert postbuild.main() == 0
    assert [c[2] for c in storage.of("put")] == [
        "dev/b123/images/logo.png",
        "dev/b123/_next/static/chunks/main.js",
    ]
