import importlib.util
from pathlib import Path


def _load_validate_env():
    """Load scripts/validate_env.py as a module."""
    repo_root = Path(__file__).resolve().parents[2]
    mod_path = repo_root / "scripts" / "validate_env.py"
    spec = importlib.util.spec_from_file_location("validate_env", str(mod_path))
    mod = importlib.util.module_from_spec(spec)  # type: ignore[arg-type]
    assert spec and spec.loader, "could not load validate_env.py"
    spec.loader.exec_module(mod)  # type: ignore[assignment]
    return mod


def test_parse_env_strips_quotes_and_comments(tmp_path):
    mod = _load_validate_env()
    p = tmp_path / ".env"
    p.write_text('# comment\nCDN_BUCKET_NAME="assets"\n\nCDN_REGION=ap-southeast-1\nnot a line\n', encoding="utf-8")
    assert mod.parse_env(p) == {"CDN_BUCKET_NAME": "assets", "CDN_REGION": "ap-southeast-1"}


def test_main_ok_and_missing(tmp_path, capsys):
    mod = _load_validate_env()
    good = tmp_path / "good.env"
    good.write_text("CDN_BUCKET_NAME=a\nCDN_ACCESS_KEY_ID=b\nCDN_SECRET_ACCESS_KEY=c\n", encoding="utf-8")
    bad = tmp_path / "bad.env"
    bad.write_text("CDN_BUCKET_NAME=a\nCDN_ACCESS_KEY_ID=\n", encoding="utf-8")

    assert mod.main([str(good)]) == 0
    assert mod.main([str(bad)]) == 1
    out = capsys.readouterr().out
    assert "Missing required keys: CDN_ACCESS_KEY_ID, CDN_SECRET_ACCESS_KEY" in out


def test_main_file_not_found(tmp_path):
    mod = _load_validate_env()
    assert mod.main([str(tmp_path / "nope.env")]) == 1
