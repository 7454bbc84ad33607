import json
from pathlib import Path

import pytest

from portfolio_hub.config import (
    get_config_path,
    get_env_overrides,
    load_config,
    read_config_file,
    redact_config,
    write_config_file,
)


def test_read_config_file_rejects_invalid_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not-json}")
    with pytest.raises(ValueError, match="invalid config json"):
        read_config_file(config_path)


def test_read_config_file_rejects_non_object(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2]")
    with pytest.raises(ValueError, match="config must be an object"):
        read_config_file(config_path)


def test_read_config_file_missing_or_blank_is_empty(tmp_path: Path) -> None:
    assert read_config_file(tmp_path / "nope.json") == {}
    blank = tmp_path / "blank.json"
    blank.write_text("  \n")
    assert read_config_file(blank) == {}


def test_write_config_file_creates_parent_dirs(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "dir" / "config.json"
    written = write_config_file({"github_owner": "octo"}, config_path)
    assert written == config_path
    assert json.loads(config_path.read_text()) == {"github_owner": "octo"}


def test_get_config_path_honours_env(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("PORTFOLIO_HUB_CONFIG", str(target))
    assert get_config_path() == target


def test_load_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("PORTFOLIO_HUB_STORAGE", raising=False)
    cfg = load_config()
    assert cfg.storage_key == "lt_projects_v1"
    assert cfg.github_branch == "main"
    assert cfg.github_token is None
    assert cfg.publish_dir == "_projects"
    assert cfg.http_timeout_s == 15


def test_load_config_file_then_env(monkeypatch, tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"github_owner": "from-file", "github_repo": "site", "unknown": 1})
    )
    monkeypatch.setenv("PORTFOLIO_HUB_GITHUB_OWNER", "from-env")

    cfg = load_config(config_path)

    assert cfg.github_owner == "from-env"
    assert cfg.github_repo == "site"
    assert not hasattr(cfg, "unknown")


def test_load_config_ignores_corrupt_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{broken")
    assert load_config(config_path).github_owner == "luotun"


def test_invalid_int_warns_and_keeps_default(monkeypatch) -> None:
    monkeypatch.setenv("PORTFOLIO_HUB_HTTP_TIMEOUT_S", "soon")
    with pytest.warns(RuntimeWarning, match="http_timeout_s"):
        cfg = load_config()
    assert cfg.http_timeout_s == 15


def test_get_env_overrides_only_reports_set_vars(monkeypatch) -> None:
    monkeypatch.delenv("PORTFOLIO_HUB_STORAGE", raising=False)
    monkeypatch.setenv("PORTFOLIO_HUB_GITHUB_TOKEN", "ghp_secret")
    assert get_env_overrides() == {"github_token": "ghp_secret"}


def test_redact_config_hides_token() -> None:
    redacted = redact_config({"github_token": "ghp_abcdefghijkl", "github_owner": "octo"})
    assert "abcdefghijkl" not in redacted["github_token"]
    assert redacted["github_owner"] == "octo"
    assert redact_config({"github_token": None})["github_token"] is None
