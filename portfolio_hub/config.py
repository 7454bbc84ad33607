from __future__ import annotations

import json
import os
import warnings
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path("~/.config/portfolio-hub/config.json").expanduser()
DEFAULT_STORAGE_PATH = "~/.portfolio-hub/storage.json"
DEFAULT_STORAGE_KEY = "lt_projects_v1"

CONFIG_ENV_OVERRIDES = {
    "storage_path": "PORTFOLIO_HUB_STORAGE",
    "storage_key": "PORTFOLIO_HUB_STORAGE_KEY",
    "github_owner": "PORTFOLIO_HUB_GITHUB_OWNER",
    "github_repo": "PORTFOLIO_HUB_GITHUB_REPO",
    "github_token": "PORTFOLIO_HUB_GITHUB_TOKEN",
    "github_branch": "PORTFOLIO_HUB_GITHUB_BRANCH",
    "github_api_url": "PORTFOLIO_HUB_GITHUB_API_URL",
    "publish_dir": "PORTFOLIO_HUB_PUBLISH_DIR",
    "http_timeout_s": "PORTFOLIO_HUB_HTTP_TIMEOUT_S",
}

_INT_KEYS = {"http_timeout_s"}
SECRET_KEYS = {"github_token"}


def get_config_path(path: Path | None = None) -> Path:
    candidate = path or Path(os.getenv("PORTFOLIO_HUB_CONFIG", DEFAULT_CONFIG_PATH))
    return candidate.expanduser()


def read_config_file(path: Path | None = None) -> dict[str, Any]:
    config_path = get_config_path(path)
    if not config_path.exists():
        return {}
    raw = config_path.read_text()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("invalid config json") from exc
    if not isinstance(data, dict):
        raise ValueError("config must be an object")
    return data


def write_config_file(data: dict[str, Any], path: Path | None = None) -> Path:
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
    return config_path


def get_env_overrides() -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, env_var in CONFIG_ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value is not None:
            overrides[key] = value
    return overrides


@dataclass
class PortfolioHubConfig:
    storage_path: str = DEFAULT_STORAGE_PATH
    storage_key: str = DEFAULT_STORAGE_KEY
    github_owner: str = "luotun"
    github_repo: str = "luotun.github.io"
    github_token: str | None = None
    github_branch: str = "main"
    github_api_url: str = "https://api.github.com"
    publish_dir: str = "_projects"
    http_timeout_s: int = 15


def config_keys() -> list[str]:
    return [f.name for f in fields(PortfolioHubConfig)]


def _parse_int(value: object, default: int, *, key: str) -> int:
    if value is None:
        return default
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        warnings.warn(f"Invalid int for {key}: {value!r}", RuntimeWarning, stacklevel=2)
        return default


def load_config(path: Path | None = None) -> PortfolioHubConfig:
    cfg = PortfolioHubConfig()
    config_path = get_config_path(path)
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text())
        except json.JSONDecodeError:
            data = {}
        if isinstance(data, dict):
            cfg = _apply_dict(cfg, data)
    return _apply_dict(cfg, get_env_overrides())


def _apply_dict(cfg: PortfolioHubConfig, data: dict[str, Any]) -> PortfolioHubConfig:
    for key, value in data.items():
        if not hasattr(cfg, key):
            continue
        if key in _INT_KEYS:
            setattr(cfg, key, _parse_int(value, getattr(cfg, key), key=key))
            continue
        if value is None:
            if key in SECRET_KEYS:
                setattr(cfg, key, None)
            continue
        setattr(cfg, key, str(value))
    return cfg


def redact_config(data: dict[str, Any]) -> dict[str, Any]:
    redacted = dict(data)
    for key in SECRET_KEYS:
        value = redacted.get(key)
        if isinstance(value, str) and value:
            redacted[key] = f"{value[:4]}…" if len(value) > 8 else "***"
    return redacted
