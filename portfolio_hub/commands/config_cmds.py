from __future__ import annotations

import json
from dataclasses import asdict

import typer
from rich import print
from rich.markup import escape

from portfolio_hub.config import config_keys, get_config_path, redact_config


def config_show_cmd(*, load_config) -> None:
    """Print the effective configuration (file plus environment)."""

    config = load_config()
    print(f"# {escape(str(get_config_path()))}")
    print(escape(json.dumps(redact_config(asdict(config)), indent=2, ensure_ascii=False)))


def config_set_cmd(*, read_config_or_exit, write_config_or_exit, key: str, value: str) -> None:
    """Store a single setting in the config file."""

    if key not in config_keys():
        print(f"[red]Unknown config key: {escape(key)}[/red]")
        print(f"Known keys: {', '.join(config_keys())}")
        raise typer.Exit(code=1)
    data = read_config_or_exit()
    data[key] = value
    write_config_or_exit(data)
    shown = redact_config({key: value})[key]
    print(escape(f"Set {key} = {shown}"))
