from __future__ import annotations

from typing import Any

import typer
from rich import print
from rich.markup import escape

from portfolio_hub.actions import ActionStatus
from portfolio_hub.config import load_config, read_config_file, write_config_file
from portfolio_hub.repository import ProjectRepository
from portfolio_hub.store import FileStorage, LocalProjectStore


def repository_from_path(storage_path: str | None) -> ProjectRepository:
    config = load_config()
    storage = FileStorage(storage_path or config.storage_path)
    return ProjectRepository(LocalProjectStore(storage, config.storage_key))


def read_config_or_exit() -> dict[str, Any]:
    try:
        return read_config_file()
    except ValueError as exc:
        print(f"[red]Invalid config file: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def write_config_or_exit(data: dict[str, Any]) -> None:
    try:
        write_config_file(data)
    except OSError as exc:
        print(f"[red]Failed to write config: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def report_status(status: ActionStatus) -> None:
    if status.ok:
        print(f"[green]{escape(status.message)}[/green]")
        return
    print(f"[red]{escape(status.message)}[/red]")
    raise typer.Exit(code=1)


def compact_text(text: str, limit: int) -> str:
    single = " ".join(text.split())
    if len(single) <= limit:
        return single
    return single[: max(limit - 1, 0)] + "…"
