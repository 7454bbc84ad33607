from __future__ import annotations

import logging
from typing import Any

import typer
from rich import print

from . import __version__
from .commands.common import read_config_or_exit, repository_from_path, write_config_or_exit
from .commands.config_cmds import config_set_cmd, config_show_cmd
from .commands.project_cmds import add_cmd, delete_cmd, download_cmd, list_cmd, show_cmd
from .commands.publish_cmds import publish_cmd
from .config import load_config
from .repository import ProjectRepository

app = typer.Typer(help="portfolio-hub: keep portfolio projects locally and publish them to GitHub")
config_app = typer.Typer(help="Show or change settings")
app.add_typer(config_app, name="config")


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _repo(storage_path: str | None) -> ProjectRepository:
    return repository_from_path(storage_path)


def _read_config_or_exit() -> dict[str, Any]:
    return read_config_or_exit()


def _write_config_or_exit(data: dict[str, Any]) -> None:
    write_config_or_exit(data)


@app.command()
def add(
    title: str = typer.Argument(help="Project title"),
    description: str = typer.Option("", "--description", "-d", help="Project description"),
    file: str = typer.Option(None, "--file", "-f", help="File to attach"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """Save a new project locally."""

    add_cmd(
        repository_from_path=_repo,
        storage_path=storage,
        title=title,
        description=description,
        file_path=file,
    )


@app.command("list")
def list_projects(
    limit: int = typer.Option(None, help="Show at most this many projects"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """List projects, newest first."""

    list_cmd(repository_from_path=_repo, storage_path=storage, limit=limit)


@app.command()
def show(
    project_id: str = typer.Argument(help="Project id"),
    with_data: bool = typer.Option(False, help="Include the encoded file payload"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """Print a project as JSON."""

    show_cmd(
        repository_from_path=_repo,
        storage_path=storage,
        project_id=project_id,
        with_data=with_data,
    )


@app.command()
def delete(
    project_id: str = typer.Argument(help="Project id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """Delete a project locally. Copies already on GitHub are kept."""

    delete_cmd(repository_from_path=_repo, storage_path=storage, project_id=project_id, yes=yes)


@app.command()
def download(
    project_id: str = typer.Argument(help="Project id"),
    output: str = typer.Option(".", "--output", "-o", help="Directory to write the file to"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """Write a project's attached file to disk."""

    download_cmd(
        repository_from_path=_repo, storage_path=storage, project_id=project_id, output=output
    )


@app.command()
def publish(
    project_id: str = typer.Argument(help="Project id"),
    owner: str = typer.Option(None, help="GitHub user or organisation"),
    repo: str = typer.Option(None, "--repo", help="Repository name"),
    token: str = typer.Option(None, help="GitHub personal access token (needs repo scope)"),
    branch: str = typer.Option(None, help="Target branch"),
    storage: str = typer.Option(None, help="Path to the local storage file"),
) -> None:
    """Upload one project to GitHub under _projects/."""

    publish_cmd(
        repository_from_path=_repo,
        load_config=load_config,
        storage_path=storage,
        project_id=project_id,
        owner=owner,
        repo_name=repo,
        token=token,
        branch=branch,
    )


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration."""

    config_show_cmd(load_config=load_config)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Setting name"),
    value: str = typer.Argument(help="Setting value"),
) -> None:
    """Store a setting in the config file."""

    config_set_cmd(
        read_config_or_exit=_read_config_or_exit,
        write_config_or_exit=_write_config_or_exit,
        key=key,
        value=value,
    )


@app.command("version")
def version() -> None:
    """Print version."""

    print(__version__)


def main() -> None:
    app()
