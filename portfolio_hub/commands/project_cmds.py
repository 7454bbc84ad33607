from __future__ import annotations

import json

import typer
from rich import print
from rich.markup import escape

from portfolio_hub import actions

from .common import compact_text, report_status


def add_cmd(
    *,
    repository_from_path,
    storage_path: str | None,
    title: str,
    description: str,
    file_path: str | None,
) -> None:
    """Create a project and save it locally."""

    repo = repository_from_path(storage_path)
    status = actions.add_project(repo, title, description, file_path)
    if status.ok and status.project is not None:
        print(f"[{status.project.id}] {escape(status.project.title)}")
    report_status(status)


def list_cmd(*, repository_from_path, storage_path: str | None, limit: int | None) -> None:
    """Print projects, newest first."""

    repo = repository_from_path(storage_path)
    projects = repo.list()
    if not projects:
        print("No projects yet. Add the first one with `portfolio-hub add`.")
        return
    print(f"{len(projects)} project(s)")
    if limit:
        projects = projects[:limit]
    for project in projects:
        attachment = escape(project.filename) if project.has_file else "[dim]no file[/dim]"
        print(f"[bold]\\[{escape(project.id)}][/bold] {escape(project.title)} ({attachment})")
        if project.description:
            print(f"  {escape(compact_text(project.description, 100))}")
        print(f"  [dim]{escape(project.created_at)}[/dim]")


def show_cmd(
    *, repository_from_path, storage_path: str | None, project_id: str, with_data: bool
) -> None:
    """Print a project as JSON."""

    repo = repository_from_path(storage_path)
    project = repo.get(project_id)
    if project is None:
        print(f"[red]Project {escape(project_id)} not found[/red]")
        raise typer.Exit(code=1)
    record = dict(project.to_record())
    if not with_data and record.get("fileData"):
        record["fileData"] = f"<{len(record['fileData'])} chars>"
    print(escape(json.dumps(record, indent=2, ensure_ascii=False)))


def delete_cmd(
    *, repository_from_path, storage_path: str | None, project_id: str, yes: bool
) -> None:
    """Delete a project from local storage; published copies stay on GitHub."""

    repo = repository_from_path(storage_path)

    def _confirm() -> bool:
        if yes:
            return True
        return typer.confirm(f"Delete project {project_id}? (local only)", default=False)

    report_status(actions.delete_project(repo, project_id, _confirm))


def download_cmd(
    *, repository_from_path, storage_path: str | None, project_id: str, output: str
) -> None:
    """Write a project's attached file to disk."""

    repo = repository_from_path(storage_path)
    report_status(actions.download_project(repo, project_id, output))
