from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .encoder import write_download
from .errors import (
    FileReadError,
    MissingCredentialError,
    NoFileAttachedError,
    RemoteRejectionError,
    TransportError,
    ValidationError,
)
from .github import PublishTarget, publish_project
from .github.http_client import request_json
from .github.publish import RequestFn
from .repository import Confirm, ProjectRepository
from .store import Project

logger = logging.getLogger(__name__)

SAVED_LOCALLY = "Saved project locally. Use `publish` to upload it to GitHub."
MISSING_TOKEN = "GitHub token required: pass --token or set PORTFOLIO_HUB_GITHUB_TOKEN"


@dataclass
class ActionStatus:
    ok: bool
    message: str
    project: Project | None = None
    path: str | None = None


def add_project(
    repo: ProjectRepository,
    title: str,
    description: str = "",
    file_path: str | Path | None = None,
) -> ActionStatus:
    try:
        project = repo.create(title, description, file_path)
    except ValidationError:
        return ActionStatus(False, "Please enter a title")
    except FileReadError as exc:
        logger.warning("file read failed: %s", exc)
        return ActionStatus(False, f"Could not read file: {exc}")
    return ActionStatus(True, SAVED_LOCALLY, project=project)


def delete_project(repo: ProjectRepository, project_id: str, confirm: Confirm) -> ActionStatus:
    if repo.get(project_id) is None:
        return ActionStatus(False, f"Project {project_id} not found")
    if not repo.delete(project_id, confirm):
        return ActionStatus(False, "Delete cancelled")
    return ActionStatus(True, f"Deleted project {project_id} (local only)")


def download_project(
    repo: ProjectRepository, project_id: str, dest_dir: str | Path
) -> ActionStatus:
    project = repo.get(project_id)
    if project is None:
        return ActionStatus(False, f"Project {project_id} not found")
    try:
        target = write_download(project, dest_dir)
    except NoFileAttachedError:
        return ActionStatus(False, "This project has no file to download", project=project)
    except (OSError, ValueError) as exc:
        return ActionStatus(False, f"Download failed: {exc}", project=project)
    return ActionStatus(True, f"Saved file to {target}", project=project, path=str(target))


def publish(
    repo: ProjectRepository,
    project_id: str,
    target: PublishTarget,
    *,
    request: RequestFn = request_json,
) -> ActionStatus:
    project = repo.get(project_id)
    if project is None:
        return ActionStatus(False, f"Project {project_id} not found")
    try:
        result = publish_project(project, target, request=request)
    except MissingCredentialError:
        return ActionStatus(False, MISSING_TOKEN, project=project)
    except RemoteRejectionError as exc:
        logger.warning("publish rejected (%s): %s", exc.status, exc.remote_message)
        return ActionStatus(False, f"Upload failed: {exc.remote_message}", project=project)
    except TransportError as exc:
        logger.warning("publish transport error: %s", exc)
        return ActionStatus(False, f"Upload error: {exc}", project=project)
    return ActionStatus(True, f"Uploaded: {result.path}", project=project, path=result.path)
