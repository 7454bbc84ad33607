from __future__ import annotations

import base64
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from http.client import HTTPException
from typing import Any
from urllib.parse import quote

from ..encoder import strip_data_url_header
from ..errors import MissingCredentialError, RemoteRejectionError, TransportError
from ..store import Project
from .http_client import build_base_url, request_json

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_PUBLISH_DIR = "_projects"

RequestFn = Callable[..., tuple[int, dict[str, Any] | None]]


@dataclass
class PublishTarget:
    owner: str
    repo: str
    token: str | None
    branch: str = "main"
    api_url: str = DEFAULT_API_URL
    publish_dir: str = DEFAULT_PUBLISH_DIR
    timeout_s: float = 15.0


@dataclass
class PublishResult:
    path: str
    sha: str | None
    created: bool


def remote_path(project: Project, publish_dir: str = DEFAULT_PUBLISH_DIR) -> str:
    prefix = publish_dir.strip("/")
    name = f"{project.id}_{project.filename or project.title}.data"
    return f"{prefix}/{name}" if prefix else name


def build_content(project: Project) -> str:
    if project.file_data:
        return strip_data_url_header(project.file_data)
    metadata = json.dumps(
        {"title": project.title, "description": project.description}, ensure_ascii=False
    )
    return base64.b64encode(metadata.encode("utf-8")).decode("ascii")


def commit_message(project: Project) -> str:
    return f"Add project {project.title} ({project.id}) via portfolio site"


def contents_url(target: PublishTarget, path: str) -> str:
    base = build_base_url(target.api_url) or DEFAULT_API_URL
    owner = quote(target.owner, safe="")
    repo = quote(target.repo, safe="")
    return f"{base}/repos/{owner}/{repo}/contents/{quote(path, safe='/')}"


def _remote_message(payload: dict[str, Any] | None) -> str:
    if not payload:
        return "empty response"
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return json.dumps(payload, ensure_ascii=False)


def publish_project(
    project: Project,
    target: PublishTarget,
    *,
    request: RequestFn = request_json,
) -> PublishResult:
    """Create or update the project's file in the target repository.

    Reads the existing object first so an update can pass its ``sha``;
    a not-found read means the write creates the object. A single attempt,
    no retries.
    """
    if not target.token:
        raise MissingCredentialError("GitHub token required")

    path = remote_path(project, target.publish_dir)
    url = contents_url(target, path)
    logger.info("publishing project %s to %s/%s:%s", project.id, target.owner, target.repo, path)

    try:
        status, payload = request("GET", url, token=target.token, timeout_s=target.timeout_s)
        sha = None
        if status == 200 and payload and isinstance(payload.get("sha"), str):
            sha = payload["sha"]
        elif status != 404:
            logger.warning("contents read for %s returned %s; writing without sha", path, status)

        body: dict[str, Any] = {
            "message": commit_message(project),
            "content": build_content(project),
            "branch": target.branch,
        }
        if sha:
            body["sha"] = sha
        status, payload = request(
            "PUT", url, token=target.token, body=body, timeout_s=target.timeout_s
        )
    except (OSError, HTTPException, ValueError) as exc:
        raise TransportError(str(exc) or type(exc).__name__) from exc

    if not 200 <= status < 300:
        raise RemoteRejectionError(status, _remote_message(payload))

    content = (payload or {}).get("content")
    content = content if isinstance(content, dict) else {}
    result = PublishResult(
        path=str(content.get("path") or path),
        sha=content.get("sha") if isinstance(content.get("sha"), str) else None,
        created=sha is None,
    )
    logger.info("published project %s (%s)", project.id, "created" if result.created else "updated")
    return result
