from __future__ import annotations

from rich import print
from rich.markup import escape

from portfolio_hub import actions
from portfolio_hub.github import PublishTarget

from .common import report_status


def publish_cmd(
    *,
    repository_from_path,
    load_config,
    storage_path: str | None,
    project_id: str,
    owner: str | None,
    repo_name: str | None,
    token: str | None,
    branch: str | None,
) -> None:
    """Upload one project to the configured GitHub repository."""

    config = load_config()
    repo = repository_from_path(storage_path)
    target = PublishTarget(
        owner=owner or config.github_owner,
        repo=repo_name or config.github_repo,
        token=token if token is not None else config.github_token,
        branch=branch or config.github_branch,
        api_url=config.github_api_url,
        publish_dir=config.publish_dir,
        timeout_s=float(config.http_timeout_s),
    )
    if target.token:
        print(f"Uploading to GitHub {escape(target.owner)}/{escape(target.repo)}...")
    report_status(actions.publish(repo, project_id, target))
