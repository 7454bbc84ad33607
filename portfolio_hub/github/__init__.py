from __future__ import annotations

from .publish import (
    PublishResult,
    PublishTarget,
    build_content,
    commit_message,
    publish_project,
    remote_path,
)

__all__ = [
    "PublishResult",
    "PublishTarget",
    "build_content",
    "commit_message",
    "publish_project",
    "remote_path",
]
