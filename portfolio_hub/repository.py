from __future__ import annotations

import datetime as dt
import logging
import time
from collections.abc import Callable
from pathlib import Path

from .encoder import read_file_as_data_url
from .errors import ValidationError
from .store import LocalProjectStore, Project

logger = logging.getLogger(__name__)

Confirm = bool | Callable[[], bool]


def _now_ms() -> int:
    return int(time.time() * 1000)


def format_timestamp(epoch_ms: int) -> str:
    moment = dt.datetime.fromtimestamp(epoch_ms / 1000, tz=dt.timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProjectRepository:
    """In-memory working copy of the projects, newest first.

    Every mutation writes the complete collection back through the store.
    """

    def __init__(self, store: LocalProjectStore, *, clock: Callable[[], int] | None = None):
        self.store = store
        self._clock = clock or _now_ms
        self._projects: list[Project] = store.load()
        self.store.save(self._projects)

    def _next_id(self, now_ms: int) -> str:
        taken = {project.id for project in self._projects}
        candidate = now_ms
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def create(
        self,
        title: str,
        description: str = "",
        file_path: str | Path | None = None,
    ) -> Project:
        if not title or not title.strip():
            raise ValidationError("title is required")

        filename = ""
        file_data = None
        if file_path is not None:
            file_data = read_file_as_data_url(file_path)
            filename = Path(file_path).name

        now_ms = self._clock()
        project = Project(
            id=self._next_id(now_ms),
            title=title,
            description=description or "",
            filename=filename,
            file_data=file_data,
            created_at=format_timestamp(now_ms),
        )
        self._projects = [project, *self._projects]
        self.store.save(self._projects)
        logger.info("created project %s", project.id)
        return project

    def list(self) -> list[Project]:
        return list(self._projects)

    def get(self, project_id: str) -> Project | None:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def delete(self, project_id: str, confirm: Confirm) -> bool:
        confirmed = confirm() if callable(confirm) else bool(confirm)
        if not confirmed:
            return False
        remaining = [project for project in self._projects if project.id != project_id]
        removed = len(remaining) != len(self._projects)
        self._projects = remaining
        self.store.save(self._projects)
        if removed:
            logger.info("deleted project %s", project_id)
        return removed
