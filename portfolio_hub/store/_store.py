from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..config import DEFAULT_STORAGE_KEY
from .storage import KeyValueStorage
from .types import Project

logger = logging.getLogger(__name__)


class LocalProjectStore:
    """Persists the whole project collection in one storage slot."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> list[Project]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("stored projects are not valid json; starting empty", exc_info=exc)
            return []
        if not isinstance(data, list):
            logger.warning("stored projects are not a list; starting empty")
            return []
        projects: list[Project] = []
        for index, record in enumerate(data):
            if not isinstance(record, dict) or not isinstance(record.get("id"), str):
                logger.warning("skipping malformed project record at index %d", index)
                continue
            projects.append(_pair_file_fields(Project.from_record(record)))
        return projects

    def save(self, projects: Sequence[Project]) -> None:
        payload = json.dumps(
            [project.to_record() for project in projects],
            ensure_ascii=False,
            separators=(",", ":"),
        )
        self.storage.set_item(self.key, payload)


def _pair_file_fields(project: Project) -> Project:
    # filename and fileData are set together; repair records that lost one half.
    if project.file_data is not None and not project.filename:
        logger.warning("project %s has file data but no filename; using its title", project.id)
        project.filename = project.title or project.id
    elif project.file_data is None and project.filename:
        logger.warning("project %s names a file but has no data; dropping filename", project.id)
        project.filename = ""
    return project
