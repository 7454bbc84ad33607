from __future__ import annotations

from ._store import LocalProjectStore
from .storage import FileStorage, KeyValueStorage, MemoryStorage
from .types import Project, ProjectRecord

__all__ = [
    "FileStorage",
    "KeyValueStorage",
    "LocalProjectStore",
    "MemoryStorage",
    "Project",
    "ProjectRecord",
]
