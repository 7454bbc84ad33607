from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from ..fs_paths import ensure_path

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class FileStorage:
    """Key-value slots kept in a single JSON object file.

    Every value is a string, the same contract as browser ``localStorage``.
    A missing or corrupt file reads as empty; writes rewrite the whole file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("storage file unreadable: %s", self.path, exc_info=exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("storage file is not an object: %s", self.path)
            return {}
        items = {str(k): v for k, v in data.items() if isinstance(v, str)}
        dropped = sorted(str(k) for k, v in data.items() if not isinstance(v, str))
        if dropped:
            logger.warning(
                "ignoring non-string storage entries in %s: %s", self.path, ", ".join(dropped)
            )
        return items

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        path = ensure_path(self.path)
        path.write_text(json.dumps(items, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
