from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict


class ProjectRecord(TypedDict):
    id: str
    title: str
    description: str
    filename: str
    fileData: str | None
    createdAt: str


@dataclass
class Project:
    id: str
    title: str
    description: str
    filename: str
    file_data: str | None
    created_at: str

    @property
    def has_file(self) -> bool:
        return self.file_data is not None

    def to_record(self) -> ProjectRecord:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "filename": self.filename,
            "fileData": self.file_data,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Project:
        description = record.get("description")
        if description is None:
            # Records written by the browser page used "desc".
            description = record.get("desc")
        file_data = record.get("fileData")
        return cls(
            id=str(record["id"]),
            title=str(record.get("title") or ""),
            description=str(description or ""),
            filename=str(record.get("filename") or ""),
            file_data=file_data if isinstance(file_data, str) and file_data else None,
            created_at=str(record.get("createdAt") or ""),
        )
