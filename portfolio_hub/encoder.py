from __future__ import annotations

import base64
import binascii
import mimetypes
from pathlib import Path

from .errors import FileReadError, NoFileAttachedError
from .fs_paths import ensure_dir
from .store.types import Project

DEFAULT_MIME_TYPE = "application/octet-stream"


def encode_bytes(data: bytes, mime_type: str | None = None) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def guess_mime_type(filename: str) -> str:
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or DEFAULT_MIME_TYPE


def read_file_as_data_url(path: str | Path) -> str:
    file_path = Path(path).expanduser()
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise FileReadError(f"could not read {file_path}: {exc.strerror or exc}") from exc
    return encode_bytes(data, guess_mime_type(file_path.name))


def strip_data_url_header(payload: str) -> str:
    _, sep, content = payload.partition(",")
    return content if sep else payload


def decode_data_url(payload: str) -> tuple[str, bytes]:
    """Split a ``data:`` URL into its MIME type and raw bytes."""
    header, sep, content = payload.partition(",")
    if not sep:
        header, content = "", payload
    mime_type = DEFAULT_MIME_TYPE
    if header.startswith("data:"):
        mime_type = header[len("data:") :].split(";", 1)[0] or DEFAULT_MIME_TYPE
    try:
        data = base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("invalid base64 payload") from exc
    return mime_type, data


def download_filename(project: Project) -> str:
    return project.filename or project.title


def write_download(project: Project, dest_dir: str | Path) -> Path:
    if project.file_data is None:
        raise NoFileAttachedError("this project has no file to download")
    _, data = decode_data_url(project.file_data)
    # Keep the write inside dest_dir even for names like "../x".
    name = Path(download_filename(project)).name or project.id
    target = ensure_dir(dest_dir) / name
    target.write_bytes(data)
    return target
