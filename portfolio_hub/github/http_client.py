from __future__ import annotations

import json
from http.client import HTTPConnection, HTTPSConnection
from typing import Any
from urllib.parse import urlparse

from .. import __version__

GITHUB_ACCEPT = "application/vnd.github.v3+json"
USER_AGENT = f"portfolio-hub/{__version__}"


def build_base_url(address: str) -> str:
    trimmed = address.strip().rstrip("/")
    if not trimmed:
        return ""
    parsed = urlparse(trimmed)
    if parsed.scheme:
        return trimmed
    return f"https://{trimmed}"


def github_headers(token: str | None = None) -> dict[str, str]:
    headers = {"Accept": GITHUB_ACCEPT, "User-Agent": USER_AGENT}
    if token:
        # Classic "token" scheme; fine-grained PATs accept it too.
        headers["Authorization"] = f"token {token}"
    return headers


def _error_payload(raw: bytes) -> dict[str, Any]:
    snippet = raw[:240].decode("utf-8", errors="replace").strip()
    return {"message": f"non_json_response: {snippet}" if snippet else "non_json_response"}


def request_json(
    method: str,
    url: str,
    *,
    token: str | None = None,
    body: dict[str, Any] | None = None,
    timeout_s: float = 15.0,
) -> tuple[int, dict[str, Any] | None]:
    """Send one GitHub REST call and decode the JSON object it returns.

    Non-JSON and non-object bodies are folded into ``{"message": ...}`` so
    callers read failures the same way GitHub reports its own errors.
    """
    parsed = urlparse(url)
    if not parsed.hostname:
        raise ValueError("missing hostname")
    if parsed.scheme == "https":
        conn = HTTPSConnection(parsed.hostname, parsed.port or 443, timeout=timeout_s)
    else:
        conn = HTTPConnection(parsed.hostname, parsed.port or 80, timeout=timeout_s)
    path = parsed.path or "/"
    if parsed.query:
        path = f"{path}?{parsed.query}"
    request_headers = github_headers(token)
    body_bytes = None
    if body is not None:
        body_bytes = json.dumps(body, ensure_ascii=False).encode("utf-8")
        request_headers["Content-Type"] = "application/json"
        request_headers["Content-Length"] = str(len(body_bytes))
    try:
        conn.request(method, path, body=body_bytes, headers=request_headers)
        resp = conn.getresponse()
        status = int(resp.status)
        raw = resp.read()
    finally:
        conn.close()
    if not raw:
        return status, None
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return status, _error_payload(raw)
    if isinstance(payload, dict):
        return status, payload
    return status, {"message": f"unexpected_json_type: {type(payload).__name__}"}
