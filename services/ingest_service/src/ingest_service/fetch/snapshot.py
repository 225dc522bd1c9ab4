from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from hashlib import sha256
from pathlib import Path

import httpx

from ingest_service.errors import FetchError


@dataclass(frozen=True)
class Snapshot:
    url: str
    fetched_at: datetime
    content_type: str | None
    sha256: str
    size: int
    raw_path: Path


def candidate_urls(url: str) -> list[str]:
    if url.startswith("https://"):
        return [url, "http://" + url[len("https://") :]]
    return [url]


def fetch_source(
    url: str,
    target: Path,
    *,
    user_agent: str,
    timeout_s: float = 30.0,
    max_bytes: int = 20_000_000,
    transport: httpx.BaseTransport | None = None,
) -> Snapshot:
    """
    Download one raw source document to `target`, bytes as served.

    The https URL is tried first, then its plain-http variant. Every candidate
    failing raises FetchError naming each attempt.
    """
    headers = {"User-Agent": user_agent}
    failures: list[str] = []
    with httpx.Client(timeout=timeout_s, headers=headers, follow_redirects=True, transport=transport) as client:
        for candidate in candidate_urls(url):
            try:
                resp = client.get(candidate)
                resp.raise_for_status()
            except httpx.HTTPError as exc:
                failures.append(f"{candidate}: {exc}")
                continue
            content = resp.content
            if len(content) > max_bytes:
                raise FetchError(f"Refusing to store {len(content)} bytes from {candidate} (max_bytes={max_bytes})")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
            return Snapshot(
                url=candidate,
                fetched_at=datetime.now(timezone.utc),
                content_type=resp.headers.get("content-type"),
                sha256=sha256(content).hexdigest(),
                size=len(content),
                raw_path=target,
            )
    raise FetchError("Could not fetch " + url + ":\n" + "\n".join(f"  - {f}" for f in failures))
