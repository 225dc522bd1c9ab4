from __future__ import annotations

import json
from dataclasses import dataclass
from hashlib import sha256
from pathlib import Path

from pydantic import ValidationError

from ethica_core.enums import ItemKind
from ethica_core.models import EthicsItem

from ingest_service.errors import CorpusBuildError, CorpusValidationError, MissingInputError


@dataclass(frozen=True)
class WriteResult:
    path: Path
    count: int
    sha256: str


@dataclass(frozen=True)
class CorpusSummary:
    total: int
    by_kind: dict[str, int]
    parts: list[int]


def serialize_corpus(items: list[EthicsItem]) -> str:
    payload = [item.to_record() for item in items]
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def write_corpus(items: list[EthicsItem], path: Path) -> WriteResult:
    """
    Write the corpus JSON, replacing any existing file.

    The text goes to a sibling temp file first, so a failure never leaves a
    half-written corpus at `path`.
    """
    data = serialize_corpus(items).encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_bytes(data)
    tmp_path.replace(path)
    return WriteResult(path=path, count=len(items), sha256=sha256(data).hexdigest())


def load_corpus(path: Path) -> list[EthicsItem]:
    if not path.is_file():
        raise MissingInputError([path], remediation="ethica build")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CorpusBuildError(f"Corpus file {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise CorpusValidationError(f"Corpus file {path} must contain a JSON array of records")
    try:
        return [EthicsItem.model_validate(record) for record in payload]
    except ValidationError as exc:
        raise CorpusValidationError(f"Corpus file {path} has invalid records:\n{exc}") from exc


def summarize(items: list[EthicsItem]) -> CorpusSummary:
    by_kind = {kind.value: 0 for kind in ItemKind}
    for item in items:
        by_kind[ItemKind(item.kind).value] += 1
    return CorpusSummary(
        total=len(items),
        by_kind={k: v for k, v in by_kind.items() if v},
        parts=sorted({item.part for item in items}),
    )
