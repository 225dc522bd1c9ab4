from __future__ import annotations

from ethica_core.contracts import ContractViolation, validate_record
from ethica_core.enums import ItemKind
from ethica_core.models import EthicsItem

from ingest_service.errors import BuildReport, CorpusValidationError, WarningType

ALLOWED_PARTS = frozenset({1, 2, 3, 4, 5})
ALLOWED_KINDS = frozenset(k.value for k in ItemKind)


def validate_corpus(items: list[EthicsItem], *, min_size: int = 200, report: BuildReport | None = None) -> None:
    """
    Check global invariants before anything is written.

    Duplicate ids, parts outside 1..5, unknown kinds and records breaking the
    JSON contract are fatal (raised together as one CorpusValidationError).
    A corpus smaller than `min_size` only produces a warning.
    """
    problems: list[str] = []
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            problems.append(f"Duplicate id in corpus: {item.id}")
        seen.add(item.id)

        if item.part not in ALLOWED_PARTS:
            problems.append(f"Invalid part on item {item.id}: {item.part}")

        kind = item.kind.value if isinstance(item.kind, ItemKind) else item.kind
        if kind not in ALLOWED_KINDS:
            problems.append(f"Invalid kind on item {item.id}: {kind}")
            continue

        try:
            validate_record(item.to_record())
        except ContractViolation as exc:
            problems.append(f"Schema violation: {exc.message}")

    if problems:
        raise CorpusValidationError("Corpus validation failed:\n" + "\n".join(f"  - {p}" for p in problems))

    if report is not None and len(items) < min_size:
        report.warn(
            WarningType.SMALL_CORPUS,
            f"Corpus only has {len(items)} items; expected at least {min_size} (check parsing).",
        )
