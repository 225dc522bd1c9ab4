from __future__ import annotations

import re
from collections.abc import Iterable

from ethica_core.models import Dependency, EthicsItem
from ethica_core.roman import roman_to_int

_REFERENCE_SCANS: list[tuple[re.Pattern[str], str, str]] = [
    (re.compile(r"\bDEF\.?\s+([IVXLCDM]+|\d+)\b"), "D", "definition"),
    (re.compile(r"\bAX\.?\s+([IVXLCDM]+|\d+)\b"), "Ax", "axiom"),
    (re.compile(r"\bPROP\.?\s+([IVXLCDM]+|\d+)\b"), "p", "proposition"),
]


def infer_dependencies(item: EthicsItem, corpus_ids: set[str]) -> list[Dependency]:
    """
    Pick up explicit "Def. 3", "Ax. V", "Prop. II" style references in the
    item's own part. Unknown ids and self-references are ignored.
    """
    text = f"{item.text.translation} {item.text.original}".upper()
    deps: list[Dependency] = []
    seen: set[str] = set()
    for pattern, code, role in _REFERENCE_SCANS:
        for m in pattern.finditer(text):
            raw = m.group(1)
            n = int(raw) if raw.isdigit() else roman_to_int(raw)
            candidate = f"E{item.part}{code}{n}"
            if n <= 0 or candidate == item.id or candidate in seen or candidate not in corpus_ids:
                continue
            seen.add(candidate)
            deps.append(Dependency(id=candidate, role=role))
    return deps


def merge_dependencies(*groups: Iterable[Dependency]) -> list[Dependency]:
    merged: list[Dependency] = []
    seen: set[tuple[str, str]] = set()
    for group in groups:
        for dep in group:
            key = (dep.id, dep.role)
            if not dep.id or key in seen:
                continue
            seen.add(key)
            merged.append(dep)
    return merged
