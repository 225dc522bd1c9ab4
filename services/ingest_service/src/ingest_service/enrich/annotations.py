from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib.resources import files

from ethica_core.enums import ItemKind, ProofStatus
from ethica_core.models import Dependency, EthicsItem, LogicEncoding, ProofInfo


DEFAULT_SKETCHES = {
    ItemKind.definition: "Stipulative definition; no proof required.",
    ItemKind.axiom: "Axiom/postulate; accepted without proof.",
    ItemKind.postulate: "Axiom/postulate; accepted without proof.",
}


@dataclass(frozen=True)
class CuratedAnnotations:
    """Human-curated Part I material: logic encodings, dependencies, proof sketches."""

    fol_definitions: dict[str, list[LogicEncoding]] = field(default_factory=dict)
    definition_cluster: LogicEncoding | None = None
    definition_cluster_members: frozenset[str] = frozenset()
    proposition_dependencies: dict[str, list[Dependency]] = field(default_factory=dict)
    proof_sketches: dict[str, str] = field(default_factory=dict)


def load_part1_annotations() -> CuratedAnnotations:
    raw = json.loads((files("ingest_service.enrich") / "part1_annotations.json").read_text(encoding="utf-8"))
    cluster = raw.get("definition_cluster")
    return CuratedAnnotations(
        fol_definitions={
            item_id: [LogicEncoding.model_validate(enc) for enc in encodings]
            for item_id, encodings in raw.get("fol_definitions", {}).items()
        },
        definition_cluster=LogicEncoding.model_validate(cluster) if cluster else None,
        definition_cluster_members=frozenset(raw.get("definition_cluster_members", [])),
        proposition_dependencies={
            item_id: [Dependency.model_validate(dep) for dep in deps]
            for item_id, deps in raw.get("proposition_dependencies", {}).items()
        },
        proof_sketches=dict(raw.get("proof_sketches", {})),
    )


def default_proof(item: EthicsItem) -> ProofInfo:
    return ProofInfo(status=ProofStatus.none, sketch=DEFAULT_SKETCHES.get(ItemKind(item.kind)))


def ensure_proof(item: EthicsItem) -> None:
    fallback = default_proof(item)
    if item.proof.status == ProofStatus.none and fallback.sketch and not item.proof.sketch:
        item.proof = item.proof.model_copy(update={"sketch": fallback.sketch})


def apply_fol_definitions(item: EthicsItem, annotations: CuratedAnnotations) -> bool:
    """Replace FOL v1 encodings of a Part I definition. False if none is curated."""
    encodings = annotations.fol_definitions.get(item.id)
    if not encodings:
        return False
    kept = [enc for enc in item.logic if not (enc.system == "FOL" and enc.version == "v1")]
    item.logic = kept + [enc.model_copy() for enc in encodings]
    return True


def apply_definition_cluster(item: EthicsItem, annotations: CuratedAnnotations) -> None:
    extra = annotations.definition_cluster
    if extra is None or item.id not in annotations.definition_cluster_members:
        return
    present = any(
        enc.system == extra.system
        and enc.version == extra.version
        and enc.encoding_format == extra.encoding_format
        and enc.display == extra.display
        for enc in item.logic
    )
    if not present:
        item.logic.append(extra.model_copy())


def apply_proof_sketch(item: EthicsItem, annotations: CuratedAnnotations) -> None:
    sketch = (annotations.proof_sketches.get(item.id) or "").strip()
    if sketch:
        item.proof = ProofInfo(status=ProofStatus.sketch, sketch=sketch, formal=item.proof.formal)
