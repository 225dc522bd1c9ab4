"""
Optional enrichment of a built corpus.

The build itself only produces skeleton records; this layer adds concept
tags, inferred and curated dependencies, default proof notes and the
curated Part I logic encodings.
"""

from __future__ import annotations

from ethica_core.enums import ItemKind
from ethica_core.models import EthicsItem

from ingest_service.enrich.annotations import (
    apply_definition_cluster,
    apply_fol_definitions,
    apply_proof_sketch,
    ensure_proof,
    load_part1_annotations,
)
from ingest_service.enrich.concepts import tag_concepts
from ingest_service.enrich.dependencies import infer_dependencies, merge_dependencies
from ingest_service.errors import BuildReport, WarningType


def apply_enrichments(items: list[EthicsItem], report: BuildReport | None = None) -> list[EthicsItem]:
    annotations = load_part1_annotations()
    corpus_ids = {item.id for item in items}

    for item in items:
        inferred = infer_dependencies(item, corpus_ids)
        item.concepts = tag_concepts(item)
        item.dependencies.uses = inferred
        ensure_proof(item)

        if item.part != 1:
            continue

        if item.kind == ItemKind.definition:
            if not apply_fol_definitions(item, annotations) and report is not None:
                report.warn(
                    WarningType.ANNOTATION_MISSING,
                    f"No FOL v1 definition encoding for {item.id} ({item.ref}).",
                    item_id=item.id,
                )
            apply_definition_cluster(item, annotations)

        curated = annotations.proposition_dependencies.get(item.id)
        if curated is not None:
            item.dependencies.uses = merge_dependencies(curated, inferred)
        apply_proof_sketch(item, annotations)

    return items
