from __future__ import annotations

from dataclasses import dataclass, field

from ethica_core.models import EthicsItem

from ingest_service.errors import BuildReport, BuildWarning, WarningType
from ingest_service.parse.html_to_blocks import iter_text_blocks
from ingest_service.segment.classifier import classify_blocks
from ingest_service.segment.merge import merge_segments
from ingest_service.segment.rules import LATIN_RULES

# Only Part I of the Latin text is ingested.
LATIN_PART = 1


@dataclass
class LatinIndex:
    texts: dict[str, str] = field(default_factory=dict)
    warnings: list[BuildWarning] = field(default_factory=list)


def build_latin_index(html: str | bytes) -> LatinIndex:
    """Segment the Latin Part I source and map canonical id -> Latin text."""
    result = classify_blocks(iter_text_blocks(html), LATIN_RULES, initial_part=LATIN_PART, source="Latin")
    index = LatinIndex(warnings=list(result.warnings))
    for seg in merge_segments(result.segments):
        if seg.part != LATIN_PART:
            continue
        item_id = seg.item_id
        text = seg.text()
        existing = index.texts.get(item_id)
        index.texts[item_id] = "\n\n".join(t for t in (existing, text) if t)
    return index


def attach_latin(items: list[EthicsItem], latin: dict[str, str], report: BuildReport) -> int:
    """
    Copy Latin text onto the matching Part I records. Returns how many records
    received text; Latin entries without an English counterpart are reported.
    """
    attached = 0
    english_ids = set()
    for item in items:
        if item.part != LATIN_PART:
            continue
        english_ids.add(item.id)
        text = latin.get(item.id)
        if text:
            item.text.original = text
            attached += 1

    for latin_id in latin:
        if latin_id not in english_ids:
            report.warn(
                WarningType.LATIN_UNMATCHED,
                f"Latin text for {latin_id} has no matching English record.",
                item_id=latin_id,
            )
    return attached


def report_missing_latin(items: list[EthicsItem], report: BuildReport) -> None:
    for item in items:
        if item.part == LATIN_PART and not item.text.original.strip():
            report.warn(WarningType.LATIN_MISSING, f"No Latin text for {item.id} ({item.ref}).", item_id=item.id)
