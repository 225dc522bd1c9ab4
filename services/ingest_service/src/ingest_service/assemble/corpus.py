from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from ethica_core.identity import label_for, ref_for
from ethica_core.models import EthicsItem, ItemMeta, ItemText

from ingest_service.assemble.crosslink import LATIN_PART, attach_latin, build_latin_index, report_missing_latin
from ingest_service.assemble.overrides import OVERRIDES, ItemOverride, apply_overrides
from ingest_service.errors import BuildReport, MissingInputError, WarningType
from ingest_service.parse.html_to_blocks import iter_text_blocks
from ingest_service.segment.classifier import classify_blocks
from ingest_service.segment.merge import merge_segments
from ingest_service.segment.models import ParsedSegment
from ingest_service.segment.rules import ENGLISH_RULES


@dataclass(frozen=True)
class SourceUrls:
    english: str
    latin: str

    def for_part(self, part: int) -> list[str]:
        english = f"English source: R.H.M. Elwes translation as hosted by Marxists Internet Archive ({self.english})"
        if part == LATIN_PART:
            return [f"Latin source: The Latin Library (Part I: {self.latin})", english]
        return [english]


@dataclass
class BuildResult:
    items: list[EthicsItem]
    report: BuildReport = field(default_factory=BuildReport)


def ensure_inputs_exist(paths: list[Path]) -> None:
    missing = [p for p in paths if not p.is_file()]
    if missing:
        raise MissingInputError(missing)


def parse_english(html: str | bytes, report: BuildReport) -> list[ParsedSegment]:
    result = classify_blocks(iter_text_blocks(html), ENGLISH_RULES, source="English")
    report.extend(result.warnings)
    return merge_segments(result.segments)


def items_from_segments(segments: list[ParsedSegment], sources: SourceUrls) -> list[EthicsItem]:
    """Skeleton records; `order` counts from 1 within each part in document order."""
    order_by_part: Counter[int] = Counter()
    items: list[EthicsItem] = []
    for seg in segments:
        order_by_part[seg.part] += 1
        key = dict(
            part=seg.part,
            kind=seg.kind,
            number=seg.number,
            of_proposition=seg.of_proposition,
            sub_index=seg.sub_index,
        )
        items.append(
            EthicsItem(
                id=seg.item_id,
                ref=ref_for(**key),
                part=seg.part,
                kind=seg.kind,
                label=label_for(kind=seg.kind, number=seg.number, sub_index=seg.sub_index),
                order=order_by_part[seg.part],
                text=ItemText(original_language="Latin", original="", translation=seg.text()),
                meta=ItemMeta(sources=sources.for_part(seg.part)),
            )
        )
    return items


def build_corpus(
    english_html: str | bytes,
    latin_html: str | bytes,
    *,
    sources: SourceUrls,
    overrides: dict[str, ItemOverride] = OVERRIDES,
) -> BuildResult:
    """
    English blocks -> segments -> skeleton records, Latin Part I attached by
    id, curated overrides applied last. Nothing here touches the filesystem.
    """
    report = BuildReport()
    segments = parse_english(english_html, report)
    items = items_from_segments(segments, sources)

    for item in items:
        if item.text.translation[:1].islower():
            report.warn(
                WarningType.MID_SENTENCE,
                f"Translation for {item.id} ({item.ref}) may start mid-sentence.",
                item_id=item.id,
            )

    latin = build_latin_index(latin_html)
    report.extend(latin.warnings)
    attach_latin(items, latin.texts, report)
    apply_overrides(items, overrides)
    report_missing_latin(items, report)
    return BuildResult(items=items, report=report)


def build_corpus_from_files(
    english_path: Path,
    latin_path: Path,
    *,
    sources: SourceUrls,
    overrides: dict[str, ItemOverride] = OVERRIDES,
) -> BuildResult:
    ensure_inputs_exist([english_path, latin_path])
    return build_corpus(
        english_path.read_bytes(),
        latin_path.read_bytes(),
        sources=sources,
        overrides=overrides,
    )
