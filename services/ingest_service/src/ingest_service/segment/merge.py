from __future__ import annotations

from collections.abc import Iterable

from ingest_service.segment.models import ParsedSegment, SegmentIdentity


def merge_segments(segments: Iterable[ParsedSegment]) -> list[ParsedSegment]:
    """
    Coalesce segments that share an identity tuple.

    First-occurrence order is kept and text fragments are concatenated in the
    order they were seen. Inputs are not mutated, and running the merge on its
    own output is a no-op.
    """
    merged: dict[SegmentIdentity, ParsedSegment] = {}
    for seg in segments:
        existing = merged.get(seg.identity)
        if existing is None:
            merged[seg.identity] = seg.copy()
        else:
            existing.text_parts.extend(seg.text_parts)
    return list(merged.values())
