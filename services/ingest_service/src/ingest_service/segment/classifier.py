from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ethica_core.enums import SECTION_KINDS, SUBORDINATE_KINDS, ItemKind

from ingest_service.errors import BuildWarning, WarningType
from ingest_service.segment.models import ParsedSegment
from ingest_service.segment.rules import (
    ENGLISH_RULES,
    Action,
    BareNumeral,
    OpenSegment,
    PartHeading,
    Rule,
    SectionHeading,
    first_match,
)


@dataclass
class ClassificationResult:
    segments: list[ParsedSegment]
    warnings: list[BuildWarning]


@dataclass
class SegmentClassifier:
    """
    Single-pass state machine over text blocks.

    One instance owns the state of exactly one pass (no module-level
    counters), so independent builds never interfere. Blocks seen while
    `part == 0` can never open a segment.
    """

    rules: tuple[Rule, ...] = ENGLISH_RULES
    part: int = 0
    source: str = "English"
    section: ItemKind | None = None
    last_proposition: int = 0
    corollary_count: int = 0
    scholium_count: int = 0
    current: ParsedSegment | None = None
    segments: list[ParsedSegment] = field(default_factory=list)
    warnings: list[BuildWarning] = field(default_factory=list)

    def feed(self, block: str) -> None:
        text = block.strip()
        if not text:
            return
        action = first_match(self.rules, text, self.section)
        if action is None:
            if self.current is not None:
                self.current.text_parts.append(text)
            return
        self._apply(action, text)

    def finish(self) -> ClassificationResult:
        self._close()
        return ClassificationResult(segments=self.segments, warnings=self.warnings)

    def _apply(self, action: Action, text: str) -> None:
        if isinstance(action, PartHeading):
            self._close()
            self.part = action.part
            self.section = None
            self._reset_proposition(0)
            return

        if isinstance(action, SectionHeading):
            self._close()
            self.section = action.kind
            return

        if self.part == 0:
            return

        if isinstance(action, BareNumeral):
            self._apply_bare_numeral(action)
        elif isinstance(action, OpenSegment):
            if action.kind in SUBORDINATE_KINDS:
                self._open_subordinate(action, text)
            else:
                self._open_primary(action, text)

    def _apply_bare_numeral(self, action: BareNumeral) -> None:
        kind = self.section
        if kind is None:
            return
        cur = self.current
        if cur is not None and (cur.part, cur.kind, cur.number) == (self.part, kind, action.number):
            # Same definition re-wrapped across elements by the source markup.
            if action.content:
                cur.text_parts.append(action.content)
            return
        self._open(kind, action.number, action.content)

    def _open_primary(self, action: OpenSegment, text: str) -> None:
        if action.number is None:
            self._close()
            self._warn(WarningType.UNRESOLVED_NUMERAL, f"{action.kind.value} heading without a numeral: {text[:80]!r}")
            return
        if action.kind == ItemKind.proposition:
            self._reset_proposition(action.number)
        self.section = action.kind if action.kind in SECTION_KINDS else None
        self._open(action.kind, action.number, action.content)

    def _open_subordinate(self, action: OpenSegment, text: str) -> None:
        if action.kind == ItemKind.corollary:
            self.corollary_count = action.number or self.corollary_count + 1
            sub_index = self.corollary_count
        else:
            self.scholium_count = action.number or self.scholium_count + 1
            sub_index = self.scholium_count

        if self.last_proposition == 0:
            self._close()
            self._warn(
                WarningType.ORPHAN_SUBORDINATE,
                f"part {self.part} {action.kind.value} {sub_index} has no preceding proposition: {text[:80]!r}",
            )
            return

        self.section = None
        self._open(
            action.kind,
            sub_index,
            action.content,
            of_proposition=self.last_proposition,
            sub_index=sub_index,
        )

    def _open(
        self,
        kind: ItemKind,
        number: int,
        content: str,
        *,
        of_proposition: int | None = None,
        sub_index: int | None = None,
    ) -> None:
        self._close()
        self.current = ParsedSegment(
            part=self.part,
            kind=kind,
            number=number,
            of_proposition=of_proposition,
            sub_index=sub_index,
            text_parts=[content] if content else [],
        )

    def _close(self) -> None:
        if self.current is not None:
            self.segments.append(self.current)
            self.current = None

    def _reset_proposition(self, number: int) -> None:
        self.last_proposition = number
        self.corollary_count = 0
        self.scholium_count = 0

    def _warn(self, warning_type: WarningType, message: str) -> None:
        self.warnings.append(BuildWarning(warning_type=warning_type, message=f"[{self.source}] {message}"))


def classify_blocks(
    blocks: Iterable[str],
    rules: tuple[Rule, ...] = ENGLISH_RULES,
    *,
    initial_part: int = 0,
    source: str = "English",
) -> ClassificationResult:
    classifier = SegmentClassifier(rules=rules, part=initial_part, source=source)
    for block in blocks:
        classifier.feed(block)
    return classifier.finish()
