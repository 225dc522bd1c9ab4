from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ethica_core.enums import ItemKind
from ethica_core.identity import item_id_for

from ingest_service.parse.html_to_blocks import clean_text

SegmentIdentity = tuple[int, ItemKind, int, Optional[int], Optional[int]]


@dataclass
class ParsedSegment:
    """
    A logical unit (definition, proposition, ...) being accumulated by the
    classifier. `text_parts` grows while the classifier stays inside it.
    """

    part: int
    kind: ItemKind
    number: int
    of_proposition: int | None = None
    sub_index: int | None = None
    text_parts: list[str] = field(default_factory=list)

    @property
    def identity(self) -> SegmentIdentity:
        return (self.part, self.kind, self.number, self.of_proposition, self.sub_index)

    @property
    def item_id(self) -> str:
        return item_id_for(
            part=self.part,
            kind=self.kind,
            number=self.number,
            of_proposition=self.of_proposition,
            sub_index=self.sub_index,
        )

    def text(self) -> str:
        return join_paragraphs(self.text_parts)

    def copy(self) -> ParsedSegment:
        return replace(self, text_parts=list(self.text_parts))


def join_paragraphs(parts: list[str]) -> str:
    cleaned = [clean_text(p) for p in parts]
    return "\n\n".join(p for p in cleaned if p)
