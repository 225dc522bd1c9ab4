"""
Persisted corpus record.

One `EthicsItem` per statement of the Ethics. The JSON produced by
`EthicsItem.to_record()` is the only contract with the presentation layer.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ethica_core.enums import ItemKind, ProofStatus, ReviewStatus


class ItemText(BaseModel):
    original_language: str = "Latin"
    original: str = ""
    translation: str = ""


class LogicEncoding(BaseModel):
    system: str
    version: str
    display: str
    encoding_format: str
    encoding: str
    notes: Optional[str] = None


class Dependency(BaseModel):
    id: str
    role: str


class Dependencies(BaseModel):
    uses: List[Dependency] = Field(default_factory=list)


class FormalProof(BaseModel):
    format: str
    encoding: str


class ProofInfo(BaseModel):
    status: ProofStatus = ProofStatus.none
    sketch: Optional[str] = None
    formal: Optional[FormalProof] = None


class ItemMeta(BaseModel):
    status: ReviewStatus = ReviewStatus.draft
    contributors: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)


class EthicsItem(BaseModel):
    """A single typed, cross-referenced statement (definition, proposition, ...)."""

    id: str
    ref: str
    part: int = Field(..., ge=1, le=5)
    kind: ItemKind
    label: str
    order: int = Field(..., ge=1)
    text: ItemText = Field(default_factory=ItemText)
    concepts: List[str] = Field(default_factory=list)
    logic: List[LogicEncoding] = Field(default_factory=list)
    dependencies: Dependencies = Field(default_factory=Dependencies)
    proof: ProofInfo = Field(default_factory=ProofInfo)
    meta: ItemMeta = Field(default_factory=ItemMeta)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
