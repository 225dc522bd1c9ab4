"""
Error taxonomy for corpus builds.

Fatal problems are raised as `CorpusBuildError` subclasses and abort the run
before anything is written. Data-quality findings that a human should look
at, but that must not block the build, are collected as `BuildWarning`s.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class CorpusBuildError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInputError(CorpusBuildError):
    def __init__(self, missing: list[Path], remediation: str = "ethica fetch"):
        lines = [
            "Missing required raw HTML files for the Ethics corpus builder.",
            "Expected files:",
            *[f"  - {p}" for p in missing],
            f"Run `{remediation}` to download the sources before building the corpus.",
        ]
        super().__init__("\n".join(lines))
        self.missing = list(missing)


class MarkupParseError(CorpusBuildError):
    pass


class CorpusValidationError(CorpusBuildError):
    pass


class FetchError(CorpusBuildError):
    pass


class WarningType(str, Enum):
    """Non-fatal findings reported during a build."""

    ORPHAN_SUBORDINATE = "ORPHAN_SUBORDINATE"
    """Corollary or scholium heading seen before any proposition of its part."""

    UNRESOLVED_NUMERAL = "UNRESOLVED_NUMERAL"
    """Heading whose number could not be determined."""

    LATIN_UNMATCHED = "LATIN_UNMATCHED"
    """Latin entry with no corresponding English record."""

    LATIN_MISSING = "LATIN_MISSING"
    """Part I English record left without Latin text."""

    MID_SENTENCE = "MID_SENTENCE"
    """Translation starts with a lowercase letter (segment probably split badly)."""

    SMALL_CORPUS = "SMALL_CORPUS"
    """Fewer records than the configured sanity threshold."""

    ANNOTATION_MISSING = "ANNOTATION_MISSING"
    """Curated logic encoding expected for a record but not available."""


class BuildWarning(BaseModel):
    warning_type: WarningType
    message: str
    item_id: Optional[str] = None

    def to_log_message(self) -> str:
        return f"[{self.warning_type.value}] {self.message}"


class BuildReport(BaseModel):
    warnings: List[BuildWarning] = Field(default_factory=list)

    def warn(self, warning_type: WarningType, message: str, *, item_id: str | None = None) -> None:
        self.warnings.append(BuildWarning(warning_type=warning_type, message=message, item_id=item_id))

    def extend(self, warnings: list[BuildWarning]) -> None:
        self.warnings.extend(warnings)

    def of_type(self, warning_type: WarningType) -> list[BuildWarning]:
        return [w for w in self.warnings if w.warning_type == warning_type]
