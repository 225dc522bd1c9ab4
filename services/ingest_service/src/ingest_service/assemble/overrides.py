"""
Hand-curated corrections applied after the automatic pipeline.

Automatic segmentation does not capture every canonical statement
perfectly. Entries here replace the generated values for one record; the
pipeline itself stays generic.
"""

from __future__ import annotations

from dataclasses import dataclass

from ethica_core.enums import ReviewStatus
from ethica_core.models import EthicsItem


@dataclass(frozen=True)
class ItemOverride:
    label: str | None = None
    original_language: str | None = None
    original: str | None = None
    translation: str | None = None
    review_status: ReviewStatus | None = None


OVERRIDES: dict[str, ItemOverride] = {
    "E1D1": ItemOverride(
        label="Self-caused (causa sui)",
        original_language="Latin",
        original=(
            "Per causam sui intelligo id cujus essentia involvit existentiam sive id cujus natura "
            "non potest concipi nisi existens."
        ),
        translation=(
            "By that which is self-caused, I mean that of which the essence involves existence, "
            "or that of which the nature is only conceivable as existent."
        ),
        review_status=ReviewStatus.reviewed,
    ),
}


def apply_overrides(items: list[EthicsItem], overrides: dict[str, ItemOverride] = OVERRIDES) -> list[str]:
    applied: list[str] = []
    for item in items:
        override = overrides.get(item.id)
        if override is None:
            continue
        if override.label is not None:
            item.label = override.label
        if override.original_language is not None:
            item.text.original_language = override.original_language
        if override.original is not None:
            item.text.original = override.original
        if override.translation is not None:
            item.text.translation = override.translation
        if override.review_status is not None:
            item.meta.status = override.review_status
        applied.append(item.id)
    return applied
