from __future__ import annotations

import re

from ethica_core.models import EthicsItem

# Ordered: tags come out in this order.
CONCEPT_RULES: list[tuple[str, list[re.Pattern[str]]]] = [
    ("Substance", [re.compile(r"substance\b", re.I), re.compile(r"\bsubstantia\b", re.I)]),
    ("Attribute", [re.compile(r"attribute\b", re.I), re.compile(r"\battributum\b", re.I)]),
    ("Mode", [re.compile(r"\bmode\b", re.I), re.compile(r"\bmodus\b", re.I)]),
    ("God", [re.compile(r"\bgod\b", re.I), re.compile(r"\bdeus\b", re.I)]),
    ("Causa sui", [re.compile(r"self-caused\b", re.I), re.compile(r"\bcausa\s+sui\b", re.I)]),
    ("Essence", [re.compile(r"\bessence\b", re.I), re.compile(r"\bessentia\b", re.I)]),
    (
        "Existence",
        [re.compile(r"\bexistence\b", re.I), re.compile(r"\bexistentia\b", re.I), re.compile(r"\bexistens\b", re.I)],
    ),
    (
        "Infinity",
        [re.compile(r"\binfinite\b", re.I), re.compile(r"\binfinit(y|e)\b", re.I), re.compile(r"\binfinitum\b", re.I)],
    ),
    ("Mind", [re.compile(r"\bmind\b", re.I), re.compile(r"\bmens\b", re.I)]),
    ("Body", [re.compile(r"\bbody\b", re.I), re.compile(r"\bcorpus\b", re.I)]),
    ("Power", [re.compile(r"\bpower\b", re.I), re.compile(r"\bpotentia\b", re.I)]),
    ("Freedom", [re.compile(r"\bfreedom\b", re.I), re.compile(r"\bliber(ty|a|um)\b", re.I)]),
]


def tag_concepts(item: EthicsItem) -> list[str]:
    haystack = f"{item.text.translation} {item.text.original}"
    tags: list[str] = []
    for concept, patterns in CONCEPT_RULES:
        if concept not in tags and any(p.search(haystack) for p in patterns):
            tags.append(concept)
    return tags
