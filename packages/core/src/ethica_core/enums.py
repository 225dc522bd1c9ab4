from __future__ import annotations

import enum


class ItemKind(str, enum.Enum):
    definition = "definition"
    axiom = "axiom"
    postulate = "postulate"
    lemma = "lemma"
    proposition = "proposition"
    corollary = "corollary"
    scholium = "scholium"


# Kinds that hang off a proposition and carry of_proposition/sub_index.
SUBORDINATE_KINDS = frozenset({ItemKind.corollary, ItemKind.scholium})

# Kinds that may be introduced by a bare section heading ("AXIOMS").
SECTION_KINDS = frozenset({ItemKind.definition, ItemKind.axiom, ItemKind.postulate})


class ProofStatus(str, enum.Enum):
    none = "none"
    sketch = "sketch"
    formal = "formal"


class ReviewStatus(str, enum.Enum):
    draft = "draft"
    reviewed = "reviewed"
