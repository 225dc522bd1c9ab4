from __future__ import annotations

from ethica_core.enums import SUBORDINATE_KINDS, ItemKind
from ethica_core.roman import int_to_roman

_ID_CODES = {
    ItemKind.definition: "D",
    ItemKind.axiom: "Ax",
    ItemKind.postulate: "Post",
    ItemKind.lemma: "L",
    ItemKind.proposition: "p",
}

_SUBORDINATE_CODES = {
    ItemKind.corollary: "c",
    ItemKind.scholium: "s",
}

_TITLES = {
    ItemKind.definition: "Definition",
    ItemKind.axiom: "Axiom",
    ItemKind.postulate: "Postulate",
    ItemKind.lemma: "Lemma",
    ItemKind.proposition: "Proposition",
    ItemKind.corollary: "Corollary",
    ItemKind.scholium: "Scholium",
}


def _check_subordinate(kind: ItemKind, of_proposition: int | None, sub_index: int | None) -> None:
    if kind in SUBORDINATE_KINDS and (of_proposition is None or sub_index is None):
        raise ValueError(f"{kind.value} requires of_proposition and sub_index")


def item_id_for(
    *,
    part: int,
    kind: ItemKind,
    number: int,
    of_proposition: int | None = None,
    sub_index: int | None = None,
) -> str:
    """
    Canonical short id, e.g. E1D3, E2Ax1, E1p3, E1p3c1, E4p18s1.

    Distinct (part, kind, number, of_proposition, sub_index) tuples map to
    distinct ids; the validator relies on this.
    """
    kind = ItemKind(kind)
    _check_subordinate(kind, of_proposition, sub_index)
    base = f"E{part}"
    if kind in SUBORDINATE_KINDS:
        return f"{base}p{of_proposition}{_SUBORDINATE_CODES[kind]}{sub_index}"
    return f"{base}{_ID_CODES[kind]}{number}"


def ref_for(
    *,
    part: int,
    kind: ItemKind,
    number: int,
    of_proposition: int | None = None,
    sub_index: int | None = None,
) -> str:
    kind = ItemKind(kind)
    _check_subordinate(kind, of_proposition, sub_index)
    part_label = f"Part {int_to_roman(part)}"
    if kind == ItemKind.corollary:
        return f"{part_label}, Proposition {of_proposition}, Corollary {sub_index}"
    if kind == ItemKind.scholium:
        return f"{part_label}, Proposition {of_proposition}, Scholium"
    return f"{part_label}, {_TITLES[kind]} {number}"


def label_for(*, kind: ItemKind, number: int, sub_index: int | None = None) -> str:
    kind = ItemKind(kind)
    if kind in SUBORDINATE_KINDS:
        return f"{_TITLES[kind]} {sub_index if sub_index is not None else number}"
    return f"{_TITLES[kind]} {number}"
