"""
Heading rules for the segment classifier.

Each rule looks at one normalized text block (plus the current section
context) and either returns an action for the classifier or None. Rules are
tried in order and the first match wins, so the tuples at the bottom of this
module are the complete, auditable priority order for each source language.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ethica_core.enums import ItemKind
from ethica_core.roman import roman_to_int

_ROMAN = r"[IVXLCDM]+"
_SEP = r"[\s.:;,\-–—)]*"


@dataclass(frozen=True)
class PartHeading:
    part: int


@dataclass(frozen=True)
class SectionHeading:
    kind: ItemKind


@dataclass(frozen=True)
class OpenSegment:
    kind: ItemKind
    number: Optional[int]
    content: str = ""


@dataclass(frozen=True)
class BareNumeral:
    number: int
    content: str = ""


Action = Union[PartHeading, SectionHeading, OpenSegment, BareNumeral]
Matcher = Callable[[str, Optional[ItemKind]], Optional[Action]]


@dataclass(frozen=True)
class Rule:
    name: str
    match: Matcher

    def __call__(self, text: str, section: ItemKind | None = None) -> Action | None:
        return self.match(text, section)


def _numeral(raw: str | None) -> int | None:
    if not raw:
        return None
    return roman_to_int(raw)


# --- shared -----------------------------------------------------------------

_PART_RE = re.compile(rf"^PART\s+({_ROMAN})\b")


def match_part_heading(text: str, section: ItemKind | None = None) -> Action | None:
    m = _PART_RE.match(text.strip().upper())
    if not m:
        return None
    part = roman_to_int(m.group(1))
    if not 1 <= part <= 5:
        return None
    return PartHeading(part)


# --- English ----------------------------------------------------------------

_ENGLISH_SECTION_RE = re.compile(r"^(DEFINITION|AXIOM|POSTULATE)S?\.?:?$")

_ENGLISH_SECTION_KINDS = {
    "DEFINITION": ItemKind.definition,
    "AXIOM": ItemKind.axiom,
    "POSTULATE": ItemKind.postulate,
}

# A bare subordinate heading must be followed by punctuation (or end the block)
# so running text such as "Note that ..." or "Note, however, ..." is not
# mistaken for a scholium. A numbered one only needs a word boundary.
_SUBORDINATE_TAIL = r"(?=[.:;\-–—]|\s*$)"
_NUMBERED_TAIL = r"(?=[\s.:;,\-–—)]|$)"

_ENGLISH_HEADINGS: list[tuple[ItemKind, re.Pattern[str]]] = [
    (ItemKind.definition, re.compile(rf"^(?:DEFINITION|DEFIN\.|DEF\.)\s*(?P<num>{_ROMAN})\b{_SEP}", re.I)),
    (ItemKind.axiom, re.compile(rf"^AXIOM\s*(?P<num>{_ROMAN})\b{_SEP}", re.I)),
    (ItemKind.postulate, re.compile(rf"^POSTULATE\s*(?P<num>{_ROMAN})\b{_SEP}", re.I)),
    (ItemKind.proposition, re.compile(rf"^(?:PROPOSITION|PROP\.?)\s*(?P<num>{_ROMAN})\b{_SEP}", re.I)),
    (ItemKind.lemma, re.compile(rf"^LEMMA\s*(?P<num>{_ROMAN})\b{_SEP}", re.I)),
    (
        ItemKind.corollary,
        re.compile(rf"^COROLLARY(?:\s+(?P<num>{_ROMAN}){_NUMBERED_TAIL}|{_SUBORDINATE_TAIL}){_SEP}", re.I),
    ),
    (
        ItemKind.scholium,
        re.compile(rf"^(?:SCHOLIUM|NOTE)(?:\s+(?P<num>{_ROMAN}){_NUMBERED_TAIL}|{_SUBORDINATE_TAIL}){_SEP}", re.I),
    ),
]

_ENGLISH_BARE_RE = re.compile(rf"^(?P<num>{_ROMAN})\.\s*", re.I)


def match_english_section(text: str, section: ItemKind | None = None) -> Action | None:
    m = _ENGLISH_SECTION_RE.match(text.strip().upper())
    if not m:
        return None
    return SectionHeading(_ENGLISH_SECTION_KINDS[m.group(1)])


def match_english_heading(text: str, section: ItemKind | None = None) -> Action | None:
    stripped = text.strip()
    for kind, pattern in _ENGLISH_HEADINGS:
        m = pattern.match(stripped)
        if m:
            return OpenSegment(kind=kind, number=_numeral(m.group("num")), content=stripped[m.end() :].strip())
    return None


def match_english_bare_numeral(text: str, section: ItemKind | None = None) -> Action | None:
    if section is None:
        return None
    stripped = text.strip()
    m = _ENGLISH_BARE_RE.match(stripped)
    if not m:
        return None
    return BareNumeral(number=roman_to_int(m.group("num")), content=stripped[m.end() :].strip())


# --- Latin ------------------------------------------------------------------

_LATIN_SECTIONS = {
    "DEFINITIONES": ItemKind.definition,
    "AXIOMATA": ItemKind.axiom,
    "POSTULATA": ItemKind.postulate,
}

_LATIN_WORDS = {
    "DEFINITIO": ItemKind.definition,
    "AXIOMA": ItemKind.axiom,
    "POSTULATUM": ItemKind.postulate,
    "PROPOSITIO": ItemKind.proposition,
    "LEMMA": ItemKind.lemma,
    "COROLLARIUM": ItemKind.corollary,
    "SCHOLIUM": ItemKind.scholium,
}

_LATIN_HEADING_RE = re.compile(rf"^({'|'.join(_LATIN_WORDS)})\s*({_ROMAN})?$")
_LATIN_BARE_RE = re.compile(rf"^({_ROMAN})(?=\s|\.|:|\)|$)")


def normalize_latin_heading(raw: str) -> str:
    return re.sub(r"[.:;]+$", "", re.sub(r"\s+", " ", raw.upper()).strip()).strip()


def _strip_latin_prefix(raw: str, word: str | None, numeral: str | None) -> str:
    """Drop the heading word and/or numeral from the front of a Latin block."""
    candidates: list[str] = []
    if word and numeral:
        candidates.append(rf"^\s*{word}\s+{numeral}\b{_SEP}")
    if word:
        candidates.append(rf"^\s*{word}\b{_SEP}")
    if numeral:
        candidates.append(rf"^\s*{numeral}\b{_SEP}")
    result = raw.strip()
    for pattern in candidates:
        m = re.match(pattern, result, re.I)
        if m:
            return result[m.end() :].strip()
    return result


def match_latin_section(text: str, section: ItemKind | None = None) -> Action | None:
    kind = _LATIN_SECTIONS.get(normalize_latin_heading(text))
    if kind is None:
        return None
    return SectionHeading(kind)


def match_latin_heading(text: str, section: ItemKind | None = None) -> Action | None:
    normalized = normalize_latin_heading(text)
    m = _LATIN_HEADING_RE.match(normalized) or _LATIN_HEADING_RE.match(normalized.split(":")[0].strip())
    if not m:
        return None
    word, numeral = m.group(1), m.group(2)
    return OpenSegment(
        kind=_LATIN_WORDS[word],
        number=_numeral(numeral),
        content=_strip_latin_prefix(text, word, numeral),
    )


def match_latin_bare_numeral(text: str, section: ItemKind | None = None) -> Action | None:
    if section is None:
        return None
    m = _LATIN_BARE_RE.match(normalize_latin_heading(text))
    if not m:
        return None
    numeral = m.group(1)
    return BareNumeral(number=roman_to_int(numeral), content=_strip_latin_prefix(text, None, numeral))


ENGLISH_RULES: tuple[Rule, ...] = (
    Rule("part_heading", match_part_heading),
    Rule("section_heading", match_english_section),
    Rule("kind_heading", match_english_heading),
    Rule("bare_numeral", match_english_bare_numeral),
)

# The Latin source has no part headings; it is classified with part 1 preset.
LATIN_RULES: tuple[Rule, ...] = (
    Rule("section_heading", match_latin_section),
    Rule("kind_heading", match_latin_heading),
    Rule("bare_numeral", match_latin_bare_numeral),
)


def first_match(rules: tuple[Rule, ...], text: str, section: ItemKind | None) -> Action | None:
    for rule in rules:
        action = rule(text, section)
        if action is not None:
            return action
    return None
