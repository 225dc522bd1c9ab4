from __future__ import annotations

from pathlib import Path

import pytest

from ingest_service.assemble.corpus import SourceUrls

ENGLISH_URL = "https://example.org/ethics.htm"
LATIN_URL = "https://example.org/ethica1.html"


def make_html(*blocks: str) -> str:
    """Wrap pre-tagged blocks (or plain strings, which become <p>) in a document."""
    body = "".join(b if b.lstrip().startswith("<") else f"<p>{b}</p>" for b in blocks)
    return f"<html><head><title>Ethics</title></head><body>{body}</body></html>"


ENGLISH_BLOCKS = [
    "<h3>PART I.</h3>",
    "<h4>CONCERNING GOD.</h4>",
    "<h4>DEFINITIONS.</h4>",
    "I. By that which is self-caused, I mean that of which the essence involves existence.",
    "II. A thing is called finite after its kind, when it can be limited by another thing of the same nature.",
    "III. By substance, I mean that which is in itself, and is conceived through itself.",
    "<h4>AXIOMS.</h4>",
    "I. Everything which exists, exists either in itself or in something else.",
    "II. That which cannot be conceived through anything else must be conceived through itself.",
    "PROP. I. Substance is by nature prior to its modifications.",
    "Proof.—This is clear from Def. III. and Def. I.",
    "PROP. II. Two substances, whose attributes are different, have nothing in common.",
    "PROP. III. Things which have nothing in common cannot be one the cause of the other.",
    "Corollary.—Hence it follows that a substance cannot be produced by anything external to itself.",
    "Corollary.—Again, nothing else is produced by it.",
    "Note.—Since by Prop. I. substance is prior, this is evident.",
    "<h3>PART II.</h3>",
    "<h4>DEFINITIONS.</h4>",
    "I. By body I mean a mode which expresses in a certain determinate manner the essence of God.",
    "PROP. I. Thought is an attribute of God, or God is a thinking thing.",
]

LATIN_BLOCKS = [
    "DEFINITIONES",
    "I. Per causam sui intelligo id cujus essentia involvit existentiam.",
    "II. Ea res dicitur in suo genere finita, quae alia ejusdem naturae terminari potest.",
    "III. Per substantiam intelligo id quod in se est et per se concipitur.",
    "AXIOMATA",
    "I. Omnia quae sunt vel in se vel in alio sunt.",
    "PROPOSITIO I",
    "Substantia prior est natura suis affectionibus.",
    "PROPOSITIO III",
    "Quae res nihil commune inter se habent, earum una alterius causa esse non potest.",
    "COROLLARIUM",
    "Hinc sequitur substantiam ab alio produci non posse.",
    "PROPOSITIO XL",
    "Nulla est in anglico textu.",
]


@pytest.fixture
def english_html() -> str:
    return make_html(*ENGLISH_BLOCKS)


@pytest.fixture
def latin_html() -> str:
    return make_html(*LATIN_BLOCKS)


@pytest.fixture
def sources() -> SourceUrls:
    return SourceUrls(english=ENGLISH_URL, latin=LATIN_URL)


@pytest.fixture
def raw_files(tmp_path: Path, english_html: str, latin_html: str) -> tuple[Path, Path]:
    raw_dir = tmp_path / "raw"
    raw_dir.mkdir()
    english = raw_dir / "english-ethics.html"
    latin = raw_dir / "latin-part1.html"
    english.write_text(english_html, encoding="utf-8")
    latin.write_text(latin_html, encoding="utf-8")
    return english, latin
