from __future__ import annotations

import re
from collections.abc import Iterator

from bs4 import BeautifulSoup, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from ingest_service.errors import MarkupParseError

# Elements whose text forms its own block. Anything else is inline and is
# folded into the surrounding block.
BLOCK_TAGS = [
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "p",
    "div",
    "center",
    "article",
    "section",
    "pre",
    "blockquote",
    "li",
    "tr",
    "td",
    "th",
    "dt",
    "dd",
]

_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def iter_text_blocks(html: str | bytes) -> Iterator[str]:
    """
    Day-1 contract:
    - Parse once, then lazily yield whitespace-normalized, non-empty text
      blocks in document order (headings and paragraph-like containers).
    - Nested containers never duplicate text: a container only yields the
      loose text it holds itself, its block children yield their own.
    - Calling again on the same source restarts extraction from scratch.

    Raises MarkupParseError when the input has no document body at all.
    """
    soup = BeautifulSoup(html, "lxml")
    body = soup.body
    if not isinstance(body, Tag):
        raise MarkupParseError("Could not parse markup: no document body found")
    _strip_noise(body)
    return _walk(body)


def extract_text_blocks(html: str | bytes) -> list[str]:
    return list(iter_text_blocks(html))


def _walk(node: Tag) -> Iterator[str]:
    buffer: list[str] = []
    for child in node.children:
        if isinstance(child, _SKIPPED_STRINGS):
            continue
        if isinstance(child, NavigableString):
            buffer.append(str(child))
            continue
        if not isinstance(child, Tag):
            continue
        if child.name == "br":
            buffer.append(" ")
            continue
        if child.name in BLOCK_TAGS or child.find(BLOCK_TAGS) is not None:
            yield from _flush(buffer)
            buffer = []
            yield from _walk(child)
            continue
        buffer.append(child.get_text())
    yield from _flush(buffer)


def _flush(buffer: list[str]) -> Iterator[str]:
    text = clean_text("".join(buffer))
    if text and not _is_noise_block(text):
        yield text


def _strip_noise(container: Tag) -> None:
    for tag_name in ["script", "style", "noscript", "nav", "header", "footer", "form"]:
        for t in list(container.find_all(tag_name)):
            t.decompose()


def clean_text(text: str) -> str:
    text = re.sub(r"\s+", " ", text).strip()
    return text


def _is_noise_block(text: str) -> bool:
    t = text.lower()
    return (
        "marxists internet archive" in t
        or t.startswith("philosophy archive")
        or t in {"the latin library", "the classics page", "index"}
    )
