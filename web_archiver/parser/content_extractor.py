"""Readable-text extraction from a parsed :class:`Document`."""
from __future__ import annotations

import re
from typing import Final, Tuple

from web_archiver.config import DEFAULT_MAX_TEXT_LENGTH
from web_archiver.crawler.models import ExtractedPage
from web_archiver.logger import logger
from web_archiver.parser.html_parser import Document

__all__ = ("TEXT_TAGS", "CODE_TAGS", "clean_text", "clean_code", "extract_content")

#: prose and code blocks; headings, tables and nav chrome are left out
TEXT_TAGS: Final[Tuple[str, ...]] = ("p", "code", "pre", "li", "ol")
CODE_TAGS: Final[frozenset[str]] = frozenset({"code", "pre"})

_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9\s.,!?()\[\]{}_+\-=/*\\:;'\"`~|#@$&]")
_WS_RE = re.compile(r"\s+")


def clean_code(text: str) -> str:
    """Collapse whitespace runs, keep every other character as is."""
    return _WS_RE.sub(" ", text).strip()


def clean_text(text: str) -> str:
    """Replace characters outside the safe set with spaces, then collapse whitespace."""
    return clean_code(_UNSAFE_RE.sub(" ", text))


def extract_content(document: Document, max_length: int = DEFAULT_MAX_TEXT_LENGTH) -> ExtractedPage:
    """
    Build an :class:`ExtractedPage` from *document*.

    Text fragments come from :data:`TEXT_TAGS` in document order, joined with
    ``"\\n"``. The result is cut to exactly *max_length* characters when longer;
    no attempt is made to stop at a word boundary.
    """
    title = document.title.strip()

    fragments = []
    for element in document.elements(TEXT_TAGS):
        if element.tag in CODE_TAGS:
            fragment = clean_code(element.text)
        else:
            fragment = clean_text(element.text)
        if fragment:
            fragments.append(fragment)

    text = "\n".join(fragments)
    if len(text) > max_length:
        logger.warning("Text truncated from %d to %d characters.", len(text), max_length)
        text = text[:max_length]

    return ExtractedPage(title=title, text=text)
