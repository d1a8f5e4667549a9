"""HTML parsing utilities for WebArchiver.

The crawl core never touches BeautifulSoup directly. It talks to a narrow
:class:`Document` capability instead:

* ``title`` — document ``<title>`` text or ``""`` if absent.
* ``elements(tags)`` — matching elements, in document order, as
  :class:`Element` (tag name + text content).
* ``hrefs()`` — raw ``href`` values of every ``<a href="…">``.

:class:`HtmlDocument` is the BeautifulSoup-backed implementation; tests can
provide any object with the same three members.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import List, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("Element", "Document", "HtmlDocument", "parse_html")

_ASCII_WS_RE = re.compile(r"[ \t\n\f\r]+")


@dataclass(slots=True, frozen=True)
class Element:
    """One matched element: lower-case tag name and its full text content."""

    tag: str
    text: str


class Document(Protocol):
    """Minimal view of a parsed page used by the extractor and link finder."""

    @property
    def title(self) -> str: ...

    def elements(self, tags: Iterable[str]) -> List[Element]: ...

    def hrefs(self) -> List[str]: ...


class HtmlDocument:
    """:class:`Document` implementation over a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @property
    def title(self) -> str:
        tag = self._soup.find("title")
        if not isinstance(tag, Tag):
            return ""
        return _ASCII_WS_RE.sub(" ", tag.get_text()).strip(" ")

    def elements(self, tags: Iterable[str]) -> List[Element]:
        # find_all walks the tree depth-first, so nested matches keep document order
        return [
            Element(tag=el.name.lower(), text=el.get_text())
            for el in self._soup.find_all(list(tags))
            if isinstance(el, Tag)
        ]

    def hrefs(self) -> List[str]:
        out: List[str] = []
        for tag in self._soup.find_all("a", href=True):
            if not isinstance(tag, Tag):
                continue
            href = tag.get("href")
            if isinstance(href, str):
                out.append(href)
        return out


def parse_html(html: str) -> HtmlDocument:
    """Parse raw markup into an :class:`HtmlDocument`.

    lxml closes implied end tags (unclosed ``<li>``, ``<p>``) like a browser,
    so every list item or paragraph stays a separate element.
    """
    return HtmlDocument(BeautifulSoup(html, "lxml"))
