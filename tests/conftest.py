# File: tests/conftest.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Union

import pytest

from web_archiver.config import ArchiverConfig
from web_archiver.errors import FetchError
from web_archiver.logger import LOGGER_NAME
from web_archiver.parser.html_parser import Element


class FakeDocument:
    """In-memory Document: no parser, no network."""

    def __init__(
        self,
        title: str = "",
        elements: Optional[List[Element]] = None,
        hrefs: Optional[List[str]] = None,
    ) -> None:
        self._title = title
        self._elements = elements or []
        self._hrefs = hrefs or []

    @property
    def title(self) -> str:
        return self._title

    def elements(self, tags: Iterable[str]) -> List[Element]:
        wanted = set(tags)
        return [e for e in self._elements if e.tag in wanted]

    def hrefs(self) -> List[str]:
        return list(self._hrefs)


def page(title: str, *paragraphs: str, links: Iterable[str] = ()) -> FakeDocument:
    return FakeDocument(
        title=title,
        elements=[Element("p", text) for text in paragraphs],
        hrefs=list(links),
    )


class FakeFetcher:
    """Serves FakeDocuments by URL and records every fetch attempt."""

    def __init__(self, pages: Dict[str, Union[FakeDocument, Exception]]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FakeDocument:
        self.calls.append(url)
        result = self.pages.get(url)
        if result is None:
            raise FetchError(url, "HTTP 404")
        if isinstance(result, Exception):
            raise FetchError(url, result)
        return result


@pytest.fixture()
def project_log(caplog):
    """
    Attach caplog to the project logger (it does not propagate to root).
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield caplog
    lg.removeHandler(caplog.handler)


@pytest.fixture()
def basic_config(tmp_path) -> ArchiverConfig:
    """
    Return a basic valid ArchiverConfig writing into tmp_path.
    """
    return ArchiverConfig(
        base_url="https://example.com/",
        output_dir=tmp_path / "archived_data",
        user_agent="TestAgent/1.0",
        timeout=2.0,
    )
