"""web_archiver.aggregator: Накопление секций корпуса с дедупликацией по заголовку."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, List, Set

from web_archiver.crawler.models import ExtractedPage
from web_archiver.logger import logger

SECTION_SEPARATOR: Final[str] = "\n\n---\n\n"


@dataclass(slots=True)
class CorpusAggregator:
    """Принятые секции в порядке поступления и множество уже виденных заголовков."""

    sections: List[str] = field(default_factory=list)
    seen_titles: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.sections)

    def save(self, page: ExtractedPage) -> bool:
        """
        Принимает страницу, если её заголовок ещё не встречался.

        Заголовки сравниваются как есть (регистр и пробелы важны).
        Возвращает True, если секция добавлена.
        """
        if page.title in self.seen_titles:
            logger.info("Skipped duplicate title: %s", page.title)
            return False
        self.sections.append(page.as_section())
        self.seen_titles.add(page.title)
        return True

    def content(self) -> str:
        """Склеивает секции через SECTION_SEPARATOR."""
        return SECTION_SEPARATOR.join(self.sections)

    def json(self) -> dict[str, str]:
        return {"content": self.content()}


__all__ = ["CorpusAggregator", "SECTION_SEPARATOR"]
