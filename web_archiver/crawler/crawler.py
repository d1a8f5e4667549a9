"""
web_archiver.crawler.crawler: последовательный цикл обхода сайта в ширину.
"""
from __future__ import annotations

import time
from typing import Optional

from web_archiver.aggregator import CorpusAggregator
from web_archiver.config import DEFAULT_MAX_TEXT_LENGTH
from web_archiver.crawler.fetcher import PageFetcher
from web_archiver.crawler.frontier import Frontier
from web_archiver.crawler.link_extractor import find_links
from web_archiver.crawler.models import CrawlStats
from web_archiver.errors import FetchError
from web_archiver.logger import logger
from web_archiver.parser.content_extractor import extract_content

__all__ = ("SiteCrawler",)


class SiteCrawler:
    """Последовательный обход сайта в ширину, начиная с base_url."""

    def __init__(
        self,
        base_url: str,
        fetcher: PageFetcher,
        aggregator: Optional[CorpusAggregator] = None,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self.base_url = base_url
        self.fetcher = fetcher
        self.aggregator = aggregator if aggregator is not None else CorpusAggregator()
        self.max_text_length = max_text_length
        self.frontier = Frontier([base_url])

    @property
    def visited(self):
        return self.frontier.visited

    def stats(self) -> CrawlStats:
        return CrawlStats(
            visited=len(self.frontier.visited),
            queued=len(self.frontier),
            sections=len(self.aggregator),
        )

    async def crawl(self) -> CorpusAggregator:
        logger.info("Старт обхода: %s", self.base_url)
        start = time.monotonic()
        while self.frontier:
            url = self.frontier.pop()
            await self.process_url(url)
            logger.info("%s", self.stats())
        duration = time.monotonic() - start
        logger.info(
            "Завершено: %d страниц, %d секций за %.2f с",
            len(self.frontier.visited), len(self.aggregator), duration,
        )
        return self.aggregator

    async def process_url(self, url: str) -> bool:
        """
        Process one dequeued URL. Returns False when it was skipped as
        already visited or its fetch failed.
        """
        if not self.frontier.should_crawl(url):
            return False
        self.frontier.mark_visited(url)
        try:
            document = await self.fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Failed to fetch %s: %s", exc.url, exc.cause)
            return False

        self.aggregator.save(extract_content(document, self.max_text_length))
        added = self.frontier.enqueue_new(find_links(document, self.base_url))
        logger.debug("%s: queued %d links", url, added)
        return True
