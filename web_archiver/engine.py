# File: web_archiver/engine.py
"""web_archiver.engine: Orchestration layer: каталог вывода, обход, запись корпуса."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from web_archiver.config import ArchiverConfig
from web_archiver.crawler.crawler import SiteCrawler
from web_archiver.crawler.fetcher import Fetcher, PageFetcher
from web_archiver.logger import logger
from web_archiver.report.json_report import ensure_output_dir, render_corpus
from web_archiver.utils import filename_from_url

__all__ = ["start_archive", "run_crawl"]


async def run_crawl(config: ArchiverConfig, fetcher: PageFetcher) -> str:
    """Обходит сайт заданным fetcher'ом и возвращает склеенный корпус."""
    crawler = SiteCrawler(
        config.base_url,
        fetcher,
        max_text_length=config.max_text_length,
    )
    aggregator = await crawler.crawl()
    return aggregator.content()


async def start_archive(config: ArchiverConfig, fetcher: Optional[PageFetcher] = None) -> Path:
    """
    Полный прогон: создаёт каталог вывода, обходит сайт и сохраняет JSON.

    Без явного *fetcher* открывает собственную aiohttp-сессию на время обхода.
    """
    ensure_output_dir(config.output_dir)
    filename = filename_from_url(config.base_url)

    if fetcher is None:
        async with Fetcher(config) as http_fetcher:
            content = await run_crawl(config, http_fetcher)
    else:
        content = await run_crawl(config, fetcher)

    path = render_corpus(content, config.output_dir, filename)
    logger.info("Crawling completed and data saved: %s", path)
    return path
