"""
Fetcher module: one HTTP GET per URL, parsed into a :class:`Document`.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from web_archiver.config import ArchiverConfig
from web_archiver.errors import FetchError
from web_archiver.logger import logger
from web_archiver.parser.html_parser import Document, parse_html


class PageFetcher(Protocol):
    """Anything the crawl loop can ask for a parsed page."""

    async def fetch(self, url: str) -> Document: ...


class Fetcher:
    """
    Handles HTTP fetching over a shared aiohttp session.

    No retries and no rate limiting: every call is a single attempt. Any
    transport error, non-2xx status or undecodable body becomes a
    :class:`FetchError`.
    """

    def __init__(self, config: ArchiverConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            # without an explicit timeout aiohttp's own default applies
            kwargs = {}
            if self.config.timeout is not None:
                kwargs["timeout"] = ClientTimeout(total=self.config.timeout)
            self.session = ClientSession(
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
                **kwargs,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> Document:
        """Download *url* and return the parsed document."""
        if not self.session:
            raise RuntimeError("Session not initialized")
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}")
                html = await resp.text()
        except (ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
            raise FetchError(url, exc) from exc
        try:
            return parse_html(html)
        except Exception as exc:
            raise FetchError(url, exc) from exc


__all__ = ["Fetcher", "PageFetcher"]
