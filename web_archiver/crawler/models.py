"""
Data models for the WebArchiver crawler.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ExtractedPage:
    """Cleaned title/text pair produced from one fetched page."""

    title: str
    text: str

    def as_section(self) -> str:
        return f"{self.title}\n\n{self.text}"


@dataclass(slots=True, frozen=True)
class CrawlStats:
    """Progress counters reported after every processed URL."""

    visited: int
    queued: int
    sections: int

    def __str__(self) -> str:
        return f"Visited: {self.visited}, Queued: {self.queued}, Sections: {self.sections}"
