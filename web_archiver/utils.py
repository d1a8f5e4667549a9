"""web_archiver.utils: Утилиты для работы с URL."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import urlparse

from web_archiver.logger import logger

__all__: Sequence[str] = ("extract_hostname", "filename_from_url")


def extract_hostname(url: str) -> str:
    """Возвращает hostname из URL (без порта, в нижнем регистре) или пустую строку."""
    return urlparse(url).hostname or ""


def filename_from_url(url: str) -> str:
    """Имя файла корпуса: последний непустой сегмент пути или hostname, плюс ``.json``."""
    parsed = urlparse(url)
    parts = [p for p in parsed.path.split("/") if p]
    last = parts[-1] if parts else extract_hostname(url)
    filename = f"{last}.json"
    logger.debug("Filename for %s: %s", url, filename)
    return filename
