"""web_archiver.errors: Исключения, которые ядро обхода поднимает наружу."""
from __future__ import annotations

from pathlib import Path
from typing import Union

__all__ = ["WebArchiverError", "FetchError", "StorageError"]


class WebArchiverError(Exception):
    """Базовое исключение пакета."""


class FetchError(WebArchiverError):
    """Страницу не удалось загрузить или разобрать.

    Carries the offending URL and the underlying cause so the crawl loop can
    report both and move on to the next frontier entry.
    """

    def __init__(self, url: str, cause: Union[BaseException, str]) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {cause}")


class StorageError(WebArchiverError):
    """Output directory could not be created or the artifact written."""

    def __init__(self, path: Union[str, Path], cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")
