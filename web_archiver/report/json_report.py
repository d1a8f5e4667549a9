"""
Запись итогового JSON-корпуса для проекта WebArchiver.
"""
import json
from pathlib import Path
from typing import Union

from web_archiver.errors import StorageError
from web_archiver.logger import logger


def ensure_output_dir(output_dir: Union[Path, str]) -> Path:
    """Создаёт каталог вывода (вместе с родителями), если его ещё нет."""
    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create output directory %s: %s", directory, exc)
        raise StorageError(directory, exc) from exc
    return directory


def render_corpus(content: str, output_dir: Union[Path, str], filename: str) -> Path:
    """
    Сохраняет корпус в ``output_dir/filename`` как ``{"content": ...}``.

    :param content: склеенные секции корпуса
    :param output_dir: каталог вывода (создаётся при необходимости)
    :param filename: имя файла, например ``example.com.json``
    :return: Path сохранённого файла

    Пример:
    ```python
    from web_archiver.report.json_report import render_corpus
    path = render_corpus("Home\\n\\nHello", "archived_data", "example.com.json")
    ```
    """
    output = ensure_output_dir(output_dir) / filename

    # Запись в файл с отступами и Unicode
    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump({"content": content}, f, ensure_ascii=False, indent=2)
    except OSError as exc:
        logger.error("Cannot write corpus to %s: %s", output, exc)
        raise StorageError(output, exc) from exc

    return output
