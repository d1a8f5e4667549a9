"""
Модуль для загрузки и валидации конфигурации WebArchiver.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT_DIR = Path("archived_data")
DEFAULT_MAX_TEXT_LENGTH = 120_000


class ArchiverConfig(BaseModel):
    """Конфигурация для одного запуска архивации сайта."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый URL обхода.")
    output_dir: Path = Field(DEFAULT_OUTPUT_DIR, description="Каталог для JSON-корпуса.")
    user_agent: str = Field("WebArchiver/0.1", min_length=1, description="Заголовок User-Agent.")
    timeout: Optional[float] = Field(
        None, gt=0, description="Таймаут на один запрос (секунд); None — значение aiohttp."
    )
    max_text_length: int = Field(
        DEFAULT_MAX_TEXT_LENGTH, ge=1, description="Максимальная длина текста страницы."
    )

    @field_validator("base_url")
    def _check_absolute_http(cls, v: str) -> str:
        v = v.strip()
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {v!r}")
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает сырой mapping без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> ArchiverConfig:
    """
    Собирает ArchiverConfig из файла (если указан) и явных переопределений.
    Переопределения со значением None игнорируются.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ArchiverConfig(**data)


__all__ = ["ArchiverConfig", "load_config", "read_config_file", "DEFAULT_MAX_TEXT_LENGTH"]
