# === FILE: chh_collector/config.py ===
"""
Загрузка и валидация конфигурации краулера.
Схема описана через Pydantic; файлы читаются из YAML или JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from chh_collector import __version__
from chh_collector.crawler.fetcher import DEFAULT_REQUEST_DELAY, DEFAULT_TIMEOUT

__all__ = ("CrawlerConfig", "load_config", "DEFAULT_CONFIG_PATH")


class CrawlerConfig(BaseModel):
    """Конфигурация одного запуска краулера."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_urls: List[str] = Field(..., min_length=1, description="Стартовые URL, в порядке обхода.")
    follow_external_links: bool = Field(
        False, description="Переходить по ссылкам, не начинающимся ни с одного seed URL."
    )
    scrape_seed_urls: bool = Field(
        True, description="Вызывать visitor для самих seed-страниц."
    )
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Таймаут на соединение и чтение (секунд).")
    request_delay: float = Field(
        DEFAULT_REQUEST_DELAY, ge=0, description="Пауза перед каждым запросом (секунд)."
    )
    user_agent: str = Field(f"CHHCollector/{__version__}", min_length=1, description="Заголовок User-Agent.")

    @field_validator("seed_urls")
    def _check_seeds(cls, v: List[str]) -> List[str]:
        for url in v:
            if not url or not url.strip():
                raise ValueError("seed URL must not be empty")
        return v

    def is_seed(self, url: str) -> bool:
        return url in self.seed_urls


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


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


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный CrawlerConfig.
    Если path не задан, используется configs/default.yaml.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(DEFAULT_CONFIG_PATH))
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return CrawlerConfig(**data)
