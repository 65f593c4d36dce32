# === FILE: link_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера LinkScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="Стартовый (seed) URL обхода.")
    max_depth: int = Field(3, ge=0, description="Максимальная глубина обхода ссылок.")
    requests_per_second: float = Field(2.0, gt=0, description="Глобальный лимит запросов в секунду.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("LinkScoutBot/1.0", min_length=1, description="Заголовок User-Agent.")
    output: Path = Field(Path("crawl_results.json"), description="Файл JSON-отчёта.")

    @field_validator("base_url", mode="before")
    def _check_absolute_url(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        v = v.strip()
        try:
            parts = urlsplit(v)
        except ValueError as exc:
            raise ValueError(f"invalid base URL {v!r}: {exc}") from exc
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"invalid base URL {v!r}: expected absolute http(s) URL")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


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


def read_config_file(path: Union[str, Path, None]) -> dict[str, Any]:
    """
    Читает YAML или JSON в словарь без валидации.
    Если path не задан и configs/default.yaml отсутствует — возвращает пустой словарь.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def build_config(data: dict[str, Any], **overrides: Any) -> CrawlerConfig:
    """Накладывает непустые overrides (например, флаги CLI) на data и валидирует результат."""
    merged = dict(data)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**merged)


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML/JSON и возвращает проверенный объект CrawlerConfig.
    Ошибки схемы пробрасываются как pydantic.ValidationError.
    """
    return build_config(read_config_file(path), **overrides)
