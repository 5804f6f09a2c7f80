# === FILE: akamai_watch/config.py ===
"""
Модуль для загрузки и валидации конфигурации AkamaiWatch.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/102.0.5005.63 Safari/537.36"
)
DEFAULT_STORAGE_DIR = Path("assets/downloaded_akamai_scripts")


class SiteConfig(BaseModel):
    """Один отслеживаемый сайт."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    site: HttpUrl = Field(..., description="Страница, на которой ищется скрипт.")
    delay: float = Field(
        60.0, ge=0, description="Интервал опроса (секунд), используется внешним планировщиком."
    )


class TrackerConfig(BaseModel):
    """Конфигурация трекеров и общих параметров запросов."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sites: list[SiteConfig] = Field(..., min_length=1, description="Список сайтов.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    storage_dir: Path = Field(DEFAULT_STORAGE_DIR, description="Каталог для сохранения скриптов.")
    script_extension: str = Field("js", min_length=1, description="Расширение файлов скриптов.")

    @field_validator("sites", mode="before")
    def _wrap_plain_urls(cls, v: Any) -> Any:
        # допускаем краткую запись: sites: [https://a.com, https://b.com]
        if isinstance(v, list):
            return [{"site": item} if isinstance(item, str) else item for item in v]
        return v

    @field_validator("script_extension")
    def _strip_dot(cls, v: str) -> str:
        ext = v.lstrip(".")
        if not ext:
            raise ValueError("script_extension не может быть пустым")
        return ext


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


def load_config(path: Union[str, Path, None]) -> TrackerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект TrackerConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
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

    try:
        return TrackerConfig(**data)
    except ValidationError:
        raise
