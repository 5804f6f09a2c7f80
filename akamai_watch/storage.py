# File: akamai_watch/storage.py
"""akamai_watch.storage: сохранение новых версий скрипта на диск."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from akamai_watch.config import DEFAULT_STORAGE_DIR
from akamai_watch.logger import logger

__all__ = ["ScriptStore"]


class ScriptStore:
    """Хранилище скриптов: ``<base>/<host>/<host>_<tag>_<hash>.<ext>``."""

    def __init__(
        self, base_dir: Union[str, Path] = DEFAULT_STORAGE_DIR, extension: str = "js"
    ) -> None:
        self.base_dir = Path(base_dir)
        self.extension = extension.lstrip(".")

    def path_for(self, host: str, version_tag: str, fingerprint: str) -> Path:
        """Детерминированный путь файла для версии скрипта."""
        filename = f"{host}_{version_tag}_{fingerprint}.{self.extension}"
        return self.base_dir / host / filename

    def save(self, host: str, version_tag: str, fingerprint: str, body: str) -> Optional[Path]:
        """
        Записывает тело скрипта как есть, перезаписывая существующий файл.
        Ошибки файловой системы логируются и не пробрасываются: возвращается None.
        """
        path = self.path_for(host, version_tag, fingerprint)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(body, encoding="utf-8", newline="")
        except OSError as exc:
            logger.error("Error writing script for %s to %s: %s", host, path, exc)
            return None
        logger.info("Saved updated script to %s", path)
        return path
