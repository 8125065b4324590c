"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from wfobj.utils.logger import logger

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "reader": {"encoding": "utf-8", "chunk_size": 65536},
    "parser": {"strict_faces": True},
}


def _merge(base: dict, override: dict) -> dict:
    """Рекурсивно наложить override поверх base (вложенные секции сливаются)."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Словарь настроек парсера поверх DEFAULT_CONFIG."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else None
        self._load()

    def _load(self):
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        if self.path is None:
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = _merge(DEFAULT_CONFIG, loaded)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")

    def save(self, path=None):
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Config has no path to save to")
        try:
            with target.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def section(self, name: str) -> dict:
        """Секция настроек (reader / parser), дополненная значениями по‑умолчанию."""
        return _merge(DEFAULT_CONFIG.get(name, {}), self.data.get(name, {}))

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

    def get(self, key, default=None):
        return self.data.get(key, default)
