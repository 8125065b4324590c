# wfobj/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger     – готовый объект logging.Logger (с level INFO)
    * set_level  – смена уровня логгера по имени
    * Config     – настройки reader/parser
"""

from .logger import logger, set_level
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "set_level", "Config", "DEFAULT_CONFIG"]
