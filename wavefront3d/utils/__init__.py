# wavefront3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger   – готовый объект logging.Logger (с level INFO)
    * Profiler – контекст‑менеджер замера времени
"""

from .logger import logger
from .profiler import Profiler

__all__ = ["logger", "Profiler"]
