"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только явным вызовом `save()`).
"""

import copy
import json
from pathlib import Path
from wavefront3d.utils.logger import logger

DEFAULT_CONFIG = {
    "parser": {
        "split_on_groups": True,
        "default_vertex_color": [1.0, 1.0, 1.0],
    },
    "loader": {
        "encoding": "utf-8",
        "max_workers": 4,
        "load_textures": False,
    },
    "default_material": {
        "diffuse": [1.0, 1.0, 1.0],
        "ambient": [0.0, 0.0, 0.0],
        "specular": [1.0, 1.0, 1.0],
        "shininess": 400.0,
        "opacity": 1.0,
    },
}


def _merge(base: dict, override: dict) -> dict:
    """Рекурсивно накладывает `override` на копию `base`."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Объект конфигурации загрузчика моделей."""

    def __init__(self, path: str = "wavefront3d.json"):
        self.path = Path(path)
        self._load()

    @classmethod
    def defaults(cls, path: str = "wavefront3d.json") -> "Config":
        """Конфигурация по‑умолчанию без чтения файла."""
        cfg = cls.__new__(cls)
        cfg.path = Path(path)
        cfg.data = copy.deepcopy(DEFAULT_CONFIG)
        return cfg

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = _merge(DEFAULT_CONFIG, json.load(f))
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    # -----------------------------------------------------------------
    # Удобные аксессоры секций
    # -----------------------------------------------------------------
    def parser_options(self) -> dict:
        """Ключевые аргументы для `parse_obj`."""
        section = self["parser"]
        return {
            "split_on_groups": bool(section["split_on_groups"]),
            "default_color": tuple(float(c) for c in section["default_vertex_color"]),
        }

    def loader_option(self, key: str):
        return self["loader"].get(key, DEFAULT_CONFIG["loader"][key])
