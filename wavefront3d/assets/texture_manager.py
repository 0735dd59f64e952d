# wavefront3d/assets/texture_manager.py
"""Менеджер кэширования текстур материалов."""

from pathlib import Path

from wavefront3d.utils.logger import logger
from wavefront3d.utils.texture_loader import load_texture


class TextureManager:
    """Кеширующий менеджер текстур – пути считаются от `base_dir`."""

    def __init__(self, base_dir="."):
        self.base_dir = Path(base_dir)
        self._cache = {}

    def resolve(self, filename: str) -> Path:
        return (self.base_dir / filename.replace("\\", "/")).resolve()

    def get(self, filename: str):
        path = self.resolve(filename)
        if path in self._cache:
            return self._cache[path]
        tex = load_texture(path)
        self._cache[path] = tex
        logger.debug(f"[TextureManager] Loaded texture: {path}")
        return tex

    def __len__(self):
        return len(self._cache)
