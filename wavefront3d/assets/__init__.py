# wavefront3d/assets/__init__.py
"""Пакет с материалами и менеджером текстур."""
from wavefront3d.assets.material import MaterialDescriptor, DEFAULT_MATERIAL, resolve_material
from wavefront3d.assets.texture_manager import TextureManager

__all__ = ["MaterialDescriptor", "DEFAULT_MATERIAL", "resolve_material", "TextureManager"]
