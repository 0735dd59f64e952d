# -*- coding: utf-8 -*-
"""
Материал из MTL‑библиотеки – хранит параметры освещения (Ka/Kd/Ks/Ke,
Ns, d/Tr, Ni, illum) и имена файлов текстурных карт.

Текстуры здесь **не загружаются** – только имена; загрузкой занимается
`TextureManager` по запросу загрузчика модели.

Если в OBJ указан материал, которого нет в библиотеке, используется
`DEFAULT_MATERIAL` (белый diffuse, чёрный ambient, белый specular,
shininess 400, непрозрачный).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping

from wavefront3d.utils.logger import logger

Color = tuple[float, float, float]


@dataclass
class MaterialDescriptor:
    """Параметры одного `newmtl`‑блока."""

    name: str = "default"
    diffuse: Color = (1.0, 1.0, 1.0)
    ambient: Color = (0.0, 0.0, 0.0)
    specular: Color = (1.0, 1.0, 1.0)
    emissive: Color = (0.0, 0.0, 0.0)
    shininess: float = 400.0
    opacity: float = 1.0
    optical_density: float = 1.0
    illum: int | None = None

    # Имена файлов карт (относительно MTL‑файла)
    diffuse_map: str | None = None
    specular_map: str | None = None
    shininess_map: str | None = None
    opacity_map: str | None = None
    normal_map: str | None = None

    def texture_maps(self) -> dict[str, str]:
        """Только указанные карты: {'diffuse': 'wood.png', ...}."""
        maps = {
            "diffuse": self.diffuse_map,
            "specular": self.specular_map,
            "shininess": self.shininess_map,
            "opacity": self.opacity_map,
            "normal": self.normal_map,
        }
        return {kind: path for kind, path in maps.items() if path}

    @classmethod
    def from_dict(cls, name: str, values: Mapping) -> "MaterialDescriptor":
        """Собрать материал из секции конфигурации (`default_material`)."""
        return cls(
            name=name,
            diffuse=tuple(values.get("diffuse", (1.0, 1.0, 1.0))),
            ambient=tuple(values.get("ambient", (0.0, 0.0, 0.0))),
            specular=tuple(values.get("specular", (1.0, 1.0, 1.0))),
            shininess=float(values.get("shininess", 400.0)),
            opacity=float(values.get("opacity", 1.0)),
        )


DEFAULT_MATERIAL = MaterialDescriptor()


def resolve_material(materials: Mapping[str, MaterialDescriptor], name: str,
                     default: MaterialDescriptor = DEFAULT_MATERIAL) -> MaterialDescriptor:
    """Найти материал по имени или вернуть копию материала по‑умолчанию."""
    material = materials.get(name)
    if material is None:
        logger.debug(f"[Material] '{name}' not found – using default material")
        return replace(default)
    return material
