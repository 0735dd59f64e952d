# wavefront3d/parsing/geometry.py
"""
Сборщик геометрии: пулы атрибутов вершин и переиндексация граней
OBJ (отдельные индексы position/texcoord/normal) в «плоские»
массивы по одной вершине на угол треугольника.

Индексного буфера нет – результат рассчитан на non‑indexed draw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from wavefront3d.parsing.errors import DanglingIndexReference
from wavefront3d.parsing.tokens import to_int

DEFAULT_NAME = "default"
DEFAULT_MATERIAL_NAME = "default"


class FaceVertex(NamedTuple):
    """
    Одна группа `i`, `i/j`, `i//k` или `i/j/k` из директивы `f`.
    Отсутствующий поток – None.
    """
    position: int
    texcoord: Optional[int] = None
    normal: Optional[int] = None

    @classmethod
    def parse(cls, token: str) -> "FaceVertex":
        """Разобрать токен; ValueError при неверном формате."""
        parts = token.split("/")
        if len(parts) > 3 or not parts[0]:
            raise ValueError(f"bad face vertex {token!r}")
        position = to_int(parts[0])
        texcoord = to_int(parts[1]) if len(parts) > 1 and parts[1] else None
        normal = to_int(parts[2]) if len(parts) > 2 and parts[2] else None
        return cls(position, texcoord, normal)


class VertexPools:
    """Растущие пулы `v`/`vt`/`vn` (+ цвета вершин) на время одного разбора."""

    def __init__(self, default_color=(1.0, 1.0, 1.0)):
        self.positions: list[tuple[float, float, float]] = []
        self.texcoords: list[tuple[float, ...]] = []
        self.normals: list[tuple[float, float, float]] = []
        # всегда той же длины, что и positions
        self.colors: list[tuple[float, float, float]] = []
        self.default_color = tuple(default_color)
        self.has_color = False
        self.texcoord_components = 2

    def add_position(self, xyz, rgb=None):
        self.positions.append(tuple(xyz))
        if rgb is None:
            self.colors.append(self.default_color)
        else:
            self.colors.append(tuple(rgb))
            self.has_color = True

    def add_texcoord(self, uvw):
        if len(uvw) == 1:
            uvw = (uvw[0], 0.0)
        self.texcoords.append(tuple(uvw))
        if len(uvw) == 3:
            self.texcoord_components = 3

    def add_normal(self, xyz):
        self.normals.append(tuple(xyz))

    def _pool(self, stream: str) -> list:
        return {
            "position": self.positions,
            "texcoord": self.texcoords,
            "normal": self.normals,
        }[stream]

    def resolve(self, index: Optional[int], stream: str, line: int) -> Optional[int]:
        """
        1‑based или отрицательный индекс → 0‑based индекс в пуле,
        каким пул является *сейчас*.
        """
        if index is None:
            return None
        size = len(self._pool(stream))
        resolved = index - 1 if index > 0 else size + index
        if index == 0 or not 0 <= resolved < size:
            raise DanglingIndexReference(line, index, stream)
        return resolved

    def resolve_vertex(self, vertex: FaceVertex, line: int) -> FaceVertex:
        return FaceVertex(
            self.resolve(vertex.position, "position", line),
            self.resolve(vertex.texcoord, "texcoord", line),
            self.resolve(vertex.normal, "normal", line),
        )


@dataclass
class Geometry:
    """Готовая к загрузке в GPU часть модели."""
    name: str
    material_name: str
    object_name: str = DEFAULT_NAME
    groups: tuple[str, ...] = ()
    position: list[float] = field(default_factory=list)
    texcoord: list[float] = field(default_factory=list)
    normal: list[float] = field(default_factory=list)
    color: list[float] = field(default_factory=list)
    texcoord_components: int = 2
    has_color: bool = False

    @property
    def vertex_count(self) -> int:
        return len(self.position) // 3

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def data(self) -> dict[str, list[float]]:
        """Массивы атрибутов; `color` пуст, если цвета в исходнике нет."""
        return {
            "position": self.position,
            "texcoord": self.texcoord,
            "normal": self.normal,
            "color": self.color,
        }


class GeometryBuilder:
    """Накапливает углы треугольников (уже разрешённые индексы) одной геометрии."""

    def __init__(self, name: str, object_name: str, groups: tuple[str, ...], material_name: str):
        self.name = name
        self.object_name = object_name
        self.groups = groups
        self.material_name = material_name
        self.corners: list[FaceVertex] = []

    @property
    def triangle_count(self) -> int:
        return len(self.corners) // 3

    def add_polygon(self, vertices: list[FaceVertex]):
        """Веерная триангуляция: (0, i, i+1) для i = 1..N-2."""
        first = vertices[0]
        for i in range(1, len(vertices) - 1):
            self.corners.extend((first, vertices[i], vertices[i + 1]))

    def build(self, pools: VertexPools) -> Geometry:
        tc = pools.texcoord_components
        geometry = Geometry(
            name=self.name,
            material_name=self.material_name,
            object_name=self.object_name,
            groups=self.groups,
            texcoord_components=tc,
            has_color=pools.has_color,
        )
        zero_tex = (0.0,) * tc
        zero_normal = (0.0, 0.0, 0.0)
        for p, t, n in self.corners:
            geometry.position.extend(pools.positions[p])
            if t is None:
                geometry.texcoord.extend(zero_tex)
            else:
                tex = pools.texcoords[t]
                geometry.texcoord.extend(tex)
                if len(tex) < tc:
                    geometry.texcoord.extend((0.0,) * (tc - len(tex)))
            geometry.normal.extend(pools.normals[n] if n is not None else zero_normal)
            if pools.has_color:
                geometry.color.extend(pools.colors[p])
        return geometry
