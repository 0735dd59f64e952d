"""
Меш одной геометрии OBJ – numpy‑массивы атрибутов для non‑indexed draw.
"""

import numpy as np
from wavefront3d.parsing.geometry import Geometry

WHITE = [1.0, 1.0, 1.0, 1.0]

class Mesh:
    """Примитивный объект – атрибуты вершин одной геометрии в виде float32‑массивов."""
    def __init__(self, geometry: Geometry):
        self.name = geometry.name
        self.material_name = geometry.material_name

        self.vertices = np.asarray(geometry.position, dtype=np.float32).reshape((-1, 3))
        self.normals = np.asarray(geometry.normal, dtype=np.float32).reshape((-1, 3))
        self.texcoords = np.asarray(geometry.texcoord, dtype=np.float32).reshape(
            (-1, geometry.texcoord_components))
        self.colors = (np.asarray(geometry.color, dtype=np.float32).reshape((-1, 3))
                       if geometry.has_color else None)

        self.vertex_count = len(self.vertices)

        # bounding sphere (локальные координаты)
        if self.vertex_count:
            self._bounding_center = self.vertices.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(self.vertices - self._bounding_center, axis=1).max())
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    def extents(self):
        """(min, max) по каждой оси."""
        if not self.vertex_count:
            return (np.full(3, np.inf, dtype=np.float32),
                    np.full(3, -np.inf, dtype=np.float32))
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def buffer_arrays(self) -> dict:
        """
        Атрибуты для создания GPU‑буферов.
        Без цветов вершин – константный белый цвет вместо массива.
        """
        arrays = {
            "position": self.vertices.ravel(),
            "texcoord": {"num_components": self.texcoords.shape[1],
                         "data": self.texcoords.ravel()},
            "normal": self.normals.ravel(),
        }
        if self.colors is not None:
            arrays["color"] = {"num_components": 3, "data": self.colors.ravel()}
        else:
            arrays["color"] = {"value": list(WHITE)}
        return arrays

    @property
    def bounding_sphere(self):
        """(центр, радиус) в локальных координатах."""
        return self._bounding_center, self._bounding_radius
