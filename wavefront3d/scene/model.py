"""
Объединяет несколько Mesh‑ов (с материалами) в одну модель.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from wavefront3d.assets.material import MaterialDescriptor
from wavefront3d.scene.mesh import Mesh


@dataclass
class ModelPart:
    mesh: Mesh
    material: MaterialDescriptor
    diffuse_texture: Optional[np.ndarray] = None


class Model:
    """Объединяет несколько частей (Mesh + материал) в один объект‑модель."""
    def __init__(self, parts, name="Model", material_libs=()):
        self.parts = list(parts)
        self.name = name
        self.material_libs = list(material_libs)

    @property
    def meshes(self):
        return [part.mesh for part in self.parts]

    def extents(self):
        """(min, max) по всем мешам; ±inf для пустой модели."""
        lo = np.full(3, np.inf, dtype=np.float32)
        hi = np.full(3, -np.inf, dtype=np.float32)
        for mesh in self.meshes:
            mesh_lo, mesh_hi = mesh.extents()
            lo = np.minimum(lo, mesh_lo)
            hi = np.maximum(hi, mesh_hi)
        return lo, hi

    def center_offset(self):
        """Сдвиг, переносящий центр габаритов модели в начало координат."""
        lo, hi = self.extents()
        return -(lo + (hi - lo) * 0.5)

    def __len__(self):
        return len(self.parts)
