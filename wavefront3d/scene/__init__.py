"""
Пакет scene – меши и модели, собранные из геометрий OBJ.
"""

from wavefront3d.scene.mesh import Mesh
from wavefront3d.scene.model import Model, ModelPart

__all__ = ["Mesh", "Model", "ModelPart"]
