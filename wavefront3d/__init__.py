"""
wavefront3d – загрузчик моделей Wavefront OBJ/MTL для 3‑D просмотрщика.
Разбирает геометрию и материалы в готовые к загрузке в GPU массивы.
"""

from wavefront3d.utils import logger
from wavefront3d.utils.config import Config
from wavefront3d.parsing import (
    WavefrontError,
    MalformedDirective,
    DanglingIndexReference,
    FaceVertex,
    Geometry,
    ObjData,
    parse_obj,
    parse_mtl,
)
from wavefront3d.assets.material import MaterialDescriptor, DEFAULT_MATERIAL, resolve_material
from wavefront3d.assets.texture_manager import TextureManager
from wavefront3d.scene import Mesh, Model, ModelPart
from wavefront3d.utils.loader import load_obj, load_model, read_material_libs

__version__ = "1.0.0"

__all__ = [
    "Config",
    "WavefrontError",
    "MalformedDirective",
    "DanglingIndexReference",
    "FaceVertex",
    "Geometry",
    "ObjData",
    "parse_obj",
    "parse_mtl",
    "MaterialDescriptor",
    "DEFAULT_MATERIAL",
    "resolve_material",
    "TextureManager",
    "Mesh",
    "Model",
    "ModelPart",
    "load_obj",
    "load_model",
    "read_material_libs",
]
