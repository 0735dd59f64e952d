# wavefront3d/parsing/__init__.py
"""Парсеры Wavefront OBJ/MTL: чистые функции «текст → структура»."""

from wavefront3d.parsing.errors import (
    WavefrontError,
    MalformedDirective,
    DanglingIndexReference,
)
from wavefront3d.parsing.geometry import FaceVertex, Geometry
from wavefront3d.parsing.obj_parser import ObjData, parse_obj
from wavefront3d.parsing.mtl_parser import parse_mtl

__all__ = [
    "WavefrontError",
    "MalformedDirective",
    "DanglingIndexReference",
    "FaceVertex",
    "Geometry",
    "ObjData",
    "parse_obj",
    "parse_mtl",
]
