# -*- coding: utf-8 -*-
"""
Загрузка модели Wavefront с диска: OBJ → MTL‑библиотеки → Model.

MTL‑файлы читаются параллельно через `TaskPool`, но склеиваются в
порядке директив `mtllib`. Нечитаемая библиотека – не ошибка: в лог
пишется предупреждение, а части модели получают материал по‑умолчанию.
"""

from __future__ import annotations

from pathlib import Path

from wavefront3d.assets.material import MaterialDescriptor, resolve_material
from wavefront3d.assets.texture_manager import TextureManager
from wavefront3d.multithread.task_pool import TaskPool
from wavefront3d.parsing.errors import WavefrontError
from wavefront3d.parsing.mtl_parser import parse_mtl
from wavefront3d.parsing.obj_parser import ObjData, parse_obj
from wavefront3d.scene.mesh import Mesh
from wavefront3d.scene.model import Model, ModelPart
from wavefront3d.utils.config import Config
from wavefront3d.utils.logger import logger
from wavefront3d.utils.profiler import Profiler


def _resolve(base: Path, filename: str) -> Path:
    # в библиотеках из Windows встречаются обратные слэши
    return base / filename.replace("\\", "/")


def load_obj(path, config: Config | None = None) -> ObjData:
    """Прочитать и разобрать один OBJ‑файл."""
    config = config or Config.defaults()
    path = Path(path)
    try:
        text = path.read_text(encoding=config.loader_option("encoding"))
    except UnicodeDecodeError as exc:
        logger.error(f"[Loader] Cannot decode {path}: {exc}")
        raise
    try:
        with Profiler(f"load_obj {path.name}"):
            return parse_obj(text, **config.parser_options())
    except WavefrontError as exc:
        logger.error(f"[Loader] Failed to parse {path}: {exc}")
        raise


def read_material_libs(obj_path, names, config: Config | None = None) -> list[str]:
    """
    Прочитать MTL‑библиотеки относительно каталога OBJ‑файла.
    Результаты – в порядке `names`; нечитаемый файл даёт пустую строку.
    """
    config = config or Config.defaults()
    names = list(names)
    if not names:
        return []
    base = Path(obj_path).parent
    encoding = config.loader_option("encoding")

    def read_one(name: str) -> str:
        lib_path = _resolve(base, name)
        try:
            return lib_path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"[Loader] Cannot read material library {lib_path}: {exc}")
            return ""

    with TaskPool(max_workers=config.loader_option("max_workers")) as pool:
        return pool.map_ordered(read_one, names)


def load_model(path, config: Config | None = None) -> Model:
    """
    Загрузить модель целиком: геометрии, материалы и (по настройке)
    diffuse‑текстуры. Материал, которого нет в библиотеках, заменяется
    материалом по‑умолчанию из конфигурации.
    """
    config = config or Config.defaults()
    path = Path(path)

    with Profiler(f"load_model {path.name}"):
        obj = load_obj(path, config)
        texts = read_material_libs(path, obj.material_libs, config)
        try:
            materials = parse_mtl("\n".join(texts))
        except WavefrontError as exc:
            logger.error(f"[Loader] Failed to parse material libraries of {path}: {exc}")
            raise

        default = MaterialDescriptor.from_dict("default", config["default_material"])
        textures = TextureManager(path.parent) if config.loader_option("load_textures") else None

        parts = []
        for geometry in obj.geometries:
            material = resolve_material(materials, geometry.material_name, default)
            texture = None
            if textures is not None and material.diffuse_map:
                try:
                    texture = textures.get(material.diffuse_map)
                except OSError as exc:
                    logger.error(f"[Loader] Failed to load texture '{material.diffuse_map}': {exc}")
            parts.append(ModelPart(Mesh(geometry), material, texture))

    logger.info(
        f"[Loader] Loaded {path.name}: {len(parts)} parts, {len(materials)} materials"
    )
    return Model(parts, name=path.stem, material_libs=obj.material_libs)
