# wavefront3d/parsing/obj_parser.py
"""
Парсер Wavefront OBJ.

Один проход по строкам: директивы `v`/`vt`/`vn` пополняют пулы,
`f` триангулируется веером и добавляется в текущую геометрию,
`o`/`g`/`usemtl` начинают новую геометрию. Материалы здесь не
читаются – запоминаются только имена (`usemtl`) и библиотеки (`mtllib`).

Неизвестные ключевые слова пропускаются.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wavefront3d.parsing.errors import MalformedDirective
from wavefront3d.parsing.geometry import (
    DEFAULT_MATERIAL_NAME,
    DEFAULT_NAME,
    FaceVertex,
    Geometry,
    GeometryBuilder,
    VertexPools,
)
from wavefront3d.parsing.tokens import Directive, iter_directives, parse_floats, require_rest
from wavefront3d.utils.logger import logger
from wavefront3d.utils.profiler import Profiler

# ключевое слово → метод контекста
OBJ_HANDLERS = {
    "v": "_on_position",
    "vt": "_on_texcoord",
    "vn": "_on_normal",
    "f": "_on_face",
    "o": "_on_object",
    "g": "_on_group",
    "usemtl": "_on_usemtl",
    "mtllib": "_on_mtllib",
    "s": "_on_smoothing",
}


@dataclass
class ObjData:
    """Результат `parse_obj`."""
    geometries: list[Geometry] = field(default_factory=list)
    material_libs: list[str] = field(default_factory=list)


class _ObjContext:
    """Изменяемое состояние одного вызова `parse_obj`."""

    def __init__(self, split_on_groups: bool, default_color):
        self.pools = VertexPools(default_color)
        self.split_on_groups = split_on_groups
        self.material_libs: list[str] = []
        self.name = DEFAULT_NAME
        self.object_name = DEFAULT_NAME
        self.groups: tuple[str, ...] = ()
        self.material_name = DEFAULT_MATERIAL_NAME
        self.finished: list[GeometryBuilder] = []
        self.current = self._new_builder()
        self.face_count = 0
        self._ignored: set[str] = set()

    # -----------------------------------------------------------------
    def dispatch(self, directive: Directive):
        handler = OBJ_HANDLERS.get(directive.keyword)
        if handler is None:
            if directive.keyword not in self._ignored:
                self._ignored.add(directive.keyword)
                logger.debug(
                    f"[OBJParser] Ignoring unsupported keyword "
                    f"'{directive.keyword}' (line {directive.line})"
                )
            return
        getattr(self, handler)(directive)

    def _new_builder(self) -> GeometryBuilder:
        return GeometryBuilder(self.name, self.object_name, self.groups, self.material_name)

    def _start_geometry(self):
        """Закрыть текущую геометрию (если в ней есть треугольники) и начать новую."""
        if self.current.triangle_count:
            self.finished.append(self.current)
        self.current = self._new_builder()

    def finish(self) -> ObjData:
        if self.current.triangle_count:
            self.finished.append(self.current)
        geometries = [builder.build(self.pools) for builder in self.finished]
        return ObjData(geometries=geometries, material_libs=list(self.material_libs))

    # -----------------------------------------------------------------
    # Атрибуты вершин
    # -----------------------------------------------------------------
    def _on_position(self, directive: Directive):
        # v x y z | v x y z w | v x y z r g b
        values = parse_floats(directive, (3, 4, 6))
        if len(values) == 6:
            self.pools.add_position(values[:3], values[3:])
        else:
            self.pools.add_position(values[:3])

    def _on_texcoord(self, directive: Directive):
        self.pools.add_texcoord(parse_floats(directive, (1, 2, 3)))

    def _on_normal(self, directive: Directive):
        self.pools.add_normal(parse_floats(directive, (3,)))

    # -----------------------------------------------------------------
    # Грани
    # -----------------------------------------------------------------
    def _on_face(self, directive: Directive):
        if len(directive.args) < 3:
            raise MalformedDirective(
                directive.line, directive.raw, "a face needs at least 3 vertices"
            )
        try:
            vertices = [FaceVertex.parse(token) for token in directive.args]
        except ValueError as exc:
            raise MalformedDirective(directive.line, directive.raw, str(exc)) from None
        resolved = [self.pools.resolve_vertex(v, directive.line) for v in vertices]
        self.current.add_polygon(resolved)
        self.face_count += 1

    # -----------------------------------------------------------------
    # Состояние: объект / группа / материал
    # -----------------------------------------------------------------
    def _on_object(self, directive: Directive):
        self.object_name = require_rest(directive)
        self.name = self.object_name
        # группы действуют только внутри своего объекта
        self.groups = ()
        self._start_geometry()

    def _on_group(self, directive: Directive):
        self.groups = directive.args or (DEFAULT_NAME,)
        self.name = " ".join(self.groups)
        if self.split_on_groups:
            self._start_geometry()
        else:
            self.current.name = self.name
            self.current.groups = self.groups

    def _on_usemtl(self, directive: Directive):
        self.material_name = require_rest(directive)
        self._start_geometry()

    def _on_mtllib(self, directive: Directive):
        if not directive.args:
            raise MalformedDirective(directive.line, directive.raw, "missing library name")
        self.material_libs.extend(directive.args)

    def _on_smoothing(self, directive: Directive):
        # нормали берутся только из `vn`
        pass


def parse_obj(text: str, *, split_on_groups: bool = True,
              default_color=(1.0, 1.0, 1.0)) -> ObjData:
    """
    Разобрать исходник OBJ.

    :param split_on_groups: начинать новую геометрию на каждом `g`.
    :param default_color: цвет для `v` без цветового расширения,
        если хотя бы одна вершина файла его содержит.
    :raises MalformedDirective: неверные аргументы распознанной директивы.
    :raises DanglingIndexReference: индекс грани вне пула.
    """
    ctx = _ObjContext(split_on_groups, default_color)
    with Profiler("parse_obj"):
        for directive in iter_directives(text):
            ctx.dispatch(directive)
        result = ctx.finish()
    logger.debug(
        f"[OBJParser] {len(ctx.pools.positions)} positions, {ctx.face_count} faces, "
        f"{len(result.geometries)} geometries, {len(result.material_libs)} material libs"
    )
    return result
