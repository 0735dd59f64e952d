# wavefront3d/parsing/mtl_parser.py
"""
Парсер Wavefront MTL.

`newmtl name` открывает новый материал; остальные директивы меняют
текущий. Всё, что стоит до первого `newmtl`, отбрасывается.
Если в блоке есть и `d`, и `Tr`, прозрачность берётся из `d`.
"""

from __future__ import annotations

from wavefront3d.assets.material import MaterialDescriptor
from wavefront3d.parsing.errors import MalformedDirective
from wavefront3d.parsing.tokens import (
    Directive,
    iter_directives,
    parse_float,
    parse_floats,
    parse_int,
    require_rest,
    to_float,
)
from wavefront3d.utils.logger import logger
from wavefront3d.utils.profiler import Profiler

MTL_HANDLERS = {
    "newmtl": "_on_newmtl",
    "Ka": "_on_color",
    "Kd": "_on_color",
    "Ks": "_on_color",
    "Ke": "_on_color",
    "Ns": "_on_shininess",
    "Ni": "_on_optical_density",
    "d": "_on_dissolve",
    "Tr": "_on_transparency",
    "illum": "_on_illum",
    "map_Kd": "_on_map",
    "map_Ks": "_on_map",
    "map_Ns": "_on_map",
    "map_d": "_on_map",
    "map_Bump": "_on_map",
    "map_bump": "_on_map",
    "bump": "_on_map",
    "norm": "_on_map",
}

COLOR_FIELDS = {"Ka": "ambient", "Kd": "diffuse", "Ks": "specular", "Ke": "emissive"}

MAP_FIELDS = {
    "map_Kd": "diffuse_map",
    "map_Ks": "specular_map",
    "map_Ns": "shininess_map",
    "map_d": "opacity_map",
    "map_Bump": "normal_map",
    "map_bump": "normal_map",
    "bump": "normal_map",
    "norm": "normal_map",
}

# опции карт: имя → (мин, макс) числа аргументов
MAP_OPTIONS = {
    "-blendu": (1, 1),
    "-blendv": (1, 1),
    "-boost": (1, 1),
    "-bm": (1, 1),
    "-cc": (1, 1),
    "-clamp": (1, 1),
    "-imfchan": (1, 1),
    "-texres": (1, 1),
    "-type": (1, 1),
    "-mm": (2, 2),
    "-o": (1, 3),
    "-s": (1, 3),
    "-t": (1, 3),
}


def _is_number(token: str) -> bool:
    try:
        to_float(token)
    except ValueError:
        return False
    return True


def map_filename(directive: Directive) -> str:
    """Имя файла карты после пропуска опций вида `-s 1 1 1`."""
    args = directive.args
    i = 0
    while i < len(args) and args[i] in MAP_OPTIONS:
        low, high = MAP_OPTIONS[args[i]]
        i += 1
        taken = 0
        while taken < high and i < len(args) - 1:
            if taken >= low and not _is_number(args[i]):
                break
            i += 1
            taken += 1
        if taken < low:
            raise MalformedDirective(directive.line, directive.raw, "incomplete map option")
    filename = " ".join(args[i:])
    if not filename:
        raise MalformedDirective(directive.line, directive.raw, "missing file name")
    return filename


class _MtlContext:
    """Изменяемое состояние одного вызова `parse_mtl`."""

    def __init__(self):
        self.materials: dict[str, MaterialDescriptor] = {}
        self.current: MaterialDescriptor | None = None
        self._has_dissolve = False
        self.dropped = 0

    def dispatch(self, directive: Directive):
        handler = MTL_HANDLERS.get(directive.keyword)
        if handler is None:
            return
        if self.current is None and directive.keyword != "newmtl":
            self.dropped += 1
            return
        getattr(self, handler)(directive)

    # -----------------------------------------------------------------
    def _on_newmtl(self, directive: Directive):
        name = require_rest(directive)
        if name in self.materials:
            logger.warning(f"[MTLParser] Material '{name}' redefined at line {directive.line}")
        self.current = MaterialDescriptor(name=name)
        self.materials[name] = self.current
        self._has_dissolve = False

    def _on_color(self, directive: Directive):
        setattr(self.current, COLOR_FIELDS[directive.keyword], parse_floats(directive, (3,)))

    def _on_shininess(self, directive: Directive):
        self.current.shininess = parse_float(directive)

    def _on_optical_density(self, directive: Directive):
        self.current.optical_density = parse_float(directive)

    def _on_dissolve(self, directive: Directive):
        if directive.args[:1] == ("-halo",):
            directive = directive._replace(args=directive.args[1:])
        self.current.opacity = parse_float(directive)
        self._has_dissolve = True

    def _on_transparency(self, directive: Directive):
        value = parse_float(directive)
        if not self._has_dissolve:
            self.current.opacity = 1.0 - value

    def _on_illum(self, directive: Directive):
        if len(directive.args) != 1:
            raise MalformedDirective(directive.line, directive.raw, "expected 1 argument")
        self.current.illum = parse_int(directive, directive.args[0])

    def _on_map(self, directive: Directive):
        setattr(self.current, MAP_FIELDS[directive.keyword], map_filename(directive))


def parse_mtl(text: str) -> dict[str, MaterialDescriptor]:
    """
    Разобрать одну или несколько склеенных MTL‑библиотек.

    :returns: словарь имя → MaterialDescriptor в порядке появления.
    :raises MalformedDirective: неверные аргументы распознанной директивы.
    """
    ctx = _MtlContext()
    with Profiler("parse_mtl"):
        for directive in iter_directives(text):
            ctx.dispatch(directive)
    if ctx.dropped:
        logger.debug(f"[MTLParser] Dropped {ctx.dropped} directives before first newmtl")
    logger.debug(f"[MTLParser] {len(ctx.materials)} materials")
    return ctx.materials
