"""
Загружает OBJ‑модель и печатает сводку по частям и материалам.

    python examples/inspect_model.py path/to/model.obj
"""

import sys

import wavefront3d as wf
from wavefront3d.utils import logger


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)

    model = wf.load_model(sys.argv[1])
    lo, hi = model.extents()
    logger.info(f"Model '{model.name}': {len(model)} parts, extents {lo} .. {hi}")
    for part in model.parts:
        m = part.material
        colors = "vertex colors" if part.mesh.colors is not None else "no vertex colors"
        logger.info(
            f"  {part.mesh.name}: {part.mesh.vertex_count} vertices, {colors}, "
            f"material '{m.name}' (diffuse={m.diffuse}, opacity={m.opacity})"
        )
