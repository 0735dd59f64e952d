# -*- coding: utf-8 -*-
"""
conftest.py – исходники OBJ/MTL и модели на диске для тестов
парсеров и загрузчика.
"""

import pytest


# ----------------------------------------------------------------------
# Куб из двух материалов: квадратные грани, `v/vt/vn`
# ----------------------------------------------------------------------
CUBE_OBJ = """\
# cube with two materials
mtllib cube.mtl
o Cube
v -1 -1  1
v  1 -1  1
v  1  1  1
v -1  1  1
v -1 -1 -1
v  1 -1 -1
v  1  1 -1
v -1  1 -1
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
vn 0 0 -1
s off
usemtl red
f 1/1/1 2/2/1 3/3/1 4/4/1
usemtl blue
f 6/1/2 5/2/2 8/3/2 7/4/2
"""

CUBE_MTL = """\
# two materials
newmtl red
Ka 0.1 0 0
Kd 1 0 0
Ks 0.5 0.5 0.5
Ns 250
d 1

newmtl blue
Kd 0 0 1
Tr 0.25
map_Kd blue.png
"""


@pytest.fixture
def cube_obj() -> str:
    return CUBE_OBJ


@pytest.fixture
def cube_mtl() -> str:
    return CUBE_MTL


@pytest.fixture
def model_dir(tmp_path):
    """Каталог с cube.obj и cube.mtl."""
    (tmp_path / "cube.obj").write_text(CUBE_OBJ, encoding="utf-8")
    (tmp_path / "cube.mtl").write_text(CUBE_MTL, encoding="utf-8")
    return tmp_path
