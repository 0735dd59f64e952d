# -*- coding: utf-8 -*-
import numpy as np
import pytest
from wavefront3d.assets.material import DEFAULT_MATERIAL
from wavefront3d.parsing import parse_obj
from wavefront3d.scene import Mesh, Model, ModelPart

TRIANGLE = "v 0 0 0\nv 2 0 0\nv 0 2 0\nf 1 2 3\n"

def make_mesh(text=TRIANGLE):
    (geometry,) = parse_obj(text).geometries
    return Mesh(geometry)

def test_mesh_arrays():
    mesh = make_mesh()
    assert mesh.vertex_count == 3
    assert mesh.vertices.shape == (3, 3)
    assert mesh.vertices.dtype == np.float32
    assert mesh.texcoords.shape == (3, 2)
    assert mesh.normals.shape == (3, 3)
    assert mesh.colors is None

def test_buffer_arrays_white_fallback():
    arrays = make_mesh().buffer_arrays()
    assert arrays["color"] == {"value": [1.0, 1.0, 1.0, 1.0]}
    assert arrays["position"].tolist() == [0, 0, 0, 2, 0, 0, 0, 2, 0]
    assert arrays["texcoord"]["num_components"] == 2

def test_buffer_arrays_vertex_colors():
    mesh = make_mesh("v 0 0 0 1 0 0\nv 1 0 0 0 1 0\nv 0 1 0 0 0 1\nf 1 2 3\n")
    color = mesh.buffer_arrays()["color"]
    assert color["num_components"] == 3
    assert len(color["data"]) == len(mesh.buffer_arrays()["position"])
    assert color["data"].tolist() == [1, 0, 0, 0, 1, 0, 0, 0, 1]

def test_mesh_extents_and_bounding_sphere():
    mesh = make_mesh()
    lo, hi = mesh.extents()
    assert lo.tolist() == [0, 0, 0]
    assert hi.tolist() == [2, 2, 0]
    centre, radius = mesh.bounding_sphere
    assert np.allclose(centre, [2 / 3, 2 / 3, 0])
    assert radius == pytest.approx(np.linalg.norm([4 / 3, -2 / 3, 0]), rel=1e-5)

def test_model_extents_over_parts():
    a = make_mesh()
    b = make_mesh("v -4 1 1\nv -3 1 1\nv -4 2 5\nf 1 2 3\n")
    model = Model([ModelPart(a, DEFAULT_MATERIAL), ModelPart(b, DEFAULT_MATERIAL)])
    lo, hi = model.extents()
    assert lo.tolist() == [-4, 0, 0]
    assert hi.tolist() == [2, 2, 5]
    assert np.allclose(model.center_offset(), [1, -1, -2.5])
    assert len(model.meshes) == 2

def test_empty_model_extents():
    lo, hi = Model([]).extents()
    assert np.all(np.isinf(lo)) and np.all(lo > 0)
    assert np.all(np.isinf(hi)) and np.all(hi < 0)
