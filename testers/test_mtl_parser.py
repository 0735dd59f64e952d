# -*- coding: utf-8 -*-
import pytest

from wavefront3d.parsing import MalformedDirective, parse_mtl
from wavefront3d.parsing.mtl_parser import map_filename
from wavefront3d.parsing.tokens import Directive


def test_parse_basic_material(cube_mtl):
    materials = parse_mtl(cube_mtl)
    assert list(materials) == ["red", "blue"]

    red = materials["red"]
    assert red.ambient == (0.1, 0.0, 0.0)
    assert red.diffuse == (1.0, 0.0, 0.0)
    assert red.specular == (0.5, 0.5, 0.5)
    assert red.shininess == 250.0
    assert red.opacity == 1.0
    assert red.diffuse_map is None

    blue = materials["blue"]
    assert blue.diffuse == (0.0, 0.0, 1.0)
    assert blue.opacity == pytest.approx(0.75)
    assert blue.diffuse_map == "blue.png"
    assert blue.texture_maps() == {"diffuse": "blue.png"}


def test_unset_properties_keep_defaults():
    material = parse_mtl("newmtl plain\n")["plain"]
    assert material.name == "plain"
    assert material.diffuse == (1.0, 1.0, 1.0)
    assert material.ambient == (0.0, 0.0, 0.0)
    assert material.specular == (1.0, 1.0, 1.0)
    assert material.shininess == 400.0
    assert material.opacity == 1.0
    assert material.texture_maps() == {}


@pytest.mark.parametrize("block", [
    "newmtl m\nd 0.5\nTr 0.9\n",
    "newmtl m\nTr 0.9\nd 0.5\n",
])
def test_dissolve_wins_over_transparency(block):
    assert parse_mtl(block)["m"].opacity == 0.5


def test_transparency_alone_inverts():
    assert parse_mtl("newmtl m\nTr 0.9\n")["m"].opacity == pytest.approx(0.1)


def test_dissolve_flag_resets_per_material():
    materials = parse_mtl("newmtl a\nd 0.5\nnewmtl b\nTr 0.25\n")
    assert materials["a"].opacity == 0.5
    assert materials["b"].opacity == pytest.approx(0.75)


def test_dissolve_halo_option():
    assert parse_mtl("newmtl m\nd -halo 0.3\n")["m"].opacity == pytest.approx(0.3)


def test_directives_before_newmtl_are_dropped():
    text = "Kd 0 0 0\nNs 10\nKd not numbers here\nnewmtl late\n"
    material = parse_mtl(text)["late"]
    assert material.diffuse == (1.0, 1.0, 1.0)
    assert material.shininess == 400.0


def test_concatenated_libraries():
    lib_a = "newmtl a\nKd 1 0 0\n"
    lib_b = "newmtl b\nKd 0 1 0"
    materials = parse_mtl("\n".join([lib_a, lib_b]))
    assert materials["a"].diffuse == (1.0, 0.0, 0.0)
    assert materials["b"].diffuse == (0.0, 1.0, 0.0)


def test_redefined_material_replaces_earlier():
    materials = parse_mtl("newmtl a\nNs 10\nnewmtl a\nNs 20\n")
    assert len(materials) == 1
    assert materials["a"].shininess == 20.0


def test_unknown_directives_are_ignored():
    materials = parse_mtl("newmtl m\nPr 0.5\nPm 1\nTf 1 1 1\nsharpness 60\nKd 0.2 0.2 0.2\n")
    assert materials["m"].diffuse == (0.2, 0.2, 0.2)


def test_extra_properties():
    text = (
        "newmtl glass\n"
        "Ke 0.1 0.2 0.3\n"
        "Ni 1.45\n"
        "illum 2\n"
        "map_Ks spec.png\n"
        "map_Ns gloss.png\n"
        "map_d alpha.png\n"
        "map_Bump -bm 0.5 normal.png\n"
    )
    glass = parse_mtl(text)["glass"]
    assert glass.emissive == (0.1, 0.2, 0.3)
    assert glass.optical_density == 1.45
    assert glass.illum == 2
    assert glass.texture_maps() == {
        "specular": "spec.png",
        "shininess": "gloss.png",
        "opacity": "alpha.png",
        "normal": "normal.png",
    }


@pytest.mark.parametrize("line", [
    "Kd 1 x 1", "Kd 1 1", "Ns", "Ns 1 2", "d high", "illum 2.5", "map_Kd",
    "Ns 1_0", "d nan", "illum 1_0",
])
def test_malformed_recognized_directives(line):
    with pytest.raises(MalformedDirective) as excinfo:
        parse_mtl("newmtl m\n" + line + "\n")
    assert excinfo.value.line == 2
    assert excinfo.value.raw == line


def test_leading_byte_order_mark_is_skipped():
    materials = parse_mtl("\ufeffnewmtl red\nKd 1 0 0\n")
    assert list(materials) == ["red"]
    assert materials["red"].diffuse == (1.0, 0.0, 0.0)


def test_newmtl_requires_name():
    with pytest.raises(MalformedDirective):
        parse_mtl("newmtl\n")


def test_parsing_is_idempotent(cube_mtl):
    assert parse_mtl(cube_mtl) == parse_mtl(cube_mtl)


@pytest.mark.parametrize("rest, expected", [
    ("wood.png", "wood.png"),
    ("my wood.png", "my wood.png"),
    ("-s 1 1 1 wood.png", "wood.png"),
    ("-o 0.5 wood.png", "wood.png"),
    ("-clamp on -blendu off textures/wood.png", "textures/wood.png"),
    ("-mm 0 1 -s 2 2 wood.png", "wood.png"),
])
def test_map_filename_skips_options(rest, expected):
    directive = Directive(1, "map_Kd", tuple(rest.split()), rest, "map_Kd " + rest)
    assert map_filename(directive) == expected


def test_map_option_without_file_is_malformed():
    directive = Directive(3, "map_Kd", ("-clamp",), "-clamp", "map_Kd -clamp")
    with pytest.raises(MalformedDirective):
        map_filename(directive)
