# -*- coding: utf-8 -*-
import numpy as np
import pytest

from wfobj.errors import MeshIndexError
from wfobj.mesh.builder import MISSING, MeshBuilder, resolve_index
from wfobj.utils.loader import parse_string

QUAD = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def build(text):
    builder = MeshBuilder()
    parse_string(text, builder)
    return builder.build()


def test_resolve_index_rules():
    assert resolve_index(1, 4, "vertex") == 0
    assert resolve_index(4, 4, "vertex") == 3
    assert resolve_index(-1, 4, "vertex") == 3
    assert resolve_index(-4, 4, "vertex") == 0
    assert resolve_index(0, 4, "normal", optional=True) == MISSING
    with pytest.raises(MeshIndexError):
        resolve_index(0, 4, "vertex")
    with pytest.raises(MeshIndexError):
        resolve_index(5, 4, "vertex")
    with pytest.raises(MeshIndexError):
        resolve_index(-5, 4, "vertex")


def test_collects_arrays():
    mesh = build(QUAD + "vp 0.5\n")
    assert mesh.positions.shape == (4, 3)
    assert mesh.texcoords.shape == (4, 2)
    assert mesh.normals.shape == (1, 3)
    assert np.allclose(mesh.parameters, [[0.5, 0.0, 0.0]])
    assert len(mesh.faces) == 1
    assert mesh.faces[0].tolist() == [[0, 0, 0], [1, 1, 0], [2, 2, 0], [3, 3, 0]]


def test_relative_indices_use_running_count():
    mesh = build("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\nv 5 5 5\nf -1 -2 -3\n")
    assert mesh.faces[0][:, 0].tolist() == [0, 1, 2]
    assert mesh.faces[1][:, 0].tolist() == [3, 2, 1]
    assert mesh.faces[0][:, 1].tolist() == [MISSING] * 3


def test_out_of_range_index_aborts_parse():
    with pytest.raises(MeshIndexError):
        build("v 0 0 0\nf 1 2 3\n")


def test_triangulate_quad():
    positions, normals, texcoords, indices = build(QUAD).triangulate()
    assert indices.dtype == np.uint32
    assert indices.tolist() == [0, 1, 2, 0, 2, 3]
    assert positions.shape == (4, 3)
    assert np.allclose(normals, [[0, 0, 1]] * 4)
    assert np.allclose(texcoords, [[0, 0], [1, 0], [1, 1], [0, 1]])


def test_triangulate_defaults_for_missing_attributes():
    positions, normals, texcoords, indices = build("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\nf 1 2\n").triangulate()
    assert indices.tolist() == [0, 1, 2]
    assert np.allclose(normals, [[0.0, 0.0, 1.0]] * 3)
    assert np.allclose(texcoords, np.zeros((3, 2)))


def test_builder_without_parser():
    builder = MeshBuilder()
    for p in [(0, 0, 0), (1, 0, 0), (0, 1, 0)]:
        builder.on_vertex(*p, 1.0)
    builder.on_face([(1, 0, 0), (2, 0, 0), (-1, 0, 0)], 3)
    assert builder.build().faces[0][:, 0].tolist() == [0, 1, 2]
