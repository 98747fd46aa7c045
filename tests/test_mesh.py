import pytest

from robotsiege.mesh import Material, MeshVertex, QuadMesh
from robotsiege.vector import Vector3

ORIGIN = Vector3(-160.0, 0.0, 160.0)
DIR1 = Vector3(1.0, 0.0, 0.0)
DIR2 = Vector3(0.0, 0.0, -1.0)


def _ground(size=4, length=3200.0, width=3200.0):
    mesh = QuadMesh(size, 3200.0)
    mesh.init_mesh(size, ORIGIN, length, width, DIR1, DIR2)
    return mesh


def test_default_dimensions():
    assert QuadMesh().max_mesh_dimensions() == (1, 40)


def test_max_size_is_clamped_to_minimum():
    assert QuadMesh(0).max_mesh_dimensions() == (1, 1)


def test_default_material():
    mesh = QuadMesh()
    assert mesh.material == Material()
    assert mesh.material.diffuse == (0.9, 0.5, 0.0, 1.0)
    assert mesh.material.shininess == 0.0


@pytest.mark.parametrize("size", [1, 2, 5, 16])
def test_vertex_and_quad_counts(size):
    mesh = _ground(size)
    assert len(mesh.vertices) == (size + 1) ** 2
    assert len(mesh.quads) == size * size
    assert mesh.mesh_size == size


def test_corner_positions():
    mesh = _ground(4, length=40.0, width=20.0)
    assert tuple(mesh.vertices[0].position) == pytest.approx(tuple(ORIGIN))
    far_corner = ORIGIN + DIR1 * 40.0 + DIR2 * 20.0
    assert tuple(mesh.vertices[-1].position) == pytest.approx(tuple(far_corner))


def test_quads_share_vertices_with_neighbours():
    mesh = _ground(3)
    first, second = mesh.quads[0], mesh.quads[1]
    assert first.vertices[1] is second.vertices[0]
    assert first.vertices[2] is second.vertices[3]
    assert all(v in mesh.vertices for q in mesh.quads for v in q.vertices)


def test_quad_vertices_are_counterclockwise_steps():
    mesh = _ground(2, length=10.0, width=10.0)
    v0, v1, v2, v3 = (v.position for v in mesh.quads[0].vertices)
    assert tuple((v1 - v0).normalized()) == pytest.approx(tuple(DIR1))
    assert tuple((v3 - v0).normalized()) == pytest.approx(tuple(DIR2))
    assert tuple(v2 - v1) == pytest.approx(tuple(v3 - v0))


def test_normals_are_unit_and_perpendicular_to_plane():
    mesh = _ground(4)
    expected = DIR1.cross(DIR2).normalized()
    for vertex in mesh.vertices:
        assert vertex.normal.length() == pytest.approx(1.0)
        assert tuple(vertex.normal) == pytest.approx(tuple(expected))


def test_normals_for_tilted_plane():
    mesh = QuadMesh(3)
    a = Vector3(1.0, 1.0, 0.0).normalized()
    b = Vector3(0.0, 0.0, 1.0)
    mesh.init_mesh(3, Vector3(), 6.0, 6.0, a, b)
    expected = a.cross(b).normalized()
    for vertex in mesh.vertices:
        assert tuple(vertex.normal) == pytest.approx(tuple(expected))
        assert vertex.normal.dot(a) == pytest.approx(0.0, abs=1e-9)


def test_compute_normals_restores_overwritten_normals():
    mesh = _ground(2)
    before = [vertex.normal for vertex in mesh.vertices]
    for vertex in mesh.vertices:
        vertex.normal = Vector3()
    mesh.compute_normals()
    assert [vertex.normal for vertex in mesh.vertices] == before


def test_set_material_adds_opaque_alpha():
    mesh = QuadMesh()
    mesh.set_material(
        Vector3(0.4, 0.2, 0.1), Vector3(0.6, 0.3, 0.15), Vector3(0.1, 0.1, 0.1), 0.2
    )
    assert mesh.material.ambient == (0.4, 0.2, 0.1, 1.0)
    assert mesh.material.diffuse == (0.6, 0.3, 0.15, 1.0)
    assert mesh.material.specular == (0.1, 0.1, 0.1, 1.0)
    assert mesh.material.shininess == 0.2


@pytest.mark.parametrize("size", [0, -1, 5])
def test_init_mesh_rejects_sizes_out_of_range(size):
    mesh = QuadMesh(4)
    with pytest.raises(ValueError):
        mesh.init_mesh(size, ORIGIN, 10.0, 10.0, DIR1, DIR2)


def test_reinit_replaces_grid():
    mesh = QuadMesh(8)
    mesh.init_mesh(8, ORIGIN, 10.0, 10.0, DIR1, DIR2)
    mesh.init_mesh(2, ORIGIN, 10.0, 10.0, DIR1, DIR2)
    assert len(mesh.vertices) == 9
    assert len(mesh.quads) == 4


def test_mesh_vertex_default_normal_is_zero():
    vertex = MeshVertex(Vector3(1.0, 2.0, 3.0))
    assert vertex.normal == Vector3()