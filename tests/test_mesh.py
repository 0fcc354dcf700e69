from zintl.mesh import Mesh, Vertex
from zintl.units import PhysicalPixelsPoint, PhysicalPixelsRect


def _rect(x0, y0, x1, y1):
    return PhysicalPixelsRect(PhysicalPixelsPoint(x0, y0), PhysicalPixelsPoint(x1, y1))


def test_default_mesh_is_empty():
    mesh = Mesh()
    assert mesh.vertices == []
    assert mesh.indices == []
    assert mesh.texture_id is None
    assert mesh.children == []


def test_from_children_keeps_order_and_has_no_geometry():
    a = Mesh(indices=[0])
    b = Mesh(indices=[1])
    mesh = Mesh.from_children([a, b])
    assert mesh.children == [a, b]
    assert mesh.vertices == []
    assert mesh.texture_id is None


def test_from_device_rect_indices():
    mesh = Mesh.from_device_rect(_rect(0, 0, 10, 10), 0, _rect(0, 0, 1, 1))
    assert mesh.indices == [0, 1, 2, 0, 2, 3]


def test_from_device_rect_positions_are_corners():
    rect = _rect(2, 3, 12, 8)
    mesh = Mesh.from_device_rect(rect, None, _rect(0, 0, 4, 4))
    positions = [v.position for v in mesh.vertices]
    assert positions == [
        PhysicalPixelsPoint(2, 3),
        PhysicalPixelsPoint(12, 3),
        PhysicalPixelsPoint(12, 8),
        PhysicalPixelsPoint(2, 8),
    ]


def test_from_device_rect_tex_coords_follow_positions():
    tex = _rect(5, 6, 9, 11)
    mesh = Mesh.from_device_rect(_rect(0, 0, 10, 10), 3, tex)
    assert mesh.texture_id == 3
    assert mesh.vertices[0].tex_coords == tex.min
    assert mesh.vertices[2].tex_coords == tex.max
    assert mesh.vertices[1].tex_coords == PhysicalPixelsPoint(tex.max.x, tex.min.y)
    assert mesh.vertices[3].tex_coords == PhysicalPixelsPoint(tex.min.x, tex.max.y)


def test_indices_reference_existing_vertices():
    mesh = Mesh.from_device_rect(_rect(0, 0, 1, 1), None, _rect(0, 0, 1, 1))
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    assert mesh.children == []


def test_vertex_equality():
    p = PhysicalPixelsPoint(1, 2)
    assert Vertex(p, p) == Vertex(PhysicalPixelsPoint(1, 2), PhysicalPixelsPoint(1, 2))