"""Mesh data in the flat float layout a GPU vertex buffer expects."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Optional

from zintl.geometry import TexturePoint, Viewport
from zintl.mat import Mat4
from zintl.mesh import Mesh, Vertex
from zintl.units import Point, PhysicalPixelsSize

_VERTEX_FORMAT = struct.Struct("<4f")


@dataclass(frozen=True)
class DevicePoint:
    """A position in device pixels as two floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_point(cls, point: Point) -> DevicePoint:
        """Convert a whole or fractional physical pixel point."""
        return cls(float(point.x.value()), float(point.y.value()))


@dataclass(frozen=True)
class DeviceVertex:
    """A vertex position with normalised texture coordinates."""

    position: DevicePoint
    tex_coords: TexturePoint

    @classmethod
    def from_vertex(cls, vertex: Vertex, texture_size: PhysicalPixelsSize) -> DeviceVertex:
        """Normalise a vertex's texture coordinates by the texture size.

        Raises ValueError when the texture has a zero width or height.
        """
        tex_coords = TexturePoint.from_physical_point(vertex.tex_coords, texture_size)
        if tex_coords is None:
            raise ValueError(f"cannot normalise texture coordinates for size {texture_size!r}")
        return cls(DevicePoint.from_point(vertex.position), tex_coords)

    def to_bytes(self) -> bytes:
        """Pack as four little-endian 32-bit floats: position x, y, then texture x, y."""
        return _VERTEX_FORMAT.pack(
            self.position.x, self.position.y, self.tex_coords.x, self.tex_coords.y
        )


@dataclass
class DeviceMesh:
    """A mesh ready for upload: vertices, 32-bit indices and a texture id."""

    vertices: list[DeviceVertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    texture_id: Optional[int] = None

    @classmethod
    def from_mesh(cls, mesh: Mesh, texture_size: PhysicalPixelsSize) -> DeviceMesh:
        """Convert a mesh's own vertices; its children are not included."""
        return cls(
            vertices=[DeviceVertex.from_vertex(v, texture_size) for v in mesh.vertices],
            indices=list(mesh.indices),
            texture_id=mesh.texture_id,
        )

    def vertex_bytes(self) -> bytes:
        return b"".join(vertex.to_bytes() for vertex in self.vertices)

    def index_bytes(self) -> bytes:
        """Pack the indices as little-endian unsigned 32-bit integers."""
        return struct.pack(f"<{len(self.indices)}I", *self.indices)


@dataclass(frozen=True)
class Uniforms:
    """Shader uniforms: the orthographic projection."""

    ortho: Mat4

    def to_bytes(self) -> bytes:
        return self.ortho.to_bytes()


def _orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    return Mat4(
        (
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, -2.0 / (far - near), 0.0),
            (
                -(right + left) / (right - left),
                -(top + bottom) / (top - bottom),
                -(far + near) / (far - near),
                1.0,
            ),
        )
    )


def create_ortho_matrix(viewport: Viewport) -> Mat4:
    """Projection mapping device pixels (origin top-left, y down) to clip space."""
    width = float(viewport.device_width.value())
    height = float(viewport.device_height.value())
    if width == 0.0 or height == 0.0:
        raise ValueError("viewport must have a non-zero width and height")
    return _orthographic(0.0, width, height, 0.0, -1.0, 1.0)