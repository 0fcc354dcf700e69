"""Triangle meshes in device pixels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from zintl.units import PhysicalPixelsPoint, PhysicalPixelsRect


@dataclass
class Vertex:
    """A vertex position and its texture coordinates, both in unnormalised pixels."""

    position: PhysicalPixelsPoint
    tex_coords: PhysicalPixelsPoint


@dataclass
class Mesh:
    """Indexed triangles with an optional texture and nested child meshes."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    texture_id: Optional[int] = None
    children: list[Mesh] = field(default_factory=list)

    @classmethod
    def from_children(cls, children: list[Mesh]) -> Mesh:
        return cls(children=list(children))

    @classmethod
    def from_device_rect(
        cls,
        rect: PhysicalPixelsRect,
        texture_id: Optional[int],
        tex_bounds: PhysicalPixelsRect,
    ) -> Mesh:
        """A quad of two triangles covering `rect`, mapped onto `tex_bounds`."""
        vertices = [
            Vertex(rect.min, PhysicalPixelsPoint(tex_bounds.min.x, tex_bounds.min.y)),
            Vertex(
                PhysicalPixelsPoint(rect.max.x, rect.min.y),
                PhysicalPixelsPoint(tex_bounds.max.x, tex_bounds.min.y),
            ),
            Vertex(
                PhysicalPixelsPoint(rect.max.x, rect.max.y),
                PhysicalPixelsPoint(tex_bounds.max.x, tex_bounds.max.y),
            ),
            Vertex(
                PhysicalPixelsPoint(rect.min.x, rect.max.y),
                PhysicalPixelsPoint(tex_bounds.min.x, tex_bounds.max.y),
            ),
        ]
        return cls(vertices=vertices, indices=[0, 1, 2, 0, 2, 3], texture_id=texture_id)