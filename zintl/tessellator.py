"""Turns laid-out text into textured meshes."""

from __future__ import annotations

from dataclasses import dataclass

from zintl.geometry import Viewport
from zintl.mesh import Mesh
from zintl.text import Galley
from zintl.units import PhysicalPixelsPoint, PhysicalPixelsRect


class TessellationJob:
    """Something to be turned into meshes."""


@dataclass
class GalleyJob(TessellationJob):
    galley: Galley


@dataclass
class EmptyJob(TessellationJob):
    """Produces no meshes."""


class Tessellator:
    """Builds device-pixel meshes from tessellation jobs."""

    def tessellate_galley(self, galley: Galley) -> list[Mesh]:
        """One textured quad per positioned glyph."""
        meshes = []
        for positioned in galley.glyphs:
            origin = positioned.rect.min
            bounds = positioned.glyph.rect.bounds
            mesh_rect = PhysicalPixelsRect(
                PhysicalPixelsPoint(
                    (origin.x + bounds.min.x).to_rounded(),
                    (origin.y + bounds.min.y).to_rounded(),
                ),
                PhysicalPixelsPoint(
                    (origin.x + bounds.max.x).to_rounded(),
                    (origin.y + bounds.max.y).to_rounded(),
                ),
            )
            meshes.append(
                Mesh.from_device_rect(mesh_rect, 0, positioned.glyph.rect.texture_bounds)
            )
        return meshes

    def tessellate(self, job: TessellationJob, viewport: Viewport) -> list[Mesh]:
        if isinstance(job, GalleyJob):
            return self.tessellate_galley(job.galley)
        return []