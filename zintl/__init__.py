"""Unit-safe geometry, text layout, glyph atlases, mesh tessellation and GPU-ready mesh data for a UI toolkit."""

__version__ = "0.1.0"