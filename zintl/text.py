"""Fonts, glyph rasterisation into an atlas, and simple text layout."""

from __future__ import annotations

import io
import logging
import struct
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Any, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from zintl.geometry import Alignment, ScaleFactor
from zintl.texture import Atlas
from zintl.units import (
    LogicalPixels,
    LogicalPixelsRect,
    PhysicalPixels,
    PhysicalPixelsF,
    PhysicalPixelsFPoint,
    PhysicalPixelsFRect,
    PhysicalPixelsFSize,
    PhysicalPixelsRect,
    PhysicalPixelsSize,
)

logger = logging.getLogger(__name__)

# (min_x, min_y, max_x, max_y) in pixels, and coverage rows with values in [0, 1].
RasterResult = tuple[tuple[float, float, float, float], Sequence[Sequence[float]]]


@dataclass(frozen=True)
class GlyphRect:
    """Layout size, mesh bounds and atlas location of a glyph."""

    width: PhysicalPixelsF = field(default_factory=PhysicalPixelsF)
    height: PhysicalPixelsF = field(default_factory=PhysicalPixelsF)
    bounds: PhysicalPixelsFRect = field(default_factory=PhysicalPixelsFRect.zero)
    texture_bounds: PhysicalPixelsRect = field(default_factory=PhysicalPixelsRect.zero)


@dataclass(frozen=True)
class Glyph:
    """A glyph id with its rectangle; id 0 means the glyph is missing."""

    id: int = 0
    rect: GlyphRect = field(default_factory=GlyphRect)


class FontFace(ABC):
    """A scalable font face; `scale` is the pixel height from descent to ascent."""

    @abstractmethod
    def glyph_id(self, c: str) -> int:
        """The glyph id for a character, or 0 when the face lacks it."""

    @abstractmethod
    def vertical_metrics(self, scale: float) -> tuple[float, float, float]:
        """Ascent, descent (negative below the baseline) and line gap in pixels."""

    @abstractmethod
    def h_advance(self, glyph_id: int, scale: float) -> float:
        """Horizontal advance of a glyph in pixels."""

    @abstractmethod
    def kern(self, left: int, right: int, scale: float) -> float:
        """Kerning adjustment between two glyphs in pixels."""

    @abstractmethod
    def rasterize(self, glyph_id: int, scale: float, baseline: float) -> Optional[RasterResult]:
        """Render a glyph whose origin sits at (0, baseline).

        Returns its pixel bounds and coverage rows, or None when it has no outline.
        """


def _table_directory(data: bytes) -> dict[bytes, int]:
    base = struct.unpack_from(">I", data, 12)[0] if data[:4] == b"ttcf" else 0
    (count,) = struct.unpack_from(">H", data, base + 4)
    start = base + 12
    records = data[start : start + 16 * count]
    if len(records) != 16 * count:
        raise ValueError("truncated table directory")
    return {tag: offset for tag, _, offset, _ in struct.iter_unpack(">4sIII", records)}


def _cmap_format4(data: bytes, start: int) -> dict[int, int]:
    seg_count = struct.unpack_from(">H", data, start + 6)[0] // 2
    ends_at = start + 14
    starts_at = ends_at + 2 * seg_count + 2
    deltas_at = starts_at + 2 * seg_count
    ranges_at = deltas_at + 2 * seg_count
    ends = struct.unpack_from(f">{seg_count}H", data, ends_at)
    starts = struct.unpack_from(f">{seg_count}H", data, starts_at)
    deltas = struct.unpack_from(f">{seg_count}h", data, deltas_at)
    ranges = struct.unpack_from(f">{seg_count}H", data, ranges_at)

    mapping: dict[int, int] = {}
    for segment, (first, last, delta, range_offset) in enumerate(zip(starts, ends, deltas, ranges)):
        for cp in range(first, min(last, 0xFFFE) + 1):
            if range_offset == 0:
                gid = (cp + delta) & 0xFFFF
            else:
                addr = ranges_at + 2 * segment + range_offset + 2 * (cp - first)
                if addr + 2 > len(data):
                    continue
                gid = struct.unpack_from(">H", data, addr)[0]
                if gid:
                    gid = (gid + delta) & 0xFFFF
            if gid:
                mapping[cp] = gid
    return mapping


def _cmap_format12(data: bytes, start: int) -> dict[int, int]:
    (count,) = struct.unpack_from(">I", data, start + 12)
    groups = data[start + 16 : start + 16 + 12 * count]
    mapping: dict[int, int] = {}
    for first, last, first_glyph in struct.iter_unpack(">III", groups):
        for cp in range(first, min(last, 0x10FFFF) + 1):
            mapping[cp] = first_glyph + cp - first
    return mapping


def _parse_cmap(data: bytes, offset: int) -> dict[int, int]:
    _, count = struct.unpack_from(">HH", data, offset)
    records = data[offset + 4 : offset + 4 + 8 * count]
    candidates = []
    for platform, encoding, sub in struct.iter_unpack(">HHI", records):
        if platform not in (0, 3) or (platform == 3 and encoding not in (1, 10)):
            continue
        start = offset + sub
        (fmt,) = struct.unpack_from(">H", data, start)
        if fmt in (4, 12):
            candidates.append((fmt, start))
    if not candidates:
        return {}
    fmt, start = max(candidates)
    return _cmap_format12(data, start) if fmt == 12 else _cmap_format4(data, start)


class PillowFace(FontFace):
    """A TrueType/OpenType face read from bytes and rendered with Pillow."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        try:
            tables = _table_directory(self._data)
            head, hhea, hmtx, cmap = (tables[t] for t in (b"head", b"hhea", b"hmtx", b"cmap"))
            (self._units_per_em,) = struct.unpack_from(">H", self._data, head + 18)
            self._ascender, self._descender, self._line_gap = struct.unpack_from(
                ">hhh", self._data, hhea + 4
            )
            (metric_count,) = struct.unpack_from(">H", self._data, hhea + 34)
            self._advances = [
                advance
                for advance, _ in struct.iter_unpack(
                    ">Hh", self._data[hmtx : hmtx + 4 * metric_count]
                )
            ]
            mapping = _parse_cmap(self._data, cmap)
            ImageFont.truetype(io.BytesIO(self._data), 12)
        except (struct.error, KeyError, OSError, ValueError) as exc:
            raise ValueError("invalid font data") from exc
        if self._ascender - self._descender == 0:
            raise ValueError("invalid font data: zero line height")

        self._cmap = mapping
        self._chars: dict[int, str] = {}
        for cp, gid in sorted(mapping.items()):
            if not 0xD800 <= cp <= 0xDFFF:
                self._chars.setdefault(gid, chr(cp))
        self._sized: dict[int, Any] = {}

    def _factor(self, scale: float) -> float:
        return scale / (self._ascender - self._descender)

    def _font(self, scale: float) -> Any:
        em = max(1, round(self._factor(scale) * self._units_per_em))
        font = self._sized.get(em)
        if font is None:
            font = ImageFont.truetype(io.BytesIO(self._data), em)
            self._sized[em] = font
        return font

    def glyph_id(self, c: str) -> int:
        return self._cmap.get(ord(c), 0)

    def vertical_metrics(self, scale: float) -> tuple[float, float, float]:
        f = self._factor(scale)
        return (self._ascender * f, self._descender * f, self._line_gap * f)

    def h_advance(self, glyph_id: int, scale: float) -> float:
        if not self._advances:
            return 0.0
        advance = self._advances[min(glyph_id, len(self._advances) - 1)]
        return advance * self._factor(scale)

    def kern(self, left: int, right: int, scale: float) -> float:
        lc, rc = self._chars.get(left), self._chars.get(right)
        if lc is None or rc is None:
            return 0.0
        font = self._font(scale)
        return float(font.getlength(lc + rc) - font.getlength(lc) - font.getlength(rc))

    def rasterize(self, glyph_id: int, scale: float, baseline: float) -> Optional[RasterResult]:
        ch = self._chars.get(glyph_id)
        if ch is None:
            return None
        font = self._font(scale)
        left, top, right, bottom = font.getbbox(ch, anchor="ls")
        if right <= left or bottom <= top:
            return None
        width, height = int(right - left), int(bottom - top)
        image = Image.new("L", (width, height), 0)
        ImageDraw.Draw(image).text((-left, -top), ch, font=font, fill=255, anchor="ls")
        raw = image.tobytes()
        coverage = [
            [value / 255.0 for value in raw[start : start + width]]
            for start in range(0, len(raw), width)
        ]
        bounds = (float(left), float(top) + baseline, float(right), float(bottom) + baseline)
        return bounds, coverage


def _channel(value: float) -> int:
    return max(0, min(255, int(value * 255.0)))


class Font:
    """A face at one size, with its glyph cache and atlas."""

    def __init__(
        self, face: FontFace, type_face: str, scale: Any, scale_factor: ScaleFactor
    ) -> None:
        logical = scale if isinstance(scale, LogicalPixels) else LogicalPixels(scale)
        physical = logical.in_physical_scale(scale_factor)
        self.face = face
        self.type_face = type_face
        self.atlas = Atlas(physical.max(PhysicalPixels(1024)), physical.max(PhysicalPixels(32)))
        self.scale = physical.to_float()
        ascent, descent, line_gap = face.vertical_metrics(self.scale.value())
        self.ascent = PhysicalPixelsF(ascent)
        self.descent = PhysicalPixelsF(descent)
        self.line_gap = PhysicalPixelsF(line_gap)
        self.height = PhysicalPixelsF(ascent - descent)
        self.glyphs: dict[str, Glyph] = {}
        self._lock = threading.RLock()

    def get_glyph(self, c: str) -> Glyph:
        """The glyph for `c`, rasterised into the atlas on first use."""
        with self._lock:
            cached = self.glyphs.get(c)
            if cached is not None:
                return cached

            glyph_id = self.face.glyph_id(c)
            if glyph_id == 0:
                return Glyph()

            scale = self.scale.value()
            h_advance = PhysicalPixelsF(self.face.h_advance(glyph_id, scale))
            raster = self.face.rasterize(glyph_id, scale, self.ascent.value())
            if raster is None:
                logger.debug("no outline for glyph %d", glyph_id)
                return Glyph()

            (min_x, min_y, max_x, max_y), coverage = raster
            px_width = max(0, int(max_x - min_x))
            px_height = max(0, int(max_y - min_y))
            texture_bounds, atlas_width, pixels = self.atlas.create_image(px_width, px_height)
            origin_x = texture_bounds.min.x.value()
            origin_y = texture_bounds.min.y.value()
            stride = atlas_width.value()
            for y, row in enumerate(islice(coverage, px_height)):
                for x, c_value in enumerate(islice(row, px_width)):
                    if c_value == 0.0:
                        continue
                    start = ((origin_y + y) * stride + origin_x + x) * 4
                    shade = _channel(1.0 - c_value)
                    pixels[start : start + 4] = bytes((shade, shade, shade, _channel(c_value)))

            rect = GlyphRect(
                width=h_advance,
                height=self.height,
                bounds=PhysicalPixelsFRect(
                    PhysicalPixelsFPoint(min_x, min_y), PhysicalPixelsFPoint(max_x, max_y)
                ),
                texture_bounds=texture_bounds,
            )
            glyph = Glyph(glyph_id, rect)
            logger.debug("glyph %r: %r", c, glyph)
            self.glyphs[c] = glyph
            return glyph

    def kern(self, left: Glyph, right: Glyph) -> PhysicalPixelsF:
        return PhysicalPixelsF(self.face.kern(left.id, right.id, self.scale.value()))

    def atlas_pixels(self) -> bytes:
        with self._lock:
            return self.atlas.pixels()

    def atlas_size(self) -> PhysicalPixelsSize:
        with self._lock:
            return PhysicalPixelsSize(self.atlas.width, self.atlas.height)


@dataclass(frozen=True)
class FontProperties:
    """A font name and size; the size is kept as text so the key is hashable."""

    name: str = ""
    scale_string: str = ""


class Typecase:
    """Loaded font faces and the sized fonts made from them."""

    def __init__(self, scale_factor: ScaleFactor) -> None:
        self.fonts: dict[str, FontFace] = {}
        self.sized_fonts: dict[FontProperties, Font] = {}
        self.scale_factor = scale_factor

    def load_font(self, name: str, data: bytes) -> None:
        """Register font file bytes under `name`; raises ValueError for bad data."""
        self.add_face(name, PillowFace(data))

    def add_face(self, name: str, face: FontFace) -> None:
        self.fonts[name] = face

    def get_font(self, font: FontProperties) -> Optional[Font]:
        """The sized font for `font`, or None when no face has that name."""
        face = self.fonts.get(font.name)
        if face is None:
            return None
        try:
            scale = float(font.scale_string)
        except ValueError as exc:
            raise ValueError(f"Invalid scale string: {font.scale_string!r}") from exc
        sized = self.sized_fonts.get(font)
        if sized is None:
            sized = Font(face, font.name, scale, self.scale_factor)
            self.sized_fonts[font] = sized
        return sized


@dataclass
class PositionedGlyph:
    glyph: Glyph
    rect: PhysicalPixelsFRect


class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Galley:
    """Positioned glyphs ready for rendering, and the logical box they occupy."""

    glyphs: list[PositionedGlyph]
    rect: LogicalPixelsRect


class Typesetter:
    """Lays text out on a single line."""

    def compose(
        self,
        text: str,
        font: Font,
        bounds: LogicalPixelsRect,
        text_alignment: TextAlignment,
        alignment: Alignment,
        scale_factor: ScaleFactor,
    ) -> Galley:
        glyphs: list[PositionedGlyph] = []
        cursor_x = PhysicalPixelsF.zero()
        width = PhysicalPixelsF.zero()
        height = PhysicalPixelsF.zero()
        previous: Optional[Glyph] = None
        for c in text:
            glyph = font.get_glyph(c)
            if previous is not None:
                cursor_x = cursor_x + font.kern(previous, glyph)
            if width < glyph.rect.height:
                height = glyph.rect.height
            glyphs.append(
                PositionedGlyph(
                    glyph,
                    PhysicalPixelsFRect.with_size(
                        PhysicalPixelsFPoint(cursor_x, PhysicalPixelsF.zero()),
                        PhysicalPixelsFSize(glyph.rect.width, glyph.rect.height),
                    ),
                )
            )
            previous = glyph
            cursor_x = cursor_x + glyph.rect.width
            width = width + glyph.rect.width

        size = PhysicalPixelsFSize(width, height).in_logical_scale(scale_factor)
        return Galley(glyphs, alignment.align_size(bounds, size))