# zintl

`zintl` is the rendering core of a small declarative UI toolkit. It turns a
string and a font into positioned glyphs and a glyph atlas. It turns those
glyphs into textured quads. It packs the quads into the flat byte layout that a
GPU vertex buffer takes. Every step keeps physical and logical pixels apart
through typed units.

The package has these modules:

| Module | Contents |
| --- | --- |
| `zintl.units` | `PhysicalPixels`, `PhysicalPixelsF` and `LogicalPixels`, with a point, size and rect type for each one |
| `zintl.geometry` | `ScaleFactor`, `Viewport`, `Alignment`, `TexturePoint`, `TextureBounds` |
| `zintl.vec` | `Vec2` |
| `zintl.mat` | `Mat3` and `Mat4` |
| `zintl.texture` | `Atlas`, an RGBA glyph atlas that grows as it fills |
| `zintl.text` | `FontFace`, `PillowFace`, `Font`, `Typecase`, `Typesetter`, `Galley` |
| `zintl.mesh` | `Vertex` and `Mesh` |
| `zintl.tessellator` | `Tessellator`, `GalleyJob`, `EmptyJob` |
| `zintl.device` | `DeviceMesh`, `DeviceVertex`, `DevicePoint`, `Uniforms`, `create_ortho_matrix` |
| `zintl.render` | `RenderObject` and the content and metrics types it holds |
| `zintl.app` | `App`, `Context`, `View`, `ComposableView`, `Base`, `Stack`, `Label` |

## Install

From a checkout of the project:

```
pip install .
```

The only dependency is Pillow. `PillowFace` renders glyphs with Pillow's
FreeType support.

## Units

There are three unit types:

- `PhysicalPixels` holds an unsigned 32-bit integer. A value outside that
  range raises `OverflowError`. A value that is not an integer raises
  `TypeError`.
- `PhysicalPixelsF` holds a float number of device pixels.
- `LogicalPixels` holds device-independent pixels.

You can add, subtract and multiply two values of the same unit type, or a unit
value and a plain number. Mixing two different unit types raises `TypeError`.

Division never fails with an error:

- `checked_div` and `checked_div_value` divide and return `None` when the
  divisor is zero.
- `checked_rem` and `checked_rem_value` do the same for the remainder.
- Division of `PhysicalPixels` discards the fraction.

To move between scales, pass a `ScaleFactor`. Results are rounded half away
from zero.

- `LogicalPixels.in_physical_scale` multiplies by the device pixel ratio and
  returns `PhysicalPixels`.
- `LogicalPixels.in_physical_f_scale` does the same and returns
  `PhysicalPixelsF`.
- `in_logical_scale` on either physical type divides by the ratio and
  returns `LogicalPixels`.

`PhysicalPixels.to_float()` and `PhysicalPixelsF.to_rounded()` convert between
the two physical types.

Points, sizes and rects are frozen dataclasses with a fixed unit:

- Points: `LogicalPixelsPoint`, `PhysicalPixelsPoint`, `PhysicalPixelsFPoint`.
- Sizes: `LogicalPixelsSize`, `PhysicalPixelsSize`, `PhysicalPixelsFSize`.
- Rects: `LogicalPixelsRect`, `PhysicalPixelsRect`, `PhysicalPixelsFRect`.

Their components accept plain numbers and coerce them to the right unit.
Each has the same `in_physical_scale`, `in_physical_f_scale` and
`in_logical_scale` conversions as the units, and `cast` switches a point or
size between the two physical types.

```python
from zintl.geometry import Alignment, ScaleFactor
from zintl.units import LogicalPixelsPoint, LogicalPixelsRect, LogicalPixelsSize

bounds = LogicalPixelsRect(LogicalPixelsPoint(0.0, 0.0), LogicalPixelsPoint(100.0, 100.0))
size = LogicalPixelsSize(20.0, 10.0)

placed = Alignment.CENTER.align_size(bounds, size)
placed.min.to_tuple()        # (40.0, 45.0)

scale = ScaleFactor(96.0, 1.5)
physical = placed.in_physical_scale(scale)   # a PhysicalPixelsRect
```

`ScaleFactor(dpi, dpr)` raises `ValueError` unless both values are greater
than zero.

`Viewport.create(width, height, scale_factor)` builds a viewport. Its `rect`
starts at the origin.

`TexturePoint.from_physical_point` and `TextureBounds.from_physical_rect`
divide pixel positions by a texture size. They return `None` when the texture
has a zero width or height.

## Vectors and matrices

`Vec2` is a frozen float vector. It supports:

- `+` with another vector, scalar `*` and unary `-`;
- component-wise `min` and `max`;
- `checked_div` and `checked_div_scalar`, which return `None` on a zero
  divisor.

It has the constants `Vec2.ZERO`, `Vec2.X_AXIS` and `Vec2.Y_AXIS`.

`Mat3` and `Mat4` store their values column by column: `m[i]` is the i-th
column. Other ways to build and read them:

- `Mat4.from_rows` builds a matrix from rows as written on paper.
- `to_bytes()` packs the values as little-endian 32-bit floats in column
  order.

## Text

A `Typecase` maps font names to faces and caches sized fonts.

- `load_font(name, data)` reads TrueType or OpenType bytes into a
  `PillowFace`. It raises `ValueError` for data it cannot read.
- `add_face(name, face)` registers any implementation of the `FontFace`
  abstract class.
- `get_font(FontProperties(name, scale_string))` returns the `Font` at that
  logical size. It returns `None` when no face has that name, and raises
  `ValueError` when the size string is not a number.

A `Font` works at the physical size that the scale factor gives:

- `get_glyph(c)` rasterises a glyph into the font's `Atlas` the first time it
  is asked for, and returns the cached `Glyph` after that. A character the
  face lacks gives a `Glyph` with id 0 and empty rects.
- `kern(left, right)` gives the kerning between two glyphs.
- `atlas_pixels()` returns the atlas as RGBA bytes. Each covered pixel is
  grey-shaded, and its alpha is the coverage.
- `atlas_size()` returns the atlas size.

`Typesetter.compose` lays the text out on a single line. It applies kerning
between glyphs, then places the box of the line inside `bounds` with the given
`Alignment`. The `text_alignment` argument is accepted but does not yet change
the layout.

```python
from pathlib import Path

from zintl.geometry import Alignment, ScaleFactor, Viewport
from zintl.tessellator import GalleyJob, Tessellator
from zintl.text import FontProperties, TextAlignment, Typecase, Typesetter
from zintl.units import LogicalPixelsPoint, LogicalPixelsRect

scale = ScaleFactor(96.0, 1.25)
typecase = Typecase(scale)
typecase.load_font("Inter", Path("Inter-Regular.ttf").read_bytes())
font = typecase.get_font(FontProperties(name="Inter", scale_string="32.0"))

bounds = LogicalPixelsRect(LogicalPixelsPoint(0.0, 0.0), LogicalPixelsPoint(800.0, 600.0))
galley = Typesetter().compose(
    "Hello", font, bounds, TextAlignment.LEFT, Alignment.TOP_LEFT, scale
)

viewport = Viewport.create(800, 600, scale)
meshes = Tessellator().tessellate(GalleyJob(galley), viewport)
```

`Tessellator` produces one quad `Mesh` per glyph. Each quad has six indices
and texture id 0. It maps onto the glyph's region of the atlas in
unnormalised pixels. An `EmptyJob` produces no meshes.

The atlas is exposed as `font.atlas`. `Atlas.create_image(width, height)`
reserves a region row by row, growing the atlas downwards when needed. It
returns the region's bounds, the atlas width and the writable pixel buffer.

## Device data

```python
from zintl.device import DeviceMesh, Uniforms, create_ortho_matrix

texture_size = font.atlas_size()
device_meshes = [DeviceMesh.from_mesh(mesh, texture_size) for mesh in meshes]
vertex_data = b"".join(m.vertex_bytes() for m in device_meshes)
index_data = b"".join(m.index_bytes() for m in device_meshes)
uniform_data = Uniforms(create_ortho_matrix(viewport)).to_bytes()
```

`DeviceVertex.from_vertex` divides the texture coordinates by the texture
size. It raises `ValueError` when the size has a zero width or height.

Each vertex packs as four little-endian floats: position x and y, then
texture x and y. Indices pack as unsigned 32-bit integers.

`DeviceMesh.from_mesh` converts only the mesh's own vertices; it leaves out
its children.

`create_ortho_matrix` maps device pixels to clip space, with the origin at
the top left and y pointing down. It raises `ValueError` for a viewport with
zero width or height.

## Views

```python
from zintl.app import App, Label, Stack

app = App(Label("Hello, World!"))
root = app.get_render_object()       # a RenderObject with TextContent("Hello, World!")

stack = Stack().children([Label("one"), Label("two")])
len(stack.get_context().render_object.children)   # 2
```

`Context.render()` and `App.get_render_object()` return copies of the render
tree, so changing a copy does not affect the view.

`View.padding` returns the view unchanged. Style properties do not yet affect
the render tree.

## What it does not do

The package opens no window and runs no event loop. It does not talk to a
GPU. It prepares atlases, meshes, vertex and index bytes and a projection
matrix, and leaves uploading and drawing them to the caller.

`App` holds the render tree of its root view, but nothing here draws that
tree or lays it out on screen.

## Tests

```
pip install -e ".[test]"
pytest
```