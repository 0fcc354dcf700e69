"""The render tree produced by views."""

from __future__ import annotations

from dataclasses import dataclass, field


class Shape:
    """A primitive shape."""


@dataclass(frozen=True)
class RectangleShape(Shape):
    """A filled rectangle."""


@dataclass(frozen=True)
class TextShape(Shape):
    text: str
    font_size: float


class RenderContent:
    """What a render object draws."""


@dataclass(frozen=True)
class EmptyContent(RenderContent):
    """Draws nothing."""


@dataclass(frozen=True)
class TextContent(RenderContent):
    text: str


@dataclass(frozen=True)
class ImageContent(RenderContent):
    source: str


@dataclass(frozen=True)
class ShapeContent(RenderContent):
    shape: Shape


class Metrics:
    """How a render object is sized."""


@dataclass(frozen=True)
class AutoMetrics(Metrics):
    """Size is determined from content or context."""


@dataclass(frozen=True)
class FixedMetrics(Metrics):
    width: float
    height: float


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class RenderObject:
    """A node of the render tree."""

    content: RenderContent = field(default_factory=EmptyContent)
    position: Position = field(default_factory=Position)
    metrics: Metrics = field(default_factory=AutoMetrics)
    children: list[RenderObject] = field(default_factory=list)

    def add_child(self, child: RenderObject) -> None:
        self.children.append(child)