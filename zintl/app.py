"""Views and the application root built from them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from zintl.render import AutoMetrics, Position, RenderObject, TextContent


class Context:
    """Style properties and layout state that a view renders from."""

    def __init__(self, render_object: Optional[RenderObject] = None) -> None:
        self.render_object = render_object if render_object is not None else RenderObject()

    @classmethod
    def from_render_object(cls, render_object: RenderObject) -> Context:
        return cls(render_object)

    def set_style_property(self) -> None:
        """Hook for style properties; styles do not yet affect the render tree."""
        return None

    def render(self) -> RenderObject:
        """A copy of this context's render tree."""
        return copy.deepcopy(self.render_object)


class View(ABC):
    """A renderable component that owns a context."""

    @abstractmethod
    def get_context(self) -> Context: ...

    def padding(self, top: float, bottom: float, left: float, right: float) -> View:
        self.get_context().set_style_property()
        return self


class ComposableView(View):
    """A view composed from other views."""

    @abstractmethod
    def context(self) -> Context: ...

    @abstractmethod
    def compose(self) -> View: ...

    def get_context(self) -> Context:
        return self.context()

    def view(self) -> View:
        return self.compose()

    def children(self, children: Iterable[View]) -> ComposableView:
        for child in children:
            self.context().render_object.add_child(child.get_context().render())
        return self


class Base(View):
    """The root of the view hierarchy; it has no children."""

    def __init__(self) -> None:
        self._context = Context()

    def get_context(self) -> Context:
        return self._context


class Stack(ComposableView):
    def __init__(self) -> None:
        self._context = Context()

    def context(self) -> Context:
        return self._context

    def compose(self) -> View:
        return Base()


class Label(ComposableView):
    def __init__(self, text: str) -> None:
        self.text = text
        self._context = Context.from_render_object(
            RenderObject(TextContent(text), Position(0.0, 0.0), AutoMetrics())
        )

    def context(self) -> Context:
        return self._context

    def compose(self) -> View:
        return Stack()


class App:
    """The application root, holding the rendered tree of its root view."""

    def __init__(self, root: View) -> None:
        self._root = root.get_context().render()

    def get_render_object(self) -> RenderObject:
        return copy.deepcopy(self._root)