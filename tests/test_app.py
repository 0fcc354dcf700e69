import pytest

from zintl.app import App, ComposableView, Context, Label, Stack, View
from zintl.render import AutoMetrics, EmptyContent, Position, RenderObject, TextContent


def test_app_from_label():
    app = App(Label("Hello, World!"))
    obj = app.get_render_object()
    assert obj.content == TextContent("Hello, World!")
    assert obj.position == Position(0.0, 0.0)
    assert obj.metrics == AutoMetrics()


def test_get_render_object_returns_copy():
    app = App(Label("x"))
    obj = app.get_render_object()
    obj.add_child(RenderObject())
    assert app.get_render_object().children == []


def test_app_snapshot_independent_of_later_changes():
    label = Label("root")
    app = App(label)
    label.children([Label("late")])
    assert app.get_render_object().children == []
    assert len(label.get_context().render_object.children) == 1


def test_children_added_in_order():
    label = Label("root").children([Label("a"), Label("b")])
    contents = [c.content for c in App(label).get_render_object().children]
    assert contents == [TextContent("a"), TextContent("b")]


def test_children_returns_self():
    stack = Stack()
    assert stack.children([]) is stack


def test_padding_returns_self():
    label = Label("p")
    assert label.padding(1.0, 2.0, 3.0, 4.0) is label


def test_label_keeps_text():
    assert Label("abc").text == "abc"


def test_stack_renders_empty():
    assert Stack().get_context().render().content == EmptyContent()


def test_compose_chain():
    composed_from_label = Label("x").view()
    assert composed_from_label.get_context().render() == RenderObject()
    assert composed_from_label.view().get_context().render() == RenderObject()
    assert Stack().view().get_context().render().content == EmptyContent()


def test_context_render_is_deep_copy():
    ctx = Context.from_render_object(RenderObject(TextContent("t")))
    rendered = ctx.render()
    rendered.add_child(RenderObject())
    assert ctx.render_object.children == []
    assert rendered.content == ctx.render_object.content


def test_context_default_render_object():
    assert Context().render() == RenderObject()


def test_abstract_views_cannot_be_instantiated():
    with pytest.raises(TypeError):
        View()
    with pytest.raises(TypeError):
        ComposableView()


def test_nested_children_survive_rendering():
    inner = Stack().children([Label("leaf")])
    outer = Stack().children([inner])
    tree = App(outer).get_render_object()
    assert tree.children[0].children[0].content == TextContent("leaf")