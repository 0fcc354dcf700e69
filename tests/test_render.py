from zintl.render import (
    AutoMetrics,
    EmptyContent,
    FixedMetrics,
    ImageContent,
    Position,
    RectangleShape,
    RenderObject,
    ShapeContent,
    TextContent,
    TextShape,
)


def test_default_render_object():
    obj = RenderObject()
    assert obj.content == EmptyContent()
    assert obj.position == Position(0.0, 0.0)
    assert obj.metrics == AutoMetrics()
    assert obj.children == []


def test_add_child_preserves_order():
    parent = RenderObject()
    a = RenderObject(TextContent("a"))
    b = RenderObject(TextContent("b"))
    parent.add_child(a)
    parent.add_child(b)
    assert [c.content for c in parent.children] == [TextContent("a"), TextContent("b")]


def test_children_not_shared_between_instances():
    first = RenderObject()
    second = RenderObject()
    first.add_child(RenderObject())
    assert second.children == []


def test_position_fields():
    pos = Position(3.5, 7.0)
    assert (pos.x, pos.y) == (3.5, 7.0)


def test_fixed_metrics_fields_and_equality():
    assert FixedMetrics(10.0, 20.0) == FixedMetrics(10.0, 20.0)
    assert not FixedMetrics(10.0, 20.0) == FixedMetrics(20.0, 10.0)
    assert not FixedMetrics(1.0, 1.0) == AutoMetrics()


def test_content_kinds_distinct():
    assert not TextContent("x") == ImageContent("x")
    assert ShapeContent(RectangleShape()) == ShapeContent(RectangleShape())
    assert ShapeContent(TextShape("hi", 12.0)).shape.font_size == 12.0


def test_render_object_equality_includes_children():
    a = RenderObject(TextContent("root"))
    b = RenderObject(TextContent("root"))
    assert a == b
    a.add_child(RenderObject())
    assert not a == b