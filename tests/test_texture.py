import pytest

from zintl.texture import Atlas
from zintl.units import PhysicalPixels, PhysicalPixelsPoint


def _overlaps(a, b):
    return (
        a.min.x < b.max.x
        and b.min.x < a.max.x
        and a.min.y < b.max.y
        and b.min.y < a.max.y
    )


def _check_size(atlas):
    assert len(atlas.pixels()) == atlas.width.value() * atlas.height.value() * 4


def test_new_atlas_is_zeroed():
    atlas = Atlas(4, 4)
    assert atlas.pixels() == bytes(4 * 4 * 4)
    assert atlas.width == PhysicalPixels(4)
    assert atlas.height == PhysicalPixels(4)


def test_first_image_at_origin():
    atlas = Atlas(8, 8)
    rect, width, _ = atlas.create_image(3, 2)
    assert rect.min == PhysicalPixelsPoint(0, 0)
    assert rect.width() == PhysicalPixels(3)
    assert rect.height() == PhysicalPixels(2)
    assert width == atlas.width


def test_second_image_follows_on_same_row():
    atlas = Atlas(8, 8)
    first, _, _ = atlas.create_image(3, 2)
    second, _, _ = atlas.create_image(3, 2)
    assert second.min.x == first.max.x
    assert second.min.y == first.min.y


def test_images_wrap_and_never_overlap():
    atlas = Atlas(4, 4)
    sizes = [(2, 3), (2, 2), (1, 1), (4, 5), (3, 1), (2, 2)]
    rects = [atlas.create_image(w, h)[0] for w, h in sizes]
    for i, a in enumerate(rects):
        assert a.max.x <= atlas.width
        assert a.max.y <= atlas.height
        for b in rects[i + 1:]:
            assert not _overlaps(a, b)
    _check_size(atlas)


def test_wrapped_image_starts_at_left_edge():
    atlas = Atlas(4, 4)
    atlas.create_image(3, 2)
    rect, _, _ = atlas.create_image(3, 1)
    assert rect.min.x == PhysicalPixels(0)
    assert rect.min.y == PhysicalPixels(2)


def test_atlas_grows_for_tall_image():
    atlas = Atlas(4, 2)
    rect, _, _ = atlas.create_image(2, 10)
    assert atlas.height >= rect.max.y
    _check_size(atlas)


def test_resize_pixels_never_shrinks():
    atlas = Atlas(4, 8)
    atlas.resize_pixels(2)
    assert atlas.height == PhysicalPixels(8)
    _check_size(atlas)


def test_resize_pixels_grows_with_zeros():
    atlas = Atlas(2, 2)
    atlas.pixel_buffer[0] = 255
    atlas.resize_pixels(5)
    assert atlas.height == PhysicalPixels(5)
    assert atlas.pixels()[0] == 255
    assert set(atlas.pixels()[1:]) == {0}
    _check_size(atlas)


def test_writes_through_returned_buffer_are_visible():
    atlas = Atlas(4, 4)
    rect, width, buf = atlas.create_image(1, 1)
    start = (rect.min.y.value() * width.value() + rect.min.x.value()) * 4
    buf[start + 3] = 200
    assert atlas.pixels()[start + 3] == 200


def test_pixels_returns_copy():
    atlas = Atlas(2, 2)
    snapshot = atlas.pixels()
    atlas.pixel_buffer[0] = 9
    assert snapshot[0] == 0
    assert atlas.pixels()[0] == 9


def test_negative_size_rejected():
    with pytest.raises(OverflowError):
        Atlas(-1, 4)