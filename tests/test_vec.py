import pytest

from zintl.vec import Vec2


def test_axis_constants():
    assert Vec2.ZERO == Vec2()
    assert Vec2.X_AXIS == Vec2(1.0, 0.0)
    assert Vec2.Y_AXIS == Vec2(0.0, 1.0)
    assert Vec2.X_AXIS + Vec2.Y_AXIS == Vec2(1.0, 1.0)


def test_checked_div_by_zero():
    v = Vec2(3.0, 4.0)
    assert v.checked_div(Vec2(0.0, 1.0)) is None
    assert v.checked_div(Vec2(1.0, 0.0)) is None
    assert v.checked_div_scalar(0.0) is None


def test_checked_div_round_trip():
    v = Vec2(3.0, 4.0)
    w = Vec2(2.0, 8.0)
    q = v.checked_div(w)
    assert Vec2(q.x * w.x, q.y * w.y) == v
    assert v.checked_div_scalar(2.0) * 2.0 == v


def test_min_max():
    a = Vec2(1.0, 5.0)
    b = Vec2(3.0, 2.0)
    assert a.min(b) == Vec2(1.0, 2.0)
    assert a.max(b) == Vec2(3.0, 5.0)
    assert a.min(b) == b.min(a)


def test_add_and_neg():
    v = Vec2(2.5, -1.5)
    assert v + -v == Vec2.ZERO
    assert -(-v) == v


def test_scalar_multiplication_commutes():
    v = Vec2(2.0, 3.0)
    assert v * 4.0 == 4.0 * v
    assert v * 1.0 == v
    assert v * 0.0 == Vec2.ZERO


def test_from_tuple():
    v = Vec2.from_tuple((3, 7))
    assert v == Vec2(3.0, 7.0)
    assert isinstance(v.x, float)


def test_add_rejects_non_vector():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 1.0