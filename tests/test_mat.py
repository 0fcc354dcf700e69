import struct

import pytest

from zintl.mat import Mat3, Mat4


def test_default_mat4_is_zero_bytes():
    assert Mat4().to_bytes() == b"\x00" * 64


def test_default_mat3_is_zero_bytes():
    assert Mat3().to_bytes() == b"\x00" * 36


def test_mat4_bytes_round_trip():
    cols = tuple(tuple(float(c * 4 + r) for r in range(4)) for c in range(4))
    mat = Mat4(cols)
    unpacked = struct.unpack("<16f", mat.to_bytes())
    assert unpacked == tuple(v for col in cols for v in col)


def test_mat3_bytes_round_trip():
    cols = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0))
    assert struct.unpack("<9f", Mat3(cols).to_bytes()) == tuple(v for c in cols for v in c)


def test_from_rows_transposes():
    rows = [[float(r * 4 + c) for c in range(4)] for r in range(4)]
    mat = Mat4.from_rows(rows)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            assert mat.m[c][r] == value


def test_from_rows_identity_equals_direct():
    identity = [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]
    assert Mat4.from_rows(identity) == Mat4(identity)


@pytest.mark.parametrize(
    "values",
    [
        [[0.0] * 4] * 3,
        [[0.0] * 3] * 4,
        [],
    ],
)
def test_mat4_rejects_wrong_shape(values):
    with pytest.raises(ValueError):
        Mat4(values)


def test_mat3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Mat3([[0.0] * 4] * 4)