import numpy as np
import pytest

from vector3d import Vector3d


def test_xyz_converts_to_float():
    v = Vector3d.xyz(1, 2, 3)
    assert v == Vector3d(1.0, 2.0, 3.0)
    assert isinstance(v.x, float)


def test_from_iterable():
    assert Vector3d.from_iterable(np.array([1.5, 2.5, 3.5])) == Vector3d.xyz(1.5, 2.5, 3.5)
    with pytest.raises(ValueError):
        Vector3d.from_iterable([1, 2])


def test_to_array():
    arr = Vector3d.xyz(1, 2, 3).to_array()
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])


def test_iter_and_hash():
    v = Vector3d.xyz(1, 2, 3)
    assert tuple(v) == (1.0, 2.0, 3.0)
    assert len({v, Vector3d.xyz(1, 2, 3)}) == 1


def test_frozen():
    v = Vector3d.xyz(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5.0


def test_nan_components_compare_equal():
    nan = float("nan")
    assert Vector3d.xyz(nan, 1, 2) == Vector3d.xyz(nan, 1, 2)
    assert hash(Vector3d.xyz(nan, 1, 2)) == hash(Vector3d.xyz(nan, 1, 2))
    assert Vector3d.xyz(nan, 1, 2) != Vector3d.xyz(0, 1, 2)
