import pytest
import numpy as np

from hull.utils import typing

integers = [
    0,
    -1,
    np.int16(-2.0),
    np.int32(3.0),
    np.int64(4),
    np.uint16(5e0),
    np.uint32(6_000),
    np.uint64(7),
]

finite_floats = [
    0.0,
    1.0,
    float(2),
    float("-3"),
    np.float16(4),
    np.float32(5.6789),
    np.float64(6.0123),
]

infinite_floats = [
    np.nan,
    np.inf,
    -np.inf,
    float("inf"),
]

booleans = [
    True,
    False,
    np.True_,
    np.False_,
]

array_likes = [
    (),
    [],
    np.array([], float),
    (1.0, 2.0),
    [1, 2],
    np.array([1, 2, 3], int),
]

mappings = [
    {},
    {"a": 1},
]

other_objects = [
    {1, 2, 3},
    "abc",
    None,
    1j,
]


@pytest.mark.parametrize("obj", integers + finite_floats + infinite_floats)
def test_is_numeric_true(obj):
    assert typing.is_numeric(obj)


@pytest.mark.parametrize("obj", booleans + array_likes + mappings + other_objects)
def test_is_numeric_false(obj):
    assert not typing.is_numeric(obj)


@pytest.mark.parametrize("obj", booleans)
def test_is_boolean_true(obj):
    assert typing.is_boolean(obj)


@pytest.mark.parametrize("obj", integers + finite_floats + array_likes + other_objects)
def test_is_boolean_false(obj):
    assert not typing.is_boolean(obj)


@pytest.mark.parametrize("obj", finite_floats + integers + booleans)
def test_is_finite_true(obj):
    assert typing.is_finite(obj)


@pytest.mark.parametrize("obj", infinite_floats + array_likes + other_objects)
def test_is_finite_false(obj):
    assert not typing.is_finite(obj)


@pytest.mark.parametrize("obj", array_likes)
def test_is_arraylike_true(obj):
    assert typing.is_array_like(obj)


@pytest.mark.parametrize("obj", finite_floats + integers + booleans + mappings + other_objects)
def test_is_arraylike_false(obj):
    assert not typing.is_array_like(obj)


@pytest.mark.parametrize("obj", mappings)
def test_is_mapping_true(obj):
    assert typing.is_mapping(obj)


@pytest.mark.parametrize("obj, expected", [
    (2, 2.0),
    (np.float32(0.5), 0.5),
    ("20", 20.0),
    (" 1.5e2 ", 150.0),
    ("-3", -3.0),
    ("infinity", np.inf),
    ("abc", None),
    ("", None),
    (None, None),
    (True, None),
    ([1], None),
])
def test_to_number(obj, expected):
    assert typing.to_number(obj) == expected


@pytest.mark.parametrize("obj, dtype", [(1.0, "numeric"), ({}, "mapping"), ([1], ("mapping", "arraylike")), (None, "none")])
def test_sanitize_type_passes(obj, dtype):
    assert typing.sanitize_type(obj, dtype, "obj")


@pytest.mark.parametrize("obj, dtype", [("a", "numeric"), ([], "mapping"), (1, ("mapping", "arraylike")), (1, str)])
def test_sanitize_type_raises(obj, dtype):
    with pytest.raises(TypeError):
        typing.sanitize_type(obj, dtype, "obj")


def test_sanitize_type_unknown_dtype():
    with pytest.raises(NotImplementedError):
        typing.sanitize_type(1, "quaternion", "obj")


def test_sanitize_length():
    assert typing.sanitize_length((1, 2), 2, "obj")
    with pytest.raises(ValueError):
        typing.sanitize_length((1, 2, 3), 2, "obj")
