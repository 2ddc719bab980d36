import pytest
import numpy as np
from collections import namedtuple
from dataclasses import dataclass

from hull.utils import formatting as fm


@dataclass
class Vertex:
    px: float
    py: float


Pair = namedtuple("Pair", ["a", "b"])


# tests
def test_to_xy_without_format_is_shallow_copy():
    points = [[1, 2], [3, 4]]
    result = fm.to_xy(points)
    assert result == points
    assert result is not points
    assert result[0] is points[0]


@pytest.mark.parametrize("points, fmt", [
    ([{"x": 1, "y": 2}, {"x": 3, "y": 4}], ("x", "y")),
    ([{"lng": 1, "lat": 2}, {"lng": 3, "lat": 4}], ["lng", "lat"]),
    ([[2, 1], [4, 3]], (1, 0)),
    ([(9, 1, 2), (9, 3, 4)], (1, 2)),
    ([Vertex(1, 2), Vertex(3, 4)], ("px", "py")),
    ([Pair(1, 2), Pair(3, 4)], ("a", "b")),
    ([Pair(1, 2), Pair(3, 4)], (0, 1)),
    (np.array([[1, 2], [3, 4]]), (0, 1)),
])
def test_to_xy_with_format(points, fmt):
    assert fm.to_xy(points, fmt) == [[1, 2], [3, 4]]


def test_to_xy_missing_key():
    with pytest.raises(KeyError):
        fm.to_xy([{"x": 1}], ("x", "y"))


def test_to_xy_missing_attribute():
    with pytest.raises(AttributeError):
        fm.to_xy([Vertex(1, 2)], ("px", "pz"))


@pytest.mark.parametrize("fmt, error", [
    (("x",), ValueError),
    (("x", "y", "z"), ValueError),
    ("xy", TypeError),
    (5, TypeError),
])
def test_bad_format(fmt, error):
    with pytest.raises(error):
        fm.to_xy([{"x": 1, "y": 2}], fmt)
    with pytest.raises(error):
        fm.from_xy([[1, 2]], fmt)


def test_from_xy_without_format():
    assert fm.from_xy([(1, 2), np.array([3.0, 4.0])]) == [[1, 2], [3, 4]]


def test_from_xy_with_format():
    assert fm.from_xy([[1, 2], [3, 4]], ("x", "y")) == [{"x": 1, "y": 2}, {"x": 3, "y": 4}]


def test_format_round_trip_keeps_coordinates():
    points = [{"x": 0.5, "y": -2}, {"x": 7, "y": 1e6}]
    assert fm.from_xy(fm.to_xy(points, ("x", "y")), ("x", "y")) == points


def test_from_strings():
    assert fm.from_strings(["1,2", "3.5,-4", " 5 , 6 "]) == [[1.0, 2.0], [3.5, -4.0], [5.0, 6.0]]


def test_from_strings_custom_separator():
    assert fm.from_strings(["1 2"], sep=" ") == [[1.0, 2.0]]


def test_from_strings_malformed():
    with pytest.raises(ValueError):
        fm.from_strings(["1,2,3"])


def test_to_strings_relative_to_origin():
    assert fm.to_strings([[10.4, 20.6], [12, 22]], origin=(10, 20)) == ["0,1", "2,2"]


@pytest.mark.parametrize("value, expected", [(2.5, "3"), (-2.5, "-3"), (0.49, "0"), (-0.5, "-1")])
def test_to_strings_rounds_halves_away_from_zero(value, expected):
    assert fm.to_strings([[value, 0]]) == [f"{expected},0"]
