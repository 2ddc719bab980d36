import pytest
import numpy as np

from hull.commons.types import DEFAULTS

INT, FLOAT = DEFAULTS


# fixtures
@pytest.fixture
def rng():
    yield np.random.default_rng(42)


@pytest.fixture
def square_points():
    """Corners of a 5x5 square, in no particular order."""
    yield [[0, 5], [5, 0], [0, 0], [5, 5]]


@pytest.fixture
def square_hull():
    yield [[0, 0], [5, 0], [5, 5], [0, 5], [0, 0]]


@pytest.fixture
def c_shape_points():
    """Outer ring of a 5x5 block of integer points (interior removed)."""
    yield [
        [0, 0], [1, 0], [2, 0], [3, 0], [4, 0],  # bottom edge
        [4, 1], [4, 2], [4, 3], [4, 4],  # right edge
        [3, 4], [2, 4], [1, 4], [0, 4],  # top edge
        [0, 3], [0, 2], [0, 1],  # left edge
    ]


@pytest.fixture
def c_shape_concave_hull(c_shape_points):
    yield c_shape_points + [[0, 0]]


@pytest.fixture
def c_shape_convex_hull():
    yield [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]


@pytest.fixture
def random_points(rng):
    yield rng.uniform(-10.0, 10.0, size=(200, 2)).astype(FLOAT)
