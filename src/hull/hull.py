import numpy as np
import warnings
from math import ceil

from hull.commons.types import DEFAULTS, MAX_CONCAVITY, MAX_SEARCH_BBOX_SIZE_PERCENT
INT, FLOAT = DEFAULTS
from hull.concave import make_concave, occupied_area  # noqa: E402
from hull.geometry.convex import convex_hull, filter_duplicates, sort_points  # noqa: E402
from hull.grid import Grid  # noqa: E402
from hull.utils import formatting, typing  # noqa: E402


def calculate_hull(points, concavity=None, fmt=None, logger=None):
    """
    Calculates the concave hull of a set of points.

    Args:
        points: the point set, e.g. [[0, 0], [1, 1]] or [{'x': 0, 'y': 0}, ...].
        concavity: edge length threshold. Smaller values give a more concave
            hull. None, 'infinity', non-numeric, non-positive or very large
            values (>= 100000) give the convex hull.
        fmt: optional (x_key, y_key) naming how points store their coordinates,
            e.g. ('x', 'y') or (0, 1). None means [x, y] pairs.
        logger (RefinementLogger, optional): records each refinement pass.

    Returns:
        list: the closed polygon (first point repeated last) as [x, y] lists,
        or as dicts keyed by `fmt` when it is given. Empty input gives [].
    """
    pointset = formatting.to_xy(points, fmt)
    if len(pointset) == 0:
        return []

    pointset = _to_array(pointset)
    unique_points = filter_duplicates(sort_points(pointset))

    if unique_points.shape[0] < 3:
        # close the trivial polygon
        closed = np.concatenate((unique_points, unique_points[:1]), axis=0)
        return formatting.from_xy(closed.tolist(), fmt)

    convex = convex_hull(unique_points)

    max_edge_len = _parse_concavity(concavity)
    if max_edge_len is None:
        return formatting.from_xy(convex.tolist(), fmt)

    inner_points = _inner_points(unique_points, convex)

    width, height = occupied_area(unique_points)
    max_search_area = (
        width * MAX_SEARCH_BBOX_SIZE_PERCENT,
        height * MAX_SEARCH_BBOX_SIZE_PERCENT,
    )

    grid = Grid(inner_points, _cell_size(unique_points.shape[0], width, height))
    concave = make_concave(convex, max_edge_len**2, max_search_area, grid, set(), logger)
    if logger is not None:
        logger.finalize()

    return formatting.from_xy(concave.tolist(), fmt)


def _to_array(pointset):
    arr = np.array(pointset, dtype=FLOAT)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"'points' expected shape (N, 2) after formatting. Got: {arr.shape}")
    return np.ascontiguousarray(arr)


def _parse_concavity(concavity):
    """
    Concavity as a float, or None when the convex hull should be returned.
    """
    if concavity is None:
        return None
    if isinstance(concavity, str) and concavity.strip().lower() == "infinity":
        return None

    value = typing.to_number(concavity)
    if value is None:
        warnings.warn(f"'concavity' is not numeric ({concavity!r}). Returning the convex hull.",
                      UserWarning)
        return None
    if not typing.is_finite(value) or value <= 0 or value >= MAX_CONCAVITY:
        return None
    return value


def _inner_points(unique_points, convex):
    """ points of `unique_points` that are not hull vertices """
    on_hull = {(p[0], p[1]) for p in convex.tolist()}
    mask = np.array([(p[0], p[1]) not in on_hull for p in unique_points.tolist()], dtype=np.bool_)
    return unique_points[mask]


def _cell_size(num_points, width, height):
    divisor = width * height
    if divisor == 0:
        divisor = 1.0
    if num_points == 0:
        num_points = 1
    cell_size = ceil(1.0 / (num_points / divisor))
    if cell_size <= 0:
        cell_size = 1.0
    return float(cell_size)
