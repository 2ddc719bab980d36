import numpy as np
from numba import njit


# API functions

@njit
def convex_hull(points):
    """
    Calculates the convex hull of a set of 2D points.

    Uses the Monotone Chain (Andrew's) algorithm. The upper chain is built
    from P0 to Pn-1 and the lower chain from Pn-1 back to P0; each chain drops
    its end point and the polygon is closed by repeating P0.

    Args:
        points (np.ndarray): A 2D NumPy array of shape (N, 2), sorted by x
                             then y, with duplicates removed.

    Returns:
        np.ndarray: The closed hull polygon. Inputs with fewer than 3 points
                    are returned as they are.
    """
    n = points.shape[0]
    if n < 3:
        return points.copy()

    upper = np.empty((n, 2), dtype=points.dtype)
    upper_idx = _chain(points, upper)

    reversed_points = points[::-1]
    lower = np.empty((n, 2), dtype=points.dtype)
    lower_idx = _chain(reversed_points, lower)

    hull = np.empty((upper_idx + lower_idx + 1, 2), dtype=points.dtype)
    hull[:upper_idx] = upper[:upper_idx]
    hull[upper_idx:upper_idx + lower_idx] = lower[:lower_idx]
    hull[-1] = points[0]
    return hull

@njit
def sort_points(points):
    """
    Sorts points by x-coordinate, ties broken by y-coordinate.
    """
    n = points.shape[0]
    indices = np.argsort(points[:, 0])
    points = points[indices]

    # Handle ties in x-coordinate by sorting the y-coordinate for those specific blocks
    i = 0
    while i < n:
        j = i
        while j < n and points[j, 0] == points[i, 0]:
            j += 1
        if j - i > 1:
            slice_to_sort = points[i:j]
            indices = np.argsort(slice_to_sort[:, 1])
            points[i:j] = slice_to_sort[indices]
        i = j
    return points

@njit
def filter_duplicates(points):
    """
    Drops exact duplicates from a sorted point set.
    Duplicates of a sorted set are always adjacent.
    """
    n = points.shape[0]
    if n == 0:
        return points.copy()
    keep = np.ones(n, dtype=np.bool_)
    for i in range(1, n):
        if points[i, 0] == points[i-1, 0] and points[i, 1] == points[i-1, 1]:
            keep[i] = False
    return points[keep]

@njit
def cross_product(o, a, b):
    """
    Calculates the 2D cross product (z-component) of vectors oa and ob.
    A positive value means a counter-clockwise turn (left turn).
    A negative value means a clockwise turn (right turn).
    A zero value means the points are collinear.
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

# private helper functions

@njit
def _chain(points, buffer):
    """
    Writes one monotone chain of `points` into `buffer` and returns its length,
    excluding the chain's last point.
    Right turns and collinear points are popped.
    """
    idx = 0
    for p in points:
        while idx >= 2 and cross_product(buffer[idx-2], buffer[idx-1], p) <= 0:
            idx -= 1 # remove point
        buffer[idx] = p
        idx += 1
    if idx > 0:
        idx -= 1 # exclude the end point of the chain
    return idx
