from numba import njit


# API functions

def intersect(seg1, seg2):
    """
    Checks whether two line segments cross.

    Args:
        seg1: first segment as ((x1, y1), (x2, y2)). Any indexable pair of points.
        seg2: second segment as ((x3, y3), (x4, y4)).

    Returns:
        bool: True when the end points of each segment lie on opposite sides
        of the other segment's line.
    """
    (x1, y1), (x2, y2) = seg1
    (x3, y3), (x4, y4) = seg2
    return bool(intersect_coords(
        float(x1), float(y1), float(x2), float(y2),
        float(x3), float(y3), float(x4), float(y4)
    ))

@njit
def intersect_coords(x1, y1, x2, y2, x3, y3, x4, y4):
    """ `intersect` on unpacked coordinates, callable from other kernels """
    return (ccw(x1, y1, x3, y3, x4, y4) != ccw(x2, y2, x3, y3, x4, y4) and
            ccw(x1, y1, x2, y2, x3, y3) != ccw(x1, y1, x2, y2, x4, y4))

@njit
def ccw(x1, y1, x2, y2, x3, y3):
    """
    Orientation of the triplet (p1, p2, p3).
    True for clockwise or collinear, False for strictly counter-clockwise.
    """
    val = (y3 - y1) * (x2 - x1) - (y2 - y1) * (x3 - x1)
    if val > 0:
        return True
    if val < 0:
        return False
    # collinear
    return True
