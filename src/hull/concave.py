import numpy as np
from numba import njit

from hull.commons.types import MAX_CONCAVE_ANGLE_COS
from hull.geometry.intersect import intersect_coords


# API functions

def make_concave(hull, max_sq_edge_len, max_search_area, grid, edge_skip_list, logger=None):
    """
    Digs the edges of a closed hull inwards until no edge can take another point.

    Each pass walks the current edges; an edge at least `sqrt(max_sq_edge_len)`
    long gets the best inner point found near it inserted after its first end.
    Points inserted during a pass are visited in the same pass. Passes repeat
    until one inserts nothing.

    Args:
        hull (np.ndarray): closed hull polygon of shape (M, 2).
        max_sq_edge_len (float): squared concavity. Shorter edges are left alone.
        max_search_area (tuple): (width, height) beyond which the search for a
            midpoint stops.
        grid (Grid): inner points. Inserted points are removed from it.
        edge_skip_list (set): keys of edges with no reachable midpoint. Updated in place.
        logger (RefinementLogger, optional): receives one record per pass.

    Returns:
        np.ndarray: the refined closed polygon.
    """
    n_pass = 0
    while True:
        inserted = 0
        i = 0
        while i < hull.shape[0] - 1:
            edge_start, edge_end = hull[i], hull[i + 1]
            key = edge_key(edge_start, edge_end)

            if sq_length(edge_start, edge_end) < max_sq_edge_len or key in edge_skip_list:
                i += 1
                continue

            scale_factor = 0
            bbox = bbox_around(edge_start, edge_end)
            while True:
                extended = grid.extend_bbox(bbox, scale_factor)
                bbox_width = extended[2] - extended[0]
                bbox_height = extended[3] - extended[1]

                candidates = grid.range_points(extended)
                mid_idx = find_mid_point(edge_start, edge_end, candidates, hull)

                scale_factor += 1
                # the search box grows from the previous box, not the edge
                bbox = extended
                if mid_idx >= 0:
                    break
                if not (max_search_area[0] > bbox_width or max_search_area[1] > bbox_height):
                    break

            if bbox_width >= max_search_area[0] and bbox_height >= max_search_area[1]:
                edge_skip_list.add(key)

            if mid_idx >= 0:
                mid_point = candidates[mid_idx]
                hull = np.insert(hull, i + 1, mid_point, axis=0)
                grid.remove_point(mid_point)
                inserted += 1
            i += 1

        if logger is not None:
            logger.log_pass(n_pass, inserted, len(edge_skip_list), hull.shape[0])
        n_pass += 1
        if inserted == 0:
            return hull

def edge_key(edge_start, edge_end):
    return (float(edge_start[0]), float(edge_start[1]), float(edge_end[0]), float(edge_end[1]))

def bbox_around(edge_start, edge_end):
    """ (min_x, min_y, max_x, max_y) of a segment """
    return (
        min(edge_start[0], edge_end[0]),
        min(edge_start[1], edge_end[1]),
        max(edge_start[0], edge_end[0]),
        max(edge_start[1], edge_end[1]),
    )

@njit
def occupied_area(points):
    """
    Width and height of the axis aligned box around `points`.
    Empty input occupies no area.
    """
    if points.shape[0] == 0:
        return 0.0, 0.0
    min_x, max_x = points[0, 0], points[0, 0]
    min_y, max_y = points[0, 1], points[0, 1]
    for i in range(1, points.shape[0]):
        if points[i, 0] < min_x:
            min_x = points[i, 0]
        if points[i, 1] < min_y:
            min_y = points[i, 1]
        if points[i, 0] > max_x:
            max_x = points[i, 0]
        if points[i, 1] > max_y:
            max_y = points[i, 1]
    return float(max_x - min_x), float(max_y - min_y)

@njit
def find_mid_point(edge_start, edge_end, candidates, hull):
    """
    Index of the candidate that forms the tightest angles with both ends of
    the edge without crossing the hull.

    A candidate is accepted when both cosines beat the best pair seen so far
    (starting at cos(90 deg)) and neither new segment intersects a hull edge.

    Returns:
        int: row of `candidates`, or -1 when none qualifies.
    """
    best = -1
    angle1_cos = MAX_CONCAVE_ANGLE_COS
    angle2_cos = MAX_CONCAVE_ANGLE_COS

    for j in range(candidates.shape[0]):
        point = candidates[j]
        cos1 = cos_angle(edge_start, edge_end, point)
        cos2 = cos_angle(edge_end, edge_start, point)

        if (cos1 > angle1_cos and cos2 > angle2_cos and
                not check_intersect(edge_start, point, hull) and
                not check_intersect(edge_end, point, hull)):
            angle1_cos = cos1
            angle2_cos = cos2
            best = j
    return best

@njit
def check_intersect(seg_start, seg_end, polygon):
    """
    True if the segment crosses any edge of `polygon`.
    Edges sharing an end point with the segment are ignored.
    """
    for i in range(polygon.shape[0] - 1):
        e0 = polygon[i]
        e1 = polygon[i + 1]
        if _same(seg_start, e0) or _same(seg_start, e1):
            continue
        if _same(seg_end, e0) or _same(seg_end, e1):
            continue
        if intersect_coords(seg_start[0], seg_start[1], seg_end[0], seg_end[1],
                            e0[0], e0[1], e1[0], e1[1]):
            return True
    return False

@njit
def sq_length(a, b):
    return (b[0] - a[0])**2 + (b[1] - a[1])**2

@njit
def cos_angle(o, a, b):
    """
    Cosine of the angle aob.
    Overlapping points give 1.0.
    """
    a_shifted_x, a_shifted_y = a[0] - o[0], a[1] - o[1]
    b_shifted_x, b_shifted_y = b[0] - o[0], b[1] - o[1]
    sq_a_len = sq_length(o, a)
    sq_b_len = sq_length(o, b)
    dot = a_shifted_x * b_shifted_x + a_shifted_y * b_shifted_y

    if sq_a_len == 0 or sq_b_len == 0:
        return 1.0
    return dot / np.sqrt(sq_a_len * sq_b_len)

# private helper functions

@njit
def _same(p, q):
    return p[0] == q[0] and p[1] == q[1]
