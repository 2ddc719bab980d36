import numpy as np

from hull.utils import typing


def to_xy(points, fmt=None):
    """
    Converts a point set to [x, y] pairs.

    Args:
        points: iterable of points.
        fmt: optional (x_key, y_key), e.g. ('x', 'y') or (0, 1). Keys are read
            by indexing for mappings and sequences, and as attributes otherwise.
            Without `fmt` the points are assumed to be [x, y] already.

    Returns:
        list: a new list of points.
    """
    if fmt is None:
        return list(points)

    x_key, y_key = _sanitize_format(fmt)
    return [[_read(pt, x_key), _read(pt, y_key)] for pt in points]


def from_xy(points, fmt=None):
    """
    Converts [x, y] pairs back to the caller's format.
    With `fmt` each point becomes a dict keyed by `fmt`.
    """
    if fmt is None:
        return [[pt[0], pt[1]] for pt in points]

    x_key, y_key = _sanitize_format(fmt)
    return [{x_key: pt[0], y_key: pt[1]} for pt in points]


def from_strings(strings, sep=","):
    """ parses 'x,y' tokens into [x, y] float pairs """
    points = []
    for token in strings:
        x, y = token.split(sep)
        points.append([float(x), float(y)])
    return points


def to_strings(points, origin=(0, 0), sep=","):
    """
    Writes points as 'x,y' tokens rounded to integers, relative to `origin`.
    """
    ox, oy = origin
    return [f"{_round_half_up(pt[0] - ox)}{sep}{_round_half_up(pt[1] - oy)}" for pt in points]


def _round_half_up(value):
    # halves round away from zero, unlike round()
    return int(np.sign(value) * np.floor(np.abs(value) + 0.5))


def _read(pt, key):
    if typing.is_mapping(pt) or (typing.is_array_like(pt) and isinstance(key, int)):
        return pt[key]
    return getattr(pt, key)


def _sanitize_format(fmt):
    typing.sanitize_type(fmt, "arraylike", "fmt")
    typing.sanitize_length(fmt, 2, "fmt")
    return fmt[0], fmt[1]
