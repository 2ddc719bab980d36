import numpy as np
import warnings

# cos(90 deg): a candidate midpoint must form angles below 90 degrees with both edge ends
MAX_CONCAVE_ANGLE_COS = 0.0
# fraction of the occupied area (per axis) searched for a midpoint before giving up on an edge
MAX_SEARCH_BBOX_SIZE_PERCENT = 0.6
# concavity at or above this is treated as convex
MAX_CONCAVITY = 100000


class defaults:
    def __init__(self, precision):
        if not isinstance(precision, int):
            raise TypeError("'precision' must be an int (32 or 64)")
        self._set(precision)
        self.settable = True

    def update_precision(self, precision):
        if not self.settable:
            warnings.warn("Set precision must be called *before* importing other hull modules "\
                    "so that coordinate arrays are built with the requested dtype.", UserWarning)

        if not isinstance(precision, int):
            raise TypeError("'precision' must be an int (32 or 64)")
        self._set(precision)

    def _set(self, precision):
        if precision == 32:
            self.float = np.float32
            self.int = np.int32
        elif precision == 64:
            self.float = np.float64
            self.int = np.int64
        else:
            raise ValueError("'precision' must be 32 or 64")
        self.precision = precision

    def __iter__(self):
        self.settable = False
        return iter((self.int, self.float))

    def __repr__(self):
        return f"Default coordinate data types int and float of precision {self.precision}"

# exact coordinate comparisons need double precision by default
DEFAULTS = defaults(64)
