import numpy as np

from hull.commons.types import DEFAULTS
INT, FLOAT = DEFAULTS


class Grid:
    """
    Buckets points into square cells of side `cell_size` for fast
    bounding-box queries. Cells are addressed by
    `trunc(coord / cell_size)` on each axis.

    The grid is consumed while a hull is refined: inserted midpoints are
    removed so they cannot be used twice.
    """
    def __init__(self, points, cell_size: float):
        """
        Args:
            points: iterable of [x, y] points (rows of an (N, 2) array or pairs).
            cell_size (float): side length of a cell. Must be non-zero.
        """
        if cell_size == 0:
            raise ValueError("Cell size cannot be zero.")
        self.cell_size = float(cell_size)
        self._reverse_cell_size = 1.0 / self.cell_size
        self._cells = {}
        self._count = 0

        for point in points:
            x, y = float(point[0]), float(point[1])
            cell_x = self._coord_to_cell_num(x)
            cell_y = self._coord_to_cell_num(y)
            self._cells.setdefault(cell_x, {}).setdefault(cell_y, []).append((x, y))
            self._count += 1

    def __len__(self):
        return self._count

    def cell_points(self, x: int, y: int) -> list:
        """
        Points stored in cell (x, y), or an empty list.
        """
        return list(self._cells.get(x, {}).get(y, ()))

    def range_points(self, bbox) -> np.ndarray:
        """
        All points in cells overlapped by `bbox` = (min_x, min_y, max_x, max_y),
        inclusive of the boundary cells, swept column by column.

        Returns:
            np.ndarray: (K, 2) array of points.
        """
        tl_cell_x = self._coord_to_cell_num(bbox[0])
        tl_cell_y = self._coord_to_cell_num(bbox[1])
        br_cell_x = self._coord_to_cell_num(bbox[2])
        br_cell_y = self._coord_to_cell_num(bbox[3])

        points = []
        for x in range(tl_cell_x, br_cell_x + 1):
            column = self._cells.get(x)
            if column is None:
                continue
            for y in range(tl_cell_y, br_cell_y + 1):
                cell = column.get(y)
                if cell:
                    points.extend(cell)
        return np.array(points, dtype=FLOAT).reshape(-1, 2)

    def remove_point(self, point):
        """
        Removes the first point in its cell matching `point` exactly.

        Returns:
            list | None: the cell's remaining points, or None when the cell
            holds no points.
        """
        x, y = float(point[0]), float(point[1])
        cell = self._cells.get(self._coord_to_cell_num(x), {}).get(self._coord_to_cell_num(y))
        if not cell:
            return None

        for i, p in enumerate(cell):
            if p[0] == x and p[1] == y:
                del cell[i]
                self._count -= 1
                break
        return cell

    def extend_bbox(self, bbox, scale_factor: float) -> tuple:
        """
        Grows `bbox` by `scale_factor` cells on every side.
        """
        delta = scale_factor * self.cell_size
        return (
            bbox[0] - delta,
            bbox[1] - delta,
            bbox[2] + delta,
            bbox[3] + delta,
        )

    def _coord_to_cell_num(self, coord):
        # int() truncates toward zero
        return int(coord * self._reverse_cell_size)
