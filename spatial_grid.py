# spatial_grid.py

from enum import Enum

import numpy as np

from config import CAN_EXPAND_Y
from errors import OutOfBoundsAccess


class UpdateGridOperation(Enum):
    """How a node's id is written into a cell."""
    ADD = "add"
    REMOVE = "remove"


class SpatialGrid:
    """
    Fixed-width matrix of optional item ids.

    Cells live in a numpy object array indexed [row, col]. Rows are appended
    when an access lands below the last row and growth is allowed.
    """

    def __init__(self, rows, cols, can_expand_y=CAN_EXPAND_Y):
        self.cells = np.full((rows, cols), None, dtype=object)
        self.can_expand_y = can_expand_y

    @property
    def rows(self):
        return self.cells.shape[0]

    @property
    def cols(self):
        return self.cells.shape[1]

    def check_bounds(self, x, y):
        """Raise OutOfBoundsAccess if (x, y) can't be served, without growing."""
        if x < 0 or y < 0 or x >= self.cols:
            raise OutOfBoundsAccess(x, y)
        if y >= self.rows and not self.can_expand_y:
            raise OutOfBoundsAccess(x, y)

    def _handle_expansion(self, x, y):
        self.check_bounds(x, y)
        if y >= self.rows:
            self.expand_rows(y - self.rows + 1)

    def get(self, x, y):
        self._handle_expansion(x, y)
        return self.cells[y, x]

    def update(self, node, x, y, operation):
        """
        Add or clear node's id at (x, y).

        REMOVE only clears the cell if it still holds node's id, so a stale
        remove never wipes an item that has since taken the cell.
        """
        self._handle_expansion(x, y)

        if operation is UpdateGridOperation.ADD:
            self.cells[y, x] = node.id
        elif operation is UpdateGridOperation.REMOVE:
            if self.cells[y, x] == node.id:
                self.cells[y, x] = None

    def expand_rows(self, rows):
        if rows <= 0:
            return
        new_rows = np.full((rows, self.cols), None, dtype=object)
        self.cells = np.vstack([self.cells, new_rows])

    def copy(self):
        grid = SpatialGrid.__new__(SpatialGrid)
        grid.cells = self.cells.copy()
        grid.can_expand_y = self.can_expand_y
        return grid

    def iter_rows(self):
        for row in self.cells:
            yield tuple(row)

    def to_list(self):
        return [list(row) for row in self.iter_rows()]

    @classmethod
    def from_list(cls, cells, cols, can_expand_y=CAN_EXPAND_Y):
        grid = cls(len(cells), cols, can_expand_y=can_expand_y)
        for y, row in enumerate(cells):
            if len(row) != cols:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {cols}")
            for x, cell in enumerate(row):
                grid.cells[y, x] = cell
        return grid

    def __eq__(self, other):
        if not isinstance(other, SpatialGrid):
            return NotImplemented
        return (self.can_expand_y == other.can_expand_y
                and self.cells.shape == other.cells.shape
                and self.to_list() == other.to_list())

    def __repr__(self):
        return f"SpatialGrid(rows={self.rows}, cols={self.cols}, can_expand_y={self.can_expand_y})"
