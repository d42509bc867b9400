# node.py


class Node:
    def __init__(self, id, x, y, w, h):
        """
        Initialize a node with its id and rectangle.

        Parameters
        ----------
        id : str
            Unique identifier, fixed for the node's lifetime
        x, y : int
            Top-left cell (column, row)
        w, h : int
            Width and height in cells. Zero means the node covers no cells.
        """
        self.id = str(id)
        self.x = int(x)
        self.y = int(y)
        self.w = int(w)
        self.h = int(h)
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Node {self.id!r} has negative size {self.w}x{self.h}")

    def _key(self):
        return (self.id, self.x, self.y, self.w, self.h)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"Node(id={self.id!r}, x={self.x}, y={self.y}, w={self.w}, h={self.h})"

    def cells(self):
        """Yield every (x, y) cell covered by the node, column by column."""
        for x in range(self.x, self.x + self.w):
            for y in range(self.y, self.y + self.h):
                yield x, y

    def update_grid(self, grid, operation):
        """Write or clear this node's footprint on grid; stops at the first error."""
        for x, y in self.cells():
            grid.update(self, x, y, operation)

    def moved_to(self, x, y):
        return Node(self.id, x, y, self.w, self.h)

    def to_dict(self):
        return {'id': self.id, 'x': self.x, 'y': self.y, 'w': self.w, 'h': self.h}

    @classmethod
    def from_dict(cls, data):
        return cls(data['id'], data['x'], data['y'], data['w'], data['h'])
