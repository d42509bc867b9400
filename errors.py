# errors.py


class GridEngineError(Exception):
    """Base class for every error raised by the layout engine."""


class InnerGridError(GridEngineError):
    """Errors raised by the spatial grid or by a grid/registry mismatch."""


class OutOfBoundsAccess(InnerGridError):
    def __init__(self, x, y):
        self.x = x
        self.y = y
        super().__init__(f"Out of bounds access: x: {x}, y: {y}")


class MismatchedGridItem(InnerGridError):
    """
    A grid cell references an id the registry does not know.

    This means the grid/registry consistency invariant was broken, which is
    an internal bug rather than a user error.
    """

    def __init__(self, id):
        self.id = id
        super().__init__(f"RawGrid item not matching grid items: id: {id}")


class ItemError(GridEngineError):
    """Errors caused by the id passed to a public operation."""


class ItemNotFound(ItemError):
    def __init__(self, id):
        self.id = id
        super().__init__(f"Item not found: {id}")


class ItemAlreadyExists(ItemError):
    def __init__(self, id):
        self.id = id
        super().__init__(f"Item already exists: {id}")
