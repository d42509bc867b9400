# layout_engine.py

from collision import detect_collisions
from config import DEFAULT_ROWS, DEFAULT_COLS, VERBOSE
from errors import ItemAlreadyExists, ItemNotFound, MismatchedGridItem, OutOfBoundsAccess
from grid_events import AddChange, RemoveChange, MoveChange, ChangesEvent, GridEvents
from grid_view import GridView
from item_registry import ItemRegistry
from node_module import Node
from spatial_grid import SpatialGrid, UpdateGridOperation


class _Placement:
    """A node waiting for the cells at (x, y) to be cleared of other items."""

    def __init__(self, node, x, y, grid, collisions, record_move):
        self.node = node
        self.x = x
        self.y = y
        self.grid = grid
        self.pending = iter(collisions)
        self.record_move = record_move


class LayoutEngine:
    """
    Places rectangular items on a growable grid and keeps them from overlapping.

    Every public mutation plans its changes against scratch copies of the grid,
    then commits the whole change-set to the live grid and registry and fires
    a single ChangesEvent.
    """

    def __init__(self, rows=DEFAULT_ROWS, cols=DEFAULT_COLS):
        self._grid = SpatialGrid(rows, cols)
        self.items = ItemRegistry()
        self.pending_changes = []
        self.events = GridEvents()

    @property
    def grid(self):
        """The live grid. Read it, but mutate only through the engine."""
        return self._grid

    # ---- Queries ----

    def get_nodes(self):
        """Return the placed nodes sorted by id."""
        return self.items.sorted_nodes()

    def get_item(self, id):
        node = self.items.get(id)
        if node is None:
            raise ItemNotFound(id)
        return node

    def view(self):
        return GridView(self._grid.copy(), self.items.copy())

    @classmethod
    def from_view(cls, view):
        """Rebuild an engine from a snapshot; listeners are not part of it."""
        engine = cls(0, view.cols())
        engine._grid = view.grid.copy()
        engine.items = view.items.copy()
        engine.check_consistency()
        return engine

    def check_consistency(self):
        """
        Verify every occupied cell points at a registered node covering it.

        Raises MismatchedGridItem naming the first offending id.
        """
        for y, row in enumerate(self._grid.iter_rows()):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                node = self.items.lookup(cell)
                if not (node.x <= x < node.x + node.w and node.y <= y < node.y + node.h):
                    raise MismatchedGridItem(cell)

    # ---- Listeners ----

    def add_listener(self, function):
        return self.events.add_changes_listener(function)

    def remove_listener(self, listener_id):
        self.events.remove_changes_listener(listener_id)

    # ---- Mutations ----

    def add_item(self, id, x, y, w, h):
        """
        Add a w x h item at (x, y).

        Items already under the new one are pushed down, cascading as needed.
        Returns the registered node.
        """
        id = str(id)
        if id in self.items:
            raise ItemAlreadyExists(id)
        self._check_position(x, y)

        node = Node(id, x, y, w, h)
        try:
            self.resolve_collisions(node, x, y, self._grid.copy())
            self.pending_changes.append(AddChange(node))
            self.commit(list(self.pending_changes))
        finally:
            self.pending_changes.clear()

        added = self.items.get(id)
        if added is None:
            raise MismatchedGridItem(id)
        return added

    def move_item(self, id, new_x, new_y):
        """Move an item to (new_x, new_y), pushing down whatever is in the way."""
        node = self.get_item(id)
        self._check_position(new_x, new_y)

        try:
            self.schedule_move(node, new_x, new_y, self._grid.copy())
            self.commit(list(self.pending_changes))
        finally:
            self.pending_changes.clear()

    def remove_item(self, id):
        """Remove an item and return its last geometry."""
        node = self.get_item(id)

        try:
            self.pending_changes.append(RemoveChange(node))
            self.commit(list(self.pending_changes))
        finally:
            self.pending_changes.clear()
        return node

    # ---- Collision handling ----

    def detect_collisions(self, node, x, y, grid):
        return detect_collisions(node, x, y, grid, self.items)

    def resolve_collisions(self, node, x, y, grid):
        """Schedule downward moves for every item `node` would overlap at (x, y)."""
        self._place(node, x, y, grid, record_move=False)

    def schedule_move(self, node, new_x, new_y, grid):
        """Clear the destination, then record a move of `node` to it."""
        self._place(node, new_x, new_y, grid, record_move=True)

    def _placement(self, node, x, y, grid, record_move):
        collisions = self.detect_collisions(node, x, y, grid)
        return _Placement(node, x, y, grid, collisions, record_move)

    def _place(self, node, x, y, grid, record_move):
        """
        Resolve the cascade for `node` at (x, y) on an explicit stack.

        Each collided item gets its own scratch grid with the pushing node's
        footprint erased, and is targeted at (collided.x, y + pusher.h). A
        placement records its move only after all of its own displacements,
        so moves are appended deepest first.
        """
        stack = [self._placement(node, x, y, grid, record_move)]

        while stack:
            current = stack[-1]
            collided = next(current.pending, None)

            if collided is None:
                stack.pop()
                if current.record_move:
                    self._record_move(current.node, current.x, current.y)
                continue

            scratch = current.grid.copy()
            current.node.update_grid(scratch, UpdateGridOperation.REMOVE)
            new_x = collided.x
            new_y = current.y + current.node.h
            stack.append(self._placement(collided, new_x, new_y, scratch, record_move=True))

    def _record_move(self, node, new_x, new_y):
        # First scheduled destination wins
        already_moved = any(
            isinstance(change, MoveChange) and change.new_value.id == node.id
            for change in self.pending_changes
        )
        if already_moved:
            return

        self.pending_changes.append(MoveChange(node, node.moved_to(new_x, new_y)))

    # ---- Commit ----

    def commit(self, changes):
        """
        Apply a change-set to the live grid and registry, then notify listeners.

        Every footprint the change-set writes is bounds-checked first, so a
        rejected change-set leaves live state untouched.
        """
        self._validate_changes(changes)

        for change in changes:
            if isinstance(change, AddChange):
                node = change.value
                node.update_grid(self._grid, UpdateGridOperation.ADD)
                self.items.insert(node)

            elif isinstance(change, RemoveChange):
                node = change.value
                node.update_grid(self._grid, UpdateGridOperation.REMOVE)
                self.items.remove(node.id)

            elif isinstance(change, MoveChange):
                change.old_value.update_grid(self._grid, UpdateGridOperation.REMOVE)
                self.items.insert(change.new_value)
                change.new_value.update_grid(self._grid, UpdateGridOperation.ADD)

        if VERBOSE:
            print(f"Committed {len(changes)} change(s), grid is now {self._grid.rows}x{self._grid.cols}")
            for change in changes:
                print(f"  {change}")

        self.events.trigger_changes_event(ChangesEvent(list(changes)))

    def _validate_changes(self, changes):
        for change in changes:
            if isinstance(change, AddChange):
                written = change.value
            elif isinstance(change, MoveChange):
                written = change.new_value
            else:
                continue
            for x, y in written.cells():
                self._grid.check_bounds(x, y)

    @staticmethod
    def _check_position(x, y):
        if x < 0 or y < 0:
            raise OutOfBoundsAccess(x, y)
