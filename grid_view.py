# grid_view.py
"""
Read-only snapshot of a layout: the grid cells plus the item registry.
Used for text rendering, JSON persistence and plotting.
"""

import json

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from config import (CELL_SPACE, SNAPSHOT_FILENAME, SNAPSHOT_INDENT, FIGURE_SIZE,
                    COLOR_ITEM, COLOR_EDGE, COLOR_GRID, ITEM_ALPHA)
from item_registry import ItemRegistry
from node_module import Node
from spatial_grid import SpatialGrid


class GridView:
    def __init__(self, grid, items):
        self.grid = grid
        self.items = items

    def rows(self):
        return self.grid.rows

    def cols(self):
        return self.grid.cols

    def iter_rows(self):
        return self.grid.iter_rows()

    def get_nodes(self):
        """Get the nodes sorted by id"""
        return self.items.sorted_nodes()

    def get_grid_formatted(self, cell_space=CELL_SPACE):
        """
        Format the grid as text.

        A header lists column indices; each following line starts with the
        two-digit row number and shows `[id]` for occupied cells and
        `[<cell_space spaces>]` for empty ones.
        """
        lines = ["  " + "".join(f" {i} " for i in range(self.cols()))]
        for row_number, row in enumerate(self.iter_rows()):
            line = f"{row_number:02d}"
            for cell in row:
                line += f"[{cell}]" if cell is not None else f"[{' ' * cell_space}]"
            lines.append(line)
        return "\n".join(lines) + "\n"

    def print_grid(self):
        print(self.get_grid_formatted())

    # ---- Persistence ----

    def to_dict(self):
        return {
            'grid': {
                'rows': self.rows(),
                'cols': self.cols(),
                'can_expand_y': self.grid.can_expand_y,
                'cells': self.grid.to_list(),
            },
            'items': {node.id: node.to_dict() for node in self.get_nodes()},
        }

    @classmethod
    def from_dict(cls, data):
        grid_data = data['grid']
        grid = SpatialGrid.from_list(grid_data['cells'], grid_data['cols'],
                                     can_expand_y=grid_data.get('can_expand_y', True))
        if grid.rows != grid_data['rows']:
            raise ValueError(f"Snapshot declares {grid_data['rows']} rows but holds {grid.rows}")

        items = ItemRegistry()
        for id, node_data in data['items'].items():
            node = Node.from_dict(node_data)
            if node.id != id:
                raise ValueError(f"Snapshot item key {id!r} does not match node id {node.id!r}")
            items.insert(node)
        return cls(grid, items)

    def to_json(self):
        return json.dumps(self.to_dict(), indent=SNAPSHOT_INDENT)

    @classmethod
    def from_json(cls, text):
        return cls.from_dict(json.loads(text))

    def save(self, filename=SNAPSHOT_FILENAME):
        with open(filename, 'w') as f:
            json.dump(self.to_dict(), f, indent=SNAPSHOT_INDENT)
        print(f"Snapshot saved to {filename}")
        print(f"  Grid: {self.rows()}x{self.cols()}, items: {len(self.items)}")

    @classmethod
    def load(cls, filename=SNAPSHOT_FILENAME):
        with open(filename, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


def plot_grid(view, ax=None, title=None):
    """
    Draw every node of a GridView as a labelled rectangle.

    Row 0 is at the top, matching the text rendering. Returns the axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=FIGURE_SIZE)

    cols, rows = view.cols(), view.rows()

    for x in range(cols + 1):
        ax.axvline(x, color=COLOR_GRID, linewidth=0.5, zorder=0)
    for y in range(rows + 1):
        ax.axhline(y, color=COLOR_GRID, linewidth=0.5, zorder=0)

    for node in view.get_nodes():
        rect = Rectangle((node.x, node.y), node.w, node.h,
                         facecolor=COLOR_ITEM, edgecolor=COLOR_EDGE,
                         alpha=ITEM_ALPHA, linewidth=1.5)
        ax.add_patch(rect)
        ax.text(node.x + node.w / 2, node.y + node.h / 2, node.id,
                ha='center', va='center', fontsize=10)

    ax.set_xlim(0, max(cols, 1))
    ax.set_ylim(max(rows, 1), 0)
    ax.set_aspect('equal')
    ax.set_xlabel('Column')
    ax.set_ylabel('Row')
    ax.set_title(title or f'Layout ({len(view.items)} items)')
    return ax
