# test_node_module.py
"""
Tests for Node geometry and cell enumeration.
"""

import pytest

from errors import OutOfBoundsAccess
from node_module import Node
from spatial_grid import SpatialGrid, UpdateGridOperation


def test_node_creation():
    node = Node("test_node", 1, 2, 3, 4)

    assert node.id == "test_node"
    assert (node.x, node.y, node.w, node.h) == (1, 2, 3, 4)


def test_cells_column_major_order():
    node = Node("test_node", 1, 2, 2, 2)

    assert list(node.cells()) == [(1, 2), (1, 3), (2, 2), (2, 3)]


def test_cells_is_restartable():
    node = Node("n", 0, 0, 2, 3)

    assert list(node.cells()) == list(node.cells())
    assert len(list(node.cells())) == 6


def test_cells_zero_dimensions():
    assert list(Node("n", 0, 0, 0, 0).cells()) == []
    assert list(Node("n", 0, 0, 0, 1).cells()) == []
    assert list(Node("n", 0, 0, 1, 0).cells()) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Node("n", 0, 0, -1, 1)


def test_update_grid_writes_footprint():
    grid = SpatialGrid(4, 4)
    node = Node("a", 1, 1, 2, 2)

    node.update_grid(grid, UpdateGridOperation.ADD)

    for x, y in node.cells():
        assert grid.get(x, y) == "a"
    assert grid.get(0, 0) is None
    assert grid.get(3, 3) is None


def test_update_grid_stops_at_first_error():
    grid = SpatialGrid(4, 2, can_expand_y=False)
    node = Node("a", 1, 0, 2, 1)

    with pytest.raises(OutOfBoundsAccess) as exc:
        node.update_grid(grid, UpdateGridOperation.ADD)

    assert (exc.value.x, exc.value.y) == (2, 0)
    # Cells before the failing one were already written
    assert grid.get(1, 0) == "a"


def test_moved_to_keeps_id_and_size():
    node = Node("a", 0, 0, 2, 3)
    moved = node.moved_to(4, 5)

    assert moved == Node("a", 4, 5, 2, 3)
    assert node == Node("a", 0, 0, 2, 3)


def test_equality_and_hash():
    assert Node("a", 0, 0, 1, 1) == Node("a", 0, 0, 1, 1)
    assert Node("a", 0, 0, 1, 1) != Node("a", 0, 1, 1, 1)
    assert len({Node("a", 0, 0, 1, 1), Node("a", 0, 0, 1, 1)}) == 1


def test_dict_round_trip():
    node = Node("box", 3, 4, 5, 6)
    assert Node.from_dict(node.to_dict()) == node


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
