# collision.py

from node_module import Node


def detect_collisions(node, x, y, grid, registry):
    """
    List the placed nodes that `node` would overlap if it sat at (x, y).

    Parameters
    ----------
    node : Node
        Node being placed; only its id, w and h are used
    x, y : int
        Candidate top-left cell
    grid : SpatialGrid
        Grid to check against. Reads may grow it, so pass a scratch copy.
    registry : ItemRegistry
        Resolves cell ids to their current geometry

    Returns
    -------
    list of Node
        Colliding nodes, each once, in first-encounter order
    """
    collides_with = []
    footprint = Node(node.id, x, y, node.w, node.h)

    for cx, cy in footprint.cells():
        cell = grid.get(cx, cy)
        if cell is None or cell == node.id:
            continue

        other = registry.lookup(cell)
        if other not in collides_with:
            collides_with.append(other)

    return collides_with


def overlaps(a, b):
    """True if the rectangles of a and b share at least one cell."""
    if a.w == 0 or a.h == 0 or b.w == 0 or b.h == 0:
        return False
    return (a.x < b.x + b.w and b.x < a.x + a.w
            and a.y < b.y + b.h and b.y < a.y + a.h)


def find_overlaps(nodes):
    """Return every (a, b) pair of nodes whose rectangles overlap."""
    nodes = list(nodes)
    pairs = []
    for i, a in enumerate(nodes):
        for b in nodes[i + 1:]:
            if overlaps(a, b):
                pairs.append((a, b))
    return pairs
