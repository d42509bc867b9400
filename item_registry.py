# item_registry.py

from errors import MismatchedGridItem


class ItemRegistry:
    """
    Authoritative id -> Node map.

    The grid only stores ids; the geometry of a placed item is read from here.
    """

    def __init__(self):
        self.nodes = {}

    def __contains__(self, id):
        return id in self.nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes.values())

    def get(self, id):
        return self.nodes.get(id)

    def lookup(self, id):
        """Return the node for an id found on the grid."""
        node = self.nodes.get(id)
        if node is None:
            raise MismatchedGridItem(id)
        return node

    def insert(self, node):
        self.nodes[node.id] = node

    def remove(self, id):
        return self.nodes.pop(id, None)

    def sorted_nodes(self):
        return sorted(self.nodes.values(), key=lambda n: n.id)

    def copy(self):
        registry = ItemRegistry()
        registry.nodes = dict(self.nodes)
        return registry
