"""
Territory adjacency graph.

Undirected and independent of ownership: two territories are adjacent when
any of their cells touch. Built once at map generation and never changed,
since territories cannot move or merge.
"""


class AdjacencyGraph:
    def __init__(self):
        self._neighbors = {}

    def add_territory(self, territory_id):
        self._neighbors.setdefault(territory_id, set())

    def connect(self, a, b):
        """Mark a and b as adjacent (both directions). Self-loops are ignored."""
        if a == b:
            return
        self._neighbors.setdefault(a, set()).add(b)
        self._neighbors.setdefault(b, set()).add(a)

    def are_adjacent(self, a, b):
        return b in self._neighbors.get(a, ())

    def neighbors(self, territory_id):
        """Adjacent territory ids in ascending order."""
        return sorted(self._neighbors.get(territory_id, ()))

    def degree(self, territory_id):
        return len(self._neighbors.get(territory_id, ()))

    def territory_ids(self):
        return sorted(self._neighbors)

    def edges(self):
        """Each adjacent pair once, as (smaller, larger)."""
        return sorted(
            (a, b) for a, ns in self._neighbors.items() for b in ns if a < b
        )

    def __contains__(self, territory_id):
        return territory_id in self._neighbors

    def __len__(self):
        return len(self._neighbors)

    def __repr__(self):
        return f"AdjacencyGraph({len(self)} territories, {len(self.edges())} borders)"
