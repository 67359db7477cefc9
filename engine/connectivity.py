"""
Connectivity analysis over the territory adjacency graph.

A connected group is a maximal set of one player's territories reachable
from each other through same-owner adjacency. The size of a player's
largest group sets their reinforcement income, so groups are recomputed
whenever a capture changes ownership.

Group and choke-point results are cached per player. Callers that change
ownership must call invalidate() for both the old and the new owner;
GameState.set_owner does this.
"""

import logging

LOG = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    def __init__(self, adjacency):
        self.adjacency = adjacency
        self._groups = {}
        self._choke_points = {}

    def invalidate(self, *player_ids):
        """Forget cached results for the given players (all if none given)."""
        if not player_ids:
            self._groups.clear()
            self._choke_points.clear()
            return
        for pid in player_ids:
            self._groups.pop(pid, None)
            self._choke_points.pop(pid, None)

    # =========================================================
    # Groups
    # =========================================================

    def connected_groups(self, territories, player_id):
        """
        Partition the player's territories into connected groups.
        Returns a tuple of sorted id tuples, largest group first. Cached per
        player until invalidate().
        """
        cached = self._groups.get(player_id)
        if cached is not None:
            return cached

        owned = {t.id for t in territories if t.size > 0 and t.owner == player_id}
        groups = self._partition(owned)
        self._groups[player_id] = groups
        return groups

    def _partition(self, owned):
        visited = set()
        groups = []

        for start in sorted(owned):
            if start in visited:
                continue
            visited.add(start)
            queue = [start]
            group = []
            while queue:
                current = queue.pop(0)
                group.append(current)
                for n in self.adjacency.neighbors(current):
                    if n in owned and n not in visited:
                        visited.add(n)
                        queue.append(n)
            groups.append(tuple(sorted(group)))

        groups.sort(key=lambda g: (-len(g), g[0]))
        return tuple(groups)

    def largest_group_size(self, territories, player_id):
        groups = self.connected_groups(territories, player_id)
        return len(groups[0]) if groups else 0

    def group_count(self, territories, player_id):
        return len(self.connected_groups(territories, player_id))

    def is_connected(self, territories, a, b):
        """True if a and b share an owner and a same-owner path joins them."""
        ta, tb = territories[a], territories[b]
        if ta.size == 0 or tb.size == 0 or ta.owner != tb.owner:
            return False
        for group in self.connected_groups(territories, ta.owner):
            if a in group:
                return b in group
        return False

    # =========================================================
    # Strategic queries
    # =========================================================

    def choke_points(self, territories, player_id):
        """
        Territories whose loss would split the player's holdings into more
        groups. Found by re-partitioning with each territory removed.
        """
        cached = self._choke_points.get(player_id)
        if cached is not None:
            return cached

        owned = {t.id for t in territories if t.size > 0 and t.owner == player_id}
        base = len(self.connected_groups(territories, player_id))
        result = tuple(tid for tid in sorted(owned)
                       if len(self._partition(owned - {tid})) > base)
        self._choke_points[player_id] = result
        return result

    def attack_path(self, territories, source, target):
        """
        Shortest chain of attacks from `source` to `target`.

        BFS from the source through territories not owned by the source's
        owner. Returns [source, ..., target], or [] if the target is
        unreachable or already friendly.
        """
        src, dst = territories[source], territories[target]
        if src.size == 0 or dst.size == 0 or source == target:
            return []
        owner = src.owner
        if dst.owner == owner:
            return []

        parents = {source: None}
        queue = [source]
        while queue:
            current = queue.pop(0)
            for n in self.adjacency.neighbors(current):
                if n in parents:
                    continue
                t = territories[n]
                if t.size == 0 or t.owner == owner:
                    continue
                parents[n] = current
                if n == target:
                    path = [n]
                    while parents[path[-1]] is not None:
                        path.append(parents[path[-1]])
                    path.reverse()
                    return path
                queue.append(n)

        LOG.debug("No attack path from %d to %d", source, target)
        return []
