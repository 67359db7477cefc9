"""
Territory data for Dice Wars.

A territory is a contiguous group of cells grown during map generation.
Each territory has:
- size: cell count (0 = the id slot is unused)
- owner: player id
- dice: 1..max_dice
- a bounding box and an anchor cell where the dice stack is drawn
- a boundary trace of (cell, direction) edges for the renderer

Territories never move or merge after generation; only owner and dice change.
"""

from .hex_grid import NONE, NUM_DIRECTIONS

# Cells next to another territory are pushed down the anchor ranking
BORDER_ANCHOR_PENALTY = 4


class Territory:
    __slots__ = [
        "id", "size", "owner", "dice", "cells",
        "left", "right", "top", "bottom", "cx", "cy", "anchor",
        "boundary",
    ]

    def __init__(self, territory_id, size=0, owner=-1, dice=0):
        self.id = territory_id
        self.size = size
        self.owner = owner
        self.dice = dice
        self.cells = []
        self.left = 0
        self.right = -1
        self.top = 0
        self.bottom = -1
        self.cx = 0
        self.cy = 0
        self.anchor = NONE
        self.boundary = []

    @property
    def exists(self):
        return self.size > 0

    @property
    def can_attack(self):
        """A lone die cannot attack."""
        return self.exists and self.dice > 1

    def __repr__(self):
        return (f"Territory({self.id}, size={self.size}, "
                f"owner={self.owner}, dice={self.dice})")


def existing(territories):
    """Iterate territories that exist, in id order."""
    return (t for t in territories if t.size > 0)


def measure_territories(grid, territories, adjacency):
    """
    Fill in size, cells, bounding box, centre and anchor for every
    territory, and record which territories border which.

    The anchor is the cell closest (manhattan) to the bounding-box centre,
    preferring cells that do not touch another territory.
    """
    for t in territories:
        t.size = 0
        t.cells = []
        t.left = grid.width
        t.right = -1
        t.top = grid.height
        t.bottom = -1
        t.anchor = NONE

    for c in grid.cells:
        if c.territory == 0:
            continue
        t = territories[c.territory]
        t.size += 1
        t.cells.append(c.index)
        t.left = min(t.left, c.x)
        t.right = max(t.right, c.x)
        t.top = min(t.top, c.y)
        t.bottom = max(t.bottom, c.y)

    for t in existing(territories):
        t.cx = (t.left + t.right) // 2
        t.cy = (t.top + t.bottom) // 2
        adjacency.add_territory(t.id)

    best = {}
    for c in grid.cells:
        tid = c.territory
        if tid == 0:
            continue
        t = territories[tid]
        dist = abs(t.cx - c.x) + abs(t.cy - c.y)

        on_border = False
        for n in grid.neighbors(c.index):
            other = grid.cells[n].territory
            if other > 0 and other != tid:
                adjacency.connect(tid, other)
                on_border = True
        if on_border:
            dist += BORDER_ANCHOR_PENALTY

        if dist < best.get(tid, 9999):
            best[tid] = dist
            t.anchor = c.index


def trace_boundary(grid, territory):
    """
    Walk the outer border of a territory clockwise.

    Starts at the territory's first cell in scan order, on its upper-left
    edge (nothing above or to the left of that cell belongs to the
    territory, so the edge is on the outside). Returns a list of
    (cell_index, direction) pairs, one per border edge.
    """
    if not territory.cells:
        return []

    tid = territory.id
    start_cell = territory.cells[0]
    start_dir = 5
    c, d = start_cell, start_dir
    segments = [(c, d)]

    # Each border edge is visited once; the limit only guards bad input
    for _ in range(territory.size * NUM_DIRECTIONS + 1):
        d = (d + 1) % NUM_DIRECTIONS
        n = grid.join[c][d]
        if n != NONE and grid.cells[n].territory == tid:
            c = n
            d = (d - 2) % NUM_DIRECTIONS
        if c == start_cell and d == start_dir:
            break
        segments.append((c, d))

    return segments
