"""
Procedural map generation for Dice Wars.

1. Grow territories over the hex lattice by percolation from random seeds
2. Fill sea cells that are walled in by land
3. Drop territories that came out too small
4. Measure territories (bounding box, anchor, adjacency, border trace)
5. Deal territories to players and scatter the starting dice

The only randomness in growth is one shuffled priority array: every
"pick the next cell" decision takes the lowest priority among the
candidates, so no per-step rolls are needed.
"""

import logging
from collections import Counter, namedtuple

from .adjacency import AdjacencyGraph
from .hex_grid import HexGrid
from .territory import Territory, existing, measure_territories, trace_boundary

LOG = logging.getLogger(__name__)

MIN_TARGET_SIZE = 3
MIN_TERRITORY_SIZE = 6  # anything smaller is culled back to sea

GeneratedMap = namedtuple("GeneratedMap", ["grid", "territories", "adjacency"])


# =========================================================
# Growth
# =========================================================

def percolate(grid, priority, start, target_size, territory_id):
    """
    Grow one territory from `start`. Returns the number of cells claimed.

    Greedy phase: claim the current cell, add its neighbours to the front,
    then move to the unclaimed front cell with the lowest priority, until
    the target size is reached or the front is empty. Smoothing phase: claim
    every unclaimed front cell left over, so no one-cell slivers remain, and
    flag the cells around them as seeds for later territories.
    """
    target_size = max(target_size, MIN_TARGET_SIZE)
    cells = grid.cells

    for c in cells:
        c.frontier = False

    count = 0
    current = start
    while True:
        cells[current].territory = territory_id
        count += 1
        for n in grid.neighbors(current):
            cells[n].frontier = True

        if count >= target_size:
            break

        best = -1
        best_priority = None
        for c in cells:
            if c.frontier and c.territory == 0:
                if best_priority is None or priority[c.index] < best_priority:
                    best = c.index
                    best_priority = priority[c.index]
        if best < 0:
            break
        current = best

    for c in cells:
        if c.frontier and c.territory == 0:
            c.territory = territory_id
            count += 1
            for n in grid.neighbors(c.index):
                cells[n].candidate = True

    return count


def _next_seed(grid, priority):
    best = -1
    best_priority = None
    for c in grid.cells:
        if c.candidate and c.territory == 0:
            if best_priority is None or priority[c.index] < best_priority:
                best = c.index
                best_priority = priority[c.index]
    return best


def grow_territories(grid, rng, max_territories, territory_size=8,
                     size_variance=0.2):
    """
    Carve territories out of an empty grid. Returns the number of
    territory ids used (ids 1..n). Stops early, without retrying, when no
    seed cell is left.
    """
    priority = list(range(grid.size))
    rng.shuffle(priority)

    for c in grid.cells:
        c.territory = 0
    grid.clear_flags()
    grid.cells[rng.randrange(grid.size)].candidate = True

    territory_id = 1
    while territory_id < max_territories:
        seed = _next_seed(grid, priority)
        if seed < 0:
            LOG.debug("Lattice exhausted after %d territories", territory_id - 1)
            break

        target = max(
            MIN_TARGET_SIZE,
            int(territory_size * (1 + (rng.random() * 2 - 1) * size_variance)),
        )
        size = percolate(grid, priority, seed, target, territory_id)
        LOG.debug("Territory %d grown from cell %d: %d cells (target %d)",
                  territory_id, seed, size, target)
        if size == 0:
            break
        territory_id += 1

    grid.clear_flags()
    return territory_id - 1


def fill_holes(grid):
    """
    Give each sea cell that has no sea neighbour to the most common
    territory around it (smaller id on a tie). Returns cells filled.
    """
    filled = 0
    for c in grid.cells:
        if c.territory != 0:
            continue
        around = [grid.cells[n].territory for n in grid.neighbors(c.index)]
        if not around or 0 in around:
            continue
        counts = Counter(around)
        c.territory = min(counts, key=lambda tid: (-counts[tid], tid))
        filled += 1
    return filled


def cull_small(grid, territory_count, min_size=MIN_TERRITORY_SIZE):
    """
    Return cells of territories smaller than min_size to the sea.
    The freed cells stay sea. Returns the culled ids.
    """
    sizes = Counter(c.territory for c in grid.cells if c.territory > 0)
    culled = [tid for tid in range(1, territory_count + 1)
              if sizes.get(tid, 0) < min_size]
    if culled:
        dropped = set(culled)
        for c in grid.cells:
            if c.territory in dropped:
                c.territory = 0
        LOG.debug("Culled %d undersized territories: %s", len(culled), culled)
    return culled


# =========================================================
# Ownership and dice
# =========================================================

def assign_owners(territories, player_count, rng):
    """Deal territories one at a time, at random, to players in rotation."""
    unowned = [t for t in existing(territories)]
    for t in unowned:
        t.owner = -1

    player = 0
    while unowned:
        t = unowned.pop(rng.randrange(len(unowned)))
        t.owner = player
        player = (player + 1) % player_count


def place_dice(territories, player_count, avg_dice, max_dice, rng):
    """
    Put one die on every territory, then hand out the remaining
    count * (avg_dice - 1) dice one at a time, round-robin by player, each
    to a random territory of that player still below the cap.
    Returns the number of extra dice placed.
    """
    live = list(existing(territories))
    for t in live:
        t.dice = 1

    pool = len(live) * (avg_dice - 1)
    placed = 0
    misses = 0
    player = 0
    for _ in range(pool):
        eligible = [t for t in live if t.owner == player and t.dice < max_dice]
        if eligible:
            rng.choice(eligible).dice += 1
            placed += 1
            misses = 0
        else:
            misses += 1
            if misses >= player_count:
                LOG.debug("Every territory at the dice cap, %d dice unplaced",
                          pool - placed)
                break
        player = (player + 1) % player_count

    return placed


# =========================================================
# Whole map
# =========================================================

def generate_map(config, rng):
    """
    Build a complete map: grid, territory table (indexed by id, slot 0
    unused) and adjacency graph. Territories are owned and carry dice.
    """
    grid = HexGrid(config.width, config.height)
    used = grow_territories(grid, rng, config.max_territories,
                            config.territory_size, config.size_variance)
    fill_holes(grid)
    cull_small(grid, used)

    territories = [Territory(i) for i in range(config.max_territories)]
    adjacency = AdjacencyGraph()
    measure_territories(grid, territories, adjacency)
    for t in existing(territories):
        t.boundary = trace_boundary(grid, t)

    assign_owners(territories, config.player_count, rng)
    place_dice(territories, config.player_count, config.avg_dice,
               config.max_dice, rng)

    LOG.info("Generated %dx%d map with %d territories",
             grid.width, grid.height, len(adjacency))
    return GeneratedMap(grid, territories, adjacency)
