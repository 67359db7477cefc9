"""
Hex lattice for Dice Wars using "odd-r" offset coordinates.
Reference: https://www.redblobgames.com/grids/hexagons/

Cells are addressed by a flat index (y * width + x). Odd rows are shifted
half a cell to the right, so the diagonal neighbours of a cell depend on
the parity of its row.

Each cell has:
- index, x, y: fixed position
- territory: owning territory id (0 = sea / unassigned)
- frontier: growth-front marker (map generation only)
- candidate: eligible as the seed of a new territory (map generation only)
"""

NONE = -1

# Directions, clockwise from the upper-right edge:
# 0 upper-right, 1 right, 2 lower-right, 3 lower-left, 4 left, 5 upper-left
NUM_DIRECTIONS = 6


def neighbor(index, direction, width, height):
    """
    Index of the cell next to `index` in `direction`, or NONE when the
    step leaves the lattice.
    """
    ox = index % width
    oy = index // width
    f = oy % 2  # odd rows are shifted right

    if direction == 0:
        ax, ay = f, -1
    elif direction == 1:
        ax, ay = 1, 0
    elif direction == 2:
        ax, ay = f, 1
    elif direction == 3:
        ax, ay = f - 1, 1
    elif direction == 4:
        ax, ay = -1, 0
    elif direction == 5:
        ax, ay = f - 1, -1
    else:
        return NONE

    x = ox + ax
    y = oy + ay
    if x < 0 or y < 0 or x >= width or y >= height:
        return NONE
    return y * width + x


class Cell:
    __slots__ = ["index", "x", "y", "territory", "frontier", "candidate"]

    def __init__(self, index, x, y):
        self.index = index
        self.x = x
        self.y = y
        self.territory = 0
        self.frontier = False
        self.candidate = False

    @property
    def pos(self):
        return (self.x, self.y)

    @property
    def is_sea(self):
        return self.territory == 0

    def __repr__(self):
        return f"Cell({self.index} at {self.x},{self.y} territory={self.territory})"


class HexGrid:
    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = []
        for y in range(height):
            for x in range(width):
                self.cells.append(Cell(y * width + x, x, y))

        # Precomputed neighbour table: join[i][d] is the cell in direction d
        self.join = [
            tuple(neighbor(i, d, width, height) for d in range(NUM_DIRECTIONS))
            for i in range(len(self.cells))
        ]

    @property
    def size(self):
        return len(self.cells)

    def index(self, x, y):
        """Flat index of (x, y), or NONE if out of bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return NONE

    def get(self, x, y):
        """Get cell at position, or None if out of bounds."""
        i = self.index(x, y)
        return self.cells[i] if i != NONE else None

    def xy(self, index):
        return index % self.width, index // self.width

    def neighbor(self, index, direction):
        return self.join[index][direction]

    def neighbors(self, index):
        """In-grid neighbour indices of a cell."""
        return [n for n in self.join[index] if n != NONE]

    def territory_cells(self, territory_id):
        return [c.index for c in self.cells if c.territory == territory_id]

    def flood_fill(self, start, territory_id):
        """
        BFS from start, collecting every connected cell of the same
        territory. Returns a list of cell indices.
        """
        if self.cells[start].territory != territory_id:
            return []

        visited = {start}
        queue = [start]
        result = []

        while queue:
            current = queue.pop(0)
            result.append(current)
            for n in self.neighbors(current):
                if n not in visited and self.cells[n].territory == territory_id:
                    visited.add(n)
                    queue.append(n)

        return result

    def clear_flags(self):
        for c in self.cells:
            c.frontier = False
            c.candidate = False

    def __repr__(self):
        land = sum(1 for c in self.cells if not c.is_sea)
        return f"HexGrid({self.width}x{self.height}, {land} land)"
