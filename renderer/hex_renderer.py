"""
Map renderer for Dice Wars using pygame-ce.

Pointy-top hexagons with odd rows shifted right (the engine's lattice).
Handles: filling territories in owner colours, territory borders, dice
stacks at each territory's anchor cell, selection highlights, the player
bar and coordinate picking (pixel -> cell).
"""

import math
import pygame
from engine.hex_grid import NONE


# Player colors (8 slots)
PLAYER_COLORS = [
    (178, 151, 255),   # Purple
    (181, 255, 101),   # Lime
    (75, 232, 75),     # Green
    (255, 255, 76),    # Yellow
    (255, 127, 178),   # Pink
    (255, 127, 0),     # Orange
    (76, 200, 255),    # Cyan
    (255, 88, 88),     # Red
]

SEA_COLOR = (20, 40, 80)
BORDER_COLOR = (40, 40, 40)
SELECTED_COLOR = (255, 255, 255, 110)
TARGET_COLOR = (255, 60, 60, 110)
DICE_BG = (245, 245, 245)
DICE_FG = (20, 20, 20)


def player_color(owner):
    if 0 <= owner < len(PLAYER_COLORS):
        return PLAYER_COLORS[owner]
    return (160, 160, 160)


class HexRenderer:
    def __init__(self, hex_size=10, offset_x=20, offset_y=40):
        self.hex_size = hex_size
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.font = None
        self.small_font = None
        self.dice_font = None
        self._hex_points_cache = {}

    def init_fonts(self):
        """Initialize fonts (must be called after pygame.init)."""
        self.font = pygame.font.SysFont("consolas", 14)
        self.small_font = pygame.font.SysFont("consolas", 11)
        self.dice_font = pygame.font.SysFont("consolas", int(self.hex_size * 1.4), bold=True)

    # =========================================================
    # Geometry
    # =========================================================

    def cell_to_pixel(self, x, y):
        """Convert cell (x, y) to pixel center. Pointy-top, odd rows shifted."""
        px = self.hex_size * math.sqrt(3) * (x + 0.5 * (y % 2))
        py = self.hex_size * 1.5 * y
        return px + self.offset_x, py + self.offset_y

    def pixel_to_cell(self, px, py):
        """Convert pixel (x, y) to cell (x, y). Approximate."""
        x = px - self.offset_x
        y = py - self.offset_y
        row = round(y / (self.hex_size * 1.5))
        col = round(x / (self.hex_size * math.sqrt(3)) - 0.5 * (row % 2))
        return int(col), int(row)

    def hex_corners(self, cx, cy):
        """
        The 6 corners of a pointy-top hex, starting at the top and going
        clockwise, so edge d (facing neighbour direction d) runs from
        corner d to corner d+1.
        """
        key = (round(cx, 1), round(cy, 1))
        if key in self._hex_points_cache:
            return self._hex_points_cache[key]
        points = []
        for i in range(6):
            angle = math.radians(60 * i - 90)
            points.append((cx + self.hex_size * math.cos(angle),
                           cy + self.hex_size * math.sin(angle)))
        self._hex_points_cache[key] = points
        return points

    def edge(self, grid, cell_index, direction):
        x, y = grid.xy(cell_index)
        corners = self.hex_corners(*self.cell_to_pixel(x, y))
        return corners[direction], corners[(direction + 1) % 6]

    def get_screen_size(self, grid):
        """Calculate needed screen size for the grid."""
        max_x, max_y = self.cell_to_pixel(grid.width - 1, grid.height - 1)
        max_x += self.hex_size * math.sqrt(3) / 2
        return int(max_x + self.offset_x + self.hex_size), int(max_y + self.hex_size + 70)

    # =========================================================
    # Drawing
    # =========================================================

    def draw_map(self, surface, game_state, selected=None, target=None):
        """Draw every territory, its border and its dice."""
        grid = game_state.grid
        for c in grid.cells:
            if c.territory == 0:
                continue
            t = game_state.territories[c.territory]
            cx, cy = self.cell_to_pixel(c.x, c.y)
            pygame.draw.polygon(surface, player_color(t.owner), self.hex_corners(cx, cy))

        for t in game_state.existing_territories():
            self.draw_border(surface, grid, t)
            if t.id == selected:
                self._highlight(surface, grid, t, SELECTED_COLOR)
            elif t.id == target:
                self._highlight(surface, grid, t, TARGET_COLOR)

        for t in game_state.existing_territories():
            self.draw_dice(surface, grid, t)

    def draw_border(self, surface, grid, territory):
        """Trace the territory outline; fall back to per-cell edges."""
        if territory.boundary:
            for cell_index, direction in territory.boundary:
                p1, p2 = self.edge(grid, cell_index, direction)
                pygame.draw.line(surface, BORDER_COLOR, p1, p2, 2)
            return

        for cell_index in territory.cells:
            for d in range(6):
                n = grid.join[cell_index][d]
                if n == NONE or grid.cells[n].territory != territory.id:
                    p1, p2 = self.edge(grid, cell_index, d)
                    pygame.draw.line(surface, BORDER_COLOR, p1, p2, 2)

    def _highlight(self, surface, grid, territory, color):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for cell_index in territory.cells:
            x, y = grid.xy(cell_index)
            pygame.draw.polygon(overlay, color, self.hex_corners(*self.cell_to_pixel(x, y)))
        surface.blit(overlay, (0, 0))

    def draw_dice(self, surface, grid, territory):
        """Dice count in a small box on the anchor cell."""
        if territory.anchor == NONE or not self.dice_font:
            return
        x, y = grid.xy(territory.anchor)
        cx, cy = self.cell_to_pixel(x, y)
        text = self.dice_font.render(str(territory.dice), True, DICE_FG)
        rect = text.get_rect(center=(cx, cy))
        pygame.draw.rect(surface, DICE_BG, rect.inflate(6, 2))
        pygame.draw.rect(surface, player_color(territory.owner), rect.inflate(6, 2), 2)
        surface.blit(text, rect)

    def draw_ui(self, surface, game_state, screen_width, screen_height, message=""):
        """Top bar with the current player, bottom bar with every player."""
        if not self.font:
            return

        player = game_state.current_player
        color = player_color(player.id)

        bar_rect = pygame.Rect(0, 0, screen_width, 28)
        pygame.draw.rect(surface, (20, 20, 20), bar_rect)
        if game_state.game_over:
            info = f"Game over  |  Winner: player {game_state.winner + 1}" \
                if game_state.winner is not None else "Game over"
        else:
            info = (f"Player {player.id + 1}  |  "
                    f"Turn {game_state.turn_number}  |  "
                    f"Stock: {player.stock}")
        if message:
            info += f"  |  {message}"
        surface.blit(self.font.render(info, True, color), (10, 6))

        bot_rect = pygame.Rect(0, screen_height - 28, screen_width, 28)
        pygame.draw.rect(surface, (20, 20, 20), bot_rect)
        x = 10
        for pid in game_state.turn_order:
            p = game_state.players[pid]
            label = f"P{pid + 1}: {p.largest_group}/{p.area_count}"
            text = self.small_font.render(label, True, player_color(pid))
            if not p.alive:
                text.set_alpha(90)
            surface.blit(text, (x, screen_height - 21))
            x += text.get_width() + 14
