from .hex_renderer import HexRenderer, PLAYER_COLORS, player_color
