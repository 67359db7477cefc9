"""
Player slots.

There are always MAX_PLAYERS slots; only the first `player_count` take part
in a game. A player with no territories is eliminated but keeps its slot.
"""

MAX_PLAYERS = 8


class Player:
    __slots__ = ["id", "area_count", "largest_group", "dice_count",
                 "dice_rank", "stock"]

    def __init__(self, player_id):
        self.id = player_id
        self.reset()

    def reset(self):
        self.area_count = 0      # territories owned
        self.largest_group = 0   # size of largest connected group
        self.dice_count = 0      # dice across all owned territories
        self.dice_rank = 0       # 0 = most dice
        self.stock = 0           # reinforcements waiting to be placed

    @property
    def alive(self):
        return self.area_count > 0

    def __repr__(self):
        status = "alive" if self.alive else "out"
        return (f"Player({self.id}, {status}, areas={self.area_count}, "
                f"group={self.largest_group}, dice={self.dice_count}, "
                f"stock={self.stock})")


def rank_by_dice(players):
    """Set dice_rank on every slot; ties keep slot order."""
    ordered = sorted(players, key=lambda p: -p.dice_count)
    for rank, p in enumerate(ordered):
        p.dice_rank = rank
