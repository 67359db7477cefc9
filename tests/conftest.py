import random

import pytest

from engine import GameConfig, GameState


class ScriptedRandom(random.Random):
    """Random source whose randint() returns queued values in order."""

    def __init__(self, rolls, seed=0):
        super().__init__(seed)
        self.rolls = list(rolls)

    def randint(self, a, b):
        value = self.rolls.pop(0)
        assert a <= value <= b
        return value


def make_board(layout, borders, player_count=2, **config):
    """GameState on a hand-made board: layout is {tid: (owner, dice)}."""
    gs = GameState(GameConfig(player_count=player_count, human_player=None,
                              seed=config.pop("seed", 1), **config))
    gs.load_layout(layout, borders)
    return gs


@pytest.fixture
def line_board():
    # 1 - 2 - 3 - 4 - 5 - 6 - 7, player 1 owns only 5
    layout = {1: (0, 1), 2: (0, 1), 3: (0, 1), 4: (0, 1),
              5: (1, 1), 6: (0, 1), 7: (0, 1)}
    borders = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7)]
    return make_board(layout, borders)


@pytest.fixture
def seeded_game():
    gs = GameState(GameConfig(player_count=4, human_player=None, seed=7))
    gs.generate_map()
    gs.start_game()
    return gs
