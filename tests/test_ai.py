import logging
import random

import pytest

from ai import (
    BaseAI,
    DefaultAI,
    RandomAI,
    StrategyKind,
    create_strategy,
    resolve_kind,
    strategy_names,
)
from ai.default_ai import dice_standings, dominant_player

from conftest import make_board


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def even_stacks_board(leader_dice):
    # p0: 1 (2 dice) next to p1's 2 (2 dice); 4 and 5 are back-line stacks
    layout = {1: (0, 2), 4: (0, leader_dice), 2: (1, 2), 5: (1, 6),
              3: (2, 8), 6: (2, 1)}
    borders = [(1, 2), (1, 4), (2, 5), (3, 6)]
    return make_board(layout, borders, player_count=3)


def test_never_attacks_bigger_stack():
    gs = make_board({1: (0, 3), 2: (1, 4), 3: (1, 2)}, [(1, 2), (1, 3)])
    assert DefaultAI(0).candidate_attacks(gs) == [(1, 3)]


def test_dominant_player_must_be_involved():
    gs = make_board({1: (0, 3), 2: (1, 1), 3: (2, 1), 4: (2, 8), 5: (2, 8)},
                    [(1, 2), (1, 3), (4, 5)], player_count=3)
    totals, _ = dice_standings(gs)
    assert dominant_player(totals) == 2
    assert DefaultAI(0).candidate_attacks(gs) == [(1, 3)]


def test_no_dominant_player():
    assert dominant_player([4, 4, 4]) is None
    assert dominant_player([5, 4, 1]) == 0


def test_equal_stacks_sometimes_skipped():
    gs = even_stacks_board(6)
    gs.rng = FixedRandom(0.95)
    assert DefaultAI(0).candidate_attacks(gs) == []
    gs.rng = FixedRandom(0.5)
    assert DefaultAI(0).candidate_attacks(gs) == [(1, 2)]


def test_equal_stacks_always_attacked_by_leader():
    gs = even_stacks_board(8)
    _, ranks = dice_standings(gs)
    assert ranks[0] == 0
    gs.rng = FixedRandom(0.99)
    assert DefaultAI(0).candidate_attacks(gs) == [(1, 2)]


def test_select_attack_queues_move():
    gs = make_board({1: (0, 3), 2: (1, 2)}, [(1, 2)])
    ai = DefaultAI(0)
    assert ai.select_attack(gs) == 1
    assert gs.pending_attack == (1, 2)


def test_pass_when_nothing_to_attack():
    gs = make_board({1: (0, 1), 2: (1, 5)}, [(1, 2)])
    assert DefaultAI(0).select_attack(gs) == 0
    assert RandomAI(0).select_attack(gs) == 0


def test_example_ai_only_attacks_smaller_stacks():
    gs = make_board({1: (0, 3), 2: (1, 3), 3: (1, 2)}, [(1, 2), (1, 3)])
    ai = RandomAI(0)
    for _ in range(10):
        assert ai.select_attack(gs) == 1
        assert gs.pending_attack == (1, 3)


def test_registry():
    assert strategy_names() == ["default", "example"]
    assert resolve_kind("ai_example") is StrategyKind.EXAMPLE
    assert resolve_kind(" Default ") is StrategyKind.DEFAULT
    assert resolve_kind(None) is StrategyKind.DEFAULT
    assert isinstance(create_strategy("example", 2), RandomAI)
    assert create_strategy("example", 2).player_id == 2


def test_unknown_strategy_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="ai"):
        ai = create_strategy("clever", 4)
    assert isinstance(ai, DefaultAI)
    assert "clever" in caplog.text


class IllegalAI(BaseAI):
    def select_attack(self, game_state):
        return self.queue(game_state, 1, 3)


def test_illegal_choice_ends_turn(caplog):
    gs = make_board({1: (0, 3), 2: (1, 2), 3: (1, 2)}, [(1, 2), (2, 3)])
    gs.strategies[0] = IllegalAI(0)
    with caplog.at_level(logging.WARNING):
        assert gs.run_ai_strategy(0) == 0
    assert "illegal" in caplog.text
    assert len(gs.history) == 0


def test_ai_turn_runs_until_pass():
    gs = make_board({1: (0, 8), 2: (1, 1), 3: (1, 1)}, [(1, 2), (1, 3)])
    gs.start_game()
    gs.current_index = gs.turn_order.index(0)
    assert isinstance(gs.strategies[0], DefaultAI)
    attacks = gs.play_ai_turn()
    assert attacks >= 1
    assert attacks == len(gs.history.attacks())
    if not gs.game_over:
        assert gs.current_player.id == 1
        assert len(gs.history.reinforcements()) >= 1


def test_base_ai_must_be_subclassed():
    gs = make_board({1: (0, 3), 2: (1, 2)}, [(1, 2)])
    with pytest.raises(NotImplementedError):
        BaseAI(0).select_attack(gs)
