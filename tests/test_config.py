import logging

from engine import GameConfig, GameState
from engine.config import MIN_GRID_SIDE


def test_defaults():
    config = GameConfig().validate()
    assert config.player_count == 7
    assert config.human_player == 0
    assert (config.width, config.height) == (28, 32)
    assert config.max_territories == 32
    assert len(config.ai_assignments) == 8
    assert not config.spectator


def test_out_of_range_values_are_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        config = GameConfig(player_count=12, max_dice=20, avg_dice=30,
                            stock_max=-4, max_territories=1).validate()
    assert config.player_count == 8
    assert config.max_dice == 8
    assert config.avg_dice == 8
    assert config.stock_max == 0
    assert config.max_territories == 2
    assert "player_count" in caplog.text


def test_human_outside_active_slots_means_spectator():
    config = GameConfig(player_count=3, human_player=5).validate()
    assert config.human_player is None
    assert config.spectator


def test_short_assignment_list_is_padded():
    config = GameConfig(ai_assignments=["example"]).validate()
    assert config.ai_assignments == ["example"] + ["default"] * 7


def test_from_dict_ignores_unknown_keys(caplog):
    with caplog.at_level(logging.WARNING):
        config = GameConfig.from_dict({"player_count": 1, "colour": "blue"})
    assert config.player_count == 2
    assert "colour" in caplog.text
    assert GameConfig.from_dict(config.to_dict()).to_dict() == config.to_dict()


def test_map_dimensions_are_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        config = GameConfig(width=0, height=-3, territory_size=0,
                            size_variance=5).validate()
    assert (config.width, config.height) == (MIN_GRID_SIDE, MIN_GRID_SIDE)
    assert config.territory_size == 1
    assert config.size_variance == 1.0
    assert "width" in caplog.text


def test_fractional_and_text_values_are_coerced():
    config = GameConfig(avg_dice=2.5, max_dice="6", width="20",
                        stock_max="lots", human_player="1").validate()
    assert config.avg_dice == 2
    assert config.max_dice == 6
    assert config.width == 20
    assert config.stock_max == 64
    assert config.human_player == 1
    assert isinstance(config.avg_dice, int)


def test_bad_human_value_means_spectator():
    assert GameConfig(human_player="nobody").validate().spectator


def test_bad_values_still_generate_a_map():
    gs = GameState(GameConfig(width=0, height=2, avg_dice=2.5,
                              player_count=2, human_player=None, seed=4))
    gs.generate_map()
    gs.start_game()
    assert gs.grid.width == MIN_GRID_SIDE
    for t in gs.existing_territories():
        assert 1 <= t.dice <= gs.config.max_dice
