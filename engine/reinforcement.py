"""
End-of-turn reinforcements.

Income is a third of the player's largest connected group (at least one
die while they hold any territory), added to a capped stock. The stock is
then spent one die at a time on the most urgent territory: front-line
territories first, emptier territories before fuller ones.
"""

import logging
from collections import namedtuple

LOG = logging.getLogger(__name__)

BORDER_PRIORITY = 100
MISSING_DIE_PRIORITY = 10

ReinforcementResult = namedtuple("ReinforcementResult", ["added", "placed", "stock"])


def reinforcement_income(largest_group, area_count):
    income = largest_group // 3
    if area_count > 0 and income == 0:
        income = 1
    return income


def borders_enemy(game_state, territory):
    territories = game_state.territories
    for n in game_state.adjacency.neighbors(territory.id):
        other = territories[n]
        if other.size > 0 and other.owner != territory.owner:
            return True
    return False


def priority(game_state, territory):
    """Higher is more urgent."""
    cap = game_state.config.max_dice
    score = (cap - territory.dice) * MISSING_DIE_PRIORITY
    if borders_enemy(game_state, territory):
        score += BORDER_PRIORITY
    return score


def distribute(game_state, player_id):
    """
    Add this turn's income to the player's stock and place as much of it
    as the dice cap allows. Every die placed is logged in the history.
    """
    if not game_state.is_active_slot(player_id):
        LOG.warning("No active player %r to reinforce", player_id)
        return ReinforcementResult(0, [], 0)

    player = game_state.players[player_id]
    game_state.update_player_data(player_id)

    added = reinforcement_income(player.largest_group, player.area_count)
    player.stock = min(player.stock + added, game_state.config.stock_max)

    cap = game_state.config.max_dice
    placed = []
    while player.stock > 0:
        candidates = [t for t in game_state.territories
                      if t.size > 0 and t.owner == player_id and t.dice < cap]
        if not candidates:
            break
        # max() keeps the first of equal scores, i.e. the lowest id
        best = max(candidates, key=lambda t: priority(game_state, t))
        best.dice += 1
        player.stock -= 1
        placed.append(best.id)
        game_state.history.record_reinforcement(best.id)

    game_state.update_player_data(player_id)
    LOG.debug("Player %d reinforced: +%d income, %d placed, %d in stock",
              player_id, added, len(placed), player.stock)
    return ReinforcementResult(added, placed, player.stock)
