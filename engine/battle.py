"""
Dice battles.

Both sides roll all their dice; the attacker wins only on a strictly higher
total. A failed request (not adjacent, lone die, own territory...) is a
normal outcome: it comes back as an AttackResult with success=False and a
reason, and leaves the board and the history untouched.
"""

import logging
from collections import namedtuple

LOG = logging.getLogger(__name__)

DIE_SIDES = 6

DiceRoll = namedtuple("DiceRoll", ["values", "total"])

AttackResult = namedtuple(
    "AttackResult",
    ["success", "from_id", "to_id", "attacker_roll", "defender_roll", "reason"],
)

NO_ROLL = DiceRoll((), 0)


def roll_dice(rng, count):
    """Roll `count` six-sided dice."""
    if count <= 0:
        return NO_ROLL
    values = tuple(rng.randint(1, DIE_SIDES) for _ in range(count))
    return DiceRoll(values, sum(values))


def _rejected(from_id, to_id, reason):
    LOG.debug("Attack %s -> %s rejected: %s", from_id, to_id, reason)
    return AttackResult(False, from_id, to_id, NO_ROLL, NO_ROLL, reason)


def check_attack(game_state, from_id, to_id, player_id=None):
    """Return None if the attack is legal, otherwise the reason it is not."""
    territories = game_state.territories
    if not 0 < from_id < len(territories) or territories[from_id].size == 0:
        return f"territory {from_id} does not exist"
    if not 0 < to_id < len(territories) or territories[to_id].size == 0:
        return f"territory {to_id} does not exist"
    if from_id == to_id:
        return "a territory cannot attack itself"

    src = territories[from_id]
    dst = territories[to_id]
    if player_id is not None and src.owner != player_id:
        return f"territory {from_id} is not owned by player {player_id}"
    if src.owner == dst.owner:
        return "cannot attack a territory of the same owner"
    if not game_state.adjacency.are_adjacent(from_id, to_id):
        return f"territories {from_id} and {to_id} are not adjacent"
    if src.dice <= 1:
        return "a single die cannot attack"
    return None


def attack(game_state, from_id, to_id, player_id=None):
    """
    Resolve an attack from `from_id` on `to_id` and apply the outcome.

    Win: the defender changes hands and gets attacker dice - 1.
    Either way the attacker is left with 1 die.
    """
    reason = check_attack(game_state, from_id, to_id, player_id)
    if reason is not None:
        return _rejected(from_id, to_id, reason)

    src = game_state.territories[from_id]
    dst = game_state.territories[to_id]
    rng = game_state.rng

    attacker_roll = roll_dice(rng, src.dice)
    defender_roll = roll_dice(rng, dst.dice)
    success = attacker_roll.total > defender_roll.total

    game_state.history.record_attack(
        from_id, to_id, success, attacker_roll.values, defender_roll.values)

    attacker = src.owner
    defender = dst.owner
    if success:
        dst.dice = src.dice - 1
        src.dice = 1
        game_state.set_owner(to_id, attacker)
        LOG.debug("Player %d took %d from player %d (%d vs %d)",
                  attacker, to_id, defender,
                  attacker_roll.total, defender_roll.total)
    else:
        src.dice = 1
        game_state.update_player_data(attacker)
        LOG.debug("Player %d failed %d -> %d (%d vs %d)",
                  attacker, from_id, to_id,
                  attacker_roll.total, defender_roll.total)

    return AttackResult(success, from_id, to_id, attacker_roll, defender_roll, "")
