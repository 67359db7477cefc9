"""
Reference AI for Dice Wars (the classic gamedesign.jp computer player).

1. Count dice per player and rank players by dice
2. If one player holds more than 40% of all dice, only fight that player
3. Never attack a bigger stack; on equal stacks attack 90% of the time,
   always if either side is the dice leader
4. Pick uniformly at random among what is left
"""

from .base_ai import BaseAI

DOMINANCE_SHARE = 0.4
EQUAL_DICE_ATTACK_CHANCE = 0.9


def dice_standings(game_state):
    """
    Dice totals and ranks (0 = most dice) for all player slots, computed
    from the board without touching player records.
    """
    totals = [0] * len(game_state.players)
    for t in game_state.territories:
        if t.size > 0 and 0 <= t.owner < len(totals):
            totals[t.owner] += t.dice

    ranks = [0] * len(totals)
    ordered = sorted(range(len(totals)), key=lambda pid: -totals[pid])
    for rank, pid in enumerate(ordered):
        ranks[pid] = rank
    return totals, ranks


def dominant_player(totals):
    """First player holding more than 40% of the dice, or None."""
    threshold = sum(totals) * DOMINANCE_SHARE
    for pid, dice in enumerate(totals):
        if dice > threshold:
            return pid
    return None


class DefaultAI(BaseAI):
    name = "default"

    def candidate_attacks(self, game_state):
        """Attacks that pass the dominance, dice and tie-break rules."""
        totals, ranks = dice_standings(game_state)
        dominant = dominant_player(totals)
        rng = game_state.rng

        candidates = []
        for src, dst in self.legal_attacks(game_state):
            if dominant is not None and dominant not in (src.owner, dst.owner):
                continue
            if dst.dice > src.dice:
                continue
            if dst.dice == src.dice:
                leader_involved = ranks[src.owner] == 0 or ranks[dst.owner] == 0
                if not leader_involved and rng.random() >= EQUAL_DICE_ATTACK_CHANCE:
                    continue
            candidates.append((src.id, dst.id))
        return candidates

    def select_attack(self, game_state):
        candidates = self.candidate_attacks(game_state)
        if not candidates:
            return 0
        from_id, to_id = game_state.rng.choice(candidates)
        return self.queue(game_state, from_id, to_id)
