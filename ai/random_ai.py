"""
Example AI for Dice Wars.

Attacks a random neighbour it outnumbers, and stops once it outnumbers
nobody. Useful as:
- Opponent for manual testing
- Baseline for comparing the reference AI
- Smoke test for the strategy interface
"""

from .base_ai import BaseAI


class RandomAI(BaseAI):
    name = "example"

    def select_attack(self, game_state):
        moves = [(src.id, dst.id) for src, dst in self.legal_attacks(game_state)
                 if src.dice > dst.dice]
        if not moves:
            return 0
        from_id, to_id = game_state.rng.choice(moves)
        return self.queue(game_state, from_id, to_id)
