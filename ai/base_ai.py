"""
Strategy interface for computer players.

A strategy looks at the board and either queues one attack on the game
state (game_state.pending_attack = (from_id, to_id)) and returns 1, or
returns 0 to end its turn. Strategies only read the board; every change
goes through GameState.attack so history and connectivity stay right.
"""


class BaseAI:
    name = "base"

    def __init__(self, player_id):
        self.player_id = player_id

    def select_attack(self, game_state):
        raise NotImplementedError(
            f"{self.__class__.__name__} has not overridden select_attack()"
        )

    def queue(self, game_state, from_id, to_id):
        game_state.pending_attack = (from_id, to_id)
        return 1

    # Shared helpers
    # -----------------------------------

    def legal_attacks(self, game_state):
        """
        Every (source, target) this player could attack right now: own
        source with more than one die, adjacent target of another owner.
        """
        territories = game_state.territories
        moves = []
        for src in territories:
            if src.size == 0 or src.owner != self.player_id or src.dice <= 1:
                continue
            for to_id in game_state.adjacency.neighbors(src.id):
                dst = territories[to_id]
                if dst.size == 0 or dst.owner == self.player_id:
                    continue
                moves.append((src, dst))
        return moves

    def __repr__(self):
        return f"{self.__class__.__name__}(player={self.player_id})"
