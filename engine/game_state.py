"""
Core game state for Dice Wars.

Owns everything a game instance needs:
- Hex grid, territory table and adjacency graph
- Player slots, turn order and the current-player pointer
- Connectivity cache, turn history and the initial snapshot for replay
- The single random source (seedable through GameConfig.seed)

This is the headless engine: no graphics, no UI. Hosts (the arena, the
pygame viewer, tests) call generate_map, start_game, attack, end_turn and
run_ai_strategy, and read the rest.
"""

import logging
import random

from . import battle, reinforcement
from .adjacency import AdjacencyGraph
from .config import GameConfig
from .connectivity import ConnectivityAnalyzer
from .history import TurnHistory, replay, replay_final
from .map_gen import generate_map
from .player import MAX_PLAYERS, Player, rank_by_dice
from .territory import Territory, existing

LOG = logging.getLogger(__name__)

# Safety limit on attacks in one AI turn
MAX_AI_ATTACKS = 200


class GameState:
    def __init__(self, config=None):
        self.config = (config or GameConfig()).validate()
        self.rng = random.Random(self.config.seed)
        self.grid = None
        self.territories = [Territory(i) for i in range(self.config.max_territories)]
        self.adjacency = AdjacencyGraph()
        self.connectivity = ConnectivityAnalyzer(self.adjacency)
        self.players = [Player(i) for i in range(MAX_PLAYERS)]
        self.turn_order = list(range(self.config.player_count))
        self.current_index = 0
        self.turn_number = 0
        self.history = TurnHistory()
        self.initial_snapshot = {}
        self.strategies = [None] * MAX_PLAYERS
        self.pending_attack = None   # (from_id, to_id) set by a strategy
        self.last_attack = None      # AttackResult of the latest AI attack
        self.game_over = False
        self.winner = None

    @property
    def current_player(self):
        return self.players[self.turn_order[self.current_index]]

    @property
    def active_players(self):
        return self.players[:self.config.player_count]

    @property
    def num_alive(self):
        return sum(1 for p in self.active_players if p.alive)

    def existing_territories(self):
        return list(existing(self.territories))

    def get_player_territories(self, player_id):
        """All territories belonging to a player."""
        return [t for t in existing(self.territories) if t.owner == player_id]

    def is_active_slot(self, player_id):
        """True for a player id that takes part in this game."""
        return isinstance(player_id, int) and 0 <= player_id < self.config.player_count

    def is_human(self, player_id):
        return (self.config.human_player is not None
                and player_id == self.config.human_player)

    # =========================================================
    # Map Setup
    # =========================================================

    def generate_map(self):
        """Generate a fresh random map, dealt and seeded with dice."""
        generated = generate_map(self.config, self.rng)
        self.grid = generated.grid
        self.territories = generated.territories
        self.adjacency = generated.adjacency
        self.connectivity = ConnectivityAnalyzer(self.adjacency)
        self.refresh_players()
        return generated

    def load_layout(self, layout, borders, sizes=None):
        """
        Load a hand-made board without a cell grid.

        layout: {territory_id: (owner, dice)}
        borders: iterable of (a, b) adjacent pairs
        sizes: optional {territory_id: cell count}, default 6
        """
        needed = max(layout) + 1 if layout else 1
        capacity = max(self.config.max_territories, needed)
        self.territories = [Territory(i) for i in range(capacity)]
        self.adjacency = AdjacencyGraph()
        for tid, (owner, dice) in layout.items():
            size = sizes.get(tid, 6) if sizes else 6
            t = self.territories[tid]
            t.size = size
            t.owner = owner
            t.dice = dice
            self.adjacency.add_territory(tid)
        for a, b in borders:
            self.adjacency.connect(a, b)
        self.connectivity = ConnectivityAnalyzer(self.adjacency)
        self.refresh_players()

    # =========================================================
    # Game start
    # =========================================================

    def start_game(self):
        """
        Shuffle the turn order, reset player stats, clear the history,
        snapshot the board for replay and assign AI strategies.
        """
        self.turn_order = list(range(self.config.player_count))
        self.rng.shuffle(self.turn_order)
        self.current_index = 0
        self.turn_number = 0
        self.game_over = False
        self.winner = None
        self.pending_attack = None
        self.last_attack = None

        for p in self.players:
            p.reset()
        self.connectivity.invalidate()
        self.refresh_players()

        self.history.clear()
        self.initial_snapshot = self.snapshot()
        self.assign_strategies()

        if not self.current_player.alive:
            self.next_player()
        self._check_victory()

        LOG.info("Game started: %d players, %d territories, order %s",
                 self.config.player_count, len(self.initial_snapshot),
                 self.turn_order)

    def assign_strategies(self):
        """Create the configured strategy for every active slot."""
        from ai import create_strategy

        for pid in range(self.config.player_count):
            name = self.config.ai_assignments[pid]
            self.strategies[pid] = create_strategy(name, pid)

    # =========================================================
    # Ownership and player stats
    # =========================================================

    def set_owner(self, territory_id, new_owner):
        """
        Hand a territory to a new owner. The only place ownership changes:
        connectivity for both players is invalidated and recomputed here.
        """
        t = self.territories[territory_id]
        old_owner = t.owner
        t.owner = new_owner
        self.connectivity.invalidate(old_owner, new_owner)
        self.update_player_data(old_owner)
        self.update_player_data(new_owner)

        if 0 <= old_owner < MAX_PLAYERS and not self.players[old_owner].alive:
            LOG.info("Player %d eliminated by player %d", old_owner, new_owner)
        self._check_victory()

    def update_player_data(self, player_id):
        """Recount a player's territories, dice and largest group."""
        if not 0 <= player_id < MAX_PLAYERS:
            return
        p = self.players[player_id]
        owned = self.get_player_territories(player_id)
        p.area_count = len(owned)
        p.dice_count = sum(t.dice for t in owned)
        p.largest_group = self.connectivity.largest_group_size(
            self.territories, player_id)
        rank_by_dice(self.players)

    def refresh_players(self):
        for pid in range(MAX_PLAYERS):
            self.update_player_data(pid)

    # =========================================================
    # Turn actions
    # =========================================================

    def attack(self, from_id, to_id, player_id=None):
        """Attack from one territory into an adjacent one. See engine.battle."""
        if self.game_over:
            return battle.AttackResult(False, from_id, to_id, battle.NO_ROLL,
                                       battle.NO_ROLL, "the game is over")
        return battle.attack(self, from_id, to_id, player_id)

    def distribute_reinforcements(self, player_id):
        """Add income to the player's stock and place it. See engine.reinforcement."""
        return reinforcement.distribute(self, player_id)

    def run_ai_strategy(self, player_id):
        """
        Let the player's strategy pick one attack and carry it out.
        Returns 0 when the strategy ends the turn, nonzero after an attack
        (its result is in last_attack).
        """
        if not self.is_active_slot(player_id):
            LOG.warning("run_ai_strategy: no active player %r, ending turn",
                        player_id)
            return 0

        strategy = self.strategies[player_id]
        if strategy is None:
            from ai import create_strategy
            LOG.warning("No strategy assigned to player %d, using default",
                        player_id)
            strategy = self.strategies[player_id] = create_strategy(None, player_id)

        self.pending_attack = None
        signal = strategy.select_attack(self)
        if not signal or self.pending_attack is None:
            return 0

        from_id, to_id = self.pending_attack
        self.last_attack = self.attack(from_id, to_id, player_id=player_id)
        if not self.last_attack.reason:
            return signal

        LOG.warning("Strategy for player %d chose an illegal attack %d -> %d "
                    "(%s), ending turn", player_id, from_id, to_id,
                    self.last_attack.reason)
        return 0

    def play_ai_turn(self, max_attacks=MAX_AI_ATTACKS):
        """Run the current player's strategy to the end of its turn, then end it."""
        pid = self.current_player.id
        attacks = 0
        while attacks < max_attacks and not self.game_over:
            if not self.run_ai_strategy(pid):
                break
            attacks += 1
        self.end_turn()
        return attacks

    def end_turn(self):
        """Reinforce the current player and pass the turn on."""
        if self.game_over:
            return
        self.distribute_reinforcements(self.current_player.id)
        self.next_player()

    def next_player(self):
        """Advance to the next player who still holds territory."""
        for _ in range(len(self.turn_order)):
            self.current_index = (self.current_index + 1) % len(self.turn_order)
            if self.current_index == 0:
                self.turn_number += 1
            if self.current_player.alive:
                break
        return self.current_player.id

    def _check_victory(self):
        """The game ends when one player is left holding territory."""
        if self.game_over:
            return
        alive = [p for p in self.active_players if p.alive]
        if len(alive) <= 1:
            self.game_over = True
            self.winner = alive[0].id if alive else None
            LOG.info("Game over, winner: %s", self.winner)

    # =========================================================
    # State Queries
    # =========================================================

    def snapshot(self):
        """{territory id: (owner, dice)} for every existing territory."""
        return {t.id: (t.owner, t.dice) for t in existing(self.territories)}

    def replay(self):
        """Iterate (record, owners, dice) from the start of the game."""
        return replay(self.initial_snapshot, self.history)

    def replay_final(self):
        return replay_final(self.initial_snapshot, self.history)

    def get_state_summary(self):
        """Return a dict summary of the game state for AI/logging."""
        return {
            "turn": self.turn_number,
            "current_player": self.current_player.id,
            "game_over": self.game_over,
            "winner": self.winner,
            "history_length": len(self.history),
            "players": [
                {
                    "id": p.id,
                    "alive": p.alive,
                    "territories": p.area_count,
                    "largest_group": p.largest_group,
                    "dice": p.dice_count,
                    "dice_rank": p.dice_rank,
                    "stock": p.stock,
                }
                for p in self.active_players
            ],
        }

    def clone(self):
        """Deep copy of the game state, for what-if evaluation."""
        import copy
        return copy.deepcopy(self)
