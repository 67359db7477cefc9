from .hex_grid import HexGrid, Cell, NONE, neighbor
from .territory import Territory
from .adjacency import AdjacencyGraph
from .connectivity import ConnectivityAnalyzer
from .player import Player, MAX_PLAYERS
from .config import GameConfig
from .history import TurnHistory, TurnRecord
from .battle import AttackResult, DiceRoll
from .reinforcement import ReinforcementResult
from .game_state import GameState
