"""
Game configuration.

The engine only consumes these settings; loading and saving them is the
host's business. Bad values never stop a game: validate() clamps them to a
playable range and logs a warning for each fix.
"""

import logging

from .player import MAX_PLAYERS

LOG = logging.getLogger(__name__)

MIN_GRID_SIDE = 4

INT_FIELDS = ("player_count", "avg_dice", "max_dice", "stock_max", "width",
              "height", "max_territories", "territory_size")

DEFAULT_AI_ASSIGNMENTS = [
    "default",   # Player 0 (human by default, AI in spectator mode)
    "example",
    "default",
    "default",
    "default",
    "default",
    "default",
    "default",
]


class GameConfig:
    FIELDS = (
        "player_count", "human_player", "avg_dice", "max_dice", "stock_max",
        "width", "height", "max_territories", "territory_size",
        "size_variance", "ai_assignments", "seed",
    )

    def __init__(self, player_count=7, human_player=0, avg_dice=3,
                 max_dice=8, stock_max=64, width=28, height=32,
                 max_territories=32, territory_size=8, size_variance=0.2,
                 ai_assignments=None, seed=None):
        self.player_count = player_count
        self.human_player = human_player   # None = spectator mode
        self.avg_dice = avg_dice           # average dice per territory at start
        self.max_dice = max_dice           # per-territory cap
        self.stock_max = stock_max         # reinforcement stock cap
        self.width = width
        self.height = height
        self.max_territories = max_territories  # ids run 1..max_territories-1
        self.territory_size = territory_size    # target cells per territory
        self.size_variance = size_variance
        if ai_assignments is None:
            ai_assignments = list(DEFAULT_AI_ASSIGNMENTS)
        self.ai_assignments = list(ai_assignments)
        self.seed = seed

    @classmethod
    def from_dict(cls, data):
        """Build a config from a plain mapping; unknown keys are ignored."""
        kwargs = {}
        for key, value in data.items():
            if key in cls.FIELDS:
                kwargs[key] = value
            else:
                LOG.warning("Unknown config key %r ignored", key)
        return cls(**kwargs).validate()

    def to_dict(self):
        return {name: getattr(self, name) for name in self.FIELDS}

    def _coerce(self, name, kind):
        """Convert a setting to `kind`, falling back to its default."""
        value = getattr(self, name)
        try:
            fixed = kind(value)
        except (TypeError, ValueError, OverflowError):
            fixed = getattr(GameConfig(), name)
            LOG.warning("%s %r is not a number, using %s", name, value, fixed)
        else:
            if fixed != value or type(value) is not kind:
                LOG.warning("%s %r converted to %s", name, value, fixed)
        setattr(self, name, fixed)

    def _clamp(self, name, low, high=None):
        value = getattr(self, name)
        fixed = max(value, low)
        if high is not None:
            fixed = min(fixed, high)
        if fixed != value:
            LOG.warning("%s %s out of range, using %s", name, value, fixed)
            setattr(self, name, fixed)

    def validate(self):
        """Coerce and clamp every setting into range. Returns self."""
        for name in INT_FIELDS:
            self._coerce(name, int)
        self._coerce("size_variance", float)

        self._clamp("player_count", 2, MAX_PLAYERS)

        if self.human_player is not None:
            try:
                human = int(self.human_player)
            except (TypeError, ValueError):
                human = -1
            if not 0 <= human < self.player_count:
                LOG.warning("human_player %r is not an active slot, "
                            "running in spectator mode", self.human_player)
                human = None
            self.human_player = human

        self._clamp("max_dice", 1, 8)
        self._clamp("avg_dice", 1, self.max_dice)
        self._clamp("stock_max", 0)
        # id 0 is reserved for the sea
        self._clamp("max_territories", 2)
        self._clamp("width", MIN_GRID_SIDE)
        self._clamp("height", MIN_GRID_SIDE)
        self._clamp("territory_size", 1)
        self._clamp("size_variance", 0.0, 1.0)

        if len(self.ai_assignments) < MAX_PLAYERS:
            missing = MAX_PLAYERS - len(self.ai_assignments)
            self.ai_assignments = self.ai_assignments + ["default"] * missing

        return self

    @property
    def spectator(self):
        return self.human_player is None

    def __repr__(self):
        return (f"GameConfig(players={self.player_count}, "
                f"human={self.human_player}, map={self.width}x{self.height}, "
                f"territories<{self.max_territories}, dice={self.avg_dice}/"
                f"{self.max_dice})")
