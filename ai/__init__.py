"""
AI strategy registry.

Every player slot is configured with a strategy name. Lookups never fail:
an unknown name gets the reference strategy and a warning, so a bad config
cannot stop a game.
"""

import logging
from enum import Enum

from .base_ai import BaseAI
from .default_ai import DefaultAI
from .random_ai import RandomAI

LOG = logging.getLogger(__name__)


class StrategyKind(Enum):
    DEFAULT = "default"
    EXAMPLE = "example"


STRATEGIES = {
    StrategyKind.DEFAULT: DefaultAI,
    StrategyKind.EXAMPLE: RandomAI,
}

# Names used by older configs
ALIASES = {
    "ai_default": StrategyKind.DEFAULT,
    "ai_example": StrategyKind.EXAMPLE,
    "random": StrategyKind.EXAMPLE,
}


def resolve_kind(name):
    """Map a strategy name (or StrategyKind) to a StrategyKind."""
    if isinstance(name, StrategyKind):
        return name
    if name is None:
        return StrategyKind.DEFAULT
    key = str(name).strip().lower()
    if key in ALIASES:
        return ALIASES[key]
    for kind in StrategyKind:
        if kind.value == key:
            return kind
    LOG.warning("Unknown AI strategy %r, using %s", name, StrategyKind.DEFAULT.value)
    return StrategyKind.DEFAULT


def create_strategy(name, player_id):
    """Instantiate the strategy registered under `name` for a player."""
    return STRATEGIES[resolve_kind(name)](player_id)


def strategy_names():
    return [kind.value for kind in StrategyKind]


__all__ = [
    "BaseAI", "DefaultAI", "RandomAI", "StrategyKind", "STRATEGIES",
    "resolve_kind", "create_strategy", "strategy_names",
]
