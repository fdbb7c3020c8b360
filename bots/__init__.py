"""Bot strategies for Klondike."""

from .baseline_greedy import GreedyBot
from .hint_bot import HintBot
from .random_bot import RandomBot

__all__ = ["GreedyBot", "HintBot", "RandomBot"]
