"""Random baseline bot."""

from __future__ import annotations

import random
from typing import List, Optional

from klondike.game import KlondikeGame
from klondike.hints import DrawHint, iter_moves

from .base import Action, BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_action(self, game: KlondikeGame) -> Optional[Action]:
        state = game.state
        options: List[Action] = list(iter_moves(state))
        if state.stock or state.waste:
            options.append(DrawHint())
        if not options:
            return None
        return self._rng.choice(options)
