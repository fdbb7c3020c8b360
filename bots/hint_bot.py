"""Bot that always plays the engine's own hint."""

from __future__ import annotations

from typing import Optional

from klondike.game import KlondikeGame
from klondike.hints import find_hint

from .base import Action, BotStrategy


class HintBot(BotStrategy):
    name = "Hint"

    def choose_action(self, game: KlondikeGame) -> Optional[Action]:
        return find_hint(game.state)
