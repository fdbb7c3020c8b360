"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Optional, Union

from klondike.game import KlondikeGame
from klondike.hints import DrawHint, MoveHint

Action = Union[MoveHint, DrawHint]


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_game_start(self, game: KlondikeGame) -> None:
        """Optional hook invoked after each deal."""
        return None

    def choose_action(self, game: KlondikeGame) -> Optional[Action]:
        """Return the next move or draw, or None to give up on the deal."""
        return None


def apply_action(game: KlondikeGame, action: Action) -> None:
    """Replay an action through the same calls a UI would make."""
    if isinstance(action, DrawHint):
        game.draw_from_stock()
        return
    game.select_card(action.source)
    game.activate_pile(action.destination)
