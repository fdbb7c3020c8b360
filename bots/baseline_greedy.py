"""Baseline greedy bot."""

from __future__ import annotations

from typing import Optional

from klondike.cards import Rank
from klondike.game import KlondikeGame
from klondike.hints import DrawHint, MoveHint, iter_moves
from klondike.state import GameState, TableauSelection, TableauTarget

from .base import Action, BotStrategy


def _is_pointless(state: GameState, move: MoveHint) -> bool:
    """Tableau shuffles that expose nothing new."""
    source = move.source
    if not isinstance(source, TableauSelection) or not isinstance(move.destination, TableauTarget):
        return False
    pile = state.tableau[source.pile]
    if source.start_index == 0:
        return pile[0].rank is Rank.KING
    return pile[source.start_index - 1].face_up


class GreedyBot(BotStrategy):
    """Follow the hint order, skipping tableau moves that reveal no card."""

    name = "Greedy"

    def choose_action(self, game: KlondikeGame) -> Optional[Action]:
        state = game.state
        for move in iter_moves(state):
            if not _is_pointless(state, move):
                return move
        if state.stock or state.waste:
            return DrawHint()
        return None
