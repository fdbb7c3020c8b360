"""Move legality and win detection for Klondike."""

from __future__ import annotations

from typing import Sequence

from .cards import Card, Rank
from .deck import DECK_SIZE
from .state import GameState, check_tableau_index


def stacks_on(lower: Card, upper: Card) -> bool:
    """Return True if ``lower`` may sit directly beneath ``upper`` in a tableau run."""
    return lower.color is not upper.color and lower.rank.value == upper.rank.value + 1


def is_valid_run(run: Sequence[Card]) -> bool:
    """Return True if ``run`` is face-up, alternating in color and descending by one."""
    if not run:
        return False
    if any(not card.face_up for card in run):
        return False
    return all(stacks_on(run[i - 1], run[i]) for i in range(1, len(run)))


def can_move_to_foundation(state: GameState, card: Card, foundation_index: int) -> bool:
    pile = state.foundation(foundation_index)
    if not pile:
        return card.rank is Rank.ACE
    top = pile[-1]
    return top.suit is card.suit and top.rank.value + 1 == card.rank.value


def can_move_single_to_tableau(state: GameState, card: Card, column_index: int) -> bool:
    pile = state.column(column_index)
    if not pile:
        return card.rank is Rank.KING
    top = pile[-1]
    if not top.face_up:
        return False
    return stacks_on(top, card)


def can_move_run_to_tableau(
    state: GameState,
    run: Sequence[Card],
    dest_index: int,
    source_index: int,
) -> bool:
    check_tableau_index(source_index)
    check_tableau_index(dest_index)
    if source_index == dest_index:
        return False
    if not is_valid_run(run):
        return False
    return can_move_single_to_tableau(state, run[0], dest_index)


def is_won(state: GameState) -> bool:
    return state.foundation_total() == DECK_SIZE
