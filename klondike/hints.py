"""Deterministic hint search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .deck import FOUNDATION_COUNT, TABLEAU_COLUMNS
from .rules import can_move_run_to_tableau, can_move_single_to_tableau, can_move_to_foundation
from .state import (
    FoundationTarget,
    GameState,
    TableauSelection,
    TableauTarget,
    Target,
    WasteSelection,
)


@dataclass(frozen=True)
class MoveHint:
    source: Union[WasteSelection, TableauSelection]
    destination: Target


@dataclass(frozen=True)
class DrawHint:
    """Nothing to move; turn over the next stock card (or recycle the waste)."""


@dataclass(frozen=True)
class NoHintAvailable:
    message: str = "No moves available."


Hint = Union[MoveHint, DrawHint]


def iter_moves(state: GameState) -> Iterator[MoveHint]:
    """Yield every legal move, highest priority first.

    Order: waste to foundation, waste to tableau, tableau top to foundation,
    then tableau runs to other columns scanning columns and start indices
    ascending.
    """
    waste_top = state.waste_top()
    if waste_top is not None:
        for f in range(FOUNDATION_COUNT):
            if can_move_to_foundation(state, waste_top, f):
                yield MoveHint(WasteSelection(), FoundationTarget(f))
        for t in range(TABLEAU_COLUMNS):
            if can_move_single_to_tableau(state, waste_top, t):
                yield MoveHint(WasteSelection(), TableauTarget(t))

    for p, pile in enumerate(state.tableau):
        if not pile or not pile[-1].face_up:
            continue
        for f in range(FOUNDATION_COUNT):
            if can_move_to_foundation(state, pile[-1], f):
                yield MoveHint(TableauSelection(p, len(pile) - 1), FoundationTarget(f))

    for p, pile in enumerate(state.tableau):
        for i, card in enumerate(pile):
            if not card.face_up:
                continue
            run = pile[i:]
            for t in range(TABLEAU_COLUMNS):
                if t == p:
                    continue
                if can_move_run_to_tableau(state, run, t, p):
                    yield MoveHint(TableauSelection(p, i), TableauTarget(t))


def find_hint(state: GameState) -> Optional[Hint]:
    move = next(iter_moves(state), None)
    if move is not None:
        return move
    if state.stock or state.waste:
        return DrawHint()
    return None


def describe_hint(hint: Hint) -> str:
    if isinstance(hint, DrawHint):
        return "Draw from the stock."
    source = hint.source
    if isinstance(source, WasteSelection):
        origin = "waste"
    else:
        origin = f"tableau {source.pile} (card {source.start_index})"
    destination = hint.destination
    if isinstance(destination, FoundationTarget):
        target = f"foundation {destination.index}"
    else:
        target = f"tableau {destination.index}"
    return f"Move {origin} to {target}."
