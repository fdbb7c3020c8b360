"""Pile state, selections and snapshots for a Klondike deal."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .cards import Card
from .deck import FOUNDATION_COUNT, TABLEAU_COLUMNS


class InvalidPileIndex(IndexError):
    """Raised when a caller names a foundation or tableau pile that does not exist."""


@dataclass(frozen=True)
class WasteSelection:
    """The waste's top card."""


@dataclass(frozen=True)
class TableauSelection:
    """The run from ``start_index`` to the end of tableau column ``pile``."""

    pile: int
    start_index: int


Selection = Optional[Union[WasteSelection, TableauSelection]]


@dataclass(frozen=True)
class FoundationTarget:
    index: int


@dataclass(frozen=True)
class TableauTarget:
    index: int


Target = Union[FoundationTarget, TableauTarget]


def check_foundation_index(index: int) -> int:
    if not 0 <= index < FOUNDATION_COUNT:
        raise InvalidPileIndex(f"Foundation index {index} outside 0..{FOUNDATION_COUNT - 1}.")
    return index


def check_tableau_index(index: int) -> int:
    if not 0 <= index < TABLEAU_COLUMNS:
        raise InvalidPileIndex(f"Tableau index {index} outside 0..{TABLEAU_COLUMNS - 1}.")
    return index


@dataclass(frozen=True)
class PileSnapshot:
    """Deep copy of the four pile groups at one point in time."""

    stock: Tuple[Card, ...]
    waste: Tuple[Card, ...]
    foundations: Tuple[Tuple[Card, ...], ...]
    tableau: Tuple[Tuple[Card, ...], ...]


@dataclass(frozen=True)
class GameStateView:
    """Read-only copy of the table handed to collaborators."""

    stock: Tuple[Card, ...]
    waste: Tuple[Card, ...]
    foundations: Tuple[Tuple[Card, ...], ...]
    tableau: Tuple[Tuple[Card, ...], ...]
    selection: Selection
    won: bool

    @property
    def waste_top(self) -> Optional[Card]:
        return self.waste[-1] if self.waste else None


@dataclass
class GameState:
    stock: List[Card] = field(default_factory=list)
    waste: List[Card] = field(default_factory=list)
    foundations: List[List[Card]] = field(default_factory=lambda: [[] for _ in range(FOUNDATION_COUNT)])
    tableau: List[List[Card]] = field(default_factory=lambda: [[] for _ in range(TABLEAU_COLUMNS)])
    selection: Selection = None
    won: bool = False

    def __post_init__(self) -> None:
        if len(self.foundations) != FOUNDATION_COUNT:
            raise ValueError(f"GameState needs exactly {FOUNDATION_COUNT} foundations.")
        if len(self.tableau) != TABLEAU_COLUMNS:
            raise ValueError(f"GameState needs exactly {TABLEAU_COLUMNS} tableau columns.")
        self.stock = list(self.stock)
        self.waste = list(self.waste)
        self.foundations = [list(pile) for pile in self.foundations]
        self.tableau = [list(pile) for pile in self.tableau]

    def foundation(self, index: int) -> List[Card]:
        return self.foundations[check_foundation_index(index)]

    def column(self, index: int) -> List[Card]:
        return self.tableau[check_tableau_index(index)]

    def waste_top(self) -> Optional[Card]:
        return self.waste[-1] if self.waste else None

    def foundation_total(self) -> int:
        return sum(len(pile) for pile in self.foundations)

    def flip_exposed_cards(self) -> List[Card]:
        """Turn every face-down top card of the tableau face-up."""
        flipped = []
        for pile in self.tableau:
            if pile and not pile[-1].face_up:
                pile[-1].face_up = True
                flipped.append(pile[-1])
        return flipped

    def snapshot(self) -> PileSnapshot:
        stock, waste, foundations, tableau = copy.deepcopy(
            (self.stock, self.waste, self.foundations, self.tableau)
        )
        return PileSnapshot(
            stock=tuple(stock),
            waste=tuple(waste),
            foundations=tuple(tuple(pile) for pile in foundations),
            tableau=tuple(tuple(pile) for pile in tableau),
        )

    def restore(self, snapshot: PileSnapshot) -> None:
        stock, waste, foundations, tableau = copy.deepcopy(
            (snapshot.stock, snapshot.waste, snapshot.foundations, snapshot.tableau)
        )
        self.stock = list(stock)
        self.waste = list(waste)
        self.foundations = [list(pile) for pile in foundations]
        self.tableau = [list(pile) for pile in tableau]

    def view(self) -> GameStateView:
        snap = self.snapshot()
        return GameStateView(
            stock=snap.stock,
            waste=snap.waste,
            foundations=snap.foundations,
            tableau=snap.tableau,
            selection=self.selection,
            won=self.won,
        )
