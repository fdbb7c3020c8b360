"""High-level game orchestration for Klondike."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import List, Optional, Sequence, Union

from .cards import Card, card_label
from .config import EngineConfig
from .deck import deal
from .hints import DrawHint, MoveHint, NoHintAvailable, find_hint
from .history import History
from .rules import (
    can_move_run_to_tableau,
    can_move_single_to_tableau,
    can_move_to_foundation,
    is_won,
)
from .state import (
    FoundationTarget,
    GameState,
    GameStateView,
    Selection,
    TableauSelection,
    TableauTarget,
    Target,
    WasteSelection,
    check_foundation_index,
    check_tableau_index,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NothingToUndo:
    message: str = "Nothing to undo."


@dataclass
class KlondikeGame:
    """Own one deal of Klondike: its piles, selection and undo history.

    Every public operation returns a fresh ``GameStateView``. Illegal moves are
    rejected silently (the selection is cleared, the piles stay as they were);
    pile indices outside the table raise ``InvalidPileIndex``.
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None

    state: GameState = field(init=False)
    history: History = field(init=False)
    actions_applied: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = Random(self.config.seed)
        self.history = History(capacity=self.config.history_capacity)
        self.new_game(deck=self.deck)

    # Lifecycle ---------------------------------------------------------

    def new_game(self, deck: Optional[Sequence[Card]] = None) -> GameStateView:
        tableau, stock = deal(rng=self.rng, deck=deck)
        self.state = GameState(stock=stock, tableau=tableau)
        self.actions_applied = 0
        self.history.reset(self.state)
        logger.debug("Dealt new game: stock=%d tableau=%s", len(stock), [len(pile) for pile in tableau])
        return self.get_state()

    def load_state(self, state: GameState) -> GameStateView:
        """Adopt an externally built table as the starting point of a new history."""
        state.selection = None
        state.flip_exposed_cards()
        state.won = is_won(state)
        self.state = state
        self.actions_applied = 0
        self.history.reset(state)
        return self.get_state()

    # Actions -----------------------------------------------------------

    def draw_from_stock(self) -> GameStateView:
        state = self.state
        if state.won:
            return self.get_state()
        state.selection = None
        if state.stock:
            card = state.stock.pop()
            card.face_up = True
            state.waste.append(card)
            logger.debug("Drew %s", card_label(card))
        elif state.waste:
            recycled = list(reversed(state.waste))
            for card in recycled:
                card.face_up = False
            state.stock = recycled
            state.waste = []
            logger.debug("Recycled %d waste cards into the stock", len(recycled))
        else:
            return self.get_state()
        self._commit()
        return self.get_state()

    def select_card(self, origin: Union[WasteSelection, TableauSelection]) -> GameStateView:
        state = self.state
        if isinstance(origin, WasteSelection):
            if not state.won and state.waste:
                state.selection = WasteSelection()
        elif isinstance(origin, TableauSelection):
            pile = state.column(origin.pile)
            if state.won or not 0 <= origin.start_index < len(pile):
                return self.get_state()
            if pile[origin.start_index].face_up:
                state.selection = origin
        else:
            raise TypeError(f"Cannot select from {origin!r}.")
        return self.get_state()

    def activate_pile(self, target: Target) -> GameStateView:
        """Try to move the current selection onto ``target``; the selection is always cleared."""
        self._check_target(target)
        state = self.state
        selection = state.selection
        if selection is None or state.won:
            return self.get_state()
        state.selection = None
        if self._apply_move(selection, target):
            self._commit()
            logger.debug("Moved %s to %s", selection, target)
        else:
            logger.debug("Rejected move of %s to %s", selection, target)
        return self.get_state()

    def undo(self) -> Union[GameStateView, NothingToUndo]:
        snapshot = self.history.undo()
        if snapshot is None:
            return NothingToUndo()
        self.state.restore(snapshot)
        self.state.selection = None
        self.state.won = is_won(self.state)
        logger.debug("Undo; %d history entries remain", len(self.history))
        return self.get_state()

    # Queries -----------------------------------------------------------

    def get_hint(self) -> Union[MoveHint, DrawHint, NoHintAvailable]:
        hint = find_hint(self.state)
        return hint if hint is not None else NoHintAvailable()

    def get_state(self) -> GameStateView:
        return self.state.view()

    @property
    def selection(self) -> Selection:
        return self.state.selection

    @property
    def history_length(self) -> int:
        return len(self.history)

    def is_won(self) -> bool:
        return self.state.won

    # Helpers -----------------------------------------------------------

    def _apply_move(self, selection: Union[WasteSelection, TableauSelection], target: Target) -> bool:
        state = self.state
        if isinstance(selection, WasteSelection):
            card = state.waste_top()
            if card is None or not self._accepts(target, [card], source_index=None):
                return False
            state.waste.pop()
            self._pile_for(target).append(card)
            return True

        source = state.column(selection.pile)
        run = source[selection.start_index:]
        if not self._accepts(target, run, source_index=selection.pile):
            return False
        del source[selection.start_index:]
        self._pile_for(target).extend(run)
        return True

    def _accepts(self, target: Target, cards: List[Card], source_index: Optional[int]) -> bool:
        if not cards:
            return False
        if isinstance(target, FoundationTarget):
            return len(cards) == 1 and can_move_to_foundation(self.state, cards[0], target.index)
        if source_index is None:
            return can_move_single_to_tableau(self.state, cards[0], target.index)
        return can_move_run_to_tableau(self.state, cards, target.index, source_index)

    def _pile_for(self, target: Target) -> List[Card]:
        if isinstance(target, FoundationTarget):
            return self.state.foundation(target.index)
        return self.state.column(target.index)

    def _check_target(self, target: Target) -> None:
        if isinstance(target, FoundationTarget):
            check_foundation_index(target.index)
        elif isinstance(target, TableauTarget):
            check_tableau_index(target.index)
        else:
            raise TypeError(f"Cannot activate {target!r}.")

    def _commit(self) -> None:
        self.actions_applied += 1
        self.state.flip_exposed_cards()
        self.state.won = is_won(self.state)
        self.history.record(self.state)
        if self.state.won:
            logger.info("Game won")
