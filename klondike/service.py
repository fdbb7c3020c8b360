"""Convenience service layer for UI and agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .cards import Card, serialize_card
from .config import EngineConfig
from .game import KlondikeGame, NothingToUndo
from .hints import DrawHint, MoveHint, NoHintAvailable, describe_hint
from .state import (
    FoundationTarget,
    GameStateView,
    Selection,
    TableauSelection,
    TableauTarget,
    Target,
    WasteSelection,
)

logger = logging.getLogger(__name__)


@dataclass
class TableView:
    stock_count: int
    waste: list[dict]
    waste_top: Optional[dict]
    foundations: list[list[dict]]
    tableau: list[list[dict]]
    selection: Optional[dict]
    won: bool
    history_length: int
    status: str


def serialize_selection(selection: Selection) -> Optional[dict]:
    if selection is None:
        return None
    if isinstance(selection, WasteSelection):
        return {"kind": "waste"}
    return {"kind": "tableau", "pile": selection.pile, "index": selection.start_index}


def serialize_target(target: Target) -> dict:
    if isinstance(target, FoundationTarget):
        return {"kind": "foundation", "index": target.index}
    return {"kind": "tableau", "index": target.index}


def serialize_hint(hint: Union[MoveHint, DrawHint, NoHintAvailable]) -> dict:
    if isinstance(hint, NoHintAvailable):
        return {"action": "none", "message": hint.message}
    if isinstance(hint, DrawHint):
        return {"action": "draw", "message": describe_hint(hint)}
    return {
        "action": "move",
        "from": serialize_selection(hint.source),
        "to": serialize_target(hint.destination),
        "message": describe_hint(hint),
    }


def _require_int(payload: Mapping[str, object], key: str) -> int:
    value = payload.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Payload field {key!r} must be an integer.")
    return value


def parse_origin(payload: Mapping[str, object]) -> Union[WasteSelection, TableauSelection]:
    kind = payload.get("kind")
    if kind == "waste":
        return WasteSelection()
    if kind == "tableau":
        return TableauSelection(_require_int(payload, "pile"), _require_int(payload, "index"))
    raise ValueError(f"Unknown selection kind: {kind!r}")


def parse_target(payload: Mapping[str, object]) -> Target:
    kind = payload.get("kind")
    if kind == "foundation":
        return FoundationTarget(_require_int(payload, "index"))
    if kind == "tableau":
        return TableauTarget(_require_int(payload, "index"))
    raise ValueError(f"Unknown pile kind: {kind!r}")


def _card_payload(card: Card) -> dict:
    if card.face_up:
        return serialize_card(card)
    return {"id": card.id, "face_up": False}


class SolitaireService:
    """Facade around KlondikeGame for UI consumers."""

    def __init__(self, game: Optional[KlondikeGame] = None, config: Optional[EngineConfig] = None) -> None:
        self.game = game or KlondikeGame(config=config or EngineConfig())
        self.status = "Cards dealt. Start playing."

    # Lifecycle ---------------------------------------------------------

    def start_new_game(self) -> TableView:
        self.game.new_game()
        self.status = "New game dealt."
        logger.info("Started a new game")
        return self.get_view()

    # Actions -----------------------------------------------------------

    def draw(self) -> TableView:
        before = self.game.actions_applied
        had_stock = bool(self.game.state.stock)
        self.game.draw_from_stock()
        if self.game.actions_applied == before:
            self.status = "Nothing left to draw."
        elif had_stock:
            self.status = "Drew a card."
        else:
            self.status = "Waste turned back into the stock."
        return self._after_action()

    def select(self, payload: Mapping[str, object]) -> TableView:
        origin = parse_origin(payload)
        self.game.select_card(origin)
        self.status = "Card selected." if self.game.selection == origin else "That card cannot be selected."
        return self.get_view()

    def activate(self, payload: Mapping[str, object]) -> TableView:
        had_selection = self.game.selection is not None
        before = self.game.actions_applied
        self.game.activate_pile(parse_target(payload))
        if not had_selection:
            self.status = "Select a card first."
        elif self.game.actions_applied != before:
            self.status = "Moved."
        else:
            self.status = "Illegal move."
            logger.debug("Rejected activation payload %r", dict(payload))
        return self._after_action()

    def undo(self) -> TableView:
        result = self.game.undo()
        if isinstance(result, NothingToUndo):
            self.status = result.message
        else:
            self.status = "Undid last action."
        return self.get_view()

    def hint(self) -> dict:
        payload = serialize_hint(self.game.get_hint())
        self.status = payload["message"]
        return payload

    # Views -------------------------------------------------------------

    def get_view(self) -> TableView:
        state = self.game.get_state()
        return build_table_view(state, history_length=self.game.history_length, status=self.status)

    def _after_action(self) -> TableView:
        if self.game.is_won():
            self.status = "You won!"
        return self.get_view()


def build_table_view(state: GameStateView, *, history_length: int, status: str) -> TableView:
    waste_top = state.waste_top
    return TableView(
        stock_count=len(state.stock),
        waste=[serialize_card(card) for card in state.waste],
        waste_top=serialize_card(waste_top) if waste_top is not None else None,
        foundations=[[serialize_card(card) for card in pile] for pile in state.foundations],
        tableau=[[_card_payload(card) for card in pile] for pile in state.tableau],
        selection=serialize_selection(state.selection),
        won=state.won,
        history_length=history_length,
        status=status,
    )
