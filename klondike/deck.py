"""Deck creation and dealing utilities for Klondike."""

from __future__ import annotations

from random import Random
from typing import List, MutableSequence, Optional, Sequence, Tuple

from .cards import Card, Rank, Suit

DECK_SIZE = 52
TABLEAU_COLUMNS = 7
FOUNDATION_COUNT = 4

_default_rng = Random()


def build_deck() -> List[Card]:
    """Return the ordered 52-card deck, every card face-down with a fresh id."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def shuffle(cards: MutableSequence[Card], rng: Optional[Random] = None) -> None:
    """Fisher-Yates shuffle in place."""
    if rng is None:
        rng = _default_rng
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def deal(
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> Tuple[List[List[Card]], List[Card]]:
    """Deal the seven tableau columns and return them with the remaining stock.

    Column ``k`` receives ``k + 1`` cards with only the last one face-up. The
    undealt cards keep their relative order and become the face-down stock.
    """
    if deck is not None:
        cards = list(deck)
    else:
        cards = build_deck()
        shuffle(cards, rng)
    if len(cards) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")

    tableau: List[List[Card]] = [[] for _ in range(TABLEAU_COLUMNS)]
    position = 0
    for column in range(TABLEAU_COLUMNS):
        for row in range(column + 1):
            card = cards[position]
            position += 1
            card.face_up = row == column
            tableau[column].append(card)

    stock = cards[position:]
    for card in stock:
        card.face_up = False
    return tableau, stock
