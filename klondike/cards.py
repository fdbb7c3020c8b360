"""Card-related data structures and helpers for Klondike."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class Suit(Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


class Color(Enum):
    RED = "red"
    BLACK = "black"


class Rank(Enum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return RANK_LABELS[self]


RANK_LABELS: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

LABEL_RANKS: dict[str, Rank] = {label: rank for rank, label in RANK_LABELS.items()}

SUIT_COLORS: dict[Suit, Color] = {
    Suit.SPADES: Color.BLACK,
    Suit.HEARTS: Color.RED,
    Suit.DIAMONDS: Color.RED,
    Suit.CLUBS: Color.BLACK,
}


def new_card_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Card:
    """A playing card.

    ``id`` is the card's identity for the lifetime of a deal; ``face_up`` is
    the only field that changes while the card moves between piles.
    """

    suit: Suit
    rank: Rank
    face_up: bool = False
    id: str = field(default_factory=new_card_id)

    @property
    def color(self) -> Color:
        return SUIT_COLORS[self.suit]

    def __str__(self) -> str:
        if not self.face_up:
            return "??"
        return card_label(self)


def color_of(suit: Suit) -> Color:
    return SUIT_COLORS[suit]


def card_label(card: Card) -> str:
    return f"{RANK_LABELS[card.rank]}{card.suit.value}"


def serialize_card(card: Card) -> dict[str, object]:
    return {
        "id": card.id,
        "suit": card.suit.name.lower(),
        "rank": RANK_LABELS[card.rank],
        "face_up": card.face_up,
        "label": card_label(card),
    }


def deserialize_card(payload: Mapping[str, object]) -> Card:
    suit_name = str(payload["suit"]).upper()
    rank_label = str(payload["rank"]).upper()
    if suit_name not in Suit.__members__:
        raise ValueError(f"Unknown suit: {payload['suit']!r}")
    if rank_label not in LABEL_RANKS:
        raise ValueError(f"Unknown rank: {payload['rank']!r}")
    card = Card(Suit[suit_name], LABEL_RANKS[rank_label], face_up=bool(payload.get("face_up", False)))
    if "id" in payload:
        card.id = str(payload["id"])
    return card
