from random import Random

from klondike.cards import Card, Rank, Suit
from klondike.game import KlondikeGame
from klondike.hints import DrawHint, MoveHint, NoHintAvailable, describe_hint, find_hint, iter_moves
from klondike.state import (
    FoundationTarget,
    GameState,
    TableauSelection,
    TableauTarget,
    WasteSelection,
)


def card(rank, suit, face_up=True):
    return Card(suit, rank, face_up=face_up)


def make_state(stock=(), waste=(), foundations=None, tableau=None):
    piles = [[] for _ in range(7)]
    for index, pile in (tableau or {}).items():
        piles[index] = list(pile)
    homes = [[] for _ in range(4)]
    for index, pile in (foundations or {}).items():
        homes[index] = list(pile)
    return GameState(stock=list(stock), waste=list(waste), foundations=homes, tableau=piles)


def test_waste_to_foundation_comes_first():
    state = make_state(
        waste=[card(Rank.ACE, Suit.SPADES)],
        tableau={0: [card(Rank.ACE, Suit.HEARTS)], 1: [card(Rank.SEVEN, Suit.CLUBS)], 2: [card(Rank.EIGHT, Suit.HEARTS)]},
    )
    assert find_hint(state) == MoveHint(WasteSelection(), FoundationTarget(0))


def test_foundations_scanned_in_order():
    state = make_state(
        waste=[card(Rank.ACE, Suit.CLUBS)],
        foundations={0: [card(Rank.ACE, Suit.HEARTS)]},
    )
    assert find_hint(state) == MoveHint(WasteSelection(), FoundationTarget(1))


def test_waste_to_tableau_before_tableau_moves():
    state = make_state(
        waste=[card(Rank.SEVEN, Suit.HEARTS)],
        tableau={2: [card(Rank.EIGHT, Suit.CLUBS)], 3: [card(Rank.ACE, Suit.DIAMONDS)]},
    )
    assert find_hint(state) == MoveHint(WasteSelection(), TableauTarget(2))


def test_tableau_top_to_foundation():
    state = make_state(
        waste=[card(Rank.FIVE, Suit.SPADES)],
        tableau={3: [card(Rank.NINE, Suit.CLUBS, face_up=False), card(Rank.ACE, Suit.DIAMONDS)]},
    )
    assert find_hint(state) == MoveHint(TableauSelection(3, 1), FoundationTarget(0))


def test_run_move_between_columns():
    state = make_state(
        tableau={
            0: [card(Rank.NINE, Suit.CLUBS, face_up=False), card(Rank.SEVEN, Suit.SPADES), card(Rank.SIX, Suit.HEARTS)],
            4: [card(Rank.EIGHT, Suit.DIAMONDS)],
        },
    )
    assert find_hint(state) == MoveHint(TableauSelection(0, 1), TableauTarget(4))


def test_draw_suggested_when_no_move():
    state = make_state(stock=[card(Rank.TWO, Suit.SPADES, face_up=False)], tableau={0: [card(Rank.NINE, Suit.CLUBS)]})
    assert find_hint(state) == DrawHint()

    recycled = make_state(waste=[card(Rank.TWO, Suit.SPADES)], tableau={0: [card(Rank.NINE, Suit.CLUBS)]})
    assert find_hint(recycled) == DrawHint()


def test_no_hint_when_stuck():
    state = make_state(tableau={0: [card(Rank.NINE, Suit.CLUBS)]})
    assert find_hint(state) is None

    game = KlondikeGame(rng=Random(0))
    game.load_state(state)
    result = game.get_hint()
    assert isinstance(result, NoHintAvailable)
    assert result.message


def test_iter_moves_lists_every_option_in_priority_order():
    state = make_state(
        waste=[card(Rank.ACE, Suit.SPADES)],
        tableau={
            0: [card(Rank.ACE, Suit.HEARTS)],
            1: [card(Rank.SEVEN, Suit.CLUBS)],
            2: [card(Rank.EIGHT, Suit.HEARTS)],
        },
    )
    assert list(iter_moves(state)) == [
        MoveHint(WasteSelection(), FoundationTarget(0)),
        MoveHint(WasteSelection(), FoundationTarget(1)),
        MoveHint(WasteSelection(), FoundationTarget(2)),
        MoveHint(WasteSelection(), FoundationTarget(3)),
        MoveHint(TableauSelection(0, 0), FoundationTarget(0)),
        MoveHint(TableauSelection(0, 0), FoundationTarget(1)),
        MoveHint(TableauSelection(0, 0), FoundationTarget(2)),
        MoveHint(TableauSelection(0, 0), FoundationTarget(3)),
        MoveHint(TableauSelection(1, 0), TableauTarget(2)),
    ]


def test_hint_does_not_mutate_and_replays():
    game = KlondikeGame(rng=Random(4))
    before = game.state.snapshot()

    hint = game.get_hint()
    assert game.state.snapshot() == before
    assert game.history_length == 1

    if isinstance(hint, MoveHint):
        game.select_card(hint.source)
        game.activate_pile(hint.destination)
    else:
        game.draw_from_stock()
    assert game.history_length == 2


def test_describe_hint():
    assert describe_hint(DrawHint()) == "Draw from the stock."
    move = MoveHint(TableauSelection(2, 3), FoundationTarget(1))
    assert describe_hint(move) == "Move tableau 2 (card 3) to foundation 1."
