import pytest

from klondike.cards import Card, Rank, Suit
from klondike.history import History
from klondike.state import GameState


def state_with_stock(count):
    stock = [Card(Suit.SPADES, rank) for rank in list(Rank)[:count]]
    return GameState(stock=stock)


def test_capacity_must_leave_room_for_undo():
    with pytest.raises(ValueError):
        History(capacity=1)


def test_single_entry_cannot_be_undone():
    history = History()
    history.reset(state_with_stock(3))

    assert len(history) == 1
    assert not history.can_undo()
    assert history.undo() is None
    assert len(history) == 1


def test_undo_returns_previous_entry():
    state = state_with_stock(3)
    history = History()
    first = history.record(state)

    state.stock.pop()
    history.record(state)

    assert history.undo() == first
    assert len(history) == 1


def test_snapshots_are_deep_copies():
    state = state_with_stock(2)
    history = History()
    snapshot = history.record(state)

    state.stock[0].face_up = True
    assert not snapshot.stock[0].face_up


def test_overflow_drops_oldest():
    state = state_with_stock(5)
    history = History(capacity=3)
    history.reset(state)
    for _ in range(4):
        state.stock.pop()
        history.record(state)

    assert len(history) == 3
    assert [len(history.undo().stock) for _ in range(2)] == [2, 3]
    assert history.undo() is None
