import random

from sevensgame.cards import Card, Table, initial_table
from sevensgame.prudent import PrudentStrategy


def make():
    strategy = PrudentStrategy(random.Random(0))
    strategy.initialize(0)
    return strategy


def test_name():
    assert PrudentStrategy().name() == "PrudentStrategy"


def test_passes_when_nothing_playable():
    hand = [Card(0, 3), Card(1, 1), Card(2, 4)]
    assert make().select_card(hand, initial_table()) is None


def test_opens_suit_with_seven_when_holding_enough():
    hand = [Card(2, 6), Card(0, 7), Card(0, 1), Card(0, 2)]
    assert make().select_card(hand, initial_table()) == 1


def test_holds_seven_of_thin_suit():
    hand = [Card(2, 6), Card(0, 7)]
    assert make().select_card(hand, initial_table()) == 0


def test_prefers_middle_card_over_edge_card():
    table = Table([Card(1, 3), Card(1, 11)])
    hand = [Card(1, 2), Card(1, 10)]
    assert make().select_card(hand, table) == 1


def test_prefers_suit_held_in_depth():
    table = Table([Card(0, 7), Card(3, 7)])
    hand = [Card(0, 8), Card(3, 8), Card(3, 1), Card(3, 13)]
    assert make().select_card(hand, table) == 1


def test_selection_is_always_playable():
    table = initial_table()
    hand = [Card(2, 8), Card(1, 5), Card(2, 6), Card(3, 7)]
    index = make().select_card(hand, table)
    chosen = hand[index]
    assert chosen in {Card(2, 8), Card(2, 6), Card(3, 7)}


def test_tracks_moves_and_passes():
    strategy = make()
    strategy.observe_move(1, Card(2, 8))
    strategy.observe_move(2, Card(0, 7))
    strategy.observe_pass(1)
    strategy.observe_pass(1)
    strategy.observe_pass(3)
    assert strategy.played_cards == {(2, 8), (0, 7)}
    assert strategy.pass_counts[1] == 2
    assert strategy.pass_counts[3] == 1


def test_initialize_resets_tracking():
    strategy = make()
    strategy.observe_move(1, Card(2, 8))
    strategy.observe_pass(1)
    strategy.initialize(4)
    assert strategy.played_cards == set()
    assert sum(strategy.pass_counts.values()) == 0
    assert strategy.player_id == 4