import random

import pytest

from sevensgame.cards import Card, Table, initial_table, is_playable, standard_deck
from sevensgame.sentinel import Sentinel7


def _strategy(player_id=0, seed=1):
    strategy = Sentinel7(random.Random(seed))
    strategy.initialize(player_id)
    return strategy


def test_name():
    assert Sentinel7().name() == "Sentinel7"


def test_passes_without_playable_card():
    strategy = _strategy()
    hand = [Card(0, 1), Card(3, 13)]
    assert strategy.select_card(hand, initial_table()) is None


def test_single_playable_card_is_chosen():
    strategy = _strategy()
    hand = [Card(0, 1), Card(2, 8), Card(3, 13)]
    assert strategy.select_card(hand, initial_table()) == 1


@pytest.mark.parametrize("seed", range(20))
def test_choice_is_always_a_playable_index(seed):
    deal_rng = random.Random(seed)
    cards = list(standard_deck().values())
    deal_rng.shuffle(cards)
    table = Table(cards[:15])
    hand = cards[15:28]
    strategy = _strategy(seed=seed)
    choice = strategy.select_card(hand, table)
    any_playable = any(is_playable(card, table) for card in hand)
    if choice is None:
        assert not any_playable
    else:
        assert is_playable(hand[choice], table)


def test_select_card_records_hand_and_progress():
    strategy = _strategy()
    hand = [Card(2, 8)]
    table = initial_table()
    strategy.select_card(hand, table)
    assert strategy.hand == hand
    assert strategy.cards_per_suit == {2: 1}
    assert 0 <= strategy.game_progress <= 100


def test_potential_run_follows_own_cards():
    strategy = _strategy()
    hand = [Card(2, 8), Card(2, 9), Card(2, 10)]
    assert strategy.potential_run(Card(2, 8), hand, initial_table()) == 3


def test_potential_run_stops_at_missing_card():
    strategy = _strategy()
    hand = [Card(2, 8), Card(2, 10)]
    run = strategy.potential_run(Card(2, 8), hand, initial_table())
    assert run == strategy.potential_run(Card(2, 8), [Card(2, 8)], initial_table())


def test_potential_run_does_not_change_table():
    strategy = _strategy()
    table = initial_table()
    hand = [Card(2, 8), Card(2, 9)]
    strategy.potential_run(Card(2, 8), hand, table)
    assert Card(2, 8) not in table
    assert len(table) == len(initial_table())


def test_early_critical_card_penalised_when_alternatives_exist():
    strategy = _strategy()
    table = initial_table()
    with_alternative = [Card(2, 8), Card(0, 7)]
    without_alternative = [Card(2, 8), Card(0, 1)]
    held_back = strategy.move_score(Card(2, 8), with_alternative, table)
    forced = strategy.move_score(Card(2, 8), without_alternative, table)
    assert forced - held_back == 50


def test_mid_game_penalty_when_opponent_is_close():
    table = Table(
        [Card(suit, rank) for suit in (0, 1) for rank in range(1, 14)]
        + [Card(3, rank) for rank in range(5, 9)]
        + [Card(2, 7)]
    )
    hand = [Card(2, 6), Card(3, 9)]
    strategy = _strategy(player_id=0)
    before = strategy.move_score(Card(2, 6), hand, table)
    for rank in range(1, 11):
        strategy.observe_move(1, Card(0, rank))
    after = strategy.move_score(Card(2, 6), hand, table)
    assert before - after == 40


def test_observe_move_decrements_estimated_count():
    strategy = _strategy(player_id=0)
    before = strategy.card_counts[1]
    strategy.observe_move(1, Card(2, 8))
    assert strategy.card_counts[1] == before - 1
    assert strategy.played_cards == [Card(2, 8)]


def test_observe_move_tracks_critical_cards():
    strategy = _strategy(player_id=0)
    strategy.observe_move(1, Card(2, 6))
    strategy.observe_move(1, Card(2, 10))
    assert strategy.critical_cards[1] == {(2, 6): False}


def test_own_moves_are_ignored():
    strategy = _strategy(player_id=2)
    strategy.observe_move(2, Card(2, 8))
    assert strategy.played_cards == []
    assert 2 not in strategy.card_counts


def test_weaknesses_inferred_after_two_passes():
    strategy = _strategy(player_id=0)
    strategy.observe_move(1, Card(0, 7))
    strategy.observe_pass(1)
    assert strategy.suit_weaknesses(1) == frozenset()
    strategy.observe_pass(1)
    assert strategy.suit_weaknesses(1) == frozenset({1, 2, 3})


def test_move_resets_pass_count():
    strategy = _strategy(player_id=0)
    strategy.observe_pass(1)
    strategy.observe_move(1, Card(2, 8))
    strategy.observe_pass(1)
    assert strategy.suit_weaknesses(1) == frozenset()


def test_own_passes_are_ignored():
    strategy = _strategy(player_id=0)
    strategy.observe_pass(0)
    strategy.observe_pass(0)
    assert strategy.suit_weaknesses(0) == frozenset()


def test_initialize_resets_tracking():
    strategy = _strategy(player_id=0)
    strategy.observe_move(1, Card(2, 8))
    strategy.observe_pass(3)
    strategy.observe_pass(3)
    strategy.initialize(1)
    assert strategy.played_cards == []
    assert strategy.suit_weaknesses(3) == frozenset()
    assert 1 not in strategy.card_counts
    assert strategy.card_counts[0] == strategy.card_counts[2]
    assert strategy.game_progress == 0