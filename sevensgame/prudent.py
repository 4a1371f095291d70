"""A cautious strategy that holds back edge cards and weak sevens."""

from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Sequence, Set, Tuple

from sevensgame.cards import SEVEN, Card, Table
from sevensgame.strategy import PlayerStrategy

_EDGE_RANKS = frozenset({1, 2, 12, 13})


class PrudentStrategy(PlayerStrategy):
    """Scores each playable card and plays the best one.

    A seven opens its suit only when three or more cards of that suit are
    in hand; edge cards are held back; suits held in depth are preferred.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player_id: Optional[int] = None
        self.played_cards: Set[Tuple[int, int]] = set()
        self.pass_counts: Counter = Counter()

    def initialize(self, player_id: int) -> None:
        self.player_id = player_id
        self.played_cards.clear()
        self.pass_counts.clear()

    def select_card(self, hand: Sequence[Card], table: Table) -> Optional[int]:
        suit_counts = Counter(card.suit for card in hand)
        choices: List[Tuple[int, int]] = []

        for index, card in enumerate(hand):
            if card.rank == SEVEN and not table.has(card.suit, SEVEN):
                choices.append((index, 10 if suit_counts[card.suit] > 2 else -10))
                continue

            lower = card.rank > 1 and table.has(card.suit, card.rank - 1)
            upper = card.rank < 13 and table.has(card.suit, card.rank + 1)
            if not (lower or upper):
                continue

            score = -5 if card.rank in _EDGE_RANKS else 2
            if lower and upper:
                score += 2
            score += suit_counts[card.suit]
            choices.append((index, score))

        if not choices:
            return None
        best_index, _ = max(choices, key=lambda choice: choice[1])
        return best_index

    def observe_move(self, player_id: int, card: Card) -> None:
        self.played_cards.add((card.suit, card.rank))

    def observe_pass(self, player_id: int) -> None:
        self.pass_counts[player_id] += 1

    def name(self) -> str:
        return "PrudentStrategy"