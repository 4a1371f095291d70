"""A strategy that plays a random playable card whenever it can."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from sevensgame.cards import SEVEN, Card, Table
from sevensgame.strategy import PlayerStrategy


def _can_play(card: Card, table: Table) -> bool:
    if card.rank == SEVEN and card not in table:
        return True
    lower = card.rank > 1 and table.has(card.suit, card.rank - 1)
    upper = card.rank < 13 and table.has(card.suit, card.rank + 1)
    return lower or upper


class RandomAggressiveStrategy(PlayerStrategy):
    """Never passes when a card can be played; picks uniformly among them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player_id: Optional[int] = None

    def initialize(self, player_id: int) -> None:
        self.player_id = player_id

    def select_card(self, hand: Sequence[Card], table: Table) -> Optional[int]:
        playable: List[int] = [i for i, card in enumerate(hand) if _can_play(card, table)]
        if not playable:
            return None
        return self.rng.choice(playable)

    def observe_move(self, player_id: int, card: Card) -> None:
        """Moves are not tracked."""

    def observe_pass(self, player_id: int) -> None:
        """Passes are not tracked."""

    def name(self) -> str:
        return "RandomAgressiveStrategy"