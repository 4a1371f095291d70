"""The interface every Sevens player strategy implements."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from sevensgame.cards import Card, Table


class PlayerStrategy(ABC):
    """A player's decision logic.

    ``select_card`` returns the index in ``hand`` of the card to play,
    or ``None`` to pass.
    """

    @abstractmethod
    def initialize(self, player_id: int) -> None:
        """Prepare for a new game as player ``player_id``."""

    @abstractmethod
    def select_card(self, hand: Sequence[Card], table: Table) -> Optional[int]:
        """Choose the index of a card in ``hand`` to play, or ``None`` to pass."""

    @abstractmethod
    def observe_move(self, player_id: int, card: Card) -> None:
        """Learn that ``player_id`` played ``card``."""

    @abstractmethod
    def observe_pass(self, player_id: int) -> None:
        """Learn that ``player_id`` passed."""

    @abstractmethod
    def name(self) -> str:
        """A display name for the strategy."""


class PassingStrategy(PlayerStrategy):
    """A starting point for new strategies: it always passes."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player_id: Optional[int] = None

    def initialize(self, player_id: int) -> None:
        self.player_id = player_id

    def select_card(self, hand: Sequence[Card], table: Table) -> Optional[int]:
        return None

    def observe_move(self, player_id: int, card: Card) -> None:
        """Moves are not tracked."""

    def observe_pass(self, player_id: int) -> None:
        """Passes are not tracked."""

    def name(self) -> str:
        return "MyStrategy"