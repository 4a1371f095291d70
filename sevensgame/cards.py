"""Cards, the standard deck and the table layout of a Sevens game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

SUITS = range(4)
RANKS = range(1, 14)
SUIT_SYMBOLS = ("♠", "♥", "♦", "♣")
_FACE_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}

DIAMONDS = 2
SEVEN = 7


def _rank_label(rank: int) -> str:
    return _FACE_NAMES.get(rank, str(rank))


@dataclass(frozen=True, order=True)
class Card:
    """A playing card: suit 0..3 and rank 1 (Ace) .. 13 (King)."""

    suit: int
    rank: int

    def __str__(self) -> str:
        return f"Card(suit={self.suit}, rank={self.rank})"

    def label(self) -> str:
        """Short display form such as ``A♠`` or ``10♦``."""
        return _rank_label(self.rank) + SUIT_SYMBOLS[self.suit]


class Table:
    """The set of cards already laid out on the table."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards = set(cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Table({sorted(self._cards)!r})"

    def has(self, suit: int, rank: int) -> bool:
        """Whether the card of this suit and rank is on the table."""
        return Card(suit, rank) in self._cards

    def place(self, card: Card) -> None:
        """Lay a card on the table."""
        self._cards.add(card)

    def with_card(self, card: Card) -> "Table":
        """A new table holding these cards plus ``card``; this one is unchanged."""
        return Table(self._cards | {card})

    def count_in_suit(self, suit: int) -> int:
        """How many cards of ``suit`` are on the table."""
        return sum(1 for card in self._cards if card.suit == suit)

    def render(self) -> str:
        """Text picture of the table, one row per suit."""
        lines = ["", "----- TABLE -----"]
        for suit in SUITS:
            cells = "".join(
                (_rank_label(rank) if self.has(suit, rank) else ".") + " "
                for rank in RANKS
            )
            lines.append(f"{SUIT_SYMBOLS[suit]} {cells}")
        lines.append("----------------")
        return "\n".join(lines) + "\n"


def standard_deck() -> Dict[int, Card]:
    """The 52-card deck keyed by card id 0..51, suit by suit, Ace to King."""
    cards = (Card(suit, rank) for suit in SUITS for rank in RANKS)
    return dict(enumerate(cards))


def initial_table() -> Table:
    """The opening table: only the seven of diamonds."""
    return Table([Card(DIAMONDS, SEVEN)])


def is_playable(card: Card, table: Table) -> bool:
    """A seven is playable while it is not on the table; any other card
    needs a neighbour of the same suit on the table."""
    if card.rank == SEVEN:
        return card not in table
    lower = card.rank > 1 and table.has(card.suit, card.rank - 1)
    upper = card.rank < 13 and table.has(card.suit, card.rank + 1)
    return lower or upper