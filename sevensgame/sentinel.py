"""A scoring strategy that guards sixes, sevens and eights and plans runs."""

from __future__ import annotations

import random
from collections import Counter, defaultdict
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from sevensgame.cards import SEVEN, SUITS, Card, Table, is_playable
from sevensgame.strategy import PlayerStrategy

_TOP_SHARE = 0.8
_DECK_SIZE = 52
_MAX_PLAYERS = 8
_INITIAL_HAND_ESTIMATE = 13
_CRITICAL_RANKS = frozenset({6, 7, 8})
_HEARTS = 1


def _game_progress(table: Table) -> int:
    """Share of the deck already on the table, as a whole percentage."""
    return min(100, int(len(table) * 100.0 / _DECK_SIZE))


class Sentinel7(PlayerStrategy):
    """Scores every playable card and plays one of the best.

    On top of shedding high cards and unlocking its own plays, it holds
    back sixes, sevens and eights while the game is young or an opponent
    is close to going out, and favours cards that start runs it can follow.
    Among moves scoring within 20% of the best, one is picked at random.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player_id: Optional[int] = None
        self.hand: List[Card] = []
        self.played_cards: List[Card] = []
        self.pass_counts: Counter = Counter()
        self.card_counts: Dict[int, int] = {}
        self.game_progress = 0
        self.cards_per_suit: Dict[int, int] = {}
        self.critical_cards: Dict[int, Dict[Tuple[int, int], bool]] = defaultdict(dict)
        self._suit_strengths: Dict[int, Set[int]] = defaultdict(set)
        self._suit_weaknesses: Dict[int, Set[int]] = defaultdict(set)

    def initialize(self, player_id: int) -> None:
        self.player_id = player_id
        self.played_cards.clear()
        self.pass_counts.clear()
        self._suit_strengths.clear()
        self._suit_weaknesses.clear()
        self.critical_cards.clear()
        self.game_progress = 0
        self.cards_per_suit.clear()
        self.card_counts = {
            pid: _INITIAL_HAND_ESTIMATE
            for pid in range(_MAX_PLAYERS)
            if pid != player_id
        }

    def select_card(self, hand: Sequence[Card], table: Table) -> Optional[int]:
        self.hand = list(hand)
        self._update_progress(table)

        scored: List[Tuple[float, int]] = [
            (self.move_score(card, hand, table), index)
            for index, card in enumerate(hand)
            if is_playable(card, table)
        ]
        if not scored:
            return None

        scored.sort(key=lambda move: move[0], reverse=True)
        if len(scored) > 1:
            threshold = scored[0][0] * _TOP_SHARE
            top: List[int] = []
            for score, index in scored:
                if score < threshold:
                    break
                top.append(index)
            if len(top) > 1:
                return self.rng.choice(top)
        return scored[0][1]

    def observe_move(self, player_id: int, card: Card) -> None:
        if player_id == self.player_id:
            return
        self.played_cards.append(card)
        self._suit_strengths[player_id].add(card.suit)
        if card.rank in _CRITICAL_RANKS:
            self.critical_cards[player_id][(card.suit, card.rank)] = False
        if player_id in self.card_counts:
            self.card_counts[player_id] -= 1
        self.pass_counts[player_id] = 0

    def observe_pass(self, player_id: int) -> None:
        if player_id == self.player_id:
            return
        self.pass_counts[player_id] += 1
        if self.pass_counts[player_id] >= 2:
            self._infer_weaknesses(player_id)

    def name(self) -> str:
        return "Sentinel7"

    def move_score(self, card: Card, hand: Sequence[Card], table: Table) -> float:
        """How attractive playing ``card`` from ``hand`` is; higher is better."""
        progress = _game_progress(table)
        score = 0.0

        if card.rank >= 10:
            score += 30 + (card.rank - 9)
        elif card.rank == 1:
            score += 30

        score += self._cards_unlocked(card, hand, table) * 20

        suit_count = sum(1 for held in hand if held.suit == card.suit)
        if suit_count <= 2:
            score += 15
        elif suit_count >= 7:
            score += 10

        opponent_holds_suit = any(
            player != self.player_id and card.suit in strengths
            for player, strengths in self._suit_strengths.items()
        )
        if opponent_holds_suit and self._creates_blocking_gap(card, table):
            score += 25

        if card.rank in _CRITICAL_RANKS:
            has_alternatives = sum(1 for held in hand if is_playable(held, table)) > 1
            opponent_close = any(
                player != self.player_id and count <= 3
                for player, count in self.card_counts.items()
            )
            if progress < 50 and has_alternatives:
                score -= 50
            elif progress < 75 and has_alternatives and opponent_close:
                score -= 40
            elif progress >= 75 and len(hand) <= 5:
                score += 20

        if len(hand) <= 5:
            score += 15

        run = self.potential_run(card, hand, table)
        if run >= 2:
            score += run * 8

        if card.rank == SEVEN:
            score += 100 if card.suit == _HEARTS and progress == 0 else 5

        score -= abs(SEVEN - card.rank) * 0.5
        return score

    def potential_run(self, card: Card, hand: Sequence[Card], table: Table) -> int:
        """Length of the run of our own cards that playing ``card`` would open,
        counting ``card`` itself."""
        return (
            1
            + self._run_length(card, 1, hand, table)
            + self._run_length(card, -1, hand, table)
        )

    def suit_weaknesses(self, player_id: int) -> FrozenSet[int]:
        """Suits that ``player_id`` is believed to lack."""
        return frozenset(self._suit_weaknesses.get(player_id, ()))

    def _update_progress(self, table: Table) -> None:
        self.cards_per_suit = {
            suit: count
            for suit in SUITS
            if (count := table.count_in_suit(suit))
        }
        self.game_progress = _game_progress(table)

    def _run_length(
        self, card: Card, direction: int, hand: Sequence[Card], table: Table
    ) -> int:
        layout = table.with_card(card)
        held = set(hand)
        bound = 14 if direction > 0 else 0
        length = 0
        rank = card.rank + direction
        while rank != bound:
            candidate = Card(card.suit, rank)
            if candidate not in held or not is_playable(candidate, layout):
                break
            length += 1
            layout.place(candidate)
            rank += direction
        return length

    def _cards_unlocked(self, card: Card, hand: Sequence[Card], table: Table) -> int:
        after = table.with_card(card)
        return sum(
            1
            for other in hand
            if other != card
            and not is_playable(other, table)
            and is_playable(other, after)
        )

    @staticmethod
    def _creates_blocking_gap(card: Card, table: Table) -> bool:
        if card.rank <= 5:
            above = table.has(card.suit, card.rank + 1)
            two_above = card.rank <= 11 and table.has(card.suit, card.rank + 2)
            return not above and two_above
        if card.rank >= 9:
            below = table.has(card.suit, card.rank - 1)
            two_below = card.rank >= 3 and table.has(card.suit, card.rank - 2)
            return not below and two_below
        return False

    def _infer_weaknesses(self, player_id: int) -> None:
        strengths = self._suit_strengths[player_id]
        self._suit_weaknesses[player_id].update(
            suit for suit in SUITS if suit not in strengths
        )