"""Running Sevens games between registered player strategies."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

from sevensgame.cards import DIAMONDS, SEVEN, Card, Table, initial_table, is_playable, standard_deck
from sevensgame.strategy import PlayerStrategy

_OPENING_CARD = Card(DIAMONDS, SEVEN)


@dataclass
class _Standing:
    player_id: int
    score: int
    wins: int


class GameMapper:
    """Deals the deck, runs the turns and ranks the players.

    Every player taking part must have a strategy registered under its id.
    Scores are the number of cards left in hand; fewer is better.
    """

    def __init__(self, rng: Optional[random.Random] = None, out: Optional[TextIO] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._out = out
        self.strategies: Dict[int, PlayerStrategy] = {}
        self.cards: Dict[int, Card] = {}
        self.table: Table = Table()

    # -- strategy management -------------------------------------------------

    def register_strategy(self, player_id: int, strategy: PlayerStrategy) -> None:
        """Seat ``strategy`` as player ``player_id``, replacing any earlier one."""
        self.strategies[player_id] = strategy

    def has_registered_strategies(self) -> bool:
        """Whether at least one strategy has been registered."""
        return bool(self.strategies)

    # -- single games --------------------------------------------------------

    def compute_game_progress(self, num_players: int) -> List[Tuple[int, int]]:
        """Play one game quietly; return ``(player_id, cards_left)`` best first."""
        return self._play(num_players, verbose=False)

    def compute_and_display_game(self, num_players: int) -> List[Tuple[int, int]]:
        """Play one game, printing every turn; return ``(player_id, cards_left)``."""
        return self._play(num_players, verbose=True)

    def compute_named_game_progress(self, names: Sequence[str]) -> List[Tuple[str, int]]:
        """Play one game quietly with players ``0..len(names)-1`` shown by name."""
        results = self.compute_game_progress(len(names))
        return [(names[player_id], score) for player_id, score in results]

    def compute_and_display_named_game(self, names: Sequence[str]) -> List[Tuple[str, int]]:
        """Play one game by name and print each player's result."""
        results = self.compute_named_game_progress(names)
        for name, score in results:
            self._write(f"{name} → Rank {score}\n")
        return results

    # -- multi-round play ----------------------------------------------------

    def compute_multiple_rounds_to_score(
        self, num_players: int, max_score: int
    ) -> List[Tuple[int, int]]:
        """Play rounds until some player's total reaches ``max_score``.

        Returns ``(player_id, rank)`` ordered by player id; the lowest total
        ranks first, with more round wins breaking ties.
        """
        totals = [0] * num_players
        wins = [0] * num_players
        round_number = 1
        game_over = False

        while not game_over:
            self._write(f"\n\n=== ROUND {round_number} ===\n")
            self._write("--- Current Scores ---\n")
            for player_id, total in enumerate(totals):
                self._write(f"Player {player_id}: {total} points\n")

            round_scores = self.compute_game_progress(num_players)
            best = min(score for _, score in round_scores)

            self._write("--- Round Results ---\n")
            for player_id, score in round_scores:
                totals[player_id] += score
                if score == best:
                    wins[player_id] += 1
                self._write(
                    f"Player {player_id}: +{score} points (Total: {totals[player_id]})\n"
                )

            game_over = any(total >= max_score for total in totals)
            round_number += 1

        total_rounds = round_number - 1
        standings = sorted(
            (_Standing(pid, totals[pid], wins[pid]) for pid in range(num_players)),
            key=lambda s: (s.score, -s.wins),
        )

        self._write(f"\n=== FINAL RESULTS AFTER {total_rounds} ROUNDS ===\n")
        ranks: List[Tuple[int, int]] = []
        previous: Optional[_Standing] = None
        for position, standing in enumerate(standings, start=1):
            rank = position
            if (
                previous is not None
                and standing.score == previous.score
                and standing.wins == previous.wins
            ):
                rank = ranks[-1][1]
            ranks.append((standing.player_id, rank))
            previous = standing

            win_rate = 100.0 * standing.wins / total_rounds if total_rounds else 0.0
            self._write(
                f"Rank {rank}"
                f" | Player {standing.player_id}"
                f" | Score: {standing.score}"
                f" | Wins: {standing.wins}"
                f" | Win Rate: {win_rate:g}%"
                f" | Name: {self.strategies[standing.player_id].name()}\n"
            )

        ranks.sort(key=lambda entry: entry[0])
        return ranks

    # -- internals -----------------------------------------------------------

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def _check_players(self, num_players: int) -> None:
        if num_players < 1:
            raise ValueError(f"a game needs at least one player, got {num_players}")
        missing = [pid for pid in range(num_players) if pid not in self.strategies]
        if missing:
            raise ValueError(f"no strategy registered for player(s) {missing}")

    def _deal(self, num_players: int) -> Tuple[List[List[Card]], int]:
        deck = list(self.cards.values())
        self.rng.shuffle(deck)
        start_player = self.rng.randrange(num_players)

        hands: List[List[Card]] = [[] for _ in range(num_players)]
        for offset, card in enumerate(deck):
            hands[(start_player + offset) % num_players].append(card)

        for hand in hands:
            if _OPENING_CARD in hand:
                hand.remove(_OPENING_CARD)
                break
        return hands, start_player

    def _show_hands(self, hands: Sequence[Sequence[Card]]) -> None:
        self._write("\n--- Players' Hands ---\n")
        for player_id, hand in enumerate(hands):
            cards = "".join(card.label() + " " for card in hand)
            self._write(f"Player {player_id} : {cards}\n")
        self._write("----------------------\n")

    def _play(self, num_players: int, verbose: bool) -> List[Tuple[int, int]]:
        self._check_players(num_players)
        self.cards = standard_deck()
        self.table = initial_table()

        hands, start_player = self._deal(num_players)
        for player_id in range(num_players):
            self.strategies[player_id].initialize(player_id)
        scores = [len(hand) for hand in hands]

        if verbose:
            self._write("\n7♦ is on the table at the start of the game.\n")
            self._show_hands(hands)
            self._write(self.table.render())

        current = (start_player + 1) % num_players
        passed = [False] * num_players
        game_over = False

        while not game_over:
            if verbose:
                self._write(f"\n\nPlayer {current}'s turn\n")
                self._show_hands(hands)

            strategy = self.strategies[current]
            hand = hands[current]
            choice = strategy.select_card(hand, self.table)

            if (
                choice is not None
                and 0 <= choice < len(hand)
                and is_playable(hand[choice], self.table)
            ):
                card = hand.pop(choice)
                self.table.place(card)
                if verbose:
                    self._write(f"\nPlayer {current} plays {card.label()}\n")
                    self._write(self.table.render())
                for observer in self.strategies.values():
                    observer.observe_move(current, card)
                scores[current] = len(hand)
                if not hand:
                    game_over = True
                    if verbose:
                        self._write(
                            f"\n\nPlayer {current} has emptied their hand! Game over.\n"
                        )
                passed[current] = False
            else:
                strategy.observe_pass(current)
                passed[current] = True

            current = (current + 1) % num_players

            if all(passed):
                if verbose:
                    self._write("\n\nAll players have passed! Game over.\n")
                game_over = True

        results = sorted(enumerate(scores), key=lambda entry: entry[1])

        if verbose:
            self._write("\n--- Final Scores ---\n")
            for player_id, score in results:
                self._write(f"Player {player_id} : {score} cards remaining\n")
        return results