# sevensgame

A simulator for **Sevens**, the card game where players build each suit outward
from its seven. It deals a standard 52-card deck among the players, puts the 7♦
on the table, and lets computer players take turns until someone empties their
hand or every player has passed. A player's score is the number of cards left
in hand; fewer is better.

## Rules played

- A 7 may be played whenever that suit's 7 is not yet on the table.
- Any other card may be played when a card of the same suit one rank above or
  below it is already on the table.
- A player who cannot, or will not, play passes. A choice that is out of range
  or not playable also counts as a pass.
- The round ends when a player's hand is empty, or when every player's most
  recent turn was a pass.

## Modules

- `sevensgame.cards`: `Card` (suit 0..3 shown as ♠ ♥ ♦ ♣, rank 1..13),
  `Table`, `standard_deck()`, `initial_table()` and `is_playable(card, table)`.
- `sevensgame.strategy`: the abstract `PlayerStrategy` and `PassingStrategy`.
- `sevensgame.game`: `GameMapper`, which deals, runs turns and ranks players.
- `sevensgame.loader`: `load_strategy(path)`, `available_strategies()` and
  `StrategyLoadError`.
- `sevensgame.cli`: the `sevensgame` command.

## Strategies

- `RandomAggressiveStrategy` (`sevensgame.random_aggressive`) plays a random
  legal card whenever it can.
- `PrudentStrategy` (`sevensgame.prudent`) holds back edge cards (A, 2, Q, K),
  opens a suit with its 7 only when it holds three or more cards of that suit,
  and favours suits it is long in.
- `CalculativeStrategy` (`sevensgame.calculative`) scores every legal move:
  high cards and aces, cards that unlock others in its own hand, suit length
  and gaps that block opponents. It picks at random among moves scoring within
  20% of the best.
- `Sentinel7` (`sevensgame.sentinel`) builds on that scoring, holds back 6s, 7s
  and 8s while the round is young or an opponent is close to going out, and
  favours cards that open runs it can follow.
- `PassingStrategy` (`sevensgame.strategy`) always passes; it is a starting
  point for writing your own.

Every strategy implements `PlayerStrategy`: `initialize(player_id)`,
`select_card(hand, table)`, `observe_move(player_id, card)`,
`observe_pass(player_id)` and `name()`. `select_card` returns the index of the
card to play in `hand`, or `None` to pass. Each built-in strategy takes an
optional `random.Random` as `rng`.

`load_strategy(path)` builds a fresh strategy from the stem of `path`, ignoring
directories, extension and case, so `./Sentinel7.so`, `Sentinel7` and
`sentinel7` are the same. The names it knows are listed by
`available_strategies()`: `CalculativeStrategy`, `PrudentStrategy`,
`RandomAgressiveStrategy`, `Sentinel7` and `StudentTemplate` (the passing
strategy). Any other name raises `StrategyLoadError`.

## Command line

```
sevensgame internal [players]
sevensgame demo [players]
sevensgame competition STRATEGY.so STRATEGY.so [...]
sevensgame tournament STRATEGY.so STRATEGY.so [...]
```

- `internal` plays one displayed round with random aggressive players
  (four by default).
- `demo` plays one displayed round alternating random aggressive and
  calculative players.
- `competition` plays one displayed round, one player per strategy given.
- `tournament` plays rounds until some player's total reaches 50 points, then
  ranks players by total score, with more rounds won breaking ties.

When three or more arguments are given and the last two do not contain `.so`,
those two are taken as deck and table files and ignored. Give strategy names
with the `.so` suffix (for example `Sentinel7.so PrudentStrategy.so`) so they
are not mistaken for those files. With no arguments, or with too few
strategies for `competition` or `tournament`, the command prints its usage and
exits with status 1; an unknown strategy name also gives status 1.

## From Python

```python
import random

from sevensgame.game import GameMapper
from sevensgame.calculative import CalculativeStrategy
from sevensgame.prudent import PrudentStrategy

rng = random.Random(7)
game = GameMapper(rng=rng)
game.register_strategy(0, CalculativeStrategy(rng=rng))
game.register_strategy(1, PrudentStrategy(rng=rng))

for player_id, cards_left in game.compute_game_progress(2):
    print(player_id, cards_left)
```

`compute_game_progress` returns `(player_id, cards_left)` pairs, fewest cards
first. `compute_and_display_game` plays the same way and prints each hand, move
and table to `out` (standard output by default).
`compute_named_game_progress(names)` and `compute_and_display_named_game(names)`
report players by name. `compute_multiple_rounds_to_score(num_players,
max_score)` plays a whole tournament and returns `(player_id, rank)` pairs
ordered by player id. Every seat from 0 to `num_players - 1` needs a registered
strategy, otherwise a `ValueError` is raised.

## What it does not do

Strategies are not loaded from files: `load_strategy` only chooses among the
strategies built into the package by name. The deck is always the standard
52 cards and the table always opens with the 7♦; deck and table files are not
read.

## Tests

```
pip install -e .[test]
pytest
```