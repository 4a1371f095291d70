"""Command line entry point for running Sevens games."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from sevensgame.game import GameMapper
from sevensgame.loader import StrategyLoadError, load_strategy
from sevensgame.strategy import PlayerStrategy

_USAGE = (
    "Usage: sevens_game [internal|demo|competition|tournament] "
    "[args...] [deck.txt table.txt]\n"
)
_LIBRARY_MARK = ".so"
_DEFAULT_PLAYERS = 4
_TOURNAMENT_TARGET = 50


def _seat(game: GameMapper, paths: Sequence[str], show_name: bool = True) -> List[PlayerStrategy]:
    strategies: List[PlayerStrategy] = []
    for player_id, path in enumerate(paths):
        strategy = load_strategy(path)
        strategy.initialize(player_id)
        game.register_strategy(player_id, strategy)
        strategies.append(strategy)
        print(f"J{player_id} → {strategy.name()}")
    return strategies


def _player_count(args: Sequence[str]) -> int:
    return int(args[1]) if len(args) >= 2 else _DEFAULT_PLAYERS


def _run(mode: str, args: List[str]) -> int:
    game = GameMapper()

    if mode == "internal":
        print("[main] Internal mode → RandomAgressiveStrategy")
        count = _player_count(args)
        _seat(game, ["./RandomAgressiveStrategy.so"] * count)
        game.compute_and_display_game(count)
        return 0

    if mode == "demo":
        print("[main] Demo mode → alternating RandomAgressive/Calculative")
        count = _player_count(args)
        paths = [
            "./RandomAgressiveStrategy.so" if i % 2 == 0 else "./CalculativeStrategy.so"
            for i in range(count)
        ]
        _seat(game, paths)
        game.compute_and_display_game(count)
        return 0

    if mode in ("competition", "tournament"):
        if len(args) < 3:
            sys.stderr.write(
                f"[main] Usage: sevens_game {mode} strat1.so strat2.so [...]\n"
            )
            return 1
        if mode == "competition":
            print("[main] Competition mode → loading strategies")
            strategies = _seat(game, args[1:])
            game.compute_and_display_game(len(strategies))
        else:
            print(
                "[main] CompetitiveTo50 mode → multiple rounds until a player "
                f"reaches {_TOURNAMENT_TARGET} points"
            )
            strategies = _seat(game, args[1:])
            print(
                f"\n=== Starting multi-round competition until "
                f"{_TOURNAMENT_TARGET} points ==="
            )
            game.compute_multiple_rounds_to_score(len(strategies), _TOURNAMENT_TARGET)
        return 0

    sys.stderr.write(f"[main] Unknown mode: {mode}\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; ``argv`` excludes the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(_USAGE)
        return 1

    # Trailing deck and table files are accepted but not used.
    if (
        len(args) >= 3
        and _LIBRARY_MARK not in args[-2]
        and _LIBRARY_MARK not in args[-1]
    ):
        args = args[:-2]

    try:
        return _run(args[0], args)
    except (StrategyLoadError, ValueError) as error:
        sys.stderr.write(f"[main] {error}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())