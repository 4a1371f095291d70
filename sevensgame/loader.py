"""Looking up player strategies by the file name they are known under."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Tuple

from sevensgame.calculative import CalculativeStrategy
from sevensgame.prudent import PrudentStrategy
from sevensgame.random_aggressive import RandomAggressiveStrategy
from sevensgame.sentinel import Sentinel7
from sevensgame.strategy import PassingStrategy, PlayerStrategy


class StrategyLoadError(RuntimeError):
    """Raised when no strategy can be created for a given path."""


_FACTORIES: Dict[str, Callable[[], PlayerStrategy]] = {
    "RandomAgressiveStrategy": RandomAggressiveStrategy,
    "PrudentStrategy": PrudentStrategy,
    "CalculativeStrategy": CalculativeStrategy,
    "Sentinel7": Sentinel7,
    "StudentTemplate": PassingStrategy,
}


def available_strategies() -> Tuple[str, ...]:
    """Names of the strategies that ``load_strategy`` can create, sorted."""
    return tuple(sorted(_FACTORIES))


def load_strategy(path: str) -> PlayerStrategy:
    """Create a fresh strategy named by the stem of ``path``.

    ``./Sentinel7.so``, ``strategies/Sentinel7`` and ``sentinel7`` all name
    the same strategy; the match ignores directories, the extension and case.
    """
    stem = Path(path).stem if path else ""
    if not stem:
        raise StrategyLoadError(f"cannot load a strategy from {path!r}: empty name")
    wanted = stem.lower()
    for name, factory in _FACTORIES.items():
        if name.lower() == wanted:
            strategy = factory()
            if strategy is None:
                raise StrategyLoadError(f"failed to create the strategy from {path}")
            return strategy
    known = ", ".join(available_strategies())
    raise StrategyLoadError(
        f"cannot load a strategy from {path}: unknown strategy {stem!r} "
        f"(known: {known})"
    )