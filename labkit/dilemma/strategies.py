"""Players of the dilemma and a registry that creates them by name."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable, Sequence

from labkit.dilemma.matrix import COOPERATE, DEFECT
from labkit.dilemma.strategy_config import StrategyConfig

ChoiceHistory = Sequence[Sequence[str]]
StrategyCreator = Callable[[str], "Strategy"]


class UnknownStrategyError(LookupError):
    """No strategy is registered under the requested name."""


class Strategy(ABC):
    """A player that decides each round from the moves seen so far."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def decide(self, history: ChoiceHistory) -> str:
        """Return 'C' to cooperate or 'D' to defect."""


class AlwaysCooperate(Strategy):
    """Always cooperates."""

    def __init__(self) -> None:
        super().__init__("AlwaysCooperate")

    def decide(self, history: ChoiceHistory) -> str:
        return COOPERATE


class AlwaysDefect(Strategy):
    """Always defects."""

    def __init__(self) -> None:
        super().__init__("AlwaysDefect")

    def decide(self, history: ChoiceHistory) -> str:
        return DEFECT


class Eye4Eye(Strategy):
    """Defects only when both opponents defected last round."""

    def __init__(self) -> None:
        super().__init__("Eye4Eye")

    def decide(self, history: ChoiceHistory) -> str:
        if not history:
            return COOPERATE
        betrayals = list(history[-1]).count(DEFECT)
        return DEFECT if betrayals == 2 else COOPERATE


class RandomChoice(Strategy):
    """Cooperates or defects at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("RandomChoice")
        self._rng = rng if rng is not None else random.Random()

    def decide(self, history: ChoiceHistory) -> str:
        return COOPERATE if self._rng.randrange(2) == 0 else DEFECT


class AdaptiveCooperator(Strategy):
    """Cooperates while recent rounds were cooperative enough.

    Each cooperation in the visible rounds counts 1 and each defection
    counts ``betrayal_penalty``; the sum divided by the number of visible
    rounds is compared with ``cooperation_threshold``.
    """

    def __init__(self, config_path: str = "") -> None:
        super().__init__("AdaptiveCooperator")
        config = StrategyConfig(config_path)
        self.cooperation_threshold = config.get("cooperation_threshold", 0.5)
        self.history_depth = int(config.get("history_depth", 10))
        self.betrayal_penalty = config.get("betrayal_penalty", -5.0)

    def decide(self, history: ChoiceHistory) -> str:
        if not history:
            return COOPERATE
        depth = min(self.history_depth, len(history))
        visible = history[len(history) - depth :] if depth > 0 else ()
        score = 0.0
        for round_ in visible:
            for decision in round_:
                if decision == COOPERATE:
                    score += 1.0
                elif decision == DEFECT:
                    score += self.betrayal_penalty
        rate = score / depth if depth else math.nan
        return COOPERATE if rate >= self.cooperation_threshold else DEFECT


class MetaStrategy(Strategy):
    """A strategy built from other strategies."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.sub_strategies: list[Strategy] = []

    def sub_strategy_names(self) -> list[str]:
        """Names of the strategies this one consults."""
        return [strategy.name for strategy in self.sub_strategies]


class ConsensusMetaStrategy(MetaStrategy):
    """Follows the majority of its sub-strategies; a tie means cooperation."""

    def __init__(self) -> None:
        super().__init__("ConsensusMetaStrategy")
        self.sub_strategies = [
            AlwaysCooperate(),
            AlwaysDefect(),
            Eye4Eye(),
            RandomChoice(),
            AdaptiveCooperator(""),
        ]

    def decide(self, history: ChoiceHistory) -> str:
        votes = Counter(strategy.decide(history) for strategy in self.sub_strategies)
        return COOPERATE if votes[COOPERATE] >= votes[DEFECT] else DEFECT


_creators: dict[str, StrategyCreator] = {}


def register_strategy(name: str, creator: StrategyCreator) -> None:
    """Register a creator, called with a config path, under ``name``."""
    _creators[name] = creator


def create_strategy(name: str, config_path: str = "") -> Strategy:
    """Create the strategy registered under ``name``."""
    try:
        creator = _creators[name]
    except KeyError:
        raise UnknownStrategyError(f"Strategy not found: {name}") from None
    return creator(config_path)


register_strategy("AlwaysCooperate", lambda config_path: AlwaysCooperate())
register_strategy("AlwaysDefect", lambda config_path: AlwaysDefect())
register_strategy("Eye4Eye", lambda config_path: Eye4Eye())
register_strategy("RandomChoice", lambda config_path: RandomChoice())
register_strategy("AdaptiveCooperator", AdaptiveCooperator)
register_strategy("ConsensusMetaStrategy", lambda config_path: ConsensusMetaStrategy())