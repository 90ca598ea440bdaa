"""Record of the decisions made in each round."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_OPPONENT_VIEW_SKIPS = 1


class History:
    """Rounds of three decisions each, with the names of the players."""

    def __init__(
        self,
        strategy_names: Iterable[str],
        rounds: Iterable[Sequence[str]] | None = None,
    ) -> None:
        self.strategy_names = list(strategy_names)
        self._rounds: list[tuple[str, ...]] = [
            tuple(choices) for choices in (rounds or ())
        ]

    @property
    def rounds(self) -> list[tuple[str, ...]]:
        """All rounds recorded so far, oldest first."""
        return list(self._rounds)

    def __len__(self) -> int:
        return len(self._rounds)

    def add_round(self, choices: Sequence[str]) -> None:
        """Record a round; it must hold exactly three decisions."""
        if len(choices) != 3:
            raise ValueError("Every round must hold exactly 3 decisions.")
        self._rounds.append(tuple(choices))

    def last_moves(self) -> tuple[str, ...]:
        """Decisions of the latest round."""
        if not self._rounds:
            raise IndexError("The history is empty. There are no last moves.")
        return self._rounds[-1]

    def opponents_moves(self, strategy_name: str) -> list[tuple[str, ...]]:
        """Every round without the second position's decision.

        The name is accepted for the caller's convenience; the view always
        leaves out the decision in the second position.
        """
        return [
            tuple(d for i, d in enumerate(round_) if i != _OPPONENT_VIEW_SKIPS)
            for round_ in self._rounds
        ]

    def format(self) -> str:
        """Names on the first line, then one line per round."""
        lines = ["".join(f"{name} " for name in self.strategy_names)]
        for number, round_ in enumerate(self._rounds, start=1):
            lines.append(f"Round {number}: " + "".join(f"{d} " for d in round_))
        return "\n".join(lines) + "\n"