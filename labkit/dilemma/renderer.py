"""Text output of the dilemma simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

_CURSOR_UP_AND_CLEAR = "\033[F\033[K"


class Renderer:
    """Writes tables and results of a simulation to a text stream.

    Without a stream the current standard output is used.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        """The stream written to."""
        return self._out if self._out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def detailed_header(self, names: Sequence[str]) -> None:
        """Write the names as column headings, underlined with dashes."""
        headings = "".join(f"{name} | " for name in names)
        rules = "".join(f"{'-' * len(name)} | " for name in names)
        self._write(f"{headings}\n{rules}\n")

    def clear_lines(self, count: int) -> None:
        """Move the cursor up and clear ``count`` lines of a terminal."""
        self._write(_CURSOR_UP_AND_CLEAR * count)

    def detailed_round(
        self,
        round_number: int,
        choices: Sequence[str],
        scores: Sequence[int],
        names: Sequence[str],
    ) -> None:
        """Write the choices of a round and the running scores.

        When the sizes of the data differ from the number of names, an
        error is reported on standard error and nothing is written.
        """
        if len(choices) != len(names) or len(scores) != len(names):
            print(
                "Error: the data sizes do not match the number of strategies!",
                file=sys.stderr,
            )
            return
        lines = [f"Round {round_number} | " + "".join(f"{c} | " for c in choices)]
        lines.extend(
            f"Strategy: {name} | Score: {score}" for name, score in zip(names, scores)
        )
        self._write("\n".join(lines) + "\n\n")

    def fast_results(self, names: Sequence[str], scores: Sequence[int]) -> None:
        """Write the final score of every player."""
        lines = ["", "Final score:"]
        lines.extend(
            f"Player {name}: total score = {score}"
            for name, score in zip(names, scores)
        )
        self._write("\n".join(lines) + "\n")

    def tournament_round(self, scores: Sequence[int], names: Sequence[str]) -> None:
        """Write the scores of one match of the tournament."""
        lines = ["", "Tournament round:"]
        lines.extend(f"{name}: {score} points." for name, score in zip(names, scores))
        self._write("\n".join(lines) + "\n")

    def tournament_results(self, scores: Sequence[int], names: Sequence[str]) -> None:
        """Write the totals of the whole tournament, one line per score."""
        lines = ["", "Tournament results:"]
        lines.extend(
            f"Strategy {names[i]}: {score} points" for i, score in enumerate(scores)
        )
        self._write("\n".join(lines) + "\n")