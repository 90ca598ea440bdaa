"""Payoff table of the three-player dilemma."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

COOPERATE = "C"
DEFECT = "D"

_DEFAULT_TABLE: dict[tuple[str, int], int] = {
    (COOPERATE, 0): 7,
    (COOPERATE, 1): 3,
    (COOPERATE, 2): 0,
    (DEFECT, 0): 9,
    (DEFECT, 1): 5,
    (DEFECT, 2): 1,
}

_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class MatrixError(RuntimeError):
    """A payoff table file cannot be opened or read."""


def _to_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


class MatrixReader:
    """Payoffs keyed by a player's choice and the number of defecting opponents.

    Without a file the built-in table is used. A file has a header line
    followed by lines of the form 'choice;defectors;payoff'.
    """

    def __init__(self, file_path: str | None = None) -> None:
        if file_path is None:
            self._table = dict(_DEFAULT_TABLE)
        else:
            self._table = {}
            self._load(file_path)

    @property
    def table(self) -> Mapping[tuple[str, int], int]:
        """The whole table, read-only."""
        return MappingProxyType(self._table)

    def _load(self, file_path: str) -> None:
        try:
            stream = open(file_path, encoding="utf-8")
        except OSError as exc:
            raise MatrixError(f"Could not open the matrix file: {file_path}") from exc
        with stream:
            lines = (line[:-1] if line.endswith("\n") else line for line in stream)
            if next(lines, None) is None:
                return
            for line in lines:
                self._parse_line(line)

    def _parse_line(self, line: str) -> None:
        parts = line.split(";", 2)
        if len(parts) < 3 or not parts[2]:
            raise MatrixError(f"Could not parse line: {line}")
        choice = parts[0][:1] or "\0"
        defectors = _to_int(parts[1])
        payoff = _to_int(parts[2].split(";", 1)[0])
        self._table[(choice, defectors)] = payoff

    def result(self, choice: str, defectors: int) -> int:
        """Payoff for ``choice`` when ``defectors`` opponents defect."""
        try:
            return self._table[(choice, defectors)]
        except KeyError:
            raise KeyError(
                f"No data for the combination: {choice}, {defectors}"
            ) from None


class GameMatrix:
    """Scores of a round of three decisions."""

    def __init__(self, file_path: str | None = None) -> None:
        self._reader = MatrixReader(file_path)

    @property
    def reader(self) -> MatrixReader:
        """The underlying payoff table."""
        return self._reader

    def score(self, own: str, second: str, third: str) -> int:
        """Payoff of the player choosing ``own`` against the two others."""
        defectors = (second == DEFECT) + (third == DEFECT)
        return self._reader.result(own, defectors)

    def calculate_scores(self, choices: Sequence[str]) -> list[int]:
        """Payoffs of all three players of a round."""
        if len(choices) != 3:
            raise ValueError("Decisions must be given for exactly three players")
        first, second, third = choices
        return [
            self.score(first, second, third),
            self.score(second, third, first),
            self.score(third, first, second),
        ]