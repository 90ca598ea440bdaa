"""Running matches of the three-player dilemma."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import combinations

from labkit.dilemma.history import History
from labkit.dilemma.matrix import GameMatrix
from labkit.dilemma.renderer import Renderer
from labkit.dilemma.strategies import Strategy


def get_choices(
    history: History, player1: Strategy, player2: Strategy, player3: Strategy
) -> list[str]:
    """Decisions of three players given the history so far."""
    return [
        player.decide(history.opponents_moves(player.name))
        for player in (player1, player2, player3)
    ]


def play_custom_match(
    player1: Strategy,
    player2: Strategy,
    player3: Strategy,
    game_matrix: GameMatrix,
    steps: int,
) -> list[int]:
    """Play ``steps`` rounds between three players; return their totals."""
    players = (player1, player2, player3)
    history = History(player.name for player in players)
    totals = [0, 0, 0]
    for _ in range(steps):
        choices = get_choices(history, *players)
        history.add_round(choices)
        round_scores = game_matrix.calculate_scores(choices)
        totals = [total + score for total, score in zip(totals, round_scores)]
    return totals


class Simulation:
    """A set of strategies played against each other for a number of rounds."""

    def __init__(
        self,
        strategies: Iterable[Strategy],
        matrix_path: str | None = None,
        steps: int = 20,
        renderer: Renderer | None = None,
    ) -> None:
        self.strategies = list(strategies)
        self.game_matrix = GameMatrix(matrix_path or None)
        self.steps = steps
        self.renderer = renderer if renderer is not None else Renderer()

    def _names(self) -> list[str]:
        return [strategy.name for strategy in self.strategies]

    def _say(self, text: str) -> None:
        print(text, file=self.renderer.out, flush=True)

    def _play_round(self, history: History) -> list[str]:
        choices = [
            strategy.decide(history.opponents_moves(strategy.name))
            for strategy in self.strategies
        ]
        history.add_round(choices)
        return choices

    @staticmethod
    def _add(totals: Sequence[int], scores: Sequence[int]) -> list[int]:
        return [total + score for total, score in zip(totals, scores)]

    def run_detailed(self, wait: Callable[[], object] | None = None) -> list[int]:
        """Play round by round, showing each one and calling ``wait`` in between.

        By default ``wait`` reads a line from standard input. Each round is
        recorded in the history twice. Returns the total scores.
        """
        if wait is None:
            wait = sys.stdin.readline
        self._say("\nStarting detailed simulation...")
        self._say("Strategies:")
        names = self._names()
        self.renderer.detailed_header(names)
        history = History(names)
        totals = [0] * len(self.strategies)
        for step in range(self.steps):
            choices = self._play_round(history)
            round_scores = self.game_matrix.calculate_scores(choices)
            history.add_round(choices)
            totals = self._add(totals, round_scores)
            self.renderer.clear_lines(len(names) + 4)
            self.renderer.detailed_round(
                step + 1, history.last_moves(), totals, names
            )
            self._say('Press "Enter" to continue...')
            wait()
        self.renderer.clear_lines(4)
        self.renderer.fast_results(names, totals)
        return totals

    def run_fast(self) -> list[int]:
        """Play every round without pauses; show and return the total scores."""
        self._say("Starting fast simulation...")
        history = History(self._names())
        totals = [0] * len(self.strategies)
        for _ in range(self.steps):
            choices = self._play_round(history)
            totals = self._add(totals, self.game_matrix.calculate_scores(choices))
        self.renderer.fast_results(self._names(), totals)
        return totals

    def run_tournament(self) -> list[int]:
        """Play a match for every set of three strategies; return the totals."""
        self._say("Starting tournament...")
        totals = [0] * len(self.strategies)
        for i, j, k in combinations(range(len(self.strategies)), 3):
            trio = (self.strategies[i], self.strategies[j], self.strategies[k])
            match_scores = play_custom_match(*trio, self.game_matrix, self.steps)
            for index, score in zip((i, j, k), match_scores):
                totals[index] += score
            self.renderer.tournament_round(
                match_scores, [player.name for player in trio]
            )
        self.renderer.tournament_results(totals, self._names())
        return totals