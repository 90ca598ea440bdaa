"""Iterated three-player prisoner's dilemma: payoffs, strategies and simulation."""

__version__ = "0.1.0"