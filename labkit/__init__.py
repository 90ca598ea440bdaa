"""Small exercise programs: a quadratic solver, word tools, clock-time arithmetic and a dilemma simulator."""

__version__ = "0.1.0"