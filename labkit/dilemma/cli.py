"""Command line of the dilemma simulation."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field

from labkit.dilemma.simulation import Simulation
from labkit.dilemma.strategies import create_strategy

MODES = ("detailed", "fast", "tournament")
DEFAULT_STEPS = 20

_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class SimulationParams:
    """Settings of a simulation run."""

    strategies: list[str] = field(default_factory=list)
    mode: str = ""
    steps: int = DEFAULT_STEPS
    config_dir: str = ""
    matrix_file: str = ""

    def describe(self) -> str:
        """The settings as printed before a run."""
        matrix = self.matrix_file or "not specified"
        return (
            "Simulation parameters:\n"
            "Strategies: " + "".join(f"{name} " for name in self.strategies) + "\n"
            f"Simulation mode: {self.mode}\n"
            f"Number of steps: {self.steps}\n"
            f"Configuration directory: {self.config_dir}\n"
            f"Matrix file: {matrix}\n"
        )


def _to_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_arguments(argv: list[str]) -> dict[str, str]:
    """Split arguments into '--key=value' options and space-joined strategy names."""
    args: dict[str, str] = {}
    for arg in argv:
        if arg.startswith("--"):
            key, sep, value = arg.partition("=")
            args[key if sep else arg] = value
        else:
            args["strategies"] = args.get("strategies", "") + arg + " "
    return args


def _check_mode(mode: str, count: int) -> None:
    if mode not in MODES:
        raise ValueError(
            "Error: the simulation mode must be one of [detailed|fast|tournament]."
        )
    if mode == "tournament" and count < 4:
        raise ValueError(
            'Error: with "tournament" there must be more than 3 strategies.'
        )
    if mode != "tournament" and count != 3:
        raise ValueError(
            f'Error: with "{mode}" there must be exactly 3 strategies.'
        )


def parse_command_line(argv: list[str]) -> SimulationParams:
    """Build and check the simulation settings from the arguments."""
    args = parse_arguments(argv)
    params = SimulationParams()
    params.strategies = args.get("strategies", "").split()
    if len(params.strategies) < 3:
        raise ValueError("Not enough strategies. Give at least three.")

    if "--mode" in args:
        params.mode = args["--mode"]
        _check_mode(params.mode, len(params.strategies))
    else:
        params.mode = "tournament" if len(params.strategies) > 3 else "detailed"

    if "--steps" in args:
        params.steps = _to_int(args["--steps"])
        if params.steps <= 0:
            raise ValueError("Error: the number of steps must be a positive number.")
    else:
        params.steps = DEFAULT_STEPS

    params.config_dir = args.get("--configs", "")
    if "--configs" in args and not os.path.isdir(params.config_dir):
        raise ValueError("Error: the configuration directory does not exist.")

    params.matrix_file = args.get("--matrix", "")
    if "--matrix" in args and not os.path.exists(params.matrix_file):
        raise ValueError("Error: the matrix file was not found.")

    return params


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments and run the chosen simulation mode."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        params = parse_command_line(args)
        print(params.describe())
        strategies = []
        for name in params.strategies:
            config_path = f"{params.config_dir}/{name}.conf"
            if not os.path.exists(config_path):
                config_path = ""
            strategies.append(create_strategy(name, config_path))
        simulation = Simulation(strategies, params.matrix_file, params.steps)
        if params.mode == "detailed":
            simulation.run_detailed()
        elif params.mode == "fast":
            simulation.run_fast()
        elif params.mode == "tournament":
            simulation.run_tournament()
        else:
            raise ValueError(f"Unknown simulation mode: {params.mode}")
    except (ValueError, LookupError, RuntimeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())