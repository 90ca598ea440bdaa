"""Numeric key = value settings of a strategy."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_BLANKS = " \t"


def _to_float(key: str, text: str) -> float:
    match = _FLOAT.match(text.lstrip())
    if match is None:
        raise ValueError(f"Invalid value for key: {key}")
    token = match.group(0)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ValueError(f"Value of key out of range: {key}")
    return value


def parse_config_lines(lines: Iterable[str]) -> dict[str, float]:
    """Read 'key = value' lines; blank lines, '#' comments and lines without '=' are skipped."""
    config: dict[str, float] = {}
    for raw in lines:
        line = raw.rstrip("\n").strip(_BLANKS)
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip(_BLANKS)
        config[key] = _to_float(key, value.strip(_BLANKS))
    return config


class StrategyConfig:
    """Settings read from a file; a file that cannot be opened gives no settings."""

    def __init__(self, config_path: str) -> None:
        try:
            stream = open(config_path, encoding="utf-8")
        except OSError:
            print("Could not open the configuration file.")
            self.values: dict[str, float] = {}
            return
        with stream:
            self.values = parse_config_lines(stream)

    def get(self, key: str, default: float = 0.0) -> float:
        """The value of ``key``, or ``default`` when it is not set."""
        return self.values.get(key, default)