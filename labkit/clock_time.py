"""Time of day with wrap-around arithmetic and a live-instance counter."""

from __future__ import annotations

import logging
import re

_log = logging.getLogger(__name__)

_SECONDS_PER_DAY = 24 * 3600
_TIME_TEXT = re.compile(
    r"\s*([+-]?\d+)\s*[^\s\d]\s*([+-]?\d+)\s*[^\s\d]\s*([+-]?\d+)\s*(?:\S\s*)?"
)


class Time:
    """Hours, minutes and seconds, always normalised into one day.

    Components may be given out of range or negative; they are carried
    into the next larger unit and the hours wrap modulo 24. The class
    keeps count of how many instances are alive.
    """

    _live = 0

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        self._hours = 0
        self._minutes = 0
        self._seconds = 0
        self._assign(hours, minutes, seconds)
        Time._live += 1
        _log.debug("Constructor called. Current object count: %d", Time._live)

    def __del__(self) -> None:
        Time._live -= 1
        _log.debug("Destructor called. Current object count: %d", Time._live)

    def _assign(self, hours: int, minutes: int, seconds: int) -> None:
        total = (hours * 3600 + minutes * 60 + seconds) % _SECONDS_PER_DAY
        self._hours, rest = divmod(total, 3600)
        self._minutes, self._seconds = divmod(rest, 60)

    @property
    def hours(self) -> int:
        """Hours, 0 to 23; assigning a value normalises the time."""
        return self._hours

    @hours.setter
    def hours(self, value: int) -> None:
        self._assign(value, self._minutes, self._seconds)

    @property
    def minutes(self) -> int:
        """Minutes, 0 to 59."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Seconds, 0 to 59."""
        return self._seconds

    @classmethod
    def live_count(cls) -> int:
        """Number of instances currently alive."""
        return Time._live

    def to_seconds(self) -> int:
        """Seconds since the start of the day."""
        return self._hours * 3600 + self._minutes * 60 + self._seconds

    def __copy__(self) -> Time:
        return Time(self._hours, self._minutes, self._seconds)

    def __add__(self, other: object) -> Time:
        if isinstance(other, Time):
            return Time(
                self._hours + other._hours,
                self._minutes + other._minutes,
                self._seconds + other._seconds,
            )
        if isinstance(other, int):
            return Time(self._hours, self._minutes, self._seconds + other)
        return NotImplemented

    def __radd__(self, other: object) -> Time:
        if isinstance(other, int):
            return Time(self._hours, self._minutes, self._seconds + other)
        return NotImplemented

    def __sub__(self, other: object) -> Time:
        if isinstance(other, Time):
            return Time(
                self._hours - other._hours,
                self._minutes - other._minutes,
                self._seconds - other._seconds,
            )
        if isinstance(other, int):
            return Time(self._hours, self._minutes, self._seconds - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Time:
        """Take ``other`` seconds away from this time, the same as ``time - other``."""
        if isinstance(other, int):
            return Time(self._hours, self._minutes, self._seconds - other)
        return NotImplemented

    def __iadd__(self, other: object) -> Time:
        if isinstance(other, Time):
            self._assign(
                self._hours + other._hours,
                self._minutes + other._minutes,
                self._seconds + other._seconds,
            )
            return self
        if isinstance(other, int):
            self._assign(self._hours, self._minutes, self._seconds + other)
            return self
        return NotImplemented

    def __isub__(self, other: object) -> Time:
        if isinstance(other, Time):
            self._assign(
                self._hours - other._hours,
                self._minutes - other._minutes,
                self._seconds - other._seconds,
            )
            return self
        if isinstance(other, int):
            self._assign(self._hours, self._minutes, self._seconds - other)
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self._hours, self._minutes, self._seconds) == (
            other._hours,
            other._minutes,
            other._seconds,
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._hours}:{self._minutes}:{self._seconds}"

    def __repr__(self) -> str:
        return f"Time({self._hours}, {self._minutes}, {self._seconds})"

    def describe(self) -> str:
        """The time as 'H:<h> M:<m> S:<s>'."""
        return f"H:{self._hours} M:{self._minutes} S:{self._seconds}"


def parse_time(text: str) -> Time:
    """Read 'h:m:s' where any single non-space, non-digit character separates."""
    match = _TIME_TEXT.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot read a time from {text!r}")
    hours, minutes, seconds = (int(group) for group in match.groups())
    return Time(hours, minutes, seconds)