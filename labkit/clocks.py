"""A family of clocks that each hold a time of day."""

from __future__ import annotations

import logging

from labkit.clock_time import Time

_log = logging.getLogger(__name__)


class Clock:
    """A clock holding a normalised time of day."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        self._time = Time(hours, minutes, seconds)
        _log.debug("Clock constructor called")

    @property
    def time(self) -> Time:
        """The time the clock holds."""
        return self._time

    def display_time(self) -> str:
        """Print the time as 'H:<h> M:<m> S:<s>' and return it."""
        line = self._time.describe()
        print(line)
        return line


class CuckooClock(Clock):
    """A clock with a cuckoo."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        super().__init__(hours, minutes, seconds)
        _log.debug("CuckooClock constructor called")

    def chime(self) -> str:
        """Print the cuckoo call and return it."""
        line = "Cuckoo! Cuckoo!"
        print(line)
        return line


class WallClock(Clock):
    """A clock that hangs on a wall."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        super().__init__(hours, minutes, seconds)
        _log.debug("WallClock constructor called")


class SmartWatch(Clock):
    """A clock that also shows notifications."""

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        super().__init__(hours, minutes, seconds)
        _log.debug("SmartWatch constructor called")

    def display_notifications(self) -> str:
        """Print the notification summary and return it."""
        line = "No new notifications"
        print(line)
        return line


class SigmaClock(Clock):
    """A clock that shows a banner instead of its time."""

    _BANNER = "\n\tSIGMA TIME\n\U0001f5ff\U0001f5ff\U0001f5ff\U0001f5ff\U0001f5ff\U0001f5ff\n\t"

    def __init__(self, hours: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        super().__init__(hours, minutes, seconds)
        _log.debug("SigmaClock constructor called")

    def display_time(self) -> str:
        """Print the banner and return it."""
        print(self._BANNER)
        return self._BANNER