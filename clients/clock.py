"""Date sources supplying the as-of date of a run."""

from __future__ import annotations

from datetime import date


class SystemDateSource:
    def today(self) -> date:
        return date.today()


class FixedDateSource:
    """Always report the same as-of date; used for reruns and tests."""

    def __init__(self, as_of: date) -> None:
        self._as_of = as_of

    def today(self) -> date:
        return self._as_of
