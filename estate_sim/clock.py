"""Year sources used to compute building age."""

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """Source of the current calendar year."""

    @abstractmethod
    def current_year(self) -> int:
        """Return the current year."""


class SystemClock(Clock):
    """Clock backed by the local system date."""

    def current_year(self) -> int:
        return date.today().year


class FixedClock(Clock):
    """Clock pinned to a given year, for reproducible reports and tests."""

    def __init__(self, year: int) -> None:
        self.year = year

    def current_year(self) -> int:
        return self.year

    def __repr__(self) -> str:
        return f"FixedClock({self.year})"
