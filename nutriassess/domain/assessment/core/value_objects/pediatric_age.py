"""PediatricAge value object - calendar age breakdown for children."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PediatricAge:
    """Age split into whole years, months and days.

    Kept only for patients younger than 20 years.
    """

    years: int
    months: int
    days: int

    def __str__(self) -> str:
        return f"{self.years}y {self.months}m {self.days}d"
