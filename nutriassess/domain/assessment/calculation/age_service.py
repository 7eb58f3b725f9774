"""AgeService - calendar age from date of birth."""

import calendar
from datetime import date
from typing import Optional, Tuple

from ..core.value_objects.pediatric_age import PediatricAge

# Below this age the Y/M/D breakdown is kept
PEDIATRIC_AGE_LIMIT = 20


class AgeService:
    """Derive age at a report date from the date of birth."""

    def breakdown(self, birth_date: date, report_date: date) -> Tuple[int, int, int]:
        """Whole years, months and days between two dates.

        Days borrow from the month preceding the report month; months
        borrow from the year.

        Example:
            >>> AgeService().breakdown(date(2015, 3, 20), date(2024, 2, 10))
            (8, 10, 21)
        """
        years = report_date.year - birth_date.year
        months = report_date.month - birth_date.month
        days = report_date.day - birth_date.day

        if days < 0:
            months -= 1
            prev_year, prev_month = (
                (report_date.year - 1, 12)
                if report_date.month == 1
                else (report_date.year, report_date.month - 1)
            )
            days += calendar.monthrange(prev_year, prev_month)[1]

        if months < 0:
            years -= 1
            months += 12

        return years, months, days

    def from_birth_date(
        self, birth_date: date, report_date: date
    ) -> Tuple[int, Optional[PediatricAge]]:
        """Age in years plus the pediatric breakdown under 20.

        A birth date after the report date yields age 0.
        """
        years, months, days = self.breakdown(birth_date, report_date)
        age = max(0, years)
        if age >= PEDIATRIC_AGE_LIMIT:
            return age, None
        return age, PediatricAge(years=age, months=max(0, months), days=max(0, days))
