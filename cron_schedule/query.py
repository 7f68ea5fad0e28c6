# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Find the next instant that satisfies a set of resolved schedule fields.

The search walks the fields from most to least significant: year, month, day of month,
hour, minute, second. Day of week is not a position of its own, it filters the days
of month the search visits.

The first time the search looks at a field, it starts from the value of that field in
the reference instant, so it does not skip the rest of the reference day, hour and so
on. As soon as a field moves past the reference value, or a more significant field
carries, every less significant field starts over from the lowest value of its
domain. Which fields still start from the reference value is tracked by a
`NextAfterQuery`, which is never modified in place: every transition returns a new
query.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Final, Optional

from cron_schedule.calendar_utils import (
    days_in_month,
    next_whole_second,
    weekday_from_sunday,
)
from cron_schedule.config import DEFAULT_MAX_SEARCH_YEARS
from cron_schedule.observability.powertools_logging import powertools_logger
from cron_schedule.ordinal import Ordinal
from cron_schedule.schedule_fields import ScheduleFields
from cron_schedule.units import DaysOfMonth, Hours, Minutes, Months, Seconds, Years

logger: Final = powertools_logger()


class FieldCursor(str, Enum):
    NOT_YET_CONSUMED = "not-yet-consumed"
    RESET = "reset"


class SearchPosition(str, Enum):
    """Fields the search moves through, most significant first"""

    YEAR = "year"
    MONTH = "month"
    DAY_OF_MONTH = "day_of_month"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


_positions: Final = list(SearchPosition)

_domain_min: Final = {
    SearchPosition.YEAR: Years.inclusive_min,
    SearchPosition.MONTH: Months.inclusive_min,
    SearchPosition.DAY_OF_MONTH: DaysOfMonth.inclusive_min,
    SearchPosition.HOUR: Hours.inclusive_min,
    SearchPosition.MINUTE: Minutes.inclusive_min,
    SearchPosition.SECOND: Seconds.inclusive_min,
}

_datetime_attribute: Final = {
    SearchPosition.YEAR: "year",
    SearchPosition.MONTH: "month",
    SearchPosition.DAY_OF_MONTH: "day",
    SearchPosition.HOUR: "hour",
    SearchPosition.MINUTE: "minute",
    SearchPosition.SECOND: "second",
}


@dataclass(frozen=True)
class NextAfterQuery:
    """The starting instant of a search and which fields still start from it"""

    initial_datetime: datetime
    year: FieldCursor = FieldCursor.NOT_YET_CONSUMED
    month: FieldCursor = FieldCursor.NOT_YET_CONSUMED
    day_of_month: FieldCursor = FieldCursor.NOT_YET_CONSUMED
    hour: FieldCursor = FieldCursor.NOT_YET_CONSUMED
    minute: FieldCursor = FieldCursor.NOT_YET_CONSUMED
    second: FieldCursor = FieldCursor.NOT_YET_CONSUMED

    @classmethod
    def after(cls, dt: datetime) -> Optional["NextAfterQuery"]:
        """
        Start a search for an instant strictly after `dt`
        :return: the query, None if no later second can be represented
        """
        initial_datetime: Final = next_whole_second(dt)
        if initial_datetime is None:
            return None
        return NextAfterQuery(initial_datetime=initial_datetime)

    def cursor(self, position: SearchPosition) -> FieldCursor:
        cursor: FieldCursor = getattr(self, position.value)
        return cursor

    def lower_bound(self, position: SearchPosition) -> tuple[Ordinal, "NextAfterQuery"]:
        """
        The value to start from for a field, and the query after the field has been
        consumed. Only the first evaluation of a field starts from the initial instant.
        """
        if self.cursor(position) is FieldCursor.RESET:
            return _domain_min[position], self
        bound: Final[Ordinal] = getattr(
            self.initial_datetime, _datetime_attribute[position]
        )
        return bound, replace(self, **{position.value: FieldCursor.RESET})

    def reset(self, position: SearchPosition) -> "NextAfterQuery":
        """Make `position` and every less significant field start from its minimum"""
        index: Final = _positions.index(position)
        return replace(
            self, **{pos.value: FieldCursor.RESET for pos in _positions[index:]}
        )


def next_after(
    fields: ScheduleFields,
    after: datetime,
    max_search_years: int = DEFAULT_MAX_SEARCH_YEARS,
) -> Optional[datetime]:
    """
    Find the earliest instant strictly after `after` that satisfies `fields`
    :param fields: resolved schedule fields
    :param after: reference instant, naive or timezone-aware
    :param max_search_years: how many more years of the years set to visit
    :return: the next matching instant with the same tzinfo as `after`, None if there is
    no such instant
    """
    query = NextAfterQuery.after(after)
    if query is None:
        return None

    year_start, query = query.lower_bound(SearchPosition.YEAR)
    if not fields.years.includes(year_start):
        query = query.reset(SearchPosition.MONTH)

    # counts years visited, not the calendar distance between them
    for years_searched, year in enumerate(
        fields.years.range(year_start, Years.inclusive_max)
    ):
        if years_searched > max_search_years:
            logger.debug(
                f"No match within {max_search_years} searched years, giving up at "
                f"{year}"
            )
            return None

        month_start, query = query.lower_bound(SearchPosition.MONTH)
        if not fields.months.includes(month_start):
            query = query.reset(SearchPosition.DAY_OF_MONTH)

        for month in fields.months.range(month_start, Months.inclusive_max):
            day_start, query = query.lower_bound(SearchPosition.DAY_OF_MONTH)
            if not fields.days_of_month.includes(day_start):
                query = query.reset(SearchPosition.HOUR)

            for day in fields.days_of_month.range(day_start, days_in_month(year, month)):
                if not fields.days_of_week.includes(weekday_from_sunday(year, month, day)):
                    query = query.reset(SearchPosition.HOUR)
                    continue

                hour_start, query = query.lower_bound(SearchPosition.HOUR)
                if not fields.hours.includes(hour_start):
                    query = query.reset(SearchPosition.MINUTE)

                for hour in fields.hours.range(hour_start, Hours.inclusive_max):
                    minute_start, query = query.lower_bound(SearchPosition.MINUTE)
                    if not fields.minutes.includes(minute_start):
                        query = query.reset(SearchPosition.SECOND)

                    for minute in fields.minutes.range(
                        minute_start, Minutes.inclusive_max
                    ):
                        second_start, query = query.lower_bound(SearchPosition.SECOND)

                        for second in fields.seconds.range(
                            second_start, Seconds.inclusive_max
                        ):
                            return query.initial_datetime.replace(
                                year=year,
                                month=month,
                                day=day,
                                hour=hour,
                                minute=minute,
                                second=second,
                            )
                        query = query.reset(SearchPosition.SECOND)
                    query = query.reset(SearchPosition.MINUTE)
                query = query.reset(SearchPosition.HOUR)
            query = query.reset(SearchPosition.DAY_OF_MONTH)
        query = query.reset(SearchPosition.MONTH)

    logger.debug(f"No match on or after year {year_start}")
    return None
