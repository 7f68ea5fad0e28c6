# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Final, Optional

from cron_schedule.config import CronScheduleEnv
from cron_schedule.error import CronError
from cron_schedule.observability.powertools_logging import powertools_logger
from cron_schedule.query import next_after
from cron_schedule.schedule_fields import ScheduleFields
from cron_schedule.units import (
    DaysOfMonth,
    DaysOfWeek,
    Hours,
    Minutes,
    Months,
    Seconds,
    Years,
)

logger: Final = powertools_logger()


@dataclass(frozen=True)
class Schedule:
    """
    A parsed cron expression. Holds the text it was parsed from and the resolved values
    of its fields, and answers when the expression next fires.

        schedule = Schedule.parse("0 30 9,12,15 1,15 May-Aug Mon,Wed,Fri 2018/2")
        for fire_time in islice(schedule.upcoming(start), 10):
            ...
    """

    source: str
    fields: ScheduleFields

    @classmethod
    def parse(cls, expression: str) -> "Schedule":
        """
        Parse a cron expression
        :param expression: six or seven fields (seconds, minutes, hours, days of month,
        months, days of week, and optionally years), or one of the shorthand macros
        @yearly, @monthly, @weekly, @daily and @hourly
        :return: the schedule for the expression
        """
        try:
            fields: Final = ScheduleFields.parse(expression)
        except CronError as err:
            if err.expression is None:
                err.expression = expression
            logger.debug(f"Rejected cron expression {expression!r}: {err.message}")
            raise
        return Schedule(source=expression, fields=fields)

    def next_after(
        self, after: datetime, max_search_years: Optional[int] = None
    ) -> Optional[datetime]:
        """
        The first instant strictly after `after` that the schedule includes
        :param after: reference instant, naive or timezone-aware
        :param max_search_years: overrides the configured search bound
        :return: the next instant, None if the schedule never fires again
        """
        if max_search_years is None:
            max_search_years = CronScheduleEnv.from_env().max_search_years
        return next_after(self.fields, after, max_search_years)

    def upcoming(
        self, start: Optional[datetime] = None, tz: tzinfo = timezone.utc
    ) -> "ScheduleIterator":
        """
        Instants the schedule fires at after `start`, in increasing order
        :param start: reference instant, the current time in `tz` when omitted
        :param tz: timezone for the current time, ignored when `start` is given
        :return: a lazy, possibly infinite iterator
        """
        if start is None:
            start = datetime.now(tz)
        return ScheduleIterator(
            schedule=self,
            previous=start,
            max_search_years=CronScheduleEnv.from_env().max_search_years,
        )

    def after(self, start: datetime) -> "ScheduleIterator":
        return self.upcoming(start)

    def includes(self, dt: datetime) -> bool:
        """Does the schedule fire at `dt`, ignoring fractions of a second"""
        return self.fields.includes(dt)

    @property
    def seconds(self) -> Seconds:
        return self.fields.seconds

    @property
    def minutes(self) -> Minutes:
        return self.fields.minutes

    @property
    def hours(self) -> Hours:
        return self.fields.hours

    @property
    def days_of_month(self) -> DaysOfMonth:
        return self.fields.days_of_month

    @property
    def months(self) -> Months:
        return self.fields.months

    @property
    def days_of_week(self) -> DaysOfWeek:
        return self.fields.days_of_week

    @property
    def years(self) -> Years:
        return self.fields.years

    def __str__(self) -> str:
        return self.source


class ScheduleIterator(Iterator[datetime]):
    """
    Iterates over the instants a schedule fires at. The only state is the last instant
    returned, so an instance must not be advanced from more than one thread at a time.
    Call `Schedule.upcoming` again for an independent iterator.
    """

    def __init__(
        self, schedule: Schedule, previous: datetime, max_search_years: int
    ) -> None:
        self._schedule = schedule
        self._previous: Optional[datetime] = previous
        self._max_search_years = max_search_years

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    def __iter__(self) -> "ScheduleIterator":
        return self

    def __next__(self) -> datetime:
        if self._previous is None:
            raise StopIteration
        result = next_after(
            self._schedule.fields, self._previous, self._max_search_years
        )
        self._previous = result
        if result is None:
            raise StopIteration
        return result
