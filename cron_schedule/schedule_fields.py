# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

from cron_schedule.calendar_utils import weekday_from_sunday
from cron_schedule.error import FieldCountError
from cron_schedule.expression import CronField
from cron_schedule.parser import parse_fields
from cron_schedule.units import (
    DaysOfMonth,
    DaysOfWeek,
    Hours,
    Minutes,
    Months,
    Seconds,
    TimeUnitField,
    Years,
)


@dataclass(frozen=True)
class ScheduleFields:
    """The resolved values of all seven fields of a cron expression"""

    seconds: Seconds = field(default_factory=Seconds.all)
    minutes: Minutes = field(default_factory=Minutes.all)
    hours: Hours = field(default_factory=Hours.all)
    days_of_month: DaysOfMonth = field(default_factory=DaysOfMonth.all)
    months: Months = field(default_factory=Months.all)
    days_of_week: DaysOfWeek = field(default_factory=DaysOfWeek.all)
    years: Years = field(default_factory=Years.all)

    def __post_init__(self) -> None:
        expected_types: Final[dict[str, type[TimeUnitField]]] = {
            "seconds": Seconds,
            "minutes": Minutes,
            "hours": Hours,
            "days_of_month": DaysOfMonth,
            "months": Months,
            "days_of_week": DaysOfWeek,
            "years": Years,
        }
        for name, expected_type in expected_types.items():
            value = getattr(self, name)
            if not isinstance(value, expected_type):
                raise TypeError(
                    f"{name} must be {expected_type.__name__}, got {type(value).__name__}"
                )

    @classmethod
    def parse(cls, expression: str) -> "ScheduleFields":
        """
        Parse a longhand expression or a shorthand macro and resolve every field
        :param expression: the full cron expression
        :return: resolved fields for the expression
        """
        return cls.from_field_list(parse_fields(expression))

    @classmethod
    def from_field_list(cls, fields: Sequence[CronField]) -> "ScheduleFields":
        """
        Resolve parsed fields against their units
        :param fields: six or seven fields, in expression order, without a years field
        when there are six
        :return: resolved fields
        """
        if len(fields) not in (6, 7):
            raise FieldCountError(len(fields))

        return ScheduleFields(
            seconds=Seconds.from_field(fields[0]),
            minutes=Minutes.from_field(fields[1]),
            hours=Hours.from_field(fields[2]),
            days_of_month=DaysOfMonth.from_field(fields[3]),
            months=Months.from_field(fields[4]),
            days_of_week=DaysOfWeek.from_field(fields[5]),
            years=Years.from_field(fields[6]) if len(fields) == 7 else Years.all(),
        )

    def includes(self, dt: datetime) -> bool:
        """Does `dt` satisfy every field"""
        # Days of month and days of week are both checked, so a day has to be in both
        # sets. This is not the usual cron behavior of matching either field when both
        # are restricted, but a field given as `*` or `?` selects every value and never
        # excludes a day, so the usual cases behave the same.
        return all(
            (
                self.seconds.includes(dt.second),
                self.minutes.includes(dt.minute),
                self.hours.includes(dt.hour),
                self.days_of_month.includes(dt.day),
                self.months.includes(dt.month),
                self.days_of_week.includes(
                    weekday_from_sunday(dt.year, dt.month, dt.day)
                ),
                self.years.includes(dt.year),
            )
        )
