# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Calendar arithmetic used by the schedule. Nothing in this package computes the length
of a month or the day of the week by itself, it all goes through here.
"""
import calendar
from datetime import datetime, timedelta
from typing import Optional

from cron_schedule.ordinal import Ordinal


def days_in_month(year: int, month: int) -> int:
    _, days = calendar.monthrange(year, month)
    return days


def weekday_from_sunday(year: int, month: int, day: int) -> Ordinal:
    """
    Day of the week of a date, numbered 1 (Sunday) to 7 (Saturday)
    """
    # calendar.weekday is 0 for Monday through 6 for Sunday
    return (calendar.weekday(year, month, day) + 1) % 7 + 1


def next_whole_second(dt: datetime) -> Optional[datetime]:
    """
    The start of the second that follows `dt`, dropping any fraction of a second
    :return: the next second, None if it cannot be represented
    """
    try:
        return dt.replace(microsecond=0) + timedelta(seconds=1)
    except OverflowError:
        return None
