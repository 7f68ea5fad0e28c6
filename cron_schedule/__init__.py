# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
A cron expression parser and schedule explorer

    from datetime import datetime, timezone
    from itertools import islice

    from cron_schedule import Schedule

    #                           sec  min  hour    day of month  month    day of week  year
    schedule = Schedule.parse("0    30   9,12,15 1,15          May-Aug  Mon,Wed,Fri  2018/2")
    start = datetime(2018, 5, 1, tzinfo=timezone.utc)
    for fire_time in islice(schedule.upcoming(start), 10):
        print(fire_time)
"""
from cron_schedule.error import (
    CronError,
    CronSyntaxError,
    FieldCountError,
    OrdinalOutOfRangeError,
    RangeOrderError,
    UnknownNameError,
)
from cron_schedule.schedule import Schedule, ScheduleIterator
from cron_schedule.schedule_fields import ScheduleFields
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

__version__ = "1.0.0"

__all__ = [
    "Schedule",
    "ScheduleIterator",
    "ScheduleFields",
    "TimeUnitField",
    "Seconds",
    "Minutes",
    "Hours",
    "DaysOfMonth",
    "Months",
    "DaysOfWeek",
    "Years",
    "CronError",
    "CronSyntaxError",
    "FieldCountError",
    "OrdinalOutOfRangeError",
    "RangeOrderError",
    "UnknownNameError",
]
