# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from cron_schedule.units.clock_units import Hours, Minutes, Seconds
from cron_schedule.units.month_unit import Months
from cron_schedule.units.monthday_unit import DaysOfMonth
from cron_schedule.units.time_unit import TimeUnitField
from cron_schedule.units.weekday_unit import DaysOfWeek
from cron_schedule.units.year_unit import Years

__all__ = [
    "TimeUnitField",
    "Seconds",
    "Minutes",
    "Hours",
    "DaysOfMonth",
    "Months",
    "DaysOfWeek",
    "Years",
]
