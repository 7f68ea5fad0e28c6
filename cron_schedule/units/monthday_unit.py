# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from cron_schedule.units.time_unit import TimeUnitField


class DaysOfMonth(TimeUnitField):
    """
    Days of a month, 1-31. Whether a day exists in a specific month is only checked
    when searching for the next occurrence, so "31" is valid here and simply never
    matches in shorter months.
    """

    unit_name = "Days of Month"
    inclusive_min = 1
    inclusive_max = 31
