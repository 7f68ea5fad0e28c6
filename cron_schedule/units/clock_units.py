# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from cron_schedule.units.time_unit import TimeUnitField


class Seconds(TimeUnitField):
    """
    Seconds of a minute, 0-59
    """

    unit_name = "Seconds"
    inclusive_min = 0
    inclusive_max = 59


class Minutes(TimeUnitField):
    """
    Minutes of an hour, 0-59
    """

    unit_name = "Minutes"
    inclusive_min = 0
    inclusive_max = 59


class Hours(TimeUnitField):
    """
    Hours of a day, 0-23
    """

    unit_name = "Hours"
    inclusive_min = 0
    inclusive_max = 23
