# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import MAXYEAR, MINYEAR

from cron_schedule.units.time_unit import TimeUnitField


class Years(TimeUnitField):
    """
    Years, limited only by what a `datetime` can represent. An expression without a
    years field selects every year.
    """

    unit_name = "Years"
    inclusive_min = MINYEAR
    inclusive_max = MAXYEAR
