# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from itertools import chain
from typing import Final

from cron_schedule.units.time_unit import TimeUnitField

# names are not localized, the week starts on sunday
weekday_names: Final = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)
weekday_abbrs: Final = list(weekday_name[0:3] for weekday_name in weekday_names)
# weekday names can be the full day name, the first three letters, or one of the
# longer abbreviations below
_weekday_name_to_value: Final = {
    name: i + 1
    for i, name in chain(enumerate(weekday_names), enumerate(weekday_abbrs))
}
_weekday_name_to_value.update({"tues": 3, "thur": 5, "thurs": 5})


class DaysOfWeek(TimeUnitField):
    """
    Days of a week, 1-7 or sun-sat. Sunday is 1 and Saturday is 7, which is also the
    numbering used by `cron_schedule.calendar_utils.weekday_from_sunday`.
    """

    unit_name = "Days of Week"
    inclusive_min = 1
    inclusive_max = 7
    name_to_ordinal = _weekday_name_to_value
