# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from itertools import chain
from typing import Final

from cron_schedule.units.time_unit import TimeUnitField

# names are not localized
month_names: Final = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
month_abbrs: Final = list(month_name[0:3] for month_name in month_names)
# month names can be the full month name, or the first three letters
_month_name_to_value: Final = {
    name: i + 1 for i, name in chain(enumerate(month_names), enumerate(month_abbrs))
}
_month_name_to_value["sept"] = 9


class Months(TimeUnitField):
    """
    Months of a year, 1-12 and jan-dec
    """

    unit_name = "Months"
    inclusive_min = 1
    inclusive_max = 12
    name_to_ordinal = _month_name_to_value
