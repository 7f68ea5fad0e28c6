# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The class hierarchy defined in this module is a high-level representation of a single
field of a cron expression as written by the user, before any knowledge of the field it
belongs to has been applied.

A cron expression supported by this package takes the form of:

    <second> <minute> <hour> <day_of_month> <month> <day_of_week> [<year>]

Each field is a comma-separated list of terms. A term is one of:

- a wildcard for all values (`*`, or `?` in the day-of-month and day-of-week fields)
- a single value (`5`)
- a range of values (`1-5`)
- a range of names (`Mon-Fri`, `Jan-Mar`)
- a single name (`Wed`, `August`)
- a period, a term followed by a step (`*/15`, `10/5`, `1-30/2`)

As an example, consider the expression "Mon-Thurs/2". It parses to a period with a
named range as its base and a step of two. Whether the names are valid, and which
values they stand for, is only known once the term is resolved against a specific
field: as a day-of-week field it selects Monday and Wednesday, as a month field it is
rejected because "Mon" is not the name of a month.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CronAll:
    """All values"""


@dataclass(frozen=True)
class CronPoint:
    """A single numeric value"""

    value: int


@dataclass(frozen=True)
class CronRange:
    """All values from `start` up to and including `end`"""

    start: int
    end: int


@dataclass(frozen=True)
class CronNamedRange:
    """All values from the value named `start` up to and including the value named
    `end`"""

    start: str
    end: str


CronSpecifier = CronAll | CronPoint | CronRange | CronNamedRange
"""A term that may be used on its own or as the base of a period"""


@dataclass(frozen=True)
class CronNamedPoint:
    """A single value given by name"""

    name: str


@dataclass(frozen=True)
class CronPeriod:
    """Every `step`-th value, starting from the beginning of `base`"""

    base: CronSpecifier
    step: int


CronRootSpecifier = CronSpecifier | CronNamedPoint | CronPeriod
"""A union type for any term that may appear in a comma-separated list"""


@dataclass(frozen=True)
class CronField:
    """The terms of one whitespace-separated field, in the order they were written"""

    specifiers: tuple[CronRootSpecifier, ...]

    @property
    def is_all(self) -> bool:
        return self.specifiers == (CronAll(),)
