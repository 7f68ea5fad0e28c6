# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Errors raised while turning cron expression text into a schedule.

Every error derives from `CronError`, which is itself a `ValueError`, so callers that
only care whether an expression is usable can catch `ValueError` and be done with it.
The next-occurrence search never raises one of these: an exhausted schedule is
reported as `None`.
"""
from typing import Optional


class CronError(ValueError):
    """An expression could not be turned into a schedule"""

    def __init__(self, message: str, expression: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.expression = expression

    def __str__(self) -> str:
        if self.expression is None:
            return self.message
        return f"{self.message} (expression: {self.expression!r})"


class FieldCountError(CronError):
    """The expression does not have six or seven fields"""

    def __init__(self, field_count: int, expression: Optional[str] = None) -> None:
        super().__init__(
            f"Expression has {field_count} fields. Valid cron expressions have 6 or 7.",
            expression,
        )
        self.field_count = field_count


class CronSyntaxError(CronError):
    """Some part of the expression does not match the field grammar"""


class OrdinalOutOfRangeError(CronError):
    """A resolved value lies outside the bounds of its field"""

    def __init__(
        self, unit: str, value: int, inclusive_min: int, inclusive_max: int
    ) -> None:
        super().__init__(
            f"{unit} must be between {inclusive_min} and {inclusive_max}: {value}"
        )
        self.unit = unit
        self.value = value
        self.inclusive_min = inclusive_min
        self.inclusive_max = inclusive_max


class UnknownNameError(CronError):
    """A month or weekday name was not recognized for its field"""

    def __init__(self, unit: str, name: str) -> None:
        super().__init__(f"'{name}' is not a known name for {unit}")
        self.unit = unit
        self.name = name


class RangeOrderError(CronError):
    """A range starts after it ends. Ranges never wrap."""

    def __init__(self, unit: str, start: int, end: int) -> None:
        super().__init__(
            f"Range start must not be after range end for {unit}: {start}-{end}"
        )
        self.unit = unit
        self.start = start
        self.end = end
