# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Parse cron expression text to the abstract representation in
`cron_schedule.expression`.

Parsing does not know what the names in a field mean or which numbers are valid for
it. A field like "Foo-Bar" parses fine as a named range and is only rejected when it is
resolved against a time unit. The only field-specific rule enforced here is that the
no-specific-value marker `?` may only be used for days of the month and days of the
week.

Each term parser raises `ValueError` when the text does not match its form. Parsers are
tried in order and the first success wins, so the order of the lists below is the
precedence of the grammar: a period is tried before a bare specifier, which is tried
before a named point.
"""
import re
from collections.abc import Callable, Sequence
from functools import partial
from typing import Final, TypeVar

from cron_schedule.error import CronSyntaxError, FieldCountError
from cron_schedule.expression import (
    CronAll,
    CronField,
    CronNamedPoint,
    CronNamedRange,
    CronPeriod,
    CronPoint,
    CronRange,
    CronRootSpecifier,
    CronSpecifier,
)

T = TypeVar("T")
SpecifierParser = Callable[[str], CronSpecifier]
RootSpecifierParser = Callable[[str], CronRootSpecifier]

SHORTHAND_EXPRESSIONS: Final = {
    "@yearly": "0 0 0 1 1 * *",
    "@monthly": "0 0 0 1 * * *",
    "@weekly": "0 0 0 * * 1 *",
    "@daily": "0 0 0 * * * *",
    "@hourly": "0 0 * * * * *",
}
"""Named macros and the seven-field expression each one stands for"""

SHORTHAND_PREFIX: Final = "@"

FIELD_NAMES: Final = (
    "seconds",
    "minutes",
    "hours",
    "days of month",
    "months",
    "days of week",
    "years",
)

# whitespace is allowed around the operators inside a field, but it separates fields
# everywhere else
_operator_whitespace_re: Final = re.compile(r"\s*([,/-])\s*")
_whitespace_re: Final = re.compile(r"\s+")


def _normalize(text: str) -> str:
    return _operator_whitespace_re.sub(r"\1", text.strip())


def split_fields(expression: str) -> list[str]:
    """Split a longhand expression into the text of its fields"""
    normalized: Final = _normalize(expression)
    if not normalized:
        return []
    return _whitespace_re.split(normalized)


def parse_fields(expression: str) -> list[CronField]:
    """
    Parse a cron expression to its fields
    :param expression: six or seven whitespace-separated fields, or a shorthand macro
    :return: the parsed fields, in the order they were written
    """
    if expression.startswith(SHORTHAND_PREFIX):
        return _parse_longhand(expand_shorthand(expression), expression)
    return _parse_longhand(expression, expression)


def expand_shorthand(expression: str) -> str:
    # macros must match exactly, surrounding whitespace included
    if expression not in SHORTHAND_EXPRESSIONS:
        raise CronSyntaxError("Unknown shorthand expression", expression)
    return SHORTHAND_EXPRESSIONS[expression]


def _parse_longhand(longhand: str, expression: str) -> list[CronField]:
    fields: Final = split_fields(longhand)
    if len(fields) not in (6, 7):
        raise FieldCountError(len(fields), expression)

    parsers: Final[list[Callable[[str], CronField]]] = [
        parse_field,
        parse_field,
        parse_field,
        parse_field_with_any,
        parse_field,
        parse_field_with_any,
        parse_field,
    ]
    result: Final[list[CronField]] = []
    for name, parser, field in zip(FIELD_NAMES, parsers, fields):
        try:
            result.append(parser(field))
        except CronSyntaxError as err:
            raise CronSyntaxError(
                f"Could not parse {name} field: {field}", expression
            ) from err
    return result


def parse_field(field: str) -> CronField:
    """Parse the text of any field except days of month and days of week"""
    return _parse_field(field, _parse_root_specifier)


def parse_field_with_any(field: str) -> CronField:
    """Parse the text of a field that also accepts the no-specific-value marker `?`"""
    return _parse_field(field, _parse_root_specifier_with_any)


def _parse_field(field: str, parser: RootSpecifierParser) -> CronField:
    normalized: Final = _normalize(field)
    try:
        return CronField(
            specifiers=tuple(parser(term) for term in normalized.split(","))
        )
    except ValueError as err:
        raise CronSyntaxError(f"Could not parse field: {field}") from err


def _parse_root_specifier(expr: str) -> CronRootSpecifier:
    return _first_match(
        expr,
        [
            partial(_parse_period, specifier_parser=_parse_specifier),
            _parse_specifier,
            _parse_named_point,
        ],
        "root specifier",
    )


def _parse_root_specifier_with_any(expr: str) -> CronRootSpecifier:
    return _first_match(
        expr,
        [
            partial(_parse_period, specifier_parser=_parse_specifier_with_any),
            _parse_specifier_with_any,
            _parse_named_point,
        ],
        "root specifier",
    )


def _parse_specifier(expr: str) -> CronSpecifier:
    return _first_match(
        expr,
        [_parse_all, _parse_range, _parse_point, _parse_named_range],
        "specifier",
    )


def _parse_specifier_with_any(expr: str) -> CronSpecifier:
    return _first_match(expr, [_parse_any, _parse_specifier], "specifier")


def _first_match(expr: str, parsers: Sequence[Callable[[str], T]], kind: str) -> T:
    for parser in parsers:
        try:
            return parser(expr)
        except ValueError:
            pass
    raise ValueError(f"Could not parse as any form of {kind}: {expr}")


_all_re: Final = re.compile(r"^\*$")


def _parse_all(expr: str) -> CronAll:
    if not _all_re.match(expr):
        raise ValueError(f"Could not parse as all values wildcard: {expr}")

    return CronAll()


_any_re: Final = re.compile(r"^\?$")


def _parse_any(expr: str) -> CronAll:
    if not _any_re.match(expr):
        raise ValueError(f"Could not parse as no specific value marker: {expr}")

    return CronAll()


_ordinal_re: Final = re.compile(r"^([0-9]+)$")


def _parse_point(expr: str) -> CronPoint:
    if not (match := _ordinal_re.match(expr)):
        raise ValueError(f"Could not parse as single numeric value: {expr}")

    return CronPoint(value=int(match.group(1)))


_range_re: Final = re.compile(r"^([0-9]+)-([0-9]+)$")


def _parse_range(expr: str) -> CronRange:
    if not (match := _range_re.match(expr)):
        raise ValueError(f"Could not parse as range expression: {expr}")

    return CronRange(start=int(match.group(1)), end=int(match.group(2)))


_named_range_re: Final = re.compile(r"^([a-zA-Z]+)-([a-zA-Z]+)$")


def _parse_named_range(expr: str) -> CronNamedRange:
    if not (match := _named_range_re.match(expr)):
        raise ValueError(f"Could not parse as named range expression: {expr}")

    return CronNamedRange(start=match.group(1), end=match.group(2))


_name_re: Final = re.compile(r"^([a-zA-Z]+)$")


def _parse_named_point(expr: str) -> CronNamedPoint:
    if not (match := _name_re.match(expr)):
        raise ValueError(f"Could not parse as single name: {expr}")

    return CronNamedPoint(name=match.group(1))


_period_re: Final = re.compile(r"^(.+)/([0-9]+)$")


def _parse_period(expr: str, specifier_parser: SpecifierParser) -> CronPeriod:
    if not (match := _period_re.match(expr)):
        raise ValueError(f"Could not parse as period expression: {expr}")

    step: Final = int(match.group(2))
    if step < 1:
        raise ValueError(f"Step of period expression must be > 0: {expr}")

    return CronPeriod(base=specifier_parser(match.group(1)), step=step)
