# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pytest import raises

from cron_schedule.error import CronSyntaxError, FieldCountError
from cron_schedule.expression import (
    CronAll,
    CronField,
    CronNamedPoint,
    CronNamedRange,
    CronPeriod,
    CronPoint,
    CronRange,
)
from cron_schedule.parser import (
    SHORTHAND_EXPRESSIONS,
    parse_field,
    parse_field_with_any,
    parse_fields,
    split_fields,
)


def test_parses_single_numeric_value_ignoring_whitespace() -> None:
    assert parse_field("  1997\n\n\t") == CronField(specifiers=(CronPoint(1997),))


def test_parses_wildcard() -> None:
    assert parse_field("*") == CronField(specifiers=(CronAll(),))
    assert parse_field("*").is_all


def test_parses_named_point() -> None:
    assert parse_field("WED") == CronField(specifiers=(CronNamedPoint("WED"),))


def test_parses_numeric_range() -> None:
    assert parse_field("1-4") == CronField(specifiers=(CronRange(1, 4),))


def test_parses_named_range() -> None:
    assert parse_field("TUES-THURS") == CronField(
        specifiers=(CronNamedRange("TUES", "THURS"),)
    )


def test_parses_comma_separated_list_in_written_order() -> None:
    assert parse_field("10,2,12") == CronField(
        specifiers=(CronPoint(10), CronPoint(2), CronPoint(12))
    )
    assert parse_field(" 1 , 2 ") == CronField(specifiers=(CronPoint(1), CronPoint(2)))


def test_parses_mixed_list() -> None:
    assert parse_field("0-5,58,*/20,Jan") == CronField(
        specifiers=(
            CronRange(0, 5),
            CronPoint(58),
            CronPeriod(CronAll(), 20),
            CronNamedPoint("Jan"),
        )
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1/2", CronPeriod(CronPoint(1), 2)),
        ("*/2", CronPeriod(CronAll(), 2)),
        ("10-20/2", CronPeriod(CronRange(10, 20), 2)),
        ("10/2", CronPeriod(CronPoint(10), 2)),
        ("Mon-Thurs/2", CronPeriod(CronNamedRange("Mon", "Thurs"), 2)),
        (
            "February-November/2",
            CronPeriod(CronNamedRange("February", "November"), 2),
        ),
    ],
)
def test_parses_periods(text: str, expected: CronPeriod) -> None:
    assert parse_field(text) == CronField(specifiers=(expected,))
    assert parse_field_with_any(text) == CronField(specifiers=(expected,))


@pytest.mark.parametrize(
    "text", ["Wed/4", "Tues/2", "February/2", "10-12/*", "10-12/10-12", "?/2", "1/0"]
)
def test_rejects_malformed_periods(text: str) -> None:
    with raises(CronSyntaxError):
        parse_field(text)


def test_any_is_accepted_only_with_any() -> None:
    assert parse_field_with_any("?") == CronField(specifiers=(CronAll(),))
    assert parse_field_with_any("?/2") == CronField(
        specifiers=(CronPeriod(CronAll(), 2),)
    )
    with raises(CronSyntaxError):
        parse_field("?")


@pytest.mark.parametrize(
    "text", ["", ",1,2", "1,", "-4", "3-THURS", "a1", "1-2-3", "**", "1 2", "#3"]
)
def test_rejects_malformed_fields(text: str) -> None:
    with raises(CronSyntaxError):
        parse_field(text)
    with raises(CronSyntaxError):
        parse_field_with_any(text)


def test_split_fields_allows_whitespace_around_operators() -> None:
    assert split_fields(" \n1 , 2   *\n") == ["1,2", "*"]
    assert split_fields("0 0-5 / 2 * * * *") == ["0", "0-5/2", "*", "*", "*", "*"]
    assert split_fields("   ") == []


def test_parses_six_fields() -> None:
    assert parse_fields("* * * * * *") == [CronField(specifiers=(CronAll(),))] * 6


def test_parses_seven_fields() -> None:
    fields = parse_fields("0 30 9,12,15 1,15 May-Aug Mon,Wed,Fri 2018/2")
    assert fields == [
        CronField(specifiers=(CronPoint(0),)),
        CronField(specifiers=(CronPoint(30),)),
        CronField(specifiers=(CronPoint(9), CronPoint(12), CronPoint(15))),
        CronField(specifiers=(CronPoint(1), CronPoint(15))),
        CronField(specifiers=(CronNamedRange("May", "Aug"),)),
        CronField(
            specifiers=(
                CronNamedPoint("Mon"),
                CronNamedPoint("Wed"),
                CronNamedPoint("Fri"),
            )
        ),
        CronField(specifiers=(CronPeriod(CronPoint(2018), 2),)),
    ]


@pytest.mark.parametrize("expression", ["* * * ? * *", "* * * * * ?", "* * * ? * ?"])
def test_any_allowed_in_days_of_month_and_days_of_week(expression: str) -> None:
    assert parse_fields(expression) == [CronField(specifiers=(CronAll(),))] * 6


@pytest.mark.parametrize(
    "expression",
    ["? * * * * *", "* ? * * * *", "* * ? * * *", "* * * * ? *", "* * * * * * ?"],
)
def test_any_rejected_in_other_fields(expression: str) -> None:
    with raises(CronSyntaxError):
        parse_fields(expression)


@pytest.mark.parametrize(
    "expression", ["", "*", "* * * *", "* * * * *", "* * * * * * * *", "1 2 3 4"]
)
def test_rejects_wrong_number_of_fields(expression: str) -> None:
    with raises(FieldCountError):
        parse_fields(expression)


def test_field_count_error_reports_count() -> None:
    with raises(FieldCountError) as exc_info:
        parse_fields("foo bar baz qux")
    assert exc_info.value.field_count == 4
    assert exc_info.value.expression == "foo bar baz qux"


@pytest.mark.parametrize("expression", ["* * * * * *foo", "* * * * * *foo *"])
def test_rejects_trailing_characters(expression: str) -> None:
    with raises(CronSyntaxError) as exc_info:
        parse_fields(expression)
    assert exc_info.value.expression == expression
    assert "days of week" in str(exc_info.value)


@pytest.mark.parametrize("macro", sorted(SHORTHAND_EXPRESSIONS))
def test_shorthand_parses_like_its_expansion(macro: str) -> None:
    assert parse_fields(macro) == parse_fields(SHORTHAND_EXPRESSIONS[macro])


def test_weekly_shorthand() -> None:
    assert parse_fields("@weekly") == parse_fields("0 0 0 * * 1 *")


@pytest.mark.parametrize(
    "expression", ["@minutely", "@yearly ", "@YEARLY", "@daily *", "@annually"]
)
def test_rejects_unknown_or_padded_shorthand(expression: str) -> None:
    with raises(CronSyntaxError):
        parse_fields(expression)


def test_rejects_shorthand_with_leading_whitespace() -> None:
    with raises(FieldCountError):
        parse_fields(" @yearly")


@pytest.mark.parametrize("text", ["٢٠١٨", "1-٥", "*/٢", "１"])
def test_numbers_are_ascii_digits_only(text: str) -> None:
    with raises(CronSyntaxError):
        parse_field(text)
    with raises(CronSyntaxError):
        parse_fields(f"* * * * * * {text}")
