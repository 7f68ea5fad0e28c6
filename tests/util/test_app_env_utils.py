# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pytest import raises

from cron_schedule.util.app_env_utils import (
    AppEnvError,
    env_to_bool,
    env_to_positive_int,
)


@pytest.mark.parametrize("value", ["true", "True", " yes ", "YES"])
def test_env_to_bool_true(value: str) -> None:
    assert env_to_bool(value) is True


@pytest.mark.parametrize("value", ["false", "no", "", "1", "on"])
def test_env_to_bool_false(value: str) -> None:
    assert env_to_bool(value) is False


def test_env_to_positive_int() -> None:
    assert env_to_positive_int("X", "12") == 12
    with raises(AppEnvError) as exc_info:
        env_to_positive_int("X", "twelve")
    assert "X" in str(exc_info.value)
    with raises(AppEnvError):
        env_to_positive_int("X", "0")
