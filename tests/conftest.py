# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Iterator

import pytest
from _pytest.fixtures import fixture

from cron_schedule.config import MAX_SEARCH_YEARS_ENV_VAR, TRACE_ENV_VAR


@fixture(autouse=True)
def clean_app_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(TRACE_ENV_VAR, raising=False)
    monkeypatch.delenv(MAX_SEARCH_YEARS_ENV_VAR, raising=False)
    yield
