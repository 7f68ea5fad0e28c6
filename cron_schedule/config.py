# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Final

from cron_schedule.util.app_env_utils import env_to_bool, env_to_positive_int

TRACE_ENV_VAR: Final = "CRON_SCHEDULE_TRACE"
MAX_SEARCH_YEARS_ENV_VAR: Final = "CRON_SCHEDULE_MAX_SEARCH_YEARS"

# the Gregorian calendar repeats every 400 years, so a schedule whose years are not
# restricted and that has no match within 400 years never matches
DEFAULT_MAX_SEARCH_YEARS: Final = 400


# read once, when the first logger of a service is created
def debug_logging_enabled() -> bool:
    return env_to_bool(environ.get(TRACE_ENV_VAR, "false"))


@dataclass(frozen=True)
class CronScheduleEnv:
    max_search_years: int = DEFAULT_MAX_SEARCH_YEARS

    @classmethod
    def from_env(cls) -> "CronScheduleEnv":
        max_search_years = environ.get(MAX_SEARCH_YEARS_ENV_VAR)
        return CronScheduleEnv(
            max_search_years=(
                DEFAULT_MAX_SEARCH_YEARS
                if max_search_years is None
                else env_to_positive_int(MAX_SEARCH_YEARS_ENV_VAR, max_search_years)
            ),
        )
