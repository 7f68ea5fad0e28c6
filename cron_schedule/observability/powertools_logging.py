# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging

from aws_lambda_powertools import Logger

from cron_schedule.config import debug_logging_enabled

SERVICE_NAME = "cron-schedule"


def should_log_debug(logger: Logger) -> bool:
    return logger.log_level <= logging.DEBUG


def powertools_logger(service: str = SERVICE_NAME) -> Logger:
    return Logger(
        use_rfc3339=True,
        service=service,
        level=logging.DEBUG if debug_logging_enabled() else logging.INFO,
    )
