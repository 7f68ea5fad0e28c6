# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
class AppEnvError(RuntimeError):
    pass


def env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "yes"}


def env_to_positive_int(name: str, value: str) -> int:
    try:
        result = int(value.strip())
    except ValueError as err:
        raise AppEnvError(
            f"Application environment variable {name} must be an integer: {value}"
        ) from err
    if result < 1:
        raise AppEnvError(
            f"Application environment variable {name} must be > 0: {value}"
        )
    return result
