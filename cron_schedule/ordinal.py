# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable

Ordinal = int
"""A single value of a field. What it means depends on the field (0-59 for seconds,
1-7 for days of the week starting with Sunday, and so on)"""

OrdinalSet = frozenset[Ordinal]
"""The distinct values selected by a field. Order is irrelevant."""


def ordinal_set(ordinals: Iterable[Ordinal] = ()) -> OrdinalSet:
    return frozenset(ordinals)
