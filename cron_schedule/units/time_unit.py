# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Final, Optional, TypeVar

from cron_schedule.error import (
    CronError,
    OrdinalOutOfRangeError,
    RangeOrderError,
    UnknownNameError,
)
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
from cron_schedule.observability.powertools_logging import (
    powertools_logger,
    should_log_debug,
)
from cron_schedule.ordinal import Ordinal, OrdinalSet, ordinal_set

logger: Final = powertools_logger()

UnitT = TypeVar("UnitT", bound="TimeUnitField")


@dataclass(frozen=True, eq=False)
class TimeUnitField:
    """
    # base class for the resolved values of one field of a cron expression

    Subclasses define the domain of the field and, optionally, the names that may be
    used in place of numbers. An instance holds the set of values selected by a field.
    A field that selects everything is kept as a flag rather than an enumerated set;
    `ordinals` still produces the full set when asked for it.
    """

    # display name of the unit, used in error messages
    unit_name: ClassVar[str]

    # lowest valid value
    inclusive_min: ClassVar[Ordinal]

    # highest valid value
    inclusive_max: ClassVar[Ordinal]

    # lower case names for values, units without names reject every name
    name_to_ordinal: ClassVar[Mapping[str, Ordinal]] = {}

    explicit_ordinals: Optional[OrdinalSet] = None

    def __post_init__(self) -> None:
        if self.explicit_ordinals is None:
            return
        if len(self.explicit_ordinals) == 0:
            raise CronError(f"{self.unit_name} must select at least one value")
        for ordinal in self.explicit_ordinals:
            self.validate_ordinal(ordinal)

    @classmethod
    def all(cls: type[UnitT]) -> UnitT:
        """
        Returns a unit selecting every value in its domain
        :return: unit without restrictions
        """
        return cls()

    @classmethod
    def from_ordinal(cls: type[UnitT], ordinal: Ordinal) -> UnitT:
        return cls(explicit_ordinals=ordinal_set((ordinal,)))

    @classmethod
    def from_ordinal_set(cls: type[UnitT], ordinals: Iterable[Ordinal]) -> UnitT:
        return cls(explicit_ordinals=ordinal_set(ordinals))

    @classmethod
    def from_field(cls: type[UnitT], field: CronField) -> UnitT:
        """
        Resolves a parsed field to the values it selects
        :param field: parsed field
        :return: unit holding the union of the values of every term in the field
        """
        if field.is_all:
            return cls.all()

        ordinals: set[Ordinal] = set()
        for specifier in field.specifiers:
            resolved = cls.ordinals_from_root_specifier(specifier)
            if should_log_debug(logger):
                logger.debug(
                    f"{cls.unit_name}: {specifier} resolves to {sorted(resolved)}"
                )
            ordinals.update(cls.validate_ordinal(ordinal) for ordinal in resolved)
        return cls.from_ordinal_set(ordinals)

    @classmethod
    def supported_ordinals(cls) -> OrdinalSet:
        return ordinal_set(range(cls.inclusive_min, cls.inclusive_max + 1))

    @classmethod
    def is_valid_ordinal(cls, ordinal: Ordinal) -> bool:
        return cls.inclusive_min <= ordinal <= cls.inclusive_max

    @classmethod
    def validate_ordinal(cls, ordinal: Ordinal) -> Ordinal:
        if not cls.is_valid_ordinal(ordinal):
            raise OrdinalOutOfRangeError(
                cls.unit_name, ordinal, cls.inclusive_min, cls.inclusive_max
            )
        return ordinal

    @classmethod
    def ordinal_from_name(cls, name: str) -> Ordinal:
        # names are case-insensitive
        ordinal = cls.name_to_ordinal.get(name.lower())
        if ordinal is None:
            raise UnknownNameError(cls.unit_name, name)
        return ordinal

    @classmethod
    def ordinals_from_specifier(cls, specifier: CronSpecifier) -> list[Ordinal]:
        """
        Resolves a term that may be the base of a period
        :param specifier: parsed term
        :return: selected values in ascending order
        """
        match specifier:
            case CronAll():
                return list(range(cls.inclusive_min, cls.inclusive_max + 1))
            case CronPoint():
                return [cls.validate_ordinal(specifier.value)]
            case CronRange():
                return cls._ordinal_range(specifier.start, specifier.end)
            case CronNamedRange():
                return cls._ordinal_range(
                    cls.ordinal_from_name(specifier.start),
                    cls.ordinal_from_name(specifier.end),
                )

    @classmethod
    def ordinals_from_root_specifier(cls, specifier: CronRootSpecifier) -> list[Ordinal]:
        """
        Resolves any term of a field
        :param specifier: parsed term
        :return: selected values in ascending order
        """
        match specifier:
            case CronNamedPoint():
                return [cls.validate_ordinal(cls.ordinal_from_name(specifier.name))]
            case CronPeriod(base=CronPoint()):
                # a single value as the base of a period runs to the end of the domain
                start = cls.validate_ordinal(specifier.base.value)
                return list(range(start, cls.inclusive_max + 1, specifier.step))
            case CronPeriod():
                return cls.ordinals_from_specifier(specifier.base)[:: specifier.step]
            case _:
                return cls.ordinals_from_specifier(specifier)

    @classmethod
    def _ordinal_range(cls, start: Ordinal, end: Ordinal) -> list[Ordinal]:
        cls.validate_ordinal(start)
        cls.validate_ordinal(end)
        if start > end:
            raise RangeOrderError(cls.unit_name, start, end)
        return list(range(start, end + 1))

    @cached_property
    def ordinals(self) -> OrdinalSet:
        """
        Returns all values selected by the unit
        :return: selected values
        """
        if self.explicit_ordinals is None:
            return self.supported_ordinals()
        return self.explicit_ordinals

    @cached_property
    def _sorted_ordinals(self) -> tuple[Ordinal, ...]:
        return tuple(sorted(self.ordinals))

    @property
    def is_all(self) -> bool:
        if self.explicit_ordinals is None:
            return True
        return len(self.explicit_ordinals) == (
            self.inclusive_max - self.inclusive_min + 1
        )

    @property
    def count(self) -> int:
        if self.explicit_ordinals is None:
            return self.inclusive_max - self.inclusive_min + 1
        return len(self.explicit_ordinals)

    def includes(self, ordinal: Ordinal) -> bool:
        if self.explicit_ordinals is None:
            return self.is_valid_ordinal(ordinal)
        return ordinal in self.explicit_ordinals

    def range(self, start: Ordinal, end: Ordinal) -> Iterator[Ordinal]:
        """
        Iterates over the selected values within a window
        :param start: lowest value to return
        :param end: highest value to return
        :return: selected values between start and end inclusive, ascending
        """
        if self.explicit_ordinals is None:
            yield from range(
                max(start, self.inclusive_min), min(end, self.inclusive_max) + 1
            )
            return
        for ordinal in self._sorted_ordinals:
            if ordinal > end:
                return
            if ordinal >= start:
                yield ordinal

    def __iter__(self) -> Iterator[Ordinal]:
        return self.range(self.inclusive_min, self.inclusive_max)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, ordinal: object) -> bool:
        return isinstance(ordinal, int) and self.includes(ordinal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeUnitField) or type(other) is not type(self):
            return NotImplemented
        if self.is_all and other.is_all:
            return True
        return self.ordinals == other.ordinals

    def __hash__(self) -> int:
        if self.is_all:
            return hash((type(self).__name__, "all"))
        return hash((type(self).__name__, self.ordinals))

    def __repr__(self) -> str:
        if self.is_all:
            return f"{type(self).__name__}(all)"
        return f"{type(self).__name__}({list(self._sorted_ordinals)})"
