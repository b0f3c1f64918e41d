"""Domain primitives that enforce validity at creation time."""

import itertools
import re
from dataclasses import dataclass
from datetime import date
from typing import Self

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))


@dataclass(frozen=True)
class VendorId:
    """Unique identifier for a Vendor."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))


@dataclass(frozen=True)
class CalendarDate:
    """A local calendar date in "YYYY-MM-DD" form."""

    value: str

    def __post_init__(self) -> None:
        if not _DATE_PATTERN.fullmatch(self.value):
            raise ValueError("Calendar date must be formatted as YYYY-MM-DD")
        date.fromisoformat(self.value)

    @classmethod
    def for_day(cls, year: int, month: int, day: int) -> Self:
        return cls(value=f"{year:04d}-{month:02d}-{day:02d}")

    def __str__(self) -> str:
        return self.value


class IdSequence:
    """Monotonic id source scoped to a single store."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next(self) -> int:
        return next(self._counter)


def _parse_positive_int(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ValueError("Identifier must be a positive integer")
    parsed = int(value)
    if parsed < 1:
        raise ValueError("Identifier must be a positive integer")
    return parsed
