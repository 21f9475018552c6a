from __future__ import annotations

import enum
from typing import Generic, NoReturn, TypeVar, Union

_T = TypeVar("_T")


class Month(enum.Enum):
    """The months of the year; ``.value`` is the month number (1-12)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(enum.Enum):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


JANUARY = Month.JANUARY
FEBRUARY = Month.FEBRUARY
MARCH = Month.MARCH
APRIL = Month.APRIL
MAY = Month.MAY
JUNE = Month.JUNE
JULY = Month.JULY
AUGUST = Month.AUGUST
SEPTEMBER = Month.SEPTEMBER
OCTOBER = Month.OCTOBER
NOVEMBER = Month.NOVEMBER
DECEMBER = Month.DECEMBER

MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY
WEDNESDAY = Weekday.WEDNESDAY
THURSDAY = Weekday.THURSDAY
FRIDAY = Weekday.FRIDAY
SATURDAY = Weekday.SATURDAY
SUNDAY = Weekday.SUNDAY

_MONTHS_BY_INT = {m.value: m for m in Month}
_WEEKDAYS_BY_INT = {d.value: d for d in Weekday}


class Ok(Generic[_T]):
    """A successful result, carrying a value"""

    __slots__ = ("value",)

    value: _T

    def __init__(self, value: _T):
        self.value = value

    def unwrap(self) -> _T:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ok):
            return self.value == other.value
        return False

    def __hash__(self) -> int:
        return hash((Ok, self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


class Err:
    """A failed result, carrying a description of what went wrong"""

    __slots__ = ("message",)

    message: str

    def __init__(self, message: str):
        self.message = message

    def unwrap(self) -> NoReturn:
        raise ValueError(self.message)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Err):
            return self.message == other.message
        return False

    def __hash__(self) -> int:
        return hash((Err, self.message))

    def __repr__(self) -> str:
        return f"Err({self.message!r})"


Result = Union[Ok[_T], Err]
