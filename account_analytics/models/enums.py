"""Enumeration types for account records."""

from datetime import date
from enum import Enum, IntEnum


class Sex(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class Month(IntEnum):
    """Calendar month, numbered like ``date.month``."""

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

    @classmethod
    def of(cls, value: date) -> "Month":
        """Return the month of a date or datetime."""
        return cls(value.month)
