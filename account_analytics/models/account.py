"""Account record model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from account_analytics.models.enums import Sex


@dataclass(frozen=True)
class Account:
    """Bank account holder record.

    Records are immutable values; the analytics engine only reads them.
    ``balance`` is always a ``Decimal`` so that sums stay exact.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    birthday: date
    sex: Sex
    creation_date: datetime
    balance: Decimal
