"""Pytest configuration and fixtures."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from account_analytics.models import Account, Sex


def make_account(
    account_id: int,
    first_name: str = "Ann",
    last_name: str = "Smith",
    email: str | None = None,
    birthday: date = date(1990, 1, 15),
    sex: Sex = Sex.FEMALE,
    creation_date: datetime = datetime(2020, 3, 1, 12, 0),
    balance: str = "0.00",
) -> Account:
    """Build an account with sensible defaults for tests."""
    return Account(
        id=account_id,
        first_name=first_name,
        last_name=last_name,
        email=email or f"user{account_id}@example.com",
        birthday=birthday,
        sex=sex,
        creation_date=creation_date,
        balance=Decimal(balance),
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def simple_accounts() -> list[Account]:
    """Three accounts over two email domains."""
    return [
        make_account(1, email="a@x.com", balance="10"),
        make_account(2, email="b@x.com", balance="30"),
        make_account(3, email="c@y.com", balance="5"),
    ]


@pytest.fixture
def accounts() -> list[Account]:
    """A mixed snapshot covering sexes, months, years and name collisions."""
    return [
        make_account(
            1, "Polly", "Brown", "polly@gmail.com", date(1991, 4, 2), Sex.FEMALE,
            datetime(2019, 4, 10), "1500.25",
        ),
        make_account(
            2, "Dylan", "Brown", "dylan@yahoo.com", date(1985, 4, 20), Sex.MALE,
            datetime(2020, 1, 5), "2500.10",
        ),
        make_account(
            3, "Clark", "Kent", "clark@gmail.com", date(1978, 6, 18), Sex.MALE,
            datetime(2019, 4, 22), "0.10",
        ),
        make_account(
            4, "Polly", "Brown", "polly.b@outlook.com", date(2000, 4, 9), Sex.FEMALE,
            datetime(2019, 12, 1), "2500.10",
        ),
        make_account(
            5, "Ann", "Kent", "ann@yahoo.com", date(1995, 12, 30), Sex.FEMALE,
            datetime(2021, 1, 17), "0.20",
        ),
    ]
