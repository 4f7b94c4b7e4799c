"""Account generator for sample analytics snapshots."""

from __future__ import annotations

import unicodedata
from datetime import datetime
from decimal import Decimal
from typing import Iterator

from account_analytics.config import SampleDataConfig
from account_analytics.generators.base import BaseGenerator
from account_analytics.models import Account, Sex

CENT = Decimal("0.01")


class AccountGenerator(BaseGenerator):
    """Generate synthetic account records.

    Ids are sequential starting at 1, so every batch from one generator
    can be indexed by id without collisions. Emails are built from the
    holder's name plus the id, which keeps them unique as well.
    """

    SEXES = list(Sex)

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        start_year: int = 2015,
        end_year: int = 2024,
        max_balance: Decimal = Decimal("200000.00"),
    ) -> None:
        super().__init__(seed, locale=locale)
        self.start = datetime(start_year, 1, 1)
        self.end = datetime(end_year, 12, 31, 23, 59, 59)
        self.max_cents = int(max_balance / CENT)
        self._next_id = 1

    @classmethod
    def from_config(cls, config: SampleDataConfig) -> AccountGenerator:
        """Create a generator from sample data settings."""
        return cls(
            seed=config.seed,
            locale=config.locale,
            start_year=config.start_year,
            end_year=config.end_year,
            max_balance=config.max_balance,
        )

    def generate(self) -> Account:
        """Generate a single account.

        Returns
        -------
        Account
            Generated account.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate multiple accounts.

        Parameters
        ----------
        count : int
            Number of accounts to generate.

        Yields
        ------
        Account
            Generated accounts.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Account:
        account_id = self._next_id
        self._next_id += 1

        sex = self.fake.random_element(self.SEXES)
        if sex is Sex.MALE:
            first_name = self.fake.first_name_male()
        else:
            first_name = self.fake.first_name_female()
        last_name = self.fake.last_name()

        local_part = f"{_ascii_slug(first_name)}.{_ascii_slug(last_name)}{account_id}"
        email = f"{local_part}@{self.fake.free_email_domain()}"

        cents = self.fake.random_int(min=0, max=self.max_cents)

        return Account(
            id=account_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            birthday=self.fake.date_of_birth(minimum_age=18, maximum_age=80),
            sex=sex,
            creation_date=self.fake.date_time_between_dates(self.start, self.end),
            balance=(Decimal(cents) * CENT).quantize(CENT),
        )


def _ascii_slug(name: str) -> str:
    """Lower-case ASCII letters of a name, for use in email local parts."""
    normalized = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    slug = "".join(ch for ch in normalized.lower() if ch.isalnum())
    return slug or "user"
