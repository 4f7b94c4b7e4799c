"""Read-only analytics over a snapshot of account records."""

from __future__ import annotations

import logging
import operator
from collections import Counter
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, localcontext
from itertools import chain
from types import MappingProxyType
from typing import ContextManager, Iterable, Mapping

from account_analytics.exceptions import EntityNotFoundError, InvalidEmailError
from account_analytics.grouping import group_collect, group_reduce, to_unique_map
from account_analytics.models import Account, Month, Sex

logger = logging.getLogger(__name__)


def email_domain(email: str) -> str:
    """Return the part of an email after its single ``@``.

    Raises
    ------
    InvalidEmailError
        If the email does not contain exactly one ``@``.
    """
    parts = email.split("@")
    if len(parts) != 2:
        raise InvalidEmailError(f"Malformed email {email!r}: expected exactly one '@'")
    return parts[1]


class AccountAnalytics:
    """Query engine bound to an immutable snapshot of accounts.

    The accounts are copied into a tuple on construction, so later changes
    to the caller's collection are never observed. Every query is a pure
    read of that tuple and returns an immutable result: tuples for
    sequences, frozensets for sets and ``MappingProxyType`` for maps, with
    map keys in order of first occurrence in the snapshot.

    Parameters
    ----------
    accounts : Iterable[Account]
        Account records; ids are expected to be unique.
    """

    __slots__ = ("_accounts",)

    def __init__(self, accounts: Iterable[Account]) -> None:
        self._accounts: tuple[Account, ...] = tuple(accounts)
        logger.debug("Analytics bound to snapshot of %d accounts", len(self._accounts))

    @classmethod
    def of(cls, accounts: Iterable[Account]) -> AccountAnalytics:
        """Create an engine over ``accounts``."""
        return cls(accounts)

    @property
    def accounts(self) -> tuple[Account, ...]:
        """The snapshot, in original order."""
        return self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(accounts={len(self._accounts)})"

    # Scalar aggregation & lookup

    def find_richest_account(self) -> Account | None:
        """Return the account with the highest balance.

        The first account in snapshot order wins a tie. Returns ``None``
        for an empty snapshot.
        """
        return max(self._accounts, key=operator.attrgetter("balance"), default=None)

    def calculate_total_balance(self) -> Decimal:
        """Return the exact sum of all balances (``Decimal("0")`` if empty)."""
        with _exact_context():
            return sum((a.balance for a in self._accounts), Decimal("0"))

    def contains_account_with_email_domain(self, domain: str) -> bool:
        """Check if some account's email domain equals ``domain`` exactly."""
        return any(email_domain(a.email) == domain for a in self._accounts)

    def get_balance_by_email(self, email: str) -> Decimal:
        """Return the balance of the first account with the given email.

        Raises
        ------
        EntityNotFoundError
            If no account has that email.
        """
        for account in self._accounts:
            if account.email == email:
                return account.balance
        logger.debug("No account with email=%s", email)
        raise EntityNotFoundError(f"Cannot find Account by email={email}", key=email)

    def count_letters_in_names(self) -> int:
        """Count every character of all first and last names."""
        return sum(len(a.first_name) + len(a.last_name) for a in self._accounts)

    # Grouping & partitioning

    def partition_by_sex(self) -> Mapping[bool, tuple[Account, ...]]:
        """Split accounts into males (``True``) and females (``False``).

        Both keys are always present, even when a side is empty.
        """
        males = tuple(a for a in self._accounts if a.sex is Sex.MALE)
        females = tuple(a for a in self._accounts if a.sex is not Sex.MALE)
        return MappingProxyType({True: males, False: females})

    def group_accounts_by_email_domain(self) -> Mapping[str, tuple[Account, ...]]:
        """Group accounts by the domain part of their email."""
        return group_collect(self._accounts, lambda a: email_domain(a.email), tuple)

    def group_first_names_by_last_name(self) -> Mapping[str, frozenset[str]]:
        """Map each last name to the distinct first names seen with it."""
        return group_collect(
            self._accounts,
            operator.attrgetter("last_name"),
            frozenset,
            value_fn=operator.attrgetter("first_name"),
        )

    def group_comma_separated_first_names_by_birthday_month(self) -> Mapping[Month, str]:
        """Map each birthday month to its first names joined by ``", "``.

        Names keep snapshot order, e.g. ``"Polly, Dylan, Clark"``.
        """
        return group_collect(
            self._accounts,
            lambda a: Month.of(a.birthday),
            ", ".join,
            value_fn=operator.attrgetter("first_name"),
        )

    def group_total_balance_by_creation_month(self) -> Mapping[Month, Decimal]:
        """Map each creation month to the total balance of its accounts.

        Months without accounts are absent rather than zero.
        """
        with _exact_context():
            return group_reduce(
                self._accounts,
                lambda a: Month.of(a.creation_date),
                operator.add,
                Decimal("0"),
                value_fn=operator.attrgetter("balance"),
            )

    def collect_accounts_by_id(self) -> Mapping[int, Account]:
        """Index accounts by id.

        Raises
        ------
        DuplicateKeyError
            If two accounts share an id.
        """
        return to_unique_map(self._accounts, operator.attrgetter("id"))

    def collect_balances_by_email_for_year(self, year: int) -> Mapping[str, Decimal]:
        """Map email to balance for accounts created in ``year``.

        Raises
        ------
        DuplicateKeyError
            If two accounts created in ``year`` share an email.
        """
        return to_unique_map(
            (a for a in self._accounts if a.creation_date.year == year),
            operator.attrgetter("email"),
            operator.attrgetter("balance"),
        )

    # Filtering & ordering

    def find_accounts_by_birthday_month(self, month: Month | int) -> tuple[Account, ...]:
        """Return accounts born in ``month``, in snapshot order.

        Raises
        ------
        ValueError
            If ``month`` is not a valid month number.
        """
        month = Month(month)
        return tuple(a for a in self._accounts if a.birthday.month == month)

    def sort_by_first_and_last_name(self) -> tuple[Account, ...]:
        """Return accounts stably sorted by first name, then last name."""
        return tuple(sorted(self._accounts, key=lambda a: (a.first_name, a.last_name)))

    # Character frequency

    def get_first_name_letter_frequency(self) -> Mapping[str, int]:
        """Count each character of all first names, case-sensitively."""
        return _frequency(a.first_name for a in self._accounts)

    def get_name_letter_frequency_ignore_case(self) -> Mapping[str, int]:
        """Count each character of all first and last names, lower-cased."""
        names = chain.from_iterable((a.first_name, a.last_name) for a in self._accounts)
        return _frequency(map(_fold_case, name) for name in names)


def _exact_context() -> ContextManager[Context]:
    """Decimal context in which additions of balances never round."""
    return localcontext(Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN))


def _fold_case(ch: str) -> str:
    # Characters like "İ" lower-case to several code points; keep one per input character
    return ch.lower()[0]


def _frequency(strings: Iterable[Iterable[str]]) -> Mapping[str, int]:
    counts: Counter[str] = Counter()
    for s in strings:
        counts.update(s)
    return MappingProxyType(dict(counts))
