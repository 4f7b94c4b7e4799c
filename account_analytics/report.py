"""Run the full analytics query surface and collect a serializable report."""

import logging
from datetime import date
from typing import Any, Callable, Iterable, Protocol

from account_analytics.analytics import AccountAnalytics, email_domain
from account_analytics.exceptions import DuplicateKeyError, EntityNotFoundError
from account_analytics.models import Month
from account_analytics.sinks.serialization import serialize_value

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    def write_report(self, report: dict[str, Any]) -> None: ...

    def close(self) -> None: ...


def build_report(
    engine: AccountAnalytics,
    month: Month | int | None = None,
    year: int | None = None,
    domain: str | None = None,
    email: str | None = None,
) -> dict[str, Any]:
    """Run every analytics query and serialize the results.

    Parameterised queries default to values taken from the first account of
    the snapshot (its birthday month, creation year, email domain and email),
    so a report over sample data always has matches to show.

    Parameters
    ----------
    engine : AccountAnalytics
        Engine to query.
    month : Month | int | None
        Birthday month for ``find_accounts_by_birthday_month``.
    year : int | None
        Creation year for ``collect_balances_by_email_for_year``.
    domain : str | None
        Domain for ``contains_account_with_email_domain``.
    email : str | None
        Email for ``get_balance_by_email``.

    Returns
    -------
    dict[str, Any]
        Query name to JSON-compatible result. Lookup and index queries that
        fail are recorded as ``{"error": ..., "message": ...}``.
    """
    first = engine.accounts[0] if len(engine) else None
    if month is None:
        month = Month.of(first.birthday) if first else Month.JANUARY
    if year is None:
        year = first.creation_date.year if first else date.today().year
    if domain is None:
        domain = email_domain(first.email) if first else ""
    if email is None:
        email = first.email if first else ""

    queries: dict[str, Callable[[], Any]] = {
        "richest_account": engine.find_richest_account,
        "total_balance": engine.calculate_total_balance,
        "contains_email_domain": lambda: {
            "domain": domain,
            "found": engine.contains_account_with_email_domain(domain),
        },
        "balance_by_email": lambda: {
            "email": email,
            "balance": engine.get_balance_by_email(email),
        },
        "letters_in_names": engine.count_letters_in_names,
        "partition_by_sex": engine.partition_by_sex,
        "accounts_by_email_domain": engine.group_accounts_by_email_domain,
        "first_names_by_last_name": engine.group_first_names_by_last_name,
        "first_names_by_birthday_month": engine.group_comma_separated_first_names_by_birthday_month,
        "total_balance_by_creation_month": engine.group_total_balance_by_creation_month,
        "accounts_by_id": engine.collect_accounts_by_id,
        "balances_by_email_for_year": lambda: engine.collect_balances_by_email_for_year(year),
        "accounts_by_birthday_month": lambda: engine.find_accounts_by_birthday_month(month),
        "sorted_by_name": engine.sort_by_first_and_last_name,
        "first_name_letter_frequency": engine.get_first_name_letter_frequency,
        "name_letter_frequency_ignore_case": engine.get_name_letter_frequency_ignore_case,
    }

    logger.info("Running %d queries over %d accounts", len(queries), len(engine))

    report: dict[str, Any] = {}
    for name, query in queries.items():
        try:
            report[name] = serialize_value(query())
        except (EntityNotFoundError, DuplicateKeyError) as e:
            logger.warning("Query %s failed: %s", name, e)
            report[name] = {"error": type(e).__name__, "message": str(e)}

    return report


def export_report(report: dict[str, Any], sinks: Iterable[ReportSink]) -> None:
    """Write a report to each sink and close it."""
    count = 0
    for sink in sinks:
        sink.write_report(report)
        sink.close()
        count += 1
    logger.info("Exported report to %d sinks", count)
