"""In-memory analytics over snapshots of bank account records."""

from account_analytics.analytics import AccountAnalytics
from account_analytics.exceptions import (
    AccountAnalyticsError,
    DuplicateKeyError,
    EntityNotFoundError,
)
from account_analytics.models import Account, Month, Sex

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountAnalytics",
    "AccountAnalyticsError",
    "DuplicateKeyError",
    "EntityNotFoundError",
    "Month",
    "Sex",
    "__version__",
]
