"""Domain models for account analytics."""

from account_analytics.models.account import Account
from account_analytics.models.enums import Month, Sex

__all__ = ["Account", "Month", "Sex"]
