"""Synthetic account data generators."""

from account_analytics.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
