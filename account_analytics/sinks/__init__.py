"""Output sinks for analytics reports."""

from account_analytics.sinks.console import ConsoleSink
from account_analytics.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
