"""Console sink for inspecting analytics reports."""

import json
from typing import Any, Mapping


class ConsoleSink:
    """Print report sections to stdout as JSON."""

    def __init__(self, pretty: bool = True, max_items: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_items : int | None
            Maximum list items or map entries to print per section (None for all).
        """
        self.pretty = pretty
        self.max_items = max_items
        self._sections = 0

    def write_report(self, report: Mapping[str, Any]) -> None:
        """Write every section of a serialized report."""
        for name, data in report.items():
            self.write_section(name, data)

    def write_section(self, name: str, data: Any) -> None:
        """Write a single serialized report section."""
        print(f"\n{'='*60}")
        print(f"Query: {name}")
        print("=" * 60)

        shown, hidden = self._truncate(data)
        if self.pretty:
            print(json.dumps(shown, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(shown, ensure_ascii=False))

        if hidden:
            print(f"... and {hidden} more")

        self._sections += 1

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print(f"Console Sink Summary: {self._sections} sections")
        print("=" * 60)

    def _truncate(self, data: Any) -> tuple[Any, int]:
        if not self.max_items:
            return data, 0
        if isinstance(data, list) and len(data) > self.max_items:
            return data[: self.max_items], len(data) - self.max_items
        if isinstance(data, dict) and "error" not in data and len(data) > self.max_items:
            items = list(data.items())
            return dict(items[: self.max_items]), len(items) - self.max_items
        return data, 0
