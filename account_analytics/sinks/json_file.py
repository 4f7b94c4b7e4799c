"""JSON file sink for exporting analytics reports."""

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from account_analytics.exceptions import SinkError

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write each report section to ``<output_dir>/<section>.json``."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {e}") from e
        self.pretty = pretty
        self._written: list[Path] = []

    def write_report(self, report: Mapping[str, Any]) -> None:
        """Write every section of a serialized report."""
        for name, data in report.items():
            self.write_section(name, data)

    def write_section(self, name: str, data: Any) -> None:
        """Write a single serialized report section to its own file."""
        file_path = self.output_dir / f"{name}.json"

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise SinkError(f"Cannot write {file_path}: {e}") from e

        logger.debug("Wrote section %s to %s", name, file_path)
        self._written.append(file_path)

    @property
    def written_files(self) -> list[Path]:
        """Files written so far, in write order."""
        return list(self._written)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for file_path in self._written:
            print(f"  {file_path.name}")
