"""Configuration management for account-analytics."""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path

from account_analytics.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class SampleDataConfig:
    """Sample account snapshot generation settings."""

    num_accounts: int = 100
    seed: int | None = None
    locale: str = "en_US"
    start_year: int = 2015
    end_year: int = 2024
    max_balance: Decimal = Decimal("200000.00")


@dataclass
class OutputConfig:
    """Report output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class AnalyticsConfig:
    """Main configuration for account-analytics."""

    sample: SampleDataConfig = field(default_factory=SampleDataConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def validate(self) -> None:
        """Raise ``ConfigurationError`` when settings cannot be used."""
        if self.sample.num_accounts <= 0:
            raise ConfigurationError(
                f"num_accounts must be positive, got {self.sample.num_accounts}"
            )
        if self.sample.start_year > self.sample.end_year:
            raise ConfigurationError(
                f"start_year {self.sample.start_year} is after end_year {self.sample.end_year}"
            )
        if self.sample.max_balance < 0:
            raise ConfigurationError(f"max_balance must not be negative, got {self.sample.max_balance}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "AnalyticsConfig":
        """Create config from environment variables."""
        import os

        sample = SampleDataConfig(
            num_accounts=int(os.getenv("NUM_ACCOUNTS", "100")),
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            start_year=int(os.getenv("START_YEAR", "2015")),
            end_year=int(os.getenv("END_YEAR", "2024")),
            max_balance=Decimal(os.getenv("MAX_BALANCE", "200000.00")),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            sample=sample,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
