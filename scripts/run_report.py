#!/usr/bin/env python3
"""Generate a sample account snapshot and run the analytics report over it.

Settings come from environment variables (see ``AnalyticsConfig.from_env``)
and can be overridden with command line flags.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_analytics.analytics import AccountAnalytics
from account_analytics.config import AnalyticsConfig
from account_analytics.exceptions import ConfigurationError
from account_analytics.generators import AccountGenerator
from account_analytics.logging import get_logger, setup_logging
from account_analytics.report import build_report, export_report
from account_analytics.sinks import ConsoleSink, JsonFileSink

logger = get_logger("account_analytics.scripts.run_report")


def main() -> None:
    """Main entry point."""
    config = AnalyticsConfig.from_env()

    parser = argparse.ArgumentParser(
        description="Run account analytics queries over generated sample data"
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=config.sample.num_accounts,
        help=f"Number of accounts to generate (default: {config.sample.num_accounts})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.sample.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        help="Birthday month to filter by (default: first account's)",
    )
    parser.add_argument(
        "--year",
        type=int,
        help="Creation year for balances by email (default: first account's)",
    )
    parser.add_argument("--domain", type=str, help="Email domain to look for")
    parser.add_argument("--email", type=str, help="Email whose balance to look up")
    parser.add_argument(
        "--output",
        type=str,
        choices=["console", "json"],
        default="console",
        help="Where to write the report (default: console)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help=f"Directory for JSON output (default: {config.output.json_output_dir})",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Limit items printed per console section",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    args = parser.parse_args()

    config.sample.num_accounts = args.accounts
    config.sample.seed = args.seed
    config.log_level = args.log_level

    try:
        config.validate()
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, format_type=config.log_format)

    generator = AccountGenerator.from_config(config.sample)
    engine = AccountAnalytics.of(generator.generate_batch(config.sample.num_accounts))
    logger.info("Generated %d accounts (seed=%s)", len(engine), config.sample.seed)

    report = build_report(
        engine,
        month=args.month,
        year=args.year,
        domain=args.domain,
        email=args.email,
    )

    if args.output == "json":
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    else:
        sink = ConsoleSink(pretty=args.pretty, max_items=args.max_items)
    export_report(report, [sink])


if __name__ == "__main__":
    main()
