#!/usr/bin/env python3
"""Run the in-memory banking demo.

Registers two customers and two accounts, performs a withdrawal, a
deposit and a transfer, and prints the repository contents before and
after. Defaults come from the environment (see ``BankConfig.from_env``)
and can be overridden on the command line.
"""

import argparse
import logging

from generic_bank.config import BankConfig
from generic_bank.logging import setup_logging
from generic_bank.scenarios import DemoScenario
from generic_bank.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def parse_args(config: BankConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the in-memory banking demo")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for generated customers (default: none)",
    )
    parser.add_argument(
        "--extra-customers",
        type=int,
        default=config.demo.extra_customers,
        help="Generated customers to add before the walkthrough (default: 0)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=config.demo.as_json,
        help="Print listings as JSON instead of descriptions",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["plain", "standard", "json"],
        default=config.log_format,
        help="Log format (default: plain)",
    )
    return parser.parse_args()


def main() -> None:
    """Main entry point."""
    config = BankConfig.from_env()
    args = parse_args(config)

    setup_logging(level=args.log_level, format_type=args.log_format)

    sink = ConsoleSink(as_json=args.json)
    scenario = DemoScenario(
        extra_customers=args.extra_customers,
        seed=args.seed,
        locale=config.locale,
        currency_symbol=config.currency_symbol,
        sink=sink,
    )
    result = scenario.run()
    sink.close()

    failed = [name for name, outcome in result.results.items() if not outcome]
    if failed:
        logger.warning("Operations did not succeed: %s", ", ".join(failed))


if __name__ == "__main__":
    main()
