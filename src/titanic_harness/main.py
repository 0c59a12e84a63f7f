"""Titanic harness - command line entry point.

Usage:
    # Run the whole catalogue against the default target
    titanic-harness

    # Against a deployed gateway, two cases only
    titanic-harness --base-url https://titanic.example.com \\
        --case gateway_health --case auth_tokens

    # List the catalogue
    titanic-harness --list

Exit codes:
    0 - All cases passed
    1 - At least one case failed or errored
    2 - Invalid arguments or configuration
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from titanic_harness.cases import DEFAULT_CASES, SuiteCase, select_cases
from titanic_harness.config.logging import configure_logging
from titanic_harness.config.settings import Settings
from titanic_harness.core.cleanup import CleanupCoordinator
from titanic_harness.core.driver import SuiteDriver
from titanic_harness.core.exceptions import ConfigurationError
from titanic_harness.core.reporting import format_summary, write_report
from titanic_harness.core.session import SessionState
from titanic_harness.data.fixture_store import build_actors
from titanic_harness.models.report import SuiteReport
from titanic_harness.services.titanic.client import TitanicApiClient

log = structlog.get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="titanic-harness",
        description="Integration tests for the Titanic microservices API",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Gateway base URL (default: TITANIC_BASE_URL or http://localhost:8000)",
    )
    parser.add_argument(
        "--results-dir",
        type=Path,
        default=None,
        help="Directory for the JSON run report (default: TITANIC_RESULTS_DIR)",
    )
    parser.add_argument(
        "--case",
        dest="cases",
        action="append",
        default=None,
        metavar="NAME",
        help="Run only this case (repeatable)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available cases and exit",
    )
    parser.add_argument(
        "--verify-cleanup",
        action="store_true",
        default=None,
        help="Read deleted passengers back and expect 404",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Minimum log level (default: TITANIC_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Settings from the environment, with command line flags on top."""
    overrides: dict[str, Any] = {
        "base_url": args.base_url,
        "results_dir": args.results_dir,
        "verify_cleanup": args.verify_cleanup,
        "log_level": args.log_level,
    }
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


async def run_suite(settings: Settings, cases: Sequence[SuiteCase]) -> SuiteReport:
    """Run `cases` against the backend named in `settings`."""
    actors = build_actors(
        suffix=settings.run_suffix,
        password=settings.actor_password,
        admin_email=settings.admin_email,
        regular_email=settings.regular_email,
    )
    async with TitanicApiClient(settings.base_url, timeout=settings.request_timeout) as client:
        driver = SuiteDriver(
            client,
            actors,
            cases,
            session=SessionState(),
            coordinator=CleanupCoordinator(client, verify=settings.verify_cleanup),
            base_url=settings.base_url,
        )
        log.info(
            "suite_started",
            run_id=driver.session.run_id,
            base_url=settings.base_url,
            cases=[case.name for case in cases],
        )
        return await driver.run()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the titanic-harness console script."""
    args = parse_args(argv)

    if args.list:
        for case in DEFAULT_CASES:
            print(f"{case.name:<28} {case.title}")
        return 0

    try:
        settings = build_settings(args)
        cases = select_cases(args.cases)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings)
    report = asyncio.run(run_suite(settings, cases))
    write_report(report, settings.results_dir)
    print(format_summary(report))
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
