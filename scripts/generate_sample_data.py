#!/usr/bin/env python3
"""Generate a sample loan book, export it and print its figures.

Writes active loans, completed loans and MOI entries as JSON files, then
prints the portfolio summary and the interest reminders due in the
configured look-ahead window.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lend_track.config import LendTrackConfig, ReminderConfig, ScenarioConfig
from lend_track.logging import get_logger, setup_logging
from lend_track.reminders import ReminderScanner
from lend_track.scenarios import LoanBookScenario
from lend_track.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def print_summary(summary: dict, output_dir: Path) -> None:
    """Print portfolio figures."""
    print("\n" + "=" * 60)
    print("Portfolio Summary")
    print("=" * 60)
    for name, value in summary.items():
        print(f"{name + ':':26}{value}")
    print(f"\nAll files saved to: {output_dir}")
    print("=" * 60)


def print_reminders(reminders: list) -> None:
    """Print upcoming interest reminders."""
    print("\nInterest Reminders")
    print("-" * 60)
    if not reminders:
        print("No upcoming interest payments")
        return
    for reminder in reminders:
        print(
            f"{reminder.due_date:%b %d}  {reminder.borrower_name:30} "
            f"{reminder.interest_amount:.2f}"
        )


def main() -> None:
    """Main entry point."""
    config = LendTrackConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample loan book")
    parser.add_argument(
        "--loans",
        type=int,
        default=25,
        help="Number of loans to generate (default: 25)",
    )
    parser.add_argument(
        "--moi-entries",
        type=int,
        default=10,
        help="Number of MOI ledger entries (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed (default: SEED or 42)",
    )
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Reference date YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--window-days",
        type=int,
        default=config.reminders.window_days,
        help="Reminder look-ahead in days (default: REMINDER_WINDOW_DAYS or 7)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for JSON files (default: OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Also print every record to stdout",
    )
    args = parser.parse_args()

    setup_logging(level=config.log_level)

    scenario_config = ScenarioConfig(
        name="sample_loan_book",
        num_loans=args.loans,
        moi_entries=args.moi_entries,
    )
    as_of = args.as_of or date.today()
    scenario = LoanBookScenario(
        as_of=as_of,
        seed=args.seed,
        locale=config.locale,
        config=scenario_config,
    )
    store = scenario.generate()
    logger.info("Loan book generated as of %s", as_of)

    sinks: list = [JsonFileSink(args.output_dir, pretty=config.output.pretty_json)]
    if args.console:
        sinks.append(ConsoleSink(max_records=5))
    scenario.export(sinks)
    for sink in sinks:
        sink.close()

    print_summary(scenario.get_portfolio_summary(), args.output_dir)

    scanner = ReminderScanner(
        clock=lambda: as_of,
        config=ReminderConfig(window_days=args.window_days),
    )
    print_reminders(scanner.scan(store.list_loans()))


if __name__ == "__main__":
    main()
