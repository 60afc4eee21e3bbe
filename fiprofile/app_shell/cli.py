import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from fiprofile.adapters.clock import FrozenClock, SystemClock
from fiprofile.adapters.sqlite_store import SQLiteBlobStore
from fiprofile.components.profile import ProfileService
from fiprofile.components.profile_store import ProfileStore
from fiprofile.core.entities import ProfileCalculationResult
from fiprofile.core.errors import PersistenceError, ProfileValidationError
from fiprofile.core.ports import ClockPort
from fiprofile.rules.loader import load_rules_or_default
from fiprofile.rules.models import FinancialRules

logger = logging.getLogger("cli")

DB_PATH = "fiprofile.db"
RULES_PATH = "rules.yaml"


def get_rules(args: argparse.Namespace) -> FinancialRules:
    try:
        return load_rules_or_default(Path(args.rules))
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(1)


def get_clock(args: argparse.Namespace) -> ClockPort:
    as_of = getattr(args, "as_of", None)
    if as_of:
        try:
            return FrozenClock(datetime.fromisoformat(as_of))
        except ValueError:
            logger.error("Invalid --as-of timestamp %r; expected ISO-8601.", as_of)
            sys.exit(1)
    return SystemClock()


def get_store(args: argparse.Namespace, rules: FinancialRules) -> ProfileStore:
    try:
        blob_store = SQLiteBlobStore(args.db)
    except PersistenceError as e:
        logger.warning("Storage unavailable, continuing without persistence: %s", e)
        blob_store = None
    return ProfileStore(blob_store, get_clock(args), user_id=args.user, rules=rules)


def print_result(result: ProfileCalculationResult) -> None:
    profile = result.profile
    metrics = profile.metrics
    print(f"Stage:          {profile.stage.value}")
    print(f"Category:       {profile.category.value}")
    print(f"Savings rate:   {metrics.savings_rate:.1%}")
    print(f"FI number:      {metrics.fi_number:,.0f}")
    print(f"Progress to FI: {metrics.progress_to_fi:.1%}")
    print(f"Years to FI:    {metrics.years_to_fi:.1f}")

    if result.insights:
        print("\nInsights:")
        for line in result.insights:
            print(f"  - {line}")

    if result.recommendations:
        print("\nRecommendations:")
        for line in result.recommendations:
            print(f"  - {line}")


def handle_calculate(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error("Input file %s not found.", input_path)
        sys.exit(1)

    try:
        data = json.loads(input_path.read_text())
    except json.JSONDecodeError as e:
        logger.error("Input file %s is not valid JSON: %s", input_path, e)
        sys.exit(1)

    store = get_store(args, rules)
    service = ProfileService(store, get_clock(args), rules=rules)
    try:
        result = service.calculate_profile(data)
    except ProfileValidationError as e:
        print("Invalid financial data:", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        sys.exit(1)

    print_result(result)


def handle_show(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    profile = get_store(args, rules).load()
    if profile is None:
        print("No stored financial profile.")
        sys.exit(1)
    print(json.dumps(profile.to_wire(), indent=2))


def handle_status(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    store = get_store(args, rules)
    max_days = args.max_days if args.max_days is not None else rules.storage.stale_after_days

    age = store.age_in_days()
    print(f"Key:    {store.key}")
    print(f"Exists: {'yes' if store.exists() else 'no'}")
    print(f"Age:    {'-' if age is None else f'{age} day(s)'}")
    print(f"Stale:  {'yes' if store.is_stale(max_days) else 'no'} (threshold {max_days} days)")


def handle_clear(args: argparse.Namespace) -> None:
    rules = get_rules(args)
    if get_store(args, rules).remove():
        print("Financial profile cleared.")
    else:
        print("Could not clear financial profile.", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Financial independence profile CLI")
    parser.add_argument("--db", default=DB_PATH, help="SQLite file holding the profile")
    parser.add_argument("--rules", default=RULES_PATH, help="Rules YAML (defaults if missing)")
    parser.add_argument("--user", default=None, help="Scope the stored profile to a user id")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # calculate
    calc_parser = subparsers.add_parser("calculate", help="Calculate and store a profile")
    calc_parser.add_argument("input", help="Path to a JSON file with the financial input")

    # show
    subparsers.add_parser("show", help="Print the stored profile as JSON")

    # status
    status_parser = subparsers.add_parser("status", help="Report profile age and staleness")
    status_parser.add_argument("--max-days", type=int, default=None, help="Staleness threshold")
    status_parser.add_argument("--as-of", default=None, help="ISO timestamp to measure age at")

    # clear
    subparsers.add_parser("clear", help="Remove the stored profile")

    return parser


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.command == "calculate":
        handle_calculate(args)
    elif args.command == "show":
        handle_show(args)
    elif args.command == "status":
        handle_status(args)
    elif args.command == "clear":
        handle_clear(args)


if __name__ == "__main__":
    main()
