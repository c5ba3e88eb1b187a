import argparse
import logging
import sys

from . import __version__
from .config import load_settings
from .logging_setup import setup_logging
from .relocation import RelocationError, plan_relocations, relocation_count
from .report import RelocationReport


def _format_plan(transactions: list[int], report: RelocationReport) -> list[str]:
    lines = [
        f"transactions_count = {len(transactions)}",
        f"relocations = {report.relocations}",
        f"final_balance = {report.final_balance}",
        f"min_balance = {report.min_balance}",
    ]
    for s in report.steps:
        lines.append(
            f"relocate: expense_index= {s.expense_index} amount= {s.amount} at_index= {s.at_index}"
        )
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="balance-relocator")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "command",
        nargs="?",
        default="health",
        choices=["health", "count", "plan"],
        help="Command to run",
    )
    parser.add_argument(
        "transactions",
        nargs="*",
        type=int,
        help="Signed transaction amounts in order (negative = expense)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the plan as JSON (used with plan)",
    )
    parser.add_argument(
        "--trust",
        action="store_true",
        help="Skip the up-front total >= 0 check (overrides RELOCATOR_VALIDATION)",
    )

    args = parser.parse_intermixed_args(argv)

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    transactions: list[int] = list(args.transactions or [])
    validate = settings.validate_input and not args.trust

    if args.command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    try:
        if args.command == "count":
            print(relocation_count(transactions, validate=validate))
            return 0

        if args.command == "plan":
            plan = plan_relocations(transactions, validate=validate)
            report = RelocationReport.from_plan(plan)
            if args.json:
                print(report.model_dump_json())
            else:
                for line in _format_plan(transactions, report):
                    print(line)
            return 0
    except RelocationError as e:
        logger.warning("Input rejected: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
