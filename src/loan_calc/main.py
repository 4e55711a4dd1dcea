"""CLI entry point for the loan calculator.

Usage:
    python -m src.loan_calc.main --amount 10000 --rate 4.5 --term 30
    python -m src.loan_calc.main --amount 1200 --rate 6 --term 12 --unit month --schedule
"""

from __future__ import annotations

import argparse
import json

from ..common.config import settings
from ..common.formatting import format_money, manwon_to_won
from ..common.logging import setup_logging
from ..common.models import TermUnit
from .calculator import LoanCalculator

logger = setup_logging(level=settings.log_level_value)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Loan Calculator (원리금균등 상환)")
    parser.add_argument("--amount", type=float, required=True, help="Loan amount (만원)")
    parser.add_argument("--rate", type=float, required=True, help="Annual interest rate (%%)")
    parser.add_argument("--term", type=float, required=True, help="Loan term")
    parser.add_argument(
        "--unit",
        choices=[u.value for u in TermUnit],
        default=TermUnit.YEAR.value,
        help="Unit of --term (default: year)",
    )
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Print the month-by-month amortisation table",
    )
    parser.add_argument("--output", type=str, help="Output JSON file path")

    args = parser.parse_args(argv)

    calc = LoanCalculator()
    try:
        summary = calc.calculate(
            manwon_to_won(args.amount),
            args.rate / 100,
            args.term,
            TermUnit(args.unit),
            with_schedule=args.schedule,
        )
    except ValueError as e:
        parser.error(str(e))

    logger.info("월 상환액: %s", format_money(summary.monthly_payment))
    logger.info("  총 이자: %s", format_money(summary.total_interest))
    logger.info("  총 상환액: %s", format_money(summary.total_payment))
    for row in summary.schedule:
        logger.info(
            "    %3d회차: 원금 %s + 이자 %s (잔액 %s)",
            row.month,
            format_money(row.principal),
            format_money(row.interest),
            format_money(row.balance),
        )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(summary.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
