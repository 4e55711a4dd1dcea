"""CLI entry point for the jeonse/wolse conversion calculator.

Usage:
    python -m src.rent_calc.main --type toRent --deposit 30000 --target 10000 --rate 5.5
    python -m src.rent_calc.main --type toDeposit --deposit 5000 --rent 100 --target 50 --rate 5.5
"""

from __future__ import annotations

import argparse
import json

from ..common.config import settings
from ..common.formatting import format_money, manwon_to_won
from ..common.logging import setup_logging
from ..common.models import RentConversionType
from .calculator import RentConversionCalculator

logger = setup_logging(level=settings.log_level_value)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Jeonse/Wolse Conversion Calculator")
    parser.add_argument(
        "--type",
        choices=[t.value for t in RentConversionType],
        required=True,
        help="toRent: lower the deposit, toDeposit: lower the rent",
    )
    parser.add_argument("--deposit", type=float, default=0, help="Current deposit (만원)")
    parser.add_argument("--rent", type=float, default=0, help="Current monthly rent (만원)")
    parser.add_argument(
        "--target",
        type=float,
        required=True,
        help="Deposit (toRent) or rent (toDeposit) to reduce by (만원)",
    )
    parser.add_argument("--rate", type=float, required=True, help="Conversion rate (%%)")
    parser.add_argument("--output", type=str, help="Output JSON file path")

    args = parser.parse_args(argv)

    calc = RentConversionCalculator()
    try:
        result = calc.convert(
            args.type,
            manwon_to_won(args.deposit),
            manwon_to_won(args.rent),
            manwon_to_won(args.target),
            args.rate / 100,
        )
    except ValueError as e:
        parser.error(str(e))

    if result.conversion_type is RentConversionType.TO_RENT:
        logger.info("추가되는 월세: %s", format_money(result.additional_rent))
    else:
        logger.info("필요한 추가 보증금: %s", format_money(result.additional_deposit))
    logger.info("  최종 보증금: %s", format_money(result.final_deposit))
    logger.info("  최종 월세: %s", format_money(result.final_rent))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
