"""CLI entry point for the net-pay calculator.

Usage:
    python -m src.salary_calc.main --amount 6000 --manwon
    python -m src.salary_calc.main --amount 3800405 --period monthly --basis post
    python -m src.salary_calc.main --amount 60000000 --non-taxable 200000 --preset 2026
    python -m src.salary_calc.main --list-presets
"""

from __future__ import annotations

import argparse
import json

from ..common.config import settings
from ..common.formatting import format_money, manwon_to_won
from ..common.logging import setup_logging
from ..common.models import PayPeriod, TaxBasis
from .calculator import NetPayCalculator
from .presets import PresetLoader

logger = setup_logging(level=settings.log_level_value)

_LABELS = [
    ("national_pension", "국민연금"),
    ("health_insurance", "건강보험"),
    ("care_insurance", "장기요양"),
    ("employment_insurance", "고용보험"),
    ("income_tax", "소득세"),
    ("local_income_tax", "지방소득세"),
]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Net Pay Calculator (연봉 실수령액)")
    parser.add_argument(
        "--amount",
        type=float,
        help="Salary figure in won (or 만원 with --manwon)",
    )
    parser.add_argument(
        "--manwon",
        action="store_true",
        help="Treat --amount and --non-taxable as 만원 units",
    )
    parser.add_argument(
        "--period",
        choices=[p.value for p in PayPeriod],
        default=PayPeriod.ANNUAL.value,
        help="Whether --amount is annual or monthly (default: annual)",
    )
    parser.add_argument(
        "--basis",
        choices=[b.value for b in TaxBasis],
        default=TaxBasis.PRE_TAX.value,
        help="Whether --amount is before (pre) or after (post) deductions",
    )
    parser.add_argument(
        "--non-taxable",
        type=float,
        default=0,
        help="Monthly non-taxable allowance (비과세액)",
    )
    parser.add_argument(
        "--dependents",
        type=int,
        default=1,
        help="Dependents including yourself (default: 1)",
    )
    parser.add_argument(
        "--children",
        type=int,
        default=0,
        help="Children under 20",
    )
    parser.add_argument(
        "--preset",
        type=str,
        help=f"Rate preset (default: {settings.default_preset})",
    )
    parser.add_argument(
        "--presets-file",
        type=str,
        help="Path to rate presets YAML (default: config/tax_presets.yaml)",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List available rate presets and exit",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path",
    )

    args = parser.parse_args(argv)
    loader = PresetLoader(config_path=args.presets_file)

    if args.list_presets:
        for name in loader.names():
            logger.info("  %s: %s", name, loader.get(name).description)
        return

    if args.amount is None:
        parser.error("--amount is required")
    if args.amount <= 0:
        parser.error("금액을 입력해주세요.")
    if args.non_taxable < 0 or args.dependents < 0 or args.children < 0:
        parser.error("비과세액, 부양가족 수, 자녀 수는 0 이상이어야 합니다.")

    amount = manwon_to_won(args.amount) if args.manwon else args.amount
    non_taxable = manwon_to_won(args.non_taxable) if args.manwon else args.non_taxable

    try:
        preset = loader.get(args.preset)
    except ValueError as e:
        parser.error(str(e))

    calc = NetPayCalculator(preset=preset)
    result = calc.calculate(
        amount,
        period=PayPeriod(args.period),
        basis=TaxBasis(args.basis),
        non_taxable_monthly=non_taxable,
        dependent_count=args.dependents,
        child_count=args.children,
    )

    deductions = result.deductions
    logger.info("월 실수령액: %s", format_money(result.monthly_net))
    logger.info("  연봉 (세전): %s", format_money(result.gross_annual))
    logger.info("  월급 (세전): %s", format_money(result.monthly_gross))
    logger.info("  공제액 합계: %s", format_money(deductions.total))
    for attr, label in _LABELS:
        logger.info("    - %s: %s", label, format_money(getattr(deductions, attr)))

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
