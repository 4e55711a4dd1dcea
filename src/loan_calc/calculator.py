"""Loan repayment calculator (대출 이자 계산기).

Equal principal-and-interest installments:

    M = P * r(1+r)^n / ((1+r)^n - 1)

P: principal, r: monthly rate (annual / 12), n: number of months.
Payments are floored to whole won.
"""

from __future__ import annotations

import logging
import math

from ..common.models import TermUnit
from .models import LoanSummary, ScheduleRow

logger = logging.getLogger(__name__)


class LoanCalculator:
    """Calculate monthly installments and amortisation tables.

    Usage:
        calc = LoanCalculator()
        summary = calc.calculate(100_000_000, 0.045, 30, TermUnit.YEAR)
        print(f"월 상환액: {summary.monthly_payment:,}원")
    """

    @staticmethod
    def to_months(term: float, term_unit: TermUnit | str = TermUnit.YEAR) -> int:
        unit = TermUnit(term_unit)
        months = term * 12 if unit is TermUnit.YEAR else term
        return int(months)

    @staticmethod
    def monthly_payment(principal: float, annual_rate: float, months: int) -> int:
        """Floored equal installment for the given loan."""
        if annual_rate == 0:
            return math.floor(principal / months)
        r = annual_rate / 12
        growth = math.pow(1 + r, months)
        return math.floor(principal * (r * growth) / (growth - 1))

    def calculate(
        self,
        principal: float,
        annual_rate: float,
        term: float,
        term_unit: TermUnit | str = TermUnit.YEAR,
        with_schedule: bool = False,
    ) -> LoanSummary:
        """Calculate the repayment summary for a loan.

        Args:
            principal: Loan amount (KRW).
            annual_rate: Annual interest rate as a fraction (4.5% → 0.045).
            term: Loan term in ``term_unit`` units.
            term_unit: "year" or "month".
            with_schedule: Also build the month-by-month table.

        Raises:
            ValueError: On a non-positive amount or term, or a negative rate.
        """
        months = self.to_months(term, term_unit)
        if principal <= 0 or months <= 0:
            raise ValueError("대출 금액과 기간을 올바르게 입력해주세요.")
        if annual_rate < 0:
            raise ValueError("금리는 0 이상이어야 합니다.")

        summary = LoanSummary(
            principal=principal,
            annual_rate=annual_rate,
            months=months,
            monthly_payment=self.monthly_payment(principal, annual_rate, months),
        )
        if with_schedule:
            summary.schedule = self.schedule(principal, annual_rate, months)

        logger.info(
            "Loan %s @ %.2f%% for %d months: payment=%s/mo, interest=%s",
            f"{principal:,.0f}",
            annual_rate * 100,
            months,
            f"{summary.monthly_payment:,}",
            f"{summary.total_interest:,.0f}",
        )
        return summary

    def schedule(self, principal: float, annual_rate: float, months: int) -> list[ScheduleRow]:
        """Build the amortisation table.

        Monthly interest is floored; the final installment absorbs the
        remaining balance, so the table may differ from
        ``monthly_payment * months`` by a few won.
        """
        r = annual_rate / 12
        payment = self.monthly_payment(principal, annual_rate, months)
        balance = math.floor(principal)

        rows: list[ScheduleRow] = []
        for month in range(1, months + 1):
            interest = math.floor(balance * r)
            principal_part = payment - interest
            if month == months or principal_part > balance:
                principal_part = balance
            balance -= principal_part
            rows.append(ScheduleRow(
                month=month,
                payment=principal_part + interest,
                principal=principal_part,
                interest=interest,
                balance=balance,
            ))
        return rows
