"""Net-pay calculator (연봉 실수령액 계산기).

Maps a gross annual salary to the monthly statutory deductions
(national pension, health and long-term care insurance, employment
insurance, income tax and local income tax) and the resulting monthly
net pay. Also solves the inverse problem, net → gross, by binary search.

Rates and the income-tax bracket table come from a RatePreset, see
config/tax_presets.yaml.
"""

from __future__ import annotations

import logging
import math

from ..common.config import settings
from ..common.models import PayPeriod, RatePreset, SalaryInput, TaxBasis
from .models import Deductions, SalaryBreakdown
from .presets import PresetLoader

logger = logging.getLogger(__name__)


class NetPayCalculator:
    """Compute salary breakdowns for one rate preset.

    Instances hold no per-call state; a single calculator can be shared.

    Usage:
        calc = NetPayCalculator()
        result = calc.compute_breakdown(SalaryInput(gross_annual=60_000_000))
        print(f"월 실수령액: {result.monthly_net:,.0f}원")

        gross = calc.solve_gross_for_net(3_800_405, non_taxable_monthly=200_000)
    """

    def __init__(
        self,
        preset: RatePreset | None = None,
        tolerance: float | None = None,
        max_iterations: int | None = None,
    ) -> None:
        self.preset = preset or PresetLoader().get()
        self.tolerance = tolerance if tolerance is not None else settings.solver.tolerance
        self.max_iterations = (
            max_iterations if max_iterations is not None else settings.solver.max_iterations
        )

    # === Forward ===

    def annual_tax(self, annual_taxable: float) -> float:
        """Progressive income tax on an annual taxable amount."""
        lower = 0.0
        for bracket in self.preset.tax_brackets:
            if bracket.upper is None or annual_taxable <= bracket.upper:
                break
            lower = bracket.upper
        return bracket.base + (annual_taxable - lower) * bracket.rate

    def tax_credit(self, dependent_count: int, child_count: int) -> float:
        """Simplified annual credit. Negative when dependent_count is 0."""
        p = self.preset
        return (dependent_count - 1) * p.credit_per_dependent + child_count * p.credit_per_child

    def compute_breakdown(self, salary: SalaryInput) -> SalaryBreakdown:
        """Compute the monthly deductions for a gross annual salary."""
        p = self.preset
        monthly_gross = salary.gross_annual / 12
        monthly_taxable = max(0.0, monthly_gross - salary.non_taxable_monthly)

        # Pension uses gross pay, capped; the insurances use the taxable base
        pension_base = min(monthly_gross, p.pension_cap)
        national_pension = math.floor(pension_base * p.pension_rate)
        health_insurance = math.floor(monthly_taxable * p.health_rate)
        care_insurance = math.floor(health_insurance * p.care_rate)
        employment_insurance = math.floor(monthly_taxable * p.employment_rate)

        annual_tax = self.annual_tax(monthly_taxable * 12)
        credit = self.tax_credit(salary.dependent_count, salary.child_count)
        final_annual_tax = max(0.0, annual_tax - credit)

        income_tax = math.floor(final_annual_tax / 12)
        income_tax = (income_tax // p.withholding_unit) * p.withholding_unit
        local_income_tax = math.floor(income_tax * p.local_tax_rate)

        return SalaryBreakdown(
            gross_annual=salary.gross_annual,
            deductions=Deductions(
                national_pension=national_pension,
                health_insurance=health_insurance,
                care_insurance=care_insurance,
                employment_insurance=employment_insurance,
                income_tax=income_tax,
                local_income_tax=local_income_tax,
            ),
            preset=p.name,
        )

    def monthly_net(
        self,
        gross_annual: float,
        non_taxable_monthly: float = 0,
        dependent_count: int = 1,
        child_count: int = 0,
    ) -> float:
        return self.compute_breakdown(SalaryInput(
            gross_annual=gross_annual,
            non_taxable_monthly=non_taxable_monthly,
            dependent_count=dependent_count,
            child_count=child_count,
        )).monthly_net

    # === Inverse ===

    def gross_upper_bound(
        self,
        target_monthly_net: float,
        dependent_count: int = 1,
        child_count: int = 0,
    ) -> int:
        """Gross annual salary whose net pay is at least the target.

        Every deduction is at most its marginal rate times its base, so
        net >= gross/12 * (1 - max_deduction_fraction) - surcharge, where
        the surcharge is the tax a negative credit adds.
        """
        p = self.preset
        credit = self.tax_credit(dependent_count, child_count)
        surcharge = max(0.0, -credit) / 12 * (1 + p.local_tax_rate)
        return math.ceil(12 * (target_monthly_net + surcharge) / (1 - p.max_deduction_fraction))

    def solve_gross_for_net(
        self,
        target_monthly_net: float,
        non_taxable_monthly: float = 0,
        dependent_count: int = 1,
        child_count: int = 0,
    ) -> int:
        """Find the gross annual salary that yields the target monthly net.

        Binary search over whole-won gross figures between ``target * 12``
        and ``gross_upper_bound``. Returns the first candidate whose net is
        within ``tolerance`` of the target; if the interval empties or the
        iteration cap is hit first, returns the last candidate evaluated.
        """
        if target_monthly_net <= 0:
            return 0

        low = math.floor(target_monthly_net * 12)
        high = max(low, self.gross_upper_bound(target_monthly_net, dependent_count, child_count))
        best_guess = low
        steps = 0

        while low <= high and steps < self.max_iterations:
            mid = (low + high) // 2
            net = self.monthly_net(mid, non_taxable_monthly, dependent_count, child_count)

            if abs(net - target_monthly_net) < self.tolerance:
                logger.debug(
                    "Solved net %s → gross %s in %d steps",
                    f"{target_monthly_net:,.0f}", f"{mid:,}", steps + 1,
                )
                return mid

            if net < target_monthly_net:
                low = mid + 1
            else:
                high = mid - 1
            steps += 1
            best_guess = mid

        if steps >= self.max_iterations:
            logger.warning(
                "Iteration cap (%d) reached solving net %s; returning gross %s",
                self.max_iterations, f"{target_monthly_net:,.0f}", f"{best_guess:,}",
            )
        else:
            logger.debug(
                "No gross within %s of net %s; returning last probe %s",
                self.tolerance, f"{target_monthly_net:,.0f}", f"{best_guess:,}",
            )
        return best_guess

    # === Input modes ===

    def normalize_gross_annual(
        self,
        amount: float,
        period: PayPeriod = PayPeriod.ANNUAL,
        basis: TaxBasis = TaxBasis.PRE_TAX,
        non_taxable_monthly: float = 0,
        dependent_count: int = 1,
        child_count: int = 0,
    ) -> float:
        """Turn a user-entered salary figure into a gross annual salary."""
        period = PayPeriod(period)
        basis = TaxBasis(basis)

        if basis is TaxBasis.PRE_TAX:
            return amount if period is PayPeriod.ANNUAL else amount * 12

        target_monthly_net = amount / 12 if period is PayPeriod.ANNUAL else amount
        return self.solve_gross_for_net(
            target_monthly_net, non_taxable_monthly, dependent_count, child_count
        )

    def calculate(
        self,
        amount: float,
        period: PayPeriod = PayPeriod.ANNUAL,
        basis: TaxBasis = TaxBasis.PRE_TAX,
        non_taxable_monthly: float = 0,
        dependent_count: int = 1,
        child_count: int = 0,
    ) -> SalaryBreakdown:
        """Normalize the input figure, then compute its breakdown."""
        period = PayPeriod(period)
        basis = TaxBasis(basis)
        gross_annual = self.normalize_gross_annual(
            amount, period, basis, non_taxable_monthly, dependent_count, child_count
        )
        result = self.compute_breakdown(SalaryInput(
            gross_annual=gross_annual,
            non_taxable_monthly=non_taxable_monthly,
            dependent_count=dependent_count,
            child_count=child_count,
        ))

        logger.info(
            "Salary (%s, %s/%s): gross=%s/yr, deductions=%s/mo → net=%s/mo",
            self.preset.name,
            period.value,
            basis.value,
            f"{gross_annual:,.0f}",
            f"{result.deductions.total:,}",
            f"{result.monthly_net:,.0f}",
        )
        return result
