"""Shared Pydantic data models for the pay calculators.

These models define the validated inputs and the rate configuration
that the calculator packages consume. All amounts are in KRW (won).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# === Enums ===

class PayPeriod(str, Enum):
    """Period the user-entered salary figure refers to."""
    ANNUAL = "annual"
    MONTHLY = "monthly"


class TaxBasis(str, Enum):
    """Whether the user-entered figure is before or after deductions."""
    PRE_TAX = "pre"
    POST_TAX = "post"


class TermUnit(str, Enum):
    """Unit of a loan term."""
    YEAR = "year"
    MONTH = "month"


class RentConversionType(str, Enum):
    """Direction of a jeonse/wolse conversion."""
    TO_RENT = "toRent"
    TO_DEPOSIT = "toDeposit"


# === Salary ===

class SalaryInput(BaseModel):
    """Caller-supplied salary figures."""
    gross_annual: float = Field(ge=0, description="Gross annual salary (KRW)")
    non_taxable_monthly: float = Field(default=0, ge=0, description="Monthly non-taxable allowance (KRW)")
    dependent_count: int = Field(default=1, ge=0, description="Dependents including the filer")
    child_count: int = Field(default=0, ge=0, description="Qualifying children")

    model_config = {"frozen": True}


class TaxBracket(BaseModel):
    """One band of the progressive income-tax table."""
    upper: float | None = Field(default=None, gt=0, description="Band ceiling, None for the top band")
    base: float = Field(ge=0, description="Tax owed on everything below this band")
    rate: float = Field(ge=0, lt=1, description="Marginal rate inside the band")


class RatePreset(BaseModel):
    """Statutory rates for one regulatory year."""
    name: str
    description: str = ""
    pension_rate: float = Field(ge=0, lt=1)
    pension_cap: float = Field(gt=0, description="Monthly pension base ceiling (KRW)")
    health_rate: float = Field(ge=0, lt=1)
    care_rate: float = Field(ge=0, lt=1, description="Applied to the health premium")
    employment_rate: float = Field(ge=0, lt=1)
    local_tax_rate: float = Field(ge=0, lt=1)
    credit_per_dependent: float = Field(default=0, ge=0)
    credit_per_child: float = Field(default=0, ge=0)
    withholding_unit: int = Field(default=10, gt=0)
    tax_brackets: list[TaxBracket] = Field(min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_brackets(self) -> RatePreset:
        brackets = self.tax_brackets
        if brackets[-1].upper is not None:
            raise ValueError(f"Preset {self.name!r}: last tax bracket must be unbounded")

        lower = 0.0
        expected_base = 0.0
        for i, bracket in enumerate(brackets):
            if i < len(brackets) - 1:
                if bracket.upper is None:
                    raise ValueError(f"Preset {self.name!r}: only the last bracket may be unbounded")
                if bracket.upper <= lower:
                    raise ValueError(f"Preset {self.name!r}: bracket ceilings must increase")
            # Bases must chain, otherwise tax jumps at the ceilings
            if abs(bracket.base - expected_base) > 1:
                raise ValueError(
                    f"Preset {self.name!r}: bracket {i} base {bracket.base:,.0f} "
                    f"does not match cumulative tax {expected_base:,.0f}"
                )
            if bracket.upper is not None:
                expected_base = bracket.base + (bracket.upper - lower) * bracket.rate
                lower = bracket.upper

        if self.max_deduction_fraction >= 1:
            raise ValueError(f"Preset {self.name!r}: deductions can exceed gross pay")
        return self

    @property
    def top_rate(self) -> float:
        return max(b.rate for b in self.tax_brackets)

    @property
    def max_deduction_fraction(self) -> float:
        """Upper bound on total deductions as a share of monthly gross."""
        return (
            self.pension_rate
            + self.health_rate * (1 + self.care_rate)
            + self.employment_rate
            + self.top_rate * (1 + self.local_tax_rate)
        )
