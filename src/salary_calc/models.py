"""Data models for net-pay calculation results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Deductions:
    """Monthly statutory deductions (KRW).

    ``total`` is the sum of the six individual items.
    """

    national_pension: int
    health_insurance: int
    care_insurance: int  # 장기요양보험, derived from the health premium
    employment_insurance: int
    income_tax: int
    local_income_tax: int

    @property
    def total(self) -> int:
        return (
            self.national_pension
            + self.health_insurance
            + self.care_insurance
            + self.employment_insurance
            + self.income_tax
            + self.local_income_tax
        )

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "national_pension": self.national_pension,
            "health_insurance": self.health_insurance,
            "care_insurance": self.care_insurance,
            "employment_insurance": self.employment_insurance,
            "income_tax": self.income_tax,
            "local_income_tax": self.local_income_tax,
        }


@dataclass(frozen=True)
class SalaryBreakdown:
    """Gross-to-net breakdown for one salary figure."""

    gross_annual: float
    deductions: Deductions
    preset: str = ""

    @property
    def monthly_gross(self) -> float:
        return self.gross_annual / 12

    @property
    def monthly_net(self) -> float:
        return self.monthly_gross - self.deductions.total

    @property
    def annual_net(self) -> float:
        return self.monthly_net * 12

    def to_dict(self) -> dict:
        return {
            "preset": self.preset,
            "gross_annual": self.gross_annual,
            "monthly_gross": self.monthly_gross,
            "monthly_net": self.monthly_net,
            "deductions": self.deductions.to_dict(),
        }
