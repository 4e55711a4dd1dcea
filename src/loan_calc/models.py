"""Data models for loan repayment calculation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScheduleRow:
    """One month of an amortisation table."""

    month: int
    payment: int
    principal: int
    interest: int
    balance: int

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "payment": self.payment,
            "principal": self.principal,
            "interest": self.interest,
            "balance": self.balance,
        }


@dataclass
class LoanSummary:
    """Equal-installment (원리금균등) repayment summary."""

    principal: float
    annual_rate: float  # fraction, e.g. 0.045
    months: int
    monthly_payment: int
    schedule: list[ScheduleRow] = field(default_factory=list)

    @property
    def total_payment(self) -> float:
        if self.annual_rate == 0:
            return self.principal
        return self.monthly_payment * self.months

    @property
    def total_interest(self) -> float:
        return self.total_payment - self.principal

    def to_dict(self) -> dict:
        return {
            "principal": self.principal,
            "annual_rate": self.annual_rate,
            "months": self.months,
            "monthly_payment": self.monthly_payment,
            "total_payment": self.total_payment,
            "total_interest": self.total_interest,
            "schedule": [r.to_dict() for r in self.schedule],
        }
