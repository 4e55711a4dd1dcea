"""Loan Calculator Module - Equal installment repayment."""

from .calculator import LoanCalculator
from .models import LoanSummary, ScheduleRow

__all__ = [
    "LoanCalculator",
    "LoanSummary",
    "ScheduleRow",
]
