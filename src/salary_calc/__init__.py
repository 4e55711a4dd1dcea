"""Salary Calculator Module - Gross/net pay with statutory deductions."""

from .calculator import NetPayCalculator
from .models import Deductions, SalaryBreakdown
from .presets import PresetLoader

__all__ = [
    "NetPayCalculator",
    "Deductions",
    "SalaryBreakdown",
    "PresetLoader",
]
