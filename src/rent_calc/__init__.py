"""Rent Conversion Module - Jeonse/wolse conversion."""

from .calculator import RentConversionCalculator
from .models import RentConversionResult

__all__ = [
    "RentConversionCalculator",
    "RentConversionResult",
]
