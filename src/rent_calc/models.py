"""Data models for jeonse/wolse conversion."""

from __future__ import annotations

from dataclasses import dataclass

from ..common.models import RentConversionType


@dataclass(frozen=True)
class RentConversionResult:
    """Outcome of moving value between deposit (보증금) and monthly rent (월세)."""

    conversion_type: RentConversionType
    conversion_rate: float  # annual, fraction
    additional_rent: int = 0
    additional_deposit: int = 0
    final_deposit: float = 0
    final_rent: float = 0

    def to_dict(self) -> dict:
        return {
            "conversion_type": self.conversion_type.value,
            "conversion_rate": self.conversion_rate,
            "additional_rent": self.additional_rent,
            "additional_deposit": self.additional_deposit,
            "final_deposit": self.final_deposit,
            "final_rent": self.final_rent,
        }
