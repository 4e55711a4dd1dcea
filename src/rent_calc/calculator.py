"""Jeonse/wolse conversion calculator (전월세 전환 계산기).

    monthly rent = deposit * rate / 12
    deposit      = monthly rent * 12 / rate

where ``rate`` is the annual conversion rate (전월세전환율).
"""

from __future__ import annotations

import logging
import math

from ..common.models import RentConversionType
from .models import RentConversionResult

logger = logging.getLogger(__name__)


class RentConversionCalculator:
    """Convert between deposit and monthly rent.

    Usage:
        calc = RentConversionCalculator()
        result = calc.to_rent(300_000_000, 0, 100_000_000, 0.055)
        print(f"추가 월세: {result.additional_rent:,}원")
    """

    @staticmethod
    def _check_rate(rate: float) -> None:
        if rate <= 0:
            raise ValueError("전환율을 0보다 크게 입력해주세요.")

    def to_rent(
        self,
        current_deposit: float,
        current_rent: float,
        reduce_deposit: float,
        rate: float,
    ) -> RentConversionResult:
        """Lower the deposit by ``reduce_deposit`` and raise the rent to match."""
        self._check_rate(rate)
        if reduce_deposit > current_deposit:
            raise ValueError("줄이려는 보증금이 현재 보증금보다 클 수 없습니다.")

        additional_rent = math.floor(reduce_deposit * rate / 12)
        result = RentConversionResult(
            conversion_type=RentConversionType.TO_RENT,
            conversion_rate=rate,
            additional_rent=additional_rent,
            final_deposit=current_deposit - reduce_deposit,
            final_rent=current_rent + additional_rent,
        )
        logger.info(
            "Deposit -%s → rent +%s/mo (rate %.2f%%)",
            f"{reduce_deposit:,.0f}", f"{additional_rent:,}", rate * 100,
        )
        return result

    def to_deposit(
        self,
        current_deposit: float,
        current_rent: float,
        reduce_rent: float,
        rate: float,
    ) -> RentConversionResult:
        """Lower the rent by ``reduce_rent`` and raise the deposit to match."""
        self._check_rate(rate)
        if reduce_rent > current_rent:
            raise ValueError("줄이려는 월세가 현재 월세보다 클 수 없습니다.")

        additional_deposit = math.floor(reduce_rent * 12 / rate)
        result = RentConversionResult(
            conversion_type=RentConversionType.TO_DEPOSIT,
            conversion_rate=rate,
            additional_deposit=additional_deposit,
            final_deposit=current_deposit + additional_deposit,
            final_rent=current_rent - reduce_rent,
        )
        logger.info(
            "Rent -%s/mo → deposit +%s (rate %.2f%%)",
            f"{reduce_rent:,.0f}", f"{additional_deposit:,}", rate * 100,
        )
        return result

    def convert(
        self,
        conversion_type: RentConversionType | str,
        current_deposit: float,
        current_rent: float,
        target_amount: float,
        rate: float,
    ) -> RentConversionResult:
        """Dispatch on the conversion direction."""
        if RentConversionType(conversion_type) is RentConversionType.TO_RENT:
            return self.to_rent(current_deposit, current_rent, target_amount, rate)
        return self.to_deposit(current_deposit, current_rent, target_amount, rate)
