"""Tests for the jeonse/wolse conversion calculator."""

from __future__ import annotations

import json

import pytest

from src.common.models import RentConversionType
from src.rent_calc.calculator import RentConversionCalculator
from src.rent_calc.main import main


class TestToRent:
    def test_reduce_deposit(self):
        result = RentConversionCalculator().to_rent(300_000_000, 0, 100_000_000, 0.055)
        assert result.conversion_type is RentConversionType.TO_RENT
        # 100,000,000 * 5.5% / 12
        assert result.additional_rent == 458_333
        assert result.final_deposit == 200_000_000
        assert result.final_rent == 458_333

    def test_keeps_existing_rent(self):
        result = RentConversionCalculator().to_rent(50_000_000, 500_000, 12_000_000, 0.06)
        assert result.additional_rent == 60_000
        assert result.final_rent == 560_000

    def test_cannot_reduce_more_than_deposit(self):
        with pytest.raises(ValueError, match="현재 보증금"):
            RentConversionCalculator().to_rent(10_000_000, 0, 20_000_000, 0.05)


class TestToDeposit:
    def test_reduce_rent(self):
        result = RentConversionCalculator().to_deposit(50_000_000, 1_000_000, 500_000, 0.055)
        assert result.conversion_type is RentConversionType.TO_DEPOSIT
        # 500,000 * 12 / 5.5%
        assert result.additional_deposit == 109_090_909
        assert result.final_deposit == 159_090_909
        assert result.final_rent == 500_000

    def test_cannot_reduce_more_than_rent(self):
        with pytest.raises(ValueError, match="현재 월세"):
            RentConversionCalculator().to_deposit(50_000_000, 300_000, 500_000, 0.05)


class TestConvert:
    @pytest.mark.parametrize("rate", [0, -0.01])
    def test_rate_must_be_positive(self, rate):
        calc = RentConversionCalculator()
        with pytest.raises(ValueError, match="전환율"):
            calc.convert("toRent", 100_000_000, 0, 10_000_000, rate)
        with pytest.raises(ValueError, match="전환율"):
            calc.convert("toDeposit", 100_000_000, 500_000, 100_000, rate)

    def test_dispatch(self):
        calc = RentConversionCalculator()
        assert calc.convert("toRent", 100_000_000, 0, 12_000_000, 0.06).additional_rent == 60_000
        assert calc.convert(
            RentConversionType.TO_DEPOSIT, 0, 100_000, 100_000, 0.06
        ).additional_deposit == 20_000_000

    def test_to_dict(self):
        result = RentConversionCalculator().to_rent(100_000_000, 0, 12_000_000, 0.06)
        assert result.to_dict()["conversion_type"] == "toRent"


class TestRentCLI:
    def test_json_output(self, tmp_path):
        out = tmp_path / "rent.json"
        main(["--type", "toRent", "--deposit", "30000", "--target", "10000", "--rate", "5.5",
              "--output", str(out)])
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["additional_rent"] == 458_333
        assert data["final_deposit"] == 200_000_000

    def test_invalid_input_exits(self):
        with pytest.raises(SystemExit):
            main(["--type", "toDeposit", "--rent", "10", "--target", "20", "--rate", "5"])
