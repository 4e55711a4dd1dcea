"""Shared test fixtures for the pay calculators."""

import sys
from pathlib import Path

import pytest
import yaml

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.models import RatePreset
from src.salary_calc.calculator import NetPayCalculator
from src.salary_calc.presets import PresetLoader


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def presets_path() -> Path:
    """Return the shipped rate presets file."""
    return PROJECT_ROOT / "config" / "tax_presets.yaml"


@pytest.fixture
def preset_2025(presets_path: Path) -> RatePreset:
    return PresetLoader(config_path=presets_path).get("2025")


@pytest.fixture
def preset_2026(presets_path: Path) -> RatePreset:
    return PresetLoader(config_path=presets_path).get("2026")


@pytest.fixture
def calc(preset_2025: RatePreset) -> NetPayCalculator:
    """Net-pay calculator on the 2025 rates with the default solver settings."""
    return NetPayCalculator(preset=preset_2025, tolerance=100, max_iterations=50)


@pytest.fixture
def sample_brackets() -> list[dict]:
    """The 2023+ income-tax table."""
    return [
        {"upper": 14_000_000, "base": 0, "rate": 0.06},
        {"upper": 50_000_000, "base": 840_000, "rate": 0.15},
        {"upper": 88_000_000, "base": 6_240_000, "rate": 0.24},
        {"upper": 150_000_000, "base": 15_360_000, "rate": 0.35},
        {"upper": 300_000_000, "base": 37_060_000, "rate": 0.38},
        {"upper": 500_000_000, "base": 94_060_000, "rate": 0.40},
        {"upper": 1_000_000_000, "base": 174_060_000, "rate": 0.42},
        {"upper": None, "base": 384_060_000, "rate": 0.45},
    ]


@pytest.fixture
def sample_preset_data(sample_brackets: list[dict]) -> dict:
    """Return raw preset values as they appear in the YAML file."""
    return {
        "description": "테스트 요율",
        "pension_rate": 0.045,
        "pension_cap": 6_370_000,
        "health_rate": 0.03545,
        "care_rate": 0.1295,
        "employment_rate": 0.009,
        "local_tax_rate": 0.1,
        "credit_per_dependent": 150_000,
        "credit_per_child": 150_000,
        "withholding_unit": 10,
        "tax_brackets": sample_brackets,
    }


@pytest.fixture
def write_presets(tmp_path):
    """Write a presets YAML file and return its path."""
    def _write(presets: dict) -> Path:
        path = tmp_path / "test_presets.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump({"presets": presets}, f, allow_unicode=True)
        return path
    return _write
