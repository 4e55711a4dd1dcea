"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class SolverSettings(BaseModel):
    """Settings for the net → gross binary search."""
    tolerance: float = Field(default=100, gt=0, description="Accepted |net - target| in KRW")
    max_iterations: int = Field(default=50, gt=0)


class Settings(BaseModel):
    """Top-level application settings."""
    default_preset: str = "2025"
    presets_path: str = "config/tax_presets.yaml"
    log_level: str = "INFO"
    solver: SolverSettings = Field(default_factory=SolverSettings)

    @classmethod
    def load(cls, settings_path: str | Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        PAYCALC_PRESET, PAYCALC_PRESETS_PATH and PAYCALC_LOG_LEVEL
        override the file values.
        """
        path = Path(settings_path) if settings_path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

        if preset := os.getenv("PAYCALC_PRESET"):
            data["default_preset"] = preset
        if presets_path := os.getenv("PAYCALC_PRESETS_PATH"):
            data["presets_path"] = presets_path
        if level := os.getenv("PAYCALC_LOG_LEVEL"):
            data["log_level"] = level
        return cls(**data)

    @property
    def presets_abs_path(self) -> Path:
        """Resolve presets path relative to project root."""
        p = Path(self.presets_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


# Singleton settings instance
settings = Settings.load()
