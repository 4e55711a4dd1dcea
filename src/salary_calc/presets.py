"""Rate preset loading.

Loads per-year statutory rate tables from YAML so the same engine can
serve several regulatory years without code changes.

Config source: config/tax_presets.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..common.config import Settings, settings as default_settings
from ..common.models import RatePreset

logger = logging.getLogger(__name__)


class PresetLoader:
    """Load and cache rate presets from a YAML file.

    Usage:
        loader = PresetLoader()
        preset = loader.get("2025")
        print(preset.pension_rate)
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self._config_path = (
            Path(config_path) if config_path else self.settings.presets_abs_path
        )
        self._presets: dict[str, RatePreset] | None = None

    def _load_config(self) -> dict[str, RatePreset]:
        """Load, validate and cache every preset in the YAML file."""
        if self._presets is None:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            presets: dict[str, RatePreset] = {}
            for name, values in (data.get("presets") or {}).items():
                name = str(name)
                try:
                    presets[name] = RatePreset(name=name, **values)
                except ValidationError as e:
                    raise ValueError(f"Invalid rate preset {name!r} in {self._config_path}: {e}") from e

            logger.debug("Loaded %d rate presets from %s", len(presets), self._config_path)
            self._presets = presets
        return self._presets

    def names(self) -> list[str]:
        """Preset names in file order."""
        return list(self._load_config())

    def get(self, name: str | None = None) -> RatePreset:
        """Return the named preset, or the configured default."""
        name = name or self.settings.default_preset
        presets = self._load_config()
        if name not in presets:
            raise ValueError(
                f"Unknown rate preset {name!r}; available: {', '.join(presets) or 'none'}"
            )
        return presets[name]
