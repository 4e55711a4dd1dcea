# Common utilities and shared modules
"""
Shared components used by every calculator package:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
- KRW formatting
"""

from .config import settings, PROJECT_ROOT, CONFIG_DIR
from .formatting import format_money, manwon_to_won
from .logging import setup_logging

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "format_money",
    "manwon_to_won",
    "setup_logging",
]
