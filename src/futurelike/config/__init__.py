"""Configuration module using Pydantic Settings.

Provides typed configuration for dispatch with environment variable support.

Usage:
    from futurelike.config import DispatchSettings

    settings = DispatchSettings(verify_thenables=True)
"""

from futurelike.config.settings import DispatchSettings

__all__ = [
    "DispatchSettings",
]
