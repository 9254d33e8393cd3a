"""Configuration settings using Pydantic Settings.

Provides typed dispatch configuration with environment variable support.

Usage:
    from futurelike import promise
    from futurelike.config import DispatchSettings

    # Load from environment variables (FUTURELIKE_*)
    settings = DispatchSettings()

    # Or override with explicit values
    settings = DispatchSettings(verify_thenables=True)
    promise(future, settings=settings)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install futurelike[config]"
    ) from e


class DispatchSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for dispatcher diagnostics.

    Attributes:
        verify_thenables: Warn when a Future's promise() returns a value
            without a callable `then`. The value is returned unchanged
            either way.

    Environment Variables:
        FUTURELIKE_VERIFY_THENABLES
    """

    model_config = SettingsConfigDict(
        env_prefix="FUTURELIKE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    verify_thenables: bool = False
