"""
patentterm.settings
===================

Configuration settings for the patent term calculator.

Module-level constants cover the HTTP server and can be overridden via
environment variables; the :class:`Settings` model holds the options the
library, CLI and API read at runtime.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

# API settings
# ---------------------------------------------------------------------------
API_HOST = os.environ.get("PATENTTERM_API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("PATENTTERM_API_PORT", "8000"))
API_DEBUG = os.environ.get("PATENTTERM_API_DEBUG", "False").lower() == "true"


# ---------------------------------------------------------------------------
# Pydantic settings model
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Runtime options, loaded from environment variables or a .env file."""

    log_level: str = Field("INFO", description="Log level applied by configure_logging for the CLI and API")
    fee_window_months: int = Field(
        6,
        ge=0,
        description="Months before a fee due date that payment opens, and months of surcharge grace after it",
    )
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:5173",    # Vite dev server default port
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Origins allowed to call the API from a browser",
    )

    class Config:
        """Configuration for the settings model."""
        env_prefix = "PATENTTERM_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()


def configure_logging(level: Optional[str] = None) -> int:
    """
    Set up root logging for the CLI and API and return the numeric level.

    *level* overrides :attr:`Settings.log_level`.
    """
    name = (level or settings.log_level).upper()
    logging.basicConfig(level=name)
    logging.getLogger("patentterm").setLevel(name)
    logging.getLogger("api").setLevel(name)
    return logging.getLevelName(name)
