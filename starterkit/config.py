"""
Starter Kit — Configuration
============================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads `STARTERKIT_*` environment variables (or a
       `.env` file in the working directory), validates types and ranges,
       and exposes a singleton `settings` object.
Who:   Imported by the services and the CLI. CLI flags take precedence over
       these values for a single run.
When:  Loaded once at module import time.
"""

import sys
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Scaffolder settings loaded from environment variables.

    All settings have defaults that reproduce the stock behavior:
    a `venv/` inside the project, pip upgraded, then `fastapi` and
    `uvicorn[standard]` installed and frozen into requirements.txt.
    """

    # ── Virtual Environment ───────────────────────────────────────────────
    # Interpreter used to run `-m venv`; the new venv inherits its version
    python_executable: str = Field(default=sys.executable or "python3")

    # Directory name of the venv, relative to the project root
    venv_dir: str = Field(default="venv", min_length=1)

    # Set to false to only lay out files (same as `starterkit new --no-venv`)
    create_venv: bool = Field(default=True)

    upgrade_pip: bool = Field(default=True)

    # ── Packages ──────────────────────────────────────────────────────────
    # Comma-separated, passed verbatim to `pip install`
    packages: str = Field(default="fastapi,uvicorn[standard]")

    @property
    def packages_list(self) -> List[str]:
        """Splits comma-separated package specifiers into a list."""
        return [pkg.strip() for pkg in self.packages.split(",") if pkg.strip()]

    # Upper bound for any single venv/pip command, in seconds
    command_timeout: int = Field(default=600, ge=10, le=3600)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_prefix": "STARTERKIT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
