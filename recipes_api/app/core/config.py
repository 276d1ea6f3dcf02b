"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, reading ``recipes.json``
from the working directory and listening on port 5000.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Recipes API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset, logs go to the console
    # only.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the JSON seed file loaded once at startup.  Relative
    # paths are resolved against the current working directory.
    recipes_file: str = os.getenv("RECIPES_FILE", "recipes.json")

    # Default listen address in ``host:port`` form.  An empty host
    # binds all interfaces.  The ``--addr`` flag of ``run.py`` takes
    # precedence.
    addr: str = os.getenv("RECIPES_ADDR", ":5000")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
