"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
application starts with no configuration at all and listens on the
port the original posts board always used (8080).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Posts Board")
    version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # When enabled the store starts with a handful of sample posts so
    # the list page is not empty on a fresh start.  Tests disable it.
    seed_posts: bool = os.getenv("SEED_POSTS", "true").lower() in {"1", "true", "yes"}

    # Name of the query parameter / form field carrying the verb that an
    # HTML form (which can only GET or POST) actually wants to use.
    method_override_field: str = os.getenv("METHOD_OVERRIDE_FIELD", "_method")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
