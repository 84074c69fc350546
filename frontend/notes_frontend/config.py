"""
Notes Frontend - Application Configuration
===========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated again at app startup.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Deployments point
    NOTES_API_URL at the real Notes API.
    """

    # ── Notes API ─────────────────────────────────────────────────────────
    # What: Base URL of the external Notes API (scheme + host + port)
    # The client appends `notes_api_prefix` + "/notes" to it
    notes_api_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the Notes API serving GET/POST /api/notes",
    )

    notes_api_prefix: str = Field(default="/api")

    # What: Total timeout for one Notes API request, in seconds
    notes_api_timeout: float = Field(default=10.0, ge=0.5, le=120.0)

    @property
    def notes_endpoint(self) -> str:
        """Path of the notes collection relative to `notes_api_url`."""
        prefix = "/" + self.notes_api_prefix.strip("/") if self.notes_api_prefix.strip("/") else ""
        return f"{prefix}/notes"

    # ── Server ────────────────────────────────────────────────────────────
    frontend_host: str = Field(default="0.0.0.0")
    frontend_port: int = Field(default=3000, ge=1024, le=65535)

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

    @field_validator("notes_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # NOTES_API_URL and notes_api_url both work
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises a single ValueError listing them.
        """
        errors: List[str] = []
        if not self.notes_api_url.startswith(("http://", "https://")):
            errors.append(
                f"NOTES_API_URL must be an absolute http(s) URL, got '{self.notes_api_url}'"
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
