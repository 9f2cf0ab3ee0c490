"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    AI_PERCENTAGE_THRESHOLD=10 uvicorn detector_relay.main:app
    export DETECTOR_TIMEOUT_SEC=60

A `.env` file at the project root is loaded automatically.

DETECTOR_API_URL and DETECTOR_API_KEY have no default: constructing Settings
without them raises pydantic.ValidationError, which aborts the app lifespan
before any request is served.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # DETECTOR_API_URL == detector_api_url
        extra="ignore",         # silently drop unknown env vars
        frozen=True,            # built once at startup, never mutated
    )

    # ------------------------------------------------------------------ #
    # Detector collaborator                                               #
    # ------------------------------------------------------------------ #
    detector_api_url: str = Field(
        ..., min_length=1, description="Endpoint of the external AI-content detector"
    )
    detector_api_key: str = Field(
        ..., min_length=1, description="Bearer credential sent to the detector"
    )
    detector_timeout_sec: float = Field(
        30.0, gt=0, description="Total timeout for one outbound detector call"
    )

    # ------------------------------------------------------------------ #
    # Verdict                                                             #
    # ------------------------------------------------------------------ #
    ai_percentage_threshold: float = Field(
        5.0, ge=0, le=100, description="aiPercentage above this → classified as AI"
    )

    # ------------------------------------------------------------------ #
    # HTTP server                                                         #
    # ------------------------------------------------------------------ #
    host: str = Field("0.0.0.0", description="Inbound listen address")
    port: int = Field(3000, description="Inbound listen port")
    max_body_mb: int = Field(
        10, gt=0, description="Max MB for an inbound JSON body (base64 payloads included)"
    )

    # ------------------------------------------------------------------ #
    # Logging                                                             #
    # ------------------------------------------------------------------ #
    log_level: str = Field("INFO", description="Root logger level")

    @property
    def max_body_bytes(self) -> int:
        return self.max_body_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide Settings once; later calls return the same instance."""
    return Settings()
