"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    DEMO_MODE=true uvicorn genscan.main:app      # no provider calls
    export VIDEO_POLL_MAX_ATTEMPTS=90            # slower provider queue

A `.env` file at the project root is loaded automatically.

Provider credentials default to None. Detectors check them at call time and
raise ConfigurationError before any network traffic when they are missing.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # SAPLING_API_KEY == sapling_api_key
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Mode                                                                #
    # ------------------------------------------------------------------ #
    demo_mode: bool = Field(
        False, description="Serve generated results instead of calling providers"
    )
    demo_min_delay_ms: int = Field(
        800, description="Lower bound of the simulated demo latency"
    )
    demo_max_delay_ms: int = Field(
        2_000, description="Upper bound of the simulated demo latency"
    )

    # ------------------------------------------------------------------ #
    # Provider credentials                                                #
    # ------------------------------------------------------------------ #
    sapling_api_key: Optional[str] = Field(
        None, description="Sapling AI key (text detection)"
    )
    sightengine_api_user: Optional[str] = Field(
        None, description="Sightengine API user (image/video/audio)"
    )
    sightengine_api_secret: Optional[str] = Field(
        None, description="Sightengine API secret (image/video/audio)"
    )

    # ------------------------------------------------------------------ #
    # Provider endpoints                                                  #
    # ------------------------------------------------------------------ #
    sapling_base_url: str = Field(
        "https://api.sapling.ai", description="Sapling API root"
    )
    sightengine_base_url: str = Field(
        "https://api.sightengine.com", description="Sightengine API root"
    )
    http_timeout_sec: int = Field(
        30, description="Total timeout for a single provider HTTP call"
    )

    # ------------------------------------------------------------------ #
    # Video polling                                                       #
    # ------------------------------------------------------------------ #
    video_poll_interval_sec: float = Field(
        2.0, description="Delay before each video status poll"
    )
    video_poll_max_attempts: int = Field(
        60, description="Poll ceiling (60 x 2 s = 2 minutes)"
    )

    # ------------------------------------------------------------------ #
    # Audio feedback                                                      #
    # ------------------------------------------------------------------ #
    audio_feedback_enabled: bool = Field(
        True, description="Report the opposite class back to Sightengine after audio checks"
    )

    # ------------------------------------------------------------------ #
    # Result presentation                                                 #
    # ------------------------------------------------------------------ #
    model_provider_label: str = Field(
        "Our AI Engine", description="Provider name shown on live detected models"
    )

    # ------------------------------------------------------------------ #
    # File Size Limits                                                    #
    # ------------------------------------------------------------------ #
    max_text_chars: int = Field(
        50_000, description="Sapling free-tier daily character budget"
    )
    max_image_upload_mb: int = Field(
        20, description="Max MB for image uploads"
    )
    max_video_upload_mb: int = Field(
        200, description="Max MB for video uploads"
    )
    max_audio_upload_mb: int = Field(
        50, description="Max MB for audio uploads"
    )

    # ------------------------------------------------------------------ #
    # Logging                                                             #
    # ------------------------------------------------------------------ #
    log_level: str = Field(
        "INFO", description="Root log level for the service"
    )

    @property
    def max_image_upload_bytes(self) -> int:
        return self.max_image_upload_mb * 1024 * 1024

    @property
    def max_video_upload_bytes(self) -> int:
        return self.max_video_upload_mb * 1024 * 1024

    @property
    def max_audio_upload_bytes(self) -> int:
        return self.max_audio_upload_mb * 1024 * 1024


# Single shared instance, import this everywhere.
settings = Settings()
