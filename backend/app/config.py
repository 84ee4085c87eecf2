"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from app.features.stats import StatsOptions


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Server ===
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8080, description="Bind port")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Track statistics ===
    ele_threshold_m: float = Field(
        default=2.0,
        ge=0,
        allow_inf_nan=False,
        description="Elevation changes at or below this are ignored as noise"
    )
    earth_radius_m: float = Field(
        default=6378137.0,
        gt=0,
        allow_inf_nan=False,
        description="Sphere radius used for haversine distance"
    )
    legacy_sentinels: bool = Field(
        default=False,
        description="Treat 0 lat/lon/elevation as 'no previous value' (reference behavior)"
    )

    # === Uploads ===
    max_upload_bytes: int = Field(
        default=20 * 1024 * 1024,
        gt=0,
        description="Maximum accepted GPX body size"
    )

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    def stats_options(self, ele_threshold_m: float | None = None) -> StatsOptions:
        """Build aggregator options, optionally overriding the threshold."""
        return StatsOptions(
            ele_threshold_m=self.ele_threshold_m if ele_threshold_m is None else ele_threshold_m,
            earth_radius_m=self.earth_radius_m,
            legacy_sentinels=self.legacy_sentinels,
        )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
