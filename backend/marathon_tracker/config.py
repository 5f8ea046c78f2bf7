"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Project root: marathon-tracker/
PROJECT_ROOT = Path(__file__).parent.parent.parent
# Content directory: marathon-tracker/content/
CONTENT_DIR = PROJECT_ROOT / "content"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Database ===
    database_url: str = Field(
        default="sqlite:///./marathon.db",
        description="Database connection URL"
    )

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Content ===
    content_dir: Path = Field(
        default=CONTENT_DIR,
        description="Directory holding routes/routes.yaml"
    )

    # === Pacing defaults ===
    default_fast_pace_s: int = Field(default=7 * 60, gt=0, description="7:00 per mile")
    default_slow_pace_s: int = Field(default=8 * 60 + 10, gt=0, description="8:10 per mile")

    # === Simulation ===
    simulation_frame_ms: int = Field(default=100, gt=0)

    # === Uploads ===
    max_gpx_size_mb: int = Field(default=20, gt=0)

    @field_validator('database_url')
    @classmethod
    def fix_postgres_url(cls, v: str) -> str:
        """Fix Render/Railway postgres:// URL to postgresql://"""
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
