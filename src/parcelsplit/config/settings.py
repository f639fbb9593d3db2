"""Configuration settings for parcelsplit."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from parcelsplit.domain import SplitDirection


class SplitConfig(BaseModel):
    """Configuration for split evaluation."""

    total_area: float = Field(
        default=1264.0,
        gt=0.0,
        allow_inf_nan=False,
        description="Known real-world area of the parcel (caller's unit, e.g. sq m)",
    )
    direction: SplitDirection = Field(
        default=SplitDirection.VERTICAL,
        description="Orientation of the split line",
    )
    area_unit: str = Field(
        default="sq m",
        description="Unit label shown next to areas",
    )


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Log file level",
    )


class ParcelSplitSettings(BaseModel):
    """Main application settings."""

    split: SplitConfig = Field(default_factory=SplitConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ParcelSplitSettings:
    """Get default application settings."""
    return ParcelSplitSettings()
