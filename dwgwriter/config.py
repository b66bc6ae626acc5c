"""
Configuration settings for the dwgwriter package.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .geometry.precision import PrecisionModel, PrecisionType


class Settings(BaseSettings):
    # Precision
    precision_type: PrecisionType = PrecisionType.FLOATING
    precision_scale: Optional[float] = None
    srid: int = 0

    # Drawing output
    default_layer: str = "0"
    drawing_file_name: str = "untitled.dwg"

    # Application
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DWGWRITER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    def precision_model(self) -> PrecisionModel:
        """Build the precision policy described by these settings."""
        return PrecisionModel(self.precision_type, self.precision_scale)


# Global settings instance
settings = Settings()
