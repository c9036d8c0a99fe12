"""Configuration for the metrics serializer"""
from pathlib import Path
from typing import List, Literal, Optional, Tuple
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SerializerConfig(BaseSettings):
    """Serializer configuration, read from METRICS_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="METRICS_", case_sensitive=False)

    # Serializer settings
    prefix: Optional[str] = Field(default=None, description="Prefix dot-joined to every metric key")
    default_dimensions_str: str = Field(
        default="",
        description="Default dimensions added to every metric (comma-separated key=value pairs)"
    )
    metrics_source: Optional[str] = Field(default=None, description="Value of the dt.metrics.source dimension")
    enrich_with_metadata: bool = Field(default=True, description="Add host agent metadata as dimensions")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path, logs only to stdout if unset")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def default_dimensions(self) -> List[Tuple[str, str]]:
        """Get default dimensions as a list of pairs"""
        dimensions = []
        for item in self.default_dimensions_str.split(','):
            if '=' in item:
                key, value = item.split('=', 1)
                if key.strip():
                    dimensions.append((key.strip(), value.strip()))
        return dimensions
