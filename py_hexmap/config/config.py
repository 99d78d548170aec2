from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")

    # Map Generation Configuration
    default_map_width: int = Field(default=16, description="Map width in hexes")
    default_map_height: int = Field(default=9, description="Map height in hexes")
    default_num_regions: int = Field(default=18, description="Number of regions to partition into")
    default_num_terrains: int = Field(default=6, description="Number of terrain kinds to color with")
    relaxation_iterations: int = Field(default=4, description="Lloyd relaxation rounds")
    default_seed: str = Field(default="hexmap", description="Seed used when none is given")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",  # Explicitly forbid undeclared env vars
    )


# Instantiate singleton settings object
settings = Settings()


@dataclass
class MapConfig:
    """Parameters for one generated map."""

    width: int
    height: int
    num_regions: int
    num_terrains: int = 6
    iterations: int = 4
    seed: Optional[str] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Map dimensions must be positive, got {self.width}x{self.height}")
        if self.num_regions < 1:
            raise ValueError(f"num_regions must be at least 1, got {self.num_regions}")
        if self.num_terrains < 1:
            raise ValueError(f"num_terrains must be at least 1, got {self.num_terrains}")
        if self.iterations < 0:
            raise ValueError(f"iterations cannot be negative, got {self.iterations}")

    @property
    def map_size(self) -> int:
        return self.width * self.height

    @classmethod
    def from_settings(cls, app_settings: Optional[Settings] = None, **overrides) -> "MapConfig":
        """Build a config from application settings, with keyword overrides."""
        app_settings = app_settings or settings
        values = dict(
            width=app_settings.default_map_width,
            height=app_settings.default_map_height,
            num_regions=app_settings.default_num_regions,
            num_terrains=app_settings.default_num_terrains,
            iterations=app_settings.relaxation_iterations,
            seed=app_settings.default_seed,
        )
        values.update(overrides)
        return cls(**values)
