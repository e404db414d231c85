"""
Configuration models for the RetailMetrics mock API.

These models define the structure and validation for the optional
config.json file and the environment-variable overrides.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3001
DEFAULT_STORE_COUNT = 200

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
]


class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = Field("0.0.0.0", min_length=1, description="Interface to bind")
    port: int = Field(
        DEFAULT_PORT, gt=0, le=65535, description="TCP port the API listens on"
    )
    reload: bool = Field(False, description="Enable uvicorn auto-reload")
    log_level: str = Field("INFO", description="Root logging level")
    allowed_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS),
        description="CORS origins allowed to call the API",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class GenerationConfig(BaseModel):
    """Configuration for mock data generation."""

    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        description=(
            "Random seed for reproducible data. "
            "If None, a time-based seed is chosen at startup."
        ),
    )
    store_count: int = Field(
        DEFAULT_STORE_COUNT, gt=0, description="Number of stores to generate"
    )


class MockDataConfig(BaseModel):
    """Main configuration model for the RetailMetrics mock API."""

    server: ServerConfig = Field(
        default_factory=ServerConfig, description="HTTP server configuration"
    )
    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="Mock data generation configuration",
    )

    @classmethod
    def from_file(cls, file_path: str | Path) -> "MockDataConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            MockDataConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls(**data)

    def to_file(self, file_path: str | Path) -> None:
        """
        Save configuration to a JSON file.

        Args:
            file_path: Path where to save the configuration file
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with path.open("w") as f:
            json.dump(self.model_dump(), f, indent=2)

    def with_allowed_origins_from_env(self) -> "MockDataConfig":
        """Return a copy whose CORS origins honour ALLOWED_ORIGINS if set."""
        allowed_origins_env = os.getenv("ALLOWED_ORIGINS")
        if not allowed_origins_env:
            return self

        origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
        server = self.server.model_copy(update={"allowed_origins": origins})
        return self.model_copy(update={"server": server})
