"""Configuration models and loaders."""

from .models import GenerationConfig, MockDataConfig, ServerConfig
from .settings import load_config, load_config_with_fallback

__all__ = [
    "GenerationConfig",
    "MockDataConfig",
    "ServerConfig",
    "load_config",
    "load_config_with_fallback",
]
