"""
Mock data generators package.

Re-exports the orchestrator and the startup initialization routine.
"""

from .mock_data_generator import MockDataGenerator, initialize_mock_data, resolve_seed
from .utils import RandomSource

__all__ = ["MockDataGenerator", "RandomSource", "initialize_mock_data", "resolve_seed"]
