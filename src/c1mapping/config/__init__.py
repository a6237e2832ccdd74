"""Configuration management for c1mapping.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MappingConfig: Cell and space dimension of the mapping
- GeometryConfig: Geometric tolerances
- ProcessingConfig: Mesh processing settings
- OutputConfig: Console output settings
- LoggingConfig: Logging settings
- C1MappingSettings: Main application settings
"""

from c1mapping.config.settings import (
    C1MappingSettings,
    GeometryConfig,
    LoggingConfig,
    MappingConfig,
    OutputConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "C1MappingSettings",
    "GeometryConfig",
    "LoggingConfig",
    "MappingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "get_default_settings",
]
