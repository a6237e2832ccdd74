"""Configuration settings for c1mapping."""

from pathlib import Path

from pydantic import BaseModel, Field


class MappingConfig(BaseModel):
    """Configuration for the C1 mapping."""

    dimension: int = Field(
        default=2,
        ge=1,
        le=3,
        description="Topological dimension of the mapped cells",
    )
    space_dimension: int | None = Field(
        default=None,
        ge=1,
        le=3,
        description="Dimension of the embedding space (None = same as dimension)",
    )

    def get_space_dimension(self) -> int:
        """Get the embedding space dimension, defaulting to the cell dimension."""
        if self.space_dimension is None:
            return self.dimension
        return self.space_dimension


class GeometryConfig(BaseModel):
    """Configuration for geometric checks."""

    min_edge_length: float = Field(
        default=0.0,
        ge=0.0,
        description="Edges not longer than this are rejected as degenerate",
    )


class ProcessingConfig(BaseModel):
    """Configuration for mesh processing."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None = auto, 1 = in-process)",
    )


class OutputConfig(BaseModel):
    """Configuration for console output."""

    precision: int = Field(
        default=6,
        ge=1,
        le=17,
        description="Decimal digits shown for support point coordinates",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class C1MappingSettings(BaseModel):
    """Main application settings."""

    mapping: MappingConfig = Field(default_factory=MappingConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> C1MappingSettings:
    """Get default application settings."""
    return C1MappingSettings()
