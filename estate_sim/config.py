"""Configuration management for estate-sim."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from estate_sim.exceptions import ConfigurationError


@dataclass
class OutputConfig:
    """Report output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class SimulatorConfig:
    """Main configuration for estate-sim."""

    output: OutputConfig = field(default_factory=OutputConfig)
    full_occupancy_rate: float = 90.0  # percentage
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "SimulatorConfig":
        """Create config from environment variables."""
        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        raw_rate = os.getenv("FULL_OCCUPANCY_RATE", "90.0")
        try:
            full_occupancy_rate = float(raw_rate)
        except ValueError as e:
            raise ConfigurationError(
                f"FULL_OCCUPANCY_RATE must be a number, got {raw_rate!r}"
            ) from e

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(
                f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}"
            )

        return cls(
            output=output,
            full_occupancy_rate=full_occupancy_rate,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
