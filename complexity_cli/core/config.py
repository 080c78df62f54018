import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from complexity_cli.core.constants import (
    CONFIG_FILENAME,
    DEFAULT_DOMAIN_SIZE,
    DEFAULT_MEMORY_LIMIT_BYTES,
    DEFAULT_SAMPLE_STEP,
    DIMMED_OPACITY,
    VALUE_CEILING,
)
from complexity_cli.core.exceptions import ConfigurationError


@dataclass
class ChartConfig:
    """Reference chart configuration."""

    domain_size: int = DEFAULT_DOMAIN_SIZE
    value_ceiling: float = VALUE_CEILING
    sample_step: int = DEFAULT_SAMPLE_STEP
    dimmed_opacity: float = DIMMED_OPACITY
    open_browser: bool = True
    output_dir: Optional[str] = None  # Default: system temp directory

    def __post_init__(self):
        if self.domain_size < 1:
            raise ConfigurationError(
                f"domain_size must be at least 1, got {self.domain_size}"
            )
        if self.sample_step < 1:
            raise ConfigurationError(
                f"sample_step must be at least 1, got {self.sample_step}"
            )
        if not 0 <= self.dimmed_opacity <= 1:
            raise ConfigurationError(
                f"dimmed_opacity must be between 0 and 1, got {self.dimmed_opacity}"
            )


@dataclass
class AnalyzerConfig:
    """Main configuration class for Complexity CLI."""

    default_language: Optional[str] = None
    debug: bool = False
    chart: ChartConfig = field(default_factory=ChartConfig)
    memory_limit_bytes: int = DEFAULT_MEMORY_LIMIT_BYTES

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalyzerConfig":
        """Create config from dictionary."""
        config_data = data.copy()

        # Map flat JSON keys to config fields
        field_mapping = {
            "language": "default_language",
            "memory_limit": "memory_limit_bytes",
            "domain_size": "chart.domain_size",
            "value_ceiling": "chart.value_ceiling",
            "sample_step": "chart.sample_step",
            "dimmed_opacity": "chart.dimmed_opacity",
            "open_browser": "chart.open_browser",
            "output_dir": "chart.output_dir",
        }

        for json_key, config_key in field_mapping.items():
            if json_key in config_data:
                value = config_data.pop(json_key)
                if "." in config_key:  # Nested field
                    parent, child = config_key.split(".", 1)
                    if parent not in config_data:
                        config_data[parent] = {}
                    config_data[parent][child] = value
                else:
                    config_data[config_key] = value

        if "chart" in config_data and isinstance(config_data["chart"], dict):
            try:
                config_data["chart"] = ChartConfig(**config_data["chart"])
            except TypeError as e:
                raise ConfigurationError(f"Invalid chart configuration: {e}") from e

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(config_data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )

        return cls(**config_data)

    def get_output_dir(self) -> Optional[Path]:
        """Get the chart output directory, or None for the temp directory."""
        if self.chart.output_dir:
            return Path(self.chart.output_dir).expanduser()
        return None


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    paths = []

    if config_path:
        paths.append(Path(config_path))

    paths.extend(
        [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]
    )

    for path in paths:
        if path.exists():
            try:
                with open(path, "r") as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError):
                continue

    return {}
