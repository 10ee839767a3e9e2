"""Run configuration for vectorlab.

A ``RunConfig`` can be built directly, or loaded from a YAML or JSON file
whose top-level keys match the dataclass fields:

```yaml
length: 1000000
workers: 4
fill: random
low: -10.0
high: 10.0
seed: 42
```
"""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from vectorlab.buffer import NumericBuffer
from vectorlab.utils.config_io import read_config_mapping, write_config_mapping
from vectorlab.utils.errors import ConfigError

FILL_MODES = ("random", "constant")


@dataclass
class RunConfig:
    """Configuration for building a buffer and reducing it."""

    length: int = 1_000_000
    workers: int = 4
    fill: str = "random"
    value: float = 1.0
    low: float = -10.0
    high: float = 10.0
    seed: Optional[int] = 42
    tolerance: float = 1e-9
    iterations: int = 10
    output_dir: str = "./vectorlab_results"

    def validate(self) -> None:
        """Check field values.

        Raises:
            ConfigError: If any field is out of its accepted range
        """
        if self.length < 1:
            raise ConfigError(f"length must be >= 1, got {self.length}")
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1, got {self.workers}")
        if self.fill not in FILL_MODES:
            raise ConfigError(f"fill must be one of {FILL_MODES}, got {self.fill!r}")
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0
        ):
            raise ConfigError(f"seed must be a non-negative integer or null, got {self.seed!r}")
        if self.fill == "random" and not self.low < self.high:
            raise ConfigError(f"low must be < high, got low={self.low}, high={self.high}")
        if not (self.tolerance > 0 and math.isfinite(self.tolerance)):
            raise ConfigError(f"tolerance must be a positive number, got {self.tolerance}")
        if self.iterations < 1:
            raise ConfigError(f"iterations must be >= 1, got {self.iterations}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def config_from_dict(data: dict[str, Any]) -> RunConfig:
    """Build and validate a RunConfig from a mapping.

    Raises:
        ConfigError: On unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
    try:
        config = RunConfig(**data)
        config.validate()
    except TypeError as e:
        raise ConfigError(f"invalid config value: {e}") from e
    return config


def load_run_config(filepath: str) -> RunConfig:
    """Load a RunConfig from a ``.yaml``/``.yml`` or ``.json`` file.

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    return config_from_dict(read_config_mapping(filepath))


def save_run_config(config: RunConfig, filepath: str) -> None:
    """Save a RunConfig as YAML or JSON depending on the file suffix."""
    write_config_mapping(filepath, config.to_dict())


def build_buffer(config: RunConfig) -> NumericBuffer:
    """Create and fill a buffer as described by ``config``."""
    config.validate()
    buffer = NumericBuffer(config.length)
    if config.fill == "constant":
        buffer.fill_constant(config.value)
    else:
        buffer.fill_random(config.low, config.high, seed=config.seed)
    return buffer
