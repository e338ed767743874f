"""
Engine configuration.

Settings come from three layers, later ones winning:
    1. Dataclass defaults
    2. An optional TOML file ([logging] table)
    3. Environment variables JUMPY_LOG_DIR, JUMPY_DEBUG, JUMPY_LOG_TO_FILE

Example jumpy.toml:

    [logging]
    log_dir = "/tmp/jumpy"
    debug = true
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

DEFAULT_CONFIG_PATH = "jumpy.toml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class EngineConfig:
    """Runtime settings for the driver programs."""

    log_dir: Path = field(default_factory=lambda: Path.home() / ".jumpy")
    """Directory holding the log file"""

    log_file: str = "engine.log"
    """Log file name inside log_dir"""

    debug: bool = False
    """Log at DEBUG level instead of INFO"""

    log_to_file: bool = True
    """Disable to run without touching the filesystem"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_dir = Path(self.log_dir).expanduser()

        if not self.log_file:
            raise ValueError("log_file must not be empty")

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """
    Load configuration from TOML and the environment.

    Args:
        path: TOML file to read. Defaults to $JUMPY_CONFIG_TOML or jumpy.toml.
              A missing file is not an error.

    Returns:
        EngineConfig

    Raises:
        ValueError: On malformed values
    """
    if path is None:
        path = os.environ.get("JUMPY_CONFIG_TOML", DEFAULT_CONFIG_PATH)
    path = Path(path)

    settings = {}
    if path.is_file():
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for key, value in raw.get("logging", {}).items():
            if key in EngineConfig.__dataclass_fields__:
                settings[key] = value

    if "JUMPY_LOG_DIR" in os.environ:
        settings["log_dir"] = os.environ["JUMPY_LOG_DIR"]
    if "JUMPY_DEBUG" in os.environ:
        settings["debug"] = _parse_bool("JUMPY_DEBUG", os.environ["JUMPY_DEBUG"])
    if "JUMPY_LOG_TO_FILE" in os.environ:
        settings["log_to_file"] = _parse_bool(
            "JUMPY_LOG_TO_FILE", os.environ["JUMPY_LOG_TO_FILE"]
        )

    return EngineConfig(**settings)
