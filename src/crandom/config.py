"""Configuration manager with YAML loading and validation."""

import logging
from pathlib import Path
from typing import Any

import yaml

from crandom.distributions import set_contract_checks
from crandom.sources.buffered import is_integer
from crandom.sources.factory import SourceFactory

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and validate crandom configuration from YAML files."""

    DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

    REQUIRED_SECTIONS = ["source", "contracts", "histogram"]

    def __init__(self, config_path: str | Path | None = None):
        """Initialize config manager.

        Args:
            config_path: Path to config file. Uses default if None.
        """
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        self._config: dict[str, Any] = {}
        self._load_config()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, "r") as f:
            self._config = yaml.safe_load(f) or {}

        logger.info("Loaded config from %s", self.config_path)

    def _validate_config(self) -> None:
        """Validate required configuration sections and values."""
        if not isinstance(self._config, dict):
            raise ValueError(f"Config root must be a mapping: {self.config_path}")

        for section in self.REQUIRED_SECTIONS:
            if section not in self._config:
                raise ValueError(f"Missing required config section: {section}")

        source = self._config["source"]
        engine = source.get("engine", SourceFactory.DEFAULT_ENGINE)
        if engine not in SourceFactory.SUPPORTED_ENGINES:
            raise ValueError(
                f"source.engine must be one of {SourceFactory.SUPPORTED_ENGINES}, got {engine!r}"
            )
        if source.get("buffer_size", 1) <= 0:
            raise ValueError("source.buffer_size must be positive")
        seed = source.get("seed")
        if seed is not None and not is_integer(seed):
            raise ValueError(f"source.seed must be an integer, got {seed!r}")
        seed_array = source.get("seed_array")
        if seed_array is not None:
            if not isinstance(seed_array, list) or not all(is_integer(k) for k in seed_array):
                raise ValueError(f"source.seed_array must be a list of integers, got {seed_array!r}")
            if not seed_array:
                raise ValueError("source.seed_array must not be empty")

        histogram = self._config["histogram"]
        for key in ("lower", "upper", "bins", "draws"):
            if key not in histogram:
                raise ValueError(f"Missing required config value: histogram.{key}")
        if histogram["lower"] >= histogram["upper"]:
            raise ValueError("histogram.lower must be less than histogram.upper")
        if histogram["bins"] <= 0:
            raise ValueError("histogram.bins must be positive")
        if histogram["draws"] <= 0:
            raise ValueError("histogram.draws must be positive")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'histogram.bins')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire config section.

        Args:
            section: Section name

        Returns:
            Section dict or empty dict if not found
        """
        return self._config.get(section, {})

    def apply_contracts(self) -> None:
        """Switch distribution parameter checks on or off per ``contracts.enabled``."""
        enabled = bool(self.contracts.get("enabled", True))
        set_contract_checks(enabled)
        if not enabled:
            logger.warning("Distribution parameter checks disabled by config")

    @property
    def source(self) -> dict[str, Any]:
        """Get uniform source configuration."""
        return self._config.get("source", {})

    @property
    def contracts(self) -> dict[str, Any]:
        """Get parameter check configuration."""
        return self._config.get("contracts", {})

    @property
    def histogram(self) -> dict[str, Any]:
        """Get histogram configuration."""
        return self._config.get("histogram", {})
