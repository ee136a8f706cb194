"""
Configuration - how a Controller is set up at construction.

Two layers:
- Configuration steps: small functions applied in order to a
  ControllerSettings object. Later steps override earlier ones.
- ControllerConfig: the same choices as plain data, loadable from a
  YAML or JSON file through ConfigManager.
"""

import json
import logging
import math
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from .atomic_write import atomic_text_write
from .errors import ConfigurationError
from .gamma import GammaFunc, build_gamma_table, default_gamma, gamma_from_table
from .order import DEFAULT_ORDER, ChannelOffsets, parse_channel_order

logger = logging.getLogger(__name__)


@dataclass
class ControllerSettings:
    """Mutable target the configuration steps write into."""
    offsets: ChannelOffsets = field(default_factory=lambda: parse_channel_order(DEFAULT_ORDER))
    gamma: Optional[GammaFunc] = default_gamma


ConfigStep = Callable[[ControllerSettings], None]


def order_config(order: str) -> ConfigStep:
    """Step that sets the RGB order of the strip. Default is "bgr".

    The order is validated now, so a bad string raises ConfigurationError
    before any controller is built.
    """
    offsets = parse_channel_order(order)

    def _apply(settings: ControllerSettings) -> None:
        settings.offsets = offsets

    return _apply


def disable_gamma_correction() -> ConfigStep:
    """Step that turns off the default 2.8 gamma correction."""
    def _apply(settings: ControllerSettings) -> None:
        settings.gamma = None

    return _apply


def custom_gamma_correction(gamma_func: GammaFunc) -> ConfigStep:
    """Step that replaces the gamma function.

    gamma_func is called every time an LED record is encoded.
    """
    def _apply(settings: ControllerSettings) -> None:
        settings.gamma = gamma_func

    return _apply


@dataclass
class ControllerConfig:
    """Controller configuration as plain data."""
    led_count: int = 1
    order: str = DEFAULT_ORDER
    gamma_correction: bool = True  # False disables correction entirely
    gamma: Optional[float] = None  # Exponent for a computed table; None = built-in 2.8 table
    global_brightness: int = 255

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ControllerConfig":
        """Create from dictionary. Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate configuration values are usable."""
        if isinstance(self.led_count, bool) or not isinstance(self.led_count, int) or self.led_count < 1:
            return False, "led_count must be a positive integer"

        try:
            parse_channel_order(self.order)
        except (ConfigurationError, AttributeError) as e:
            return False, f"order: {e}"

        if (
            isinstance(self.global_brightness, bool)
            or not isinstance(self.global_brightness, int)
            or not (0 <= self.global_brightness <= 255)
        ):
            return False, "global_brightness must be an int 0-255"

        if not isinstance(self.gamma_correction, bool):
            return False, "gamma_correction must be true or false"

        if self.gamma is not None and (
            isinstance(self.gamma, bool)
            or not isinstance(self.gamma, (int, float))
            or not math.isfinite(self.gamma)
            or self.gamma <= 0
        ):
            return False, "gamma must be a positive finite number"

        return True, None

    def steps(self) -> List[ConfigStep]:
        """Configuration steps equivalent to this config."""
        steps = [order_config(self.order)]
        if not self.gamma_correction:
            steps.append(disable_gamma_correction())
        elif self.gamma is not None:
            steps.append(custom_gamma_correction(gamma_from_table(build_gamma_table(self.gamma))))
        return steps


class ConfigManager:
    """Loads and saves a ControllerConfig file (YAML or JSON)."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Path to config file (default: dotstar.yaml in current dir)
        """
        if config_path is None:
            config_path = Path("dotstar.yaml")
        self.config_path = Path(config_path)
        self._config: Optional[ControllerConfig] = None

    def _is_yaml(self) -> bool:
        return self.config_path.suffix in (".yaml", ".yml")

    def load(self, force_reload: bool = False) -> ControllerConfig:
        """Load configuration from file or return defaults."""
        if self._config is not None and not force_reload:
            return self._config

        if not self.config_path.exists():
            self._config = ControllerConfig()
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) if self._is_yaml() else json.load(f)
            if not isinstance(data, dict):
                raise TypeError(f"expected a mapping, got {type(data).__name__}")
            config = ControllerConfig.from_dict(data)
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.warning("Error loading %s, using defaults: %s", self.config_path, e)
            self._config = ControllerConfig()
            return self._config

        valid, error = config.validate()
        if not valid:
            logger.warning("Invalid config in %s, using defaults: %s", self.config_path, error)
            config = ControllerConfig()

        self._config = config
        return self._config

    def save(self, config: Optional[ControllerConfig] = None) -> bool:
        """
        Save configuration to file.

        Returns:
            True if saved successfully
        """
        if config is None:
            config = self._config or self.load()

        valid, error = config.validate()
        if not valid:
            logger.warning("Cannot save invalid config: %s", error)
            return False

        data = config.to_dict()
        if self._is_yaml():
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        else:
            text = json.dumps(data, indent=2)

        try:
            atomic_text_write(self.config_path, text)
        except OSError as e:
            logger.warning("Error saving config to %s: %s", self.config_path, e)
            return False

        self._config = config
        return True

    def reload(self) -> ControllerConfig:
        """Force reload configuration from file."""
        self._config = None
        return self.load()
