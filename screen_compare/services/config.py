"""
Configuration for the comparator.
Reads defaults, an optional .env file in the config directory, then SCREEN_COMPARE_* environment variables.
"""
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

from screen_compare.utils.errors import ConfigError
from screen_compare.utils.logging import logger

ENV_PREFIX = "SCREEN_COMPARE_"


def config_dir() -> Path:
    env = os.environ.get(f"{ENV_PREFIX}CONFIG_DIR")
    return Path(env).expanduser() if env else Path.home() / ".config" / "screen-compare"


@dataclass
class AppConfig:
    """Runtime settings for the comparator."""
    debounce_ms: int = 50
    scale_factor: float = 10.0  # pixels per inch in the visual comparison
    log_level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: config_dir() / "logs")

    @property
    def debounce_s(self) -> float:
        return self.debounce_ms / 1000.0


def _parse_value(name: str, raw: str, default: Any) -> Any:
    """Convert a raw string setting to the type of its default."""
    try:
        if isinstance(default, Path):
            return Path(raw).expanduser()
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            value = float(raw)
            if value <= 0:
                raise ValueError("must be positive")
            return value
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {raw!r} ({e})") from e
    return raw


def _read_env_file(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    return {k: v for k, v in values.items() if v is not None}


def load_config(env: Optional[Dict[str, str]] = None) -> AppConfig:
    """Load configuration from defaults, .env and the process environment."""
    config = AppConfig()
    settings = _read_env_file(config_dir() / ".env")
    settings.update(os.environ if env is None else env)

    for f in fields(AppConfig):
        raw = settings.get(f"{ENV_PREFIX}{f.name.upper()}")
        if raw is None or raw == "":
            continue
        default = getattr(config, f.name)
        try:
            setattr(config, f.name, _parse_value(f.name, raw, default))
        except ConfigError as e:
            logger.warning("%s; using default %r", e, default)

    if config.debounce_ms < 0:
        logger.warning("debounce_ms %d is negative; clamping to 0", config.debounce_ms)
        config.debounce_ms = 0
    return config


# Singleton instance
_config = None

def get_config() -> AppConfig:
    """Get the process-wide AppConfig."""
    global _config
    if _config is None:
        _config = load_config()
    return _config

def reset_config() -> None:
    global _config
    _config = None
