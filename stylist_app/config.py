"""Configuration helpers for the wardrobe stylist service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_OUTFIT_COUNT = 3

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class StylistConfig:
    """Configuration values for the stylist service.

    The AI stylist is optional: without an API key, or with
    ``enable_ai_recommendations`` switched off, every request is served by the
    deterministic outfit engine.
    """

    model: str = DEFAULT_GEMINI_MODEL
    api_key: Optional[str] = None
    enable_ai_recommendations: bool = True
    default_outfit_count: int = DEFAULT_OUTFIT_COUNT
    log_level: str = "INFO"
    environment: str | None = None

    @property
    def ai_enabled(self) -> bool:
        return self.enable_ai_recommendations and bool(self.api_key)

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take
        precedence so secrets can be injected by the runtime.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        model = get_value("model", DEFAULT_GEMINI_MODEL)
        api_key = get_value("google_api_key")
        enable_ai = get_value("enable_ai_recommendations", "true")
        outfit_count = get_value("default_outfit_count", str(DEFAULT_OUTFIT_COUNT))
        log_level = get_value("log_level", "INFO")

        try:
            default_outfit_count = max(1, int(str(outfit_count)))
        except ValueError:
            default_outfit_count = DEFAULT_OUTFIT_COUNT

        return cls(
            model=str(model or DEFAULT_GEMINI_MODEL),
            api_key=api_key or None,
            enable_ai_recommendations=str(enable_ai).strip().lower() in _TRUTHY,
            default_outfit_count=default_outfit_count,
            log_level=str(log_level or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
