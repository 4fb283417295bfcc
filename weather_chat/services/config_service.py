"""Configuration service for managing application config."""
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "WEATHER_CHAT_CONFIG"
DEFAULT_PORT = 3000


class ConfigService:
    """Service for managing application configuration.

    Values come from config.yml; PORT, APP_ENV and LOG_LEVEL environment
    variables override the matching file settings.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration service.

        Args:
            config_path: Path to config file. If None, uses WEATHER_CHAT_CONFIG
                or searches default locations.
        """
        self._config: Optional[Dict] = None
        self._config_path = config_path or os.getenv(CONFIG_PATH_ENV)
        self.load_config()

    def load_config(self) -> Dict:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file not found
        """
        if self._config_path:
            config_path = Path(self._config_path)
        else:
            # Try default locations
            config_path = Path("config.yml")
            if not config_path.exists():
                config_path = Path("config/config.yml")

        if not config_path.exists():
            raise FileNotFoundError(
                "config.yml not found in current directory or config/ directory"
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f)

        logger.info(f"Configuration loaded from {config_path}")
        logger.info(f"Default model: {self._config['default_model']}")

        return self._config

    @property
    def config(self) -> Dict:
        """Get current configuration."""
        if self._config is None:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def get_default_model(self) -> str:
        """Get default model name."""
        return self.config['default_model']

    def get_model_config(self, model_name: Optional[str] = None) -> Dict:
        """Get configuration for a specific model.

        Args:
            model_name: Name of the model. If None, returns default model config.

        Returns:
            Model configuration dictionary
        """
        if model_name is None:
            model_name = self.get_default_model()

        return self.config['models'][model_name]

    def get_available_models(self) -> List[str]:
        """Get list of available model names."""
        return list(self.config['models'].keys())

    def get_host(self) -> str:
        """Get server bind host."""
        return (self.config.get('server') or {}).get('host', '0.0.0.0')

    def get_port(self) -> int:
        """Get server port; PORT env var wins over config."""
        port = os.getenv("PORT") or (self.config.get('server') or {}).get('port', DEFAULT_PORT)
        return int(port)

    def is_development(self) -> bool:
        """Whether development-only diagnostics are enabled."""
        env = os.getenv("APP_ENV") or self.config.get('environment', 'production')
        return str(env).strip().lower() == "development"

    def get_log_level(self) -> str:
        """Get logging level name."""
        level = os.getenv("LOG_LEVEL") or (self.config.get('logging') or {}).get('level', 'INFO')
        return str(level).upper()

    def get_safe_config(self) -> Dict:
        """Get sanitized configuration without sensitive data.

        Returns:
            Safe configuration dictionary
        """
        return {
            "default_model": self.get_default_model(),
            "models": {
                name: {
                    "provider": cfg['provider'],
                    "model_id": cfg['model_id'],
                    "max_tokens": cfg.get('max_tokens', 0),
                    "temperature": cfg.get('temperature', 0.7)
                }
                for name, cfg in self.config['models'].items()
            },
        }
