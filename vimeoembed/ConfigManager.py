from vimeoembed.Config import Config


import yaml


import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

# Config field -> environment variable holding it
SECRET_ENV_VARS = {
    "vimeo_client_secret": "vimeo_client_secret",
    "vimeo_access_token_secret": "vimeo_access_token_secret",
}


class ConfigManager:
    """Manages configuration loading from YAML files and the environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Initialize the ConfigManager.

        Args:
            environ: Environment to read secrets from, defaults to ``os.environ``
        """
        self.logger = logging.getLogger(__name__)
        self.environ = os.environ if environ is None else environ

    def get_xdg_config_home(self) -> Path:
        """Get XDG config home directory."""
        xdg_config_home = self.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home)
        return Path.home() / ".config"

    def get_xdg_config_dirs(self) -> List[Path]:
        """Get XDG config directories in order of preference."""
        config_dirs = []

        # User-specific config directory
        config_dirs.append(self.get_xdg_config_home() / "vimeoembed")

        # System-wide config directories
        xdg_config_dirs = self.environ.get("XDG_CONFIG_DIRS", "/etc/xdg").split(":")
        for config_dir in xdg_config_dirs:
            config_dirs.append(Path(config_dir) / "vimeoembed")

        config_dirs.append(Path.cwd())

        return config_dirs

    def find_config_file(self) -> Optional[Path]:
        """Find the configuration file in XDG-compliant paths."""
        for config_dir in self.get_xdg_config_dirs():
            config_path = config_dir / "config.yaml"
            if config_path.exists():
                return config_path
        return None

    def get_env_secrets(self) -> Dict[str, str]:
        """Collect the secrets set in the environment, lower or upper case."""
        secrets = {}
        for field, env_var in SECRET_ENV_VARS.items():
            value = self.environ.get(env_var) or self.environ.get(env_var.upper())
            if value:
                secrets[field] = value
        return secrets

    def load_config(self, config_path: Optional[Path] = None) -> Config:
        """Load complete application configuration.

        Values from the YAML file are overlaid with the secrets found in the
        environment. Without any config file the defaults are used.
        """
        if config_path is None:
            config_path = self.find_config_file()

        yaml_data = {}
        if config_path is None:
            self.logger.info("No configuration file found, using defaults")
        else:
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    yaml_data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ValueError(f"Failed to load configuration from {config_path}: {str(e)}")
            if not isinstance(yaml_data, dict):
                raise ValueError(f"Failed to load configuration from {config_path}: expected a mapping")
            self.logger.debug(f"Loaded configuration from: {config_path}")

        yaml_data.update(self.get_env_secrets())

        try:
            # Pydantic will handle validation and type conversion automatically
            return Config(**yaml_data)
        except Exception as e:
            raise ValueError(f"Invalid configuration in {config_path or 'defaults'}: {str(e)}")
