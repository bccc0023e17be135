"""Configuration file loading and validation."""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kubectl_mc.errors import ConfigurationError

CONFIG_ENV_VAR = "KUBECTL_MC_CONFIG"
DEFAULT_MAX_PROCESSES = 5


class Settings(BaseModel):
    """Defaults that apply when the matching command-line flag is not given."""

    model_config = ConfigDict(extra="forbid")

    kubectl: str = "kubectl"
    max_processes: int = Field(default=DEFAULT_MAX_PROCESSES, ge=1)
    output: Literal["json", "yaml"] | None = None


class ConfigurationManager:
    """Locates and loads the kubectl-mc configuration file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or self._default_config_path()

    @property
    def config_path(self) -> Path:
        """Path of the configuration file, whether or not it exists."""
        return self._config_path

    @staticmethod
    def _default_config_path() -> Path:
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            base_dir = Path(xdg_config_home)
        else:
            base_dir = Path.home() / ".config"
        return base_dir / "kubectl-mc" / "config.yaml"

    def load(self) -> Settings:
        """Load settings from the configuration file.

        Returns:
            Validated settings, or the defaults when no file exists

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated
        """
        data = self._read_yaml()
        try:
            return Settings.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {self._config_path}: {e}"
            ) from e

    def _read_yaml(self) -> dict[str, Any]:
        if not self._config_path.exists():
            return {}

        try:
            with open(self._config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse YAML file {self._config_path}: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read file {self._config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_path} must contain a mapping"
            )
        return data
