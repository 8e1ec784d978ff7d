import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from core import log
from core.exceptions import ConfigurationError

CONFIG_REL_PATH = "config/settings.yaml"
DEFAULT_OUTPUT_PATH = "AndroidManifestExported.xml"


@dataclass
class OutputSettings:
    path: str = DEFAULT_OUTPUT_PATH
    indent: str = "  "


@dataclass
class LoggingSettings:
    verbose: bool = False


@dataclass
class Settings:
    output: OutputSettings = field(default_factory=OutputSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Builds settings from a parsed YAML mapping, ignoring unknown keys."""
        output = _section(data, "output")
        logging = _section(data, "logging")

        settings = cls()
        if "path" in output:
            settings.output.path = str(output["path"])
        if "indent" in output:
            settings.output.indent = str(output["indent"])
        if "verbose" in logging:
            settings.logging.verbose = bool(logging["verbose"])
        return settings


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section '{name}' in settings must be a mapping.")
    return section


def load_settings(config_path: str = CONFIG_REL_PATH) -> Settings:
    """Loads the YAML configuration file, falling back to defaults when it is absent."""
    if not os.path.exists(config_path):
        log.debug(f"Configuration file not found at {config_path}. Using default settings.")
        return Settings()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        log.error(f"Error parsing YAML configuration: {e}")
        raise ConfigurationError(f"Invalid settings file {config_path}: {e}") from e
    except OSError as e:
        log.error(f"Error reading configuration file: {e}")
        raise

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {config_path} must contain a mapping.")

    log.debug(f"Loaded settings from {config_path}")
    return Settings.from_dict(data)
