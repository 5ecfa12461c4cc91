# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the protomodel configuration file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from protomodel.errors import ConfigError
from protomodel.model.entities import GENERATED_FILE_NAME, SERVICE_SUFFIX, Package

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".protomodel.yaml"


@dataclass(frozen=True)
class ModelConfig:
    """Settings applied to every package created for a generation run.

    Attributes:
        generated_file_name: File name of each generated ``.proto`` file.
            Import locators are derived by joining a source path with it.
        service_suffix: Suffix appended to a package's last name segment to
            form its RPC service name.
    """

    generated_file_name: str = GENERATED_FILE_NAME
    service_suffix: str = SERVICE_SUFFIX

    def new_package(self, name: str, path: str = "") -> Package:
        """Create an empty package carrying these settings."""
        return Package(
            name=name,
            path=path,
            generated_file_name=self.generated_file_name,
            service_suffix=self.service_suffix,
        )


def load_config(path: Path) -> ModelConfig:
    """Load and parse a protomodel configuration file.

    Args:
        path: Path to the ``.protomodel.yaml`` file.

    Returns:
        A ModelConfig populated from the file. Keys that are absent keep
        their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    config = parse_config(text, source_label=str(path))
    logger.debug("Loaded config from %s: %s", path, config)
    return config


def parse_config(text: str, source_label: str = "<string>") -> ModelConfig:
    """Parse configuration YAML text into a ModelConfig.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        ConfigError: If the YAML is invalid or contains unknown or malformed keys.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ModelConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown config keys: {', '.join(unknown)}")

    values = {attr: _optional_string(data, key, source_label) for key, attr in _KEYS.items() if key in data}
    return ModelConfig(**values)


# ################
# Implementation
# ################

_KEYS = {
    "generated-file-name": "generated_file_name",
    "service-suffix": "service_suffix",
}


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a non-empty string field from a mapping, raising ConfigError if malformed."""
    value = mapping[key]
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    if not value:
        raise ConfigError(f"{source_label}: '{key}' must not be empty")
    return value
