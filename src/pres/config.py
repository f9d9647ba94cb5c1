"""Presenter configuration management.

This module provides the PresConfiguration class and the loader for the
``pres.yaml`` file that applications use to pin presenter classes by name.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = "pres.yaml"
DEFAULT_PRESENTER_SUFFIX = "Presenter"

logger = logging.getLogger(__name__)


@dataclass
class PresConfiguration:
    """Settings for presenter lookup.

    Attributes:
        presenter_suffix: Appended to a subject's class name to build the
            conventional presenter name (``Order`` -> ``OrderPresenter``)
        presenters: Mapping of presenter name to ``"module:ClassName"`` import
            path, registered when a registry is created from this config
    """

    presenter_suffix: str = DEFAULT_PRESENTER_SUFFIX
    presenters: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PresConfiguration":
        """Create a configuration from a parsed yaml document.

        Unknown keys are ignored.

        Args:
            data: Dictionary of configuration values

        Returns:
            A new PresConfiguration

        Raises:
            ConfigurationError: If a known key has the wrong shape
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}

        suffix = filtered_data.get("presenter_suffix", DEFAULT_PRESENTER_SUFFIX)
        if not isinstance(suffix, str):
            raise ConfigurationError(
                f"'presenter_suffix' must be a string, got {type(suffix).__name__}"
            )

        presenters = filtered_data.get("presenters") or {}
        if not isinstance(presenters, dict):
            raise ConfigurationError(
                f"'presenters' must be a mapping, got {type(presenters).__name__}"
            )
        for name, path in presenters.items():
            if not isinstance(path, str) or ":" not in path:
                raise ConfigurationError(
                    f"Presenter '{name}' must map to a 'module:ClassName' path, got {path!r}"
                )

        return cls(presenter_suffix=suffix, presenters=dict(presenters))


def load_config(path: Optional[str] = None) -> PresConfiguration:
    """Load presenter configuration from a yaml file.

    Args:
        path: Path to the yaml file (default: ``pres.yaml`` in the working directory)

    Returns:
        The parsed configuration, or defaults if the file does not exist

    Raises:
        ConfigurationError: If the file is not a yaml mapping
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(config_path):
        logger.debug(f"No pres config at {config_path}, using defaults")
        return PresConfiguration()

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid yaml in {config_path}: {e}") from e

    if data is None:
        return PresConfiguration()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping in {config_path}, got {type(data).__name__}")

    logger.debug(f"Loaded pres config from {config_path}")
    return PresConfiguration.from_dict(data)
