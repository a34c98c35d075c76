"""
Form store configuration.

Settings come from two scopes: a feature-specific ``override`` scope and a
generic ``fallback`` scope. Each may hold a ``persistence`` section:

    override:
      persistence:
        save_paths:
          /var/forms/site: true
          /var/forms/shared: false
        disabled_forms:
          contact-form: true
    fallback:
      persistence:
        save_paths:
          ~/forms: true
    default_save_path: /var/forms/default

If the override scope has a ``persistence`` section it is used as a whole
and the fallback section is ignored; the two are never merged.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV = "FORMSTORE_CONFIG"
DEFAULT_SAVE_PATH_ENV = "FORMSTORE_DEFAULT_SAVE_PATH"


@dataclass
class StoreConfig:
    """Resolved settings for a FormStore."""

    # None = not configured at all; {} is rejected by resolve_config
    save_paths: Optional[Dict[str, bool]] = None
    disabled_forms: Dict[str, bool] = field(default_factory=dict)
    default_save_path: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: str) -> "StoreConfig":
        """Load configuration from a YAML settings file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f'Configuration file "{path}" must contain a mapping',
                ConfigurationError.INVALID_SETTINGS,
            )
        return resolve_config(
            override=data.get("override"),
            fallback=data.get("fallback"),
            default_save_path=data.get("default_save_path"),
        )


def _normalize_flags(value: Any) -> Dict[str, bool]:
    # A plain list means "all of these, enabled"
    if isinstance(value, (list, tuple)):
        return {str(item): True for item in value}
    return {str(key): bool(flag) for key, flag in value.items()}


def resolve_config(
    override: Optional[Mapping[str, Any]] = None,
    fallback: Optional[Mapping[str, Any]] = None,
    default_save_path: Optional[str] = None,
) -> StoreConfig:
    """
    Apply the scope precedence rule and build a StoreConfig.

    Args:
        override: Feature-specific settings scope
        fallback: Generic settings scope
        default_save_path: Single directory used when no save paths are configured

    Returns:
        StoreConfig

    Raises:
        ConfigurationError: If save paths are configured but empty
    """
    if override and override.get("persistence") is not None:
        section = override["persistence"]
        logger.debug("Using persistence settings from the override scope")
    elif fallback and fallback.get("persistence") is not None:
        section = fallback["persistence"]
        logger.debug("Using persistence settings from the fallback scope")
    else:
        section = {}

    if not isinstance(section, Mapping):
        raise ConfigurationError(
            "The persistence settings must be a mapping",
            ConfigurationError.INVALID_SETTINGS,
        )

    config = StoreConfig(
        default_save_path=os.path.expanduser(default_save_path) if default_save_path else None
    )

    save_paths = section.get("save_paths")
    if save_paths is not None:
        if not isinstance(save_paths, (dict, list, tuple)):
            raise ConfigurationError(
                "save_paths must map directories to true/false",
                ConfigurationError.INVALID_SETTINGS,
            )
        if not save_paths:
            raise ConfigurationError(
                "Please add a save path",
                ConfigurationError.EMPTY_CONFIGURATION,
            )
        config.save_paths = {
            os.path.expanduser(path): flag
            for path, flag in _normalize_flags(save_paths).items()
        }

    disabled_forms = section.get("disabled_forms")
    if isinstance(disabled_forms, (dict, list, tuple)):
        config.disabled_forms = _normalize_flags(disabled_forms)

    return config


def load_config(path: Optional[str] = None) -> StoreConfig:
    """
    Load configuration for the CLI and server entry points.

    The file defaults to ``$FORMSTORE_CONFIG``. ``$FORMSTORE_DEFAULT_SAVE_PATH``
    overrides ``default_save_path`` from the file.
    """
    path = path or os.environ.get(CONFIG_ENV)

    if path:
        if not Path(path).is_file():
            raise ConfigurationError(
                f'Configuration file "{path}" does not exist',
                ConfigurationError.INVALID_SETTINGS,
            )
        logger.info("Loading form store configuration from %s", path)
        config = StoreConfig.from_yaml(path)
    else:
        config = StoreConfig()

    env_default = os.environ.get(DEFAULT_SAVE_PATH_ENV)
    if env_default:
        config.default_save_path = os.path.expanduser(env_default)

    return config
