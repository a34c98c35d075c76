"""
formstore - YAML file persistence for form definitions.

Form definitions are stored as YAML files across one or more configured
save paths, with support for disabling individual forms.
"""

from .codec import YamlCodec
from .config import StoreConfig, load_config, resolve_config
from .errors import (
    CodecError,
    ConfigurationError,
    FormNotFoundError,
    PersistenceManagerError,
)
from .files import FileAccessor
from .store import FormStore, FormSummary

__all__ = [
    "FormStore",
    "FormSummary",
    "StoreConfig",
    "load_config",
    "resolve_config",
    "YamlCodec",
    "FileAccessor",
    "PersistenceManagerError",
    "ConfigurationError",
    "FormNotFoundError",
    "CodecError",
]
