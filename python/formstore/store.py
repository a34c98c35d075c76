"""
FormStore - YAML file persistence for form definitions.

Form definitions are stored one per file as ``{persistence_identifier}.yaml``
directly inside one of several configured save paths. A save path is a
directory plus an enabled flag; only enabled save paths are read from or
written to, in configured order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from .codec import YamlCodec
from .config import StoreConfig
from .errors import CodecError, ConfigurationError, FormNotFoundError
from .files import FileAccessor

logger = logging.getLogger(__name__)


@dataclass
class FormSummary:
    """One entry of FormStore.list_forms()."""
    identifier: str
    name: str
    persistence_identifier: str

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "name": self.name,
            "persistenceIdentifier": self.persistence_identifier,
        }


class FormStore:
    """
    File-based form definition store spanning multiple save paths.

    Usage:
        store = FormStore(resolve_config(override={
            "persistence": {"save_paths": {"/var/forms": True}},
        }))

        store.save("contact", {"identifier": "contact", "label": "Contact"})
        definition = store.load("contact")

        for summary in store.list_forms():
            print(summary.name, summary.persistence_identifier)
    """

    def __init__(
        self,
        config: StoreConfig,
        codec: Optional[YamlCodec] = None,
        files: Optional[FileAccessor] = None,
    ):
        """
        Initialize FormStore.

        Args:
            config: Resolved store configuration
            codec: Document codec (defaults to YamlCodec)
            files: Filesystem accessor (defaults to FileAccessor)
        """
        self._codec = codec or YamlCodec()
        self._files = files or FileAccessor()
        self._disabled_forms: Dict[str, bool] = dict(config.disabled_forms)
        self._save_paths: Dict[str, bool] = dict(config.save_paths or {})

        self._ensure_directories()

        if not self._save_paths and config.default_save_path:
            self._ensure_directory(config.default_save_path)
            self._save_paths = {config.default_save_path: True}
            logger.info("No save paths configured, using %s", config.default_save_path)

        # With no save path at all the store still constructs; every
        # resolving operation then raises ConfigurationError.
        if not self._save_paths:
            logger.warning("Form store has no save paths configured")

    def _ensure_directories(self):
        """Create every enabled save path that does not exist yet."""
        for save_path, enabled in self._save_paths.items():
            if enabled:
                self._ensure_directory(save_path)

    def _ensure_directory(self, path: str):
        if not self._files.is_dir(path):
            self._files.create_directory_recursively(path)
            logger.info("Created save path %s", path)

    @property
    def save_paths(self) -> Mapping[str, bool]:
        return MappingProxyType(self._save_paths)

    @property
    def disabled_forms(self) -> Mapping[str, bool]:
        return MappingProxyType(self._disabled_forms)

    @property
    def extension(self) -> str:
        return self._codec.extension

    def _enabled_save_paths(self) -> List[str]:
        return [path for path, enabled in self._save_paths.items() if enabled]

    def _assert_save_paths_valid(self):
        """
        Check that save paths are configured and every enabled one is a directory.

        Directories may be removed after construction, so this runs on every
        resolving operation.
        """
        if not self._save_paths:
            raise ConfigurationError(
                "The save paths are not usable.",
                ConfigurationError.NO_SAVE_PATHS,
            )
        for save_path, enabled in self._save_paths.items():
            if enabled and not self._files.is_dir(save_path):
                raise ConfigurationError(
                    f'The save path "{save_path}" is not usable.',
                    ConfigurationError.UNUSABLE_SAVE_PATH,
                )

    def _resolve_path(self, persistence_identifier: str) -> Path:
        """
        Get the file path for a persistence identifier.

        Returns the first existing file among the enabled save paths, or the
        candidate path in the first enabled save path. Does not check that
        the returned file exists.
        """
        self._assert_save_paths_valid()

        file_name = f"{persistence_identifier}.{self.extension}"
        first_enabled = None
        for save_path in self._enabled_save_paths():
            if first_enabled is None:
                first_enabled = save_path
            path = self._files.join_path([save_path, file_name])
            if self._files.is_file(path):
                return path

        if first_enabled is None:
            # Only disabled save paths are configured
            raise ConfigurationError(
                "No enabled save path is configured.",
                ConfigurationError.NO_SAVE_PATHS,
            )
        return self._files.join_path([first_enabled, file_name])

    def exists(self, persistence_identifier: str) -> bool:
        """Check if a form with the given persistence identifier can be loaded."""
        return self._files.is_file(self._resolve_path(persistence_identifier))

    def load(self, persistence_identifier: str) -> Any:
        """
        Load a form definition.

        Args:
            persistence_identifier: File name stem of the form

        Returns:
            The decoded form definition

        Raises:
            FormNotFoundError: If no file exists for the identifier
            CodecError: If the file content cannot be decoded
        """
        path = self._resolve_path(persistence_identifier)
        if not self._files.is_file(path):
            raise FormNotFoundError(persistence_identifier, str(path))

        logger.debug("Loading form %s from %s", persistence_identifier, path)
        return self._codec.decode(self._files.read_file(path))

    def save(self, persistence_identifier: str, form_definition: Any) -> None:
        """
        Save a form definition, overwriting any existing file in full.

        The file goes where load() would find it, or into the first enabled
        save path for a new form.
        """
        path = self._resolve_path(persistence_identifier)
        content = self._codec.encode(form_definition)
        logger.debug("Saving form %s to %s", persistence_identifier, path)
        self._files.write_file(path, content)

    def list_forms(self) -> List[FormSummary]:
        """
        List all enabled forms across the enabled save paths.

        Every matching file is decoded to read its identifier and label, so
        one broken file fails the whole listing.

        Returns:
            Summaries in save path order, then directory order
        """
        self._assert_save_paths_valid()

        suffix = f".{self.extension}"
        forms = []
        for save_path in self._enabled_save_paths():
            for entry in self._files.list_entries(save_path):
                if not self._files.is_file(entry):
                    continue
                if entry.suffix.lower() != suffix:
                    continue

                persistence_identifier = entry.stem
                form = self._decode_for_listing(entry)

                # Identifiers and labels may read as ints or dates in YAML
                identifier = str(form["identifier"])
                if self._disabled_forms.get(identifier):
                    continue

                label = form.get("label")
                forms.append(FormSummary(
                    identifier=identifier,
                    name=str(label) if label is not None else identifier,
                    persistence_identifier=persistence_identifier,
                ))

        return forms

    def _decode_for_listing(self, path: Path) -> dict:
        try:
            form = self._codec.decode(self._files.read_file(path))
        except CodecError:
            # TODO: skip and log broken files instead of failing the listing
            logger.warning("Form file %s could not be decoded", path)
            raise

        if not isinstance(form, dict) or not form.get("identifier"):
            raise CodecError(f'The form file "{path}" has no identifier.')
        return form
