"""
Exceptions raised by the form store.

Every error carries a numeric ``code`` so callers (CLI, HTTP API) can
report it alongside the message.
"""

from typing import Optional


class PersistenceManagerError(Exception):
    """Base class for all form store errors."""

    code: int = 0

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code}


class ConfigurationError(PersistenceManagerError):
    """Save path configuration is missing, empty or points nowhere."""

    EMPTY_CONFIGURATION = 34234525235
    INVALID_SETTINGS = 1532346207
    NO_SAVE_PATHS = 1532344964
    UNUSABLE_SAVE_PATH = 1532345130


class FormNotFoundError(PersistenceManagerError):
    """No file exists for the requested persistence identifier."""

    code = 1532345505

    def __init__(self, persistence_identifier: str, path: str):
        super().__init__(
            f'The form with the identifier "{persistence_identifier}" could not be loaded '
            f'or does not exist in "{path}".'
        )
        self.persistence_identifier = persistence_identifier
        self.path = path


class CodecError(PersistenceManagerError):
    """Stored content could not be decoded, or a document could not be encoded."""

    code = 1532346014
