"""
YAML codec for form definitions.
"""

from typing import Any

import yaml

from .errors import CodecError


class YamlCodec:
    """
    Converts form definitions to and from YAML bytes.

    Documents are dumped in block style with their key order kept, so a
    definition written by hand survives a load/save cycle readably.
    """

    extension = "yaml"
    encoding = "utf-8"

    def decode(self, data: bytes) -> Any:
        """
        Parse YAML content.

        Args:
            data: Raw file content

        Returns:
            The decoded document (``None`` for empty content)

        Raises:
            CodecError: If the content is not valid UTF-8 YAML
        """
        try:
            return yaml.safe_load(data.decode(self.encoding))
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise CodecError(f"Could not decode YAML content: {e}") from e

    def encode(self, document: Any) -> bytes:
        """Serialize ``document`` to YAML bytes."""
        try:
            text = yaml.safe_dump(
                document,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            raise CodecError(f"Could not encode document as YAML: {e}") from e
        return text.encode(self.encoding)
