"""Loading alpine-data documents."""

import io
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from lift.errors import DOCUMENT_ROOT, DecodeError
from lift.models.alpine import AlpineData, init_alpine_data
from lift.models.config import LiftOptions
from lift.utils.templates import merge_dicts


logger = logging.getLogger(__name__)


class DataLoader:
    """Turns alpine-data documents into AlpineData models."""

    def __init__(self, options: Optional[LiftOptions] = None):
        """Initialize the loader."""
        self.options = options or LiftOptions()
        self.yaml = YAML(typ="safe", pure=True)
        # YAML 1.1 booleans: `permit_root_login: yes` is true, dumped "yes" strings get quoted
        self.yaml.version = (1, 1)
        self.yaml.default_flow_style = False

    def decode(self, data: Any) -> AlpineData:
        """Decode a document mapping without applying any defaults.

        Only document keys are read (`password`, not `root_password`).
        """
        document = self._as_mapping(data)
        try:
            return AlpineData.model_validate(document, by_alias=True, by_name=False)
        except ValidationError as e:
            error = DecodeError.from_validation_error(e)
            logger.error(f"Invalid alpine-data: {error}")
            raise error from e

    def overlay(self, data: Any, base: Optional[AlpineData] = None) -> AlpineData:
        """Apply a partial document on top of ``base``.

        Sections present in both are merged key by key, every other value in
        the document replaces the one in ``base``. ``base`` defaults to
        :func:`init_alpine_data`.
        """
        document = self._as_mapping(data)
        if base is None:
            base = init_alpine_data()
        return self.decode(merge_dicts(base.to_document(), document))

    def load(self, data: Any) -> AlpineData:
        """Decode a document, overlaying it on the defaults if configured to."""
        if self.options.merge_defaults:
            return self.overlay(data)
        return self.decode(data)

    def load_string(self, content: str) -> AlpineData:
        """Parse and load a YAML document."""
        try:
            data = self.yaml.load(content)
        except YAMLError as e:
            logger.error(f"Malformed alpine-data YAML: {e}")
            raise DecodeError("malformed YAML", [(DOCUMENT_ROOT, str(e))]) from e
        return self.load(data)

    def load_file(self, path: Union[str, Path]) -> AlpineData:
        """Read, parse and load a YAML document from disk."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"alpine-data not found: {path}")

        logger.info(f"Loading alpine-data from {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"alpine-data is not valid UTF-8: {path}")
            raise DecodeError("malformed YAML", [(DOCUMENT_ROOT, f"not valid UTF-8: {e}")]) from e
        return self.load_string(content)

    def dump(self, data: AlpineData) -> str:
        """Encode a model back to YAML text."""
        stream = io.StringIO()
        self.yaml.dump(data.to_document(), stream)
        return stream.getvalue()

    def _as_mapping(self, data: Any) -> Mapping[str, Any]:
        """Check the document root is a mapping; an empty document is {}."""
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise DecodeError(
                "invalid alpine-data: 1 error",
                [(DOCUMENT_ROOT, f"expected a mapping, got {type(data).__name__}")],
            )
        return data
