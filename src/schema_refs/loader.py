"""Schema loader: turns document root references into containers."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .containers import SchemaContainer
from .errors import ContainerLoadError, InvalidReferenceError
from .json_pointer import field_named, is_missing
from .json_ref import JsonRef, is_uri_string
from .parser import SchemaParser

logger = logging.getLogger(__name__)


class SchemaLoader:
    """
    Produces schema containers for document roots.

    Documents come from the in-memory registry first, then from ``file:``
    URIs on disk. Loaded containers are memoized by root reference and may be
    shared between validations since they are never modified.
    """

    def __init__(self, parser: Optional[SchemaParser] = None):
        self.parser = parser or SchemaParser()
        self._containers: Dict[JsonRef, SchemaContainer] = {}

    def register(self, uri: Union[str, JsonRef], document: Any) -> SchemaContainer:
        """Make a document available under the given root URI."""
        locator = JsonRef.from_string(uri) if isinstance(uri, str) else uri
        if not locator.fragment.is_empty():
            raise InvalidReferenceError(f"schema locator must not have a fragment: {locator}")

        container = SchemaContainer(locator, document)
        self._containers[locator] = container
        logger.debug(f"Registered schema {str(locator) or '<anonymous>'}")
        return container

    def register_schema(self, document: Any) -> SchemaContainer:
        """
        Register a document under its own ``$id`` (or draft-04 ``id``).

        Documents without a usable id get the anonymous locator and are not
        added to the registry.
        """
        schema_id = field_named(document, "$id")
        if is_missing(schema_id):
            schema_id = field_named(document, "id")

        if is_uri_string(schema_id):
            try:
                return self.register(JsonRef.from_string(schema_id).root, document)
            except InvalidReferenceError as e:
                logger.warning(f"Ignoring unusable schema id {schema_id!r}: {e}")

        return SchemaContainer(JsonRef.empty(), document)

    def load_file(self, file_path: Union[str, Path]) -> SchemaContainer:
        """Load a local schema file, using its file URI as locator."""
        locator = JsonRef.from_string(Path(file_path).resolve().as_uri())
        return self.get_container(locator)

    def get_container(self, root: JsonRef) -> SchemaContainer:
        """
        Get the container for a document root.

        Args:
            root: Reference to the document; any fragment is ignored

        Returns:
            SchemaContainer for the document

        Raises:
            ContainerLoadError: if the document cannot be found, read or parsed
        """
        root = root.root
        cached = self._containers.get(root)
        if cached is not None:
            return cached

        if not root.is_absolute:
            raise ContainerLoadError(str(root), "relative reference has no base document to load from")

        if root.scheme != "file":
            raise ContainerLoadError(str(root), f"unsupported URI scheme {root.scheme!r}")

        path = Path(url2pathname(urlsplit(str(root)).path))
        result = self.parser.parse_file(path)
        if not result.success:
            raise ContainerLoadError(str(root), result.error)

        container = SchemaContainer(root, result.data)
        self._containers[root] = container
        logger.info(f"Loaded schema {root} ({result.file_type})")
        return container

    def clear(self) -> None:
        """Forget every loaded and registered container."""
        self._containers.clear()
