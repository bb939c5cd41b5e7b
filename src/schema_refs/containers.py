"""Schema documents and the nodes validated inside them."""

from dataclasses import dataclass
from typing import Any

from .json_ref import JsonRef


@dataclass(frozen=True)
class SchemaContainer:
    """A loaded schema document paired with the reference it was loaded from."""

    locator: JsonRef
    document: Any

    def contains(self, ref: JsonRef) -> bool:
        """Check whether ref points into this container's document."""
        return self.locator.contains(ref)


@dataclass(frozen=True)
class SchemaNode:
    """A JSON value inside the document of a container."""

    container: SchemaContainer
    node: Any
