"""Reference Scanner for finding $ref usages in schema documents."""

from typing import Any, Dict, List, Tuple, Union

from .json_pointer import JsonPointer


class ReferenceScanner:
    """Scans schema documents for $ref references."""

    def find_references(self, content: Union[Dict, List, Any]) -> List[str]:
        """
        Find all $ref strings in content.

        Args:
            content: Schema content to scan (dict, list, or other)

        Returns:
            Sorted list of unique $ref strings found
        """
        refs = set()
        for _, node in self.find_reference_nodes(content):
            if isinstance(node["$ref"], str):
                refs.add(node["$ref"])
        return sorted(refs)

    def find_reference_nodes(self, content: Union[Dict, List, Any]) -> List[Tuple[JsonPointer, Dict[str, Any]]]:
        """
        Find every object carrying a $ref member, in document order.

        Returns:
            List of (pointer to the object, the object itself)
        """
        found = []
        self._scan_recursive(content, JsonPointer(), found)
        return found

    def _scan_recursive(self, obj: Any, pointer: JsonPointer, found: list) -> None:
        """Recursively scan object for $ref occurrences."""
        if isinstance(obj, dict):
            self._scan_dict(obj, pointer, found)
        elif isinstance(obj, list):
            self._scan_list(obj, pointer, found)

    def _scan_dict(self, obj: Dict[str, Any], pointer: JsonPointer, found: list) -> None:
        """Record objects with a string $ref and recurse into the other values."""
        if isinstance(obj.get("$ref"), str):
            found.append((pointer, obj))

        for key, value in obj.items():
            if key != "$ref" or not isinstance(value, str):
                self._scan_recursive(value, pointer.append(key), found)

    def _scan_list(self, obj: List[Any], pointer: JsonPointer, found: list) -> None:
        """Scan list items recursively."""
        for index, item in enumerate(obj):
            self._scan_recursive(item, pointer.append(index), found)
