"""JSON Reference values: parsing, base resolution and document containment."""

import re
from typing import Any
from urllib.parse import quote, unquote, urljoin, urlsplit, urlunsplit

from .errors import InvalidReferenceError
from .json_pointer import JsonPointer

_ILLEGAL_URI_CHARS = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')


def is_uri_string(value: Any) -> bool:
    """Check whether a JSON value is syntactically usable as a URI reference."""
    if not isinstance(value, str):
        return False

    if _ILLEGAL_URI_CHARS.search(value) or value.count("#") > 1:
        return False

    try:
        urlsplit(value)
    except ValueError:
        return False

    return True


class JsonRef:
    """
    An immutable JSON Reference.

    A reference is split into its document part (``root``) and a JSON Pointer
    fragment. Two references point into the same document when their roots
    are equal, whatever their fragments.
    """

    __slots__ = ("_root", "_pointer")

    def __init__(self, root: str = "", pointer: JsonPointer = None):
        self._root = root
        self._pointer = pointer if pointer is not None else JsonPointer()

    @classmethod
    def from_string(cls, text: str) -> "JsonRef":
        """
        Parse a reference string.

        Args:
            text: URI reference, absolute or relative (e.g. "other.json#/x")

        Returns:
            Normalized JsonRef

        Raises:
            InvalidReferenceError: if text is not a URI or its fragment is not a JSON Pointer
        """
        if not is_uri_string(text):
            raise InvalidReferenceError(f"not a valid URI: {text!r}")

        document, _, fragment = text.partition("#")
        return cls(_normalize(document), JsonPointer.from_fragment(fragment))

    @classmethod
    def empty(cls) -> "JsonRef":
        """The anonymous reference, locator of documents without an id."""
        return cls()

    @property
    def fragment(self) -> JsonPointer:
        return self._pointer

    @property
    def root(self) -> "JsonRef":
        """This reference without its fragment; the lookup key of its document."""
        if self._pointer.is_empty():
            return self
        return JsonRef(self._root)

    @property
    def is_absolute(self) -> bool:
        return bool(urlsplit(self._root).scheme)

    @property
    def scheme(self) -> str:
        return urlsplit(self._root).scheme

    def resolve(self, other: "JsonRef") -> "JsonRef":
        """
        Resolve another reference against this one used as a base.

        Raises:
            InvalidReferenceError: if this base cannot anchor the relative reference
        """
        if other.is_absolute:
            return other

        # Fragment-only references stay in this document whatever the scheme
        if not other._root:
            return JsonRef(self._root, other._pointer)

        joined = _normalize(urljoin(self._root, other._root))
        if self.is_absolute and not urlsplit(joined).scheme:
            raise InvalidReferenceError(f"cannot resolve {other} against base {self}")

        return JsonRef(joined, other._pointer)

    def contains(self, other: "JsonRef") -> bool:
        """Check whether other points into the same document as this reference."""
        return self._root == other._root

    def __str__(self):
        if self._pointer.is_empty():
            return self._root
        return f"{self._root}#{self._pointer.to_fragment()}"

    def __repr__(self):
        return f"JsonRef({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, JsonRef):
            return NotImplemented
        return self._root == other._root and self._pointer == other._pointer

    def __hash__(self):
        return hash((self._root, self._pointer))


def _normalize(document: str) -> str:
    """Lower-case scheme and authority and percent-encode the path canonically."""
    if not document:
        return ""
    parts = urlsplit(document)
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), _quote_path(parts.path), parts.query, ""))


def _quote_path(path: str) -> str:
    return quote(unquote(path), safe="/:@!$&'()*+,;=~")
