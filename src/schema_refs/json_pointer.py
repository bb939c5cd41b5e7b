"""JSON Pointer (RFC 6901) fragments and the missing-node sentinel."""

import re
from typing import Any, List, Tuple
from urllib.parse import quote, unquote

from .errors import InvalidReferenceError

_ARRAY_INDEX = re.compile(r"^(0|[1-9][0-9]*)$")


class _Missing:
    """Marker for a JSON location that does not exist."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING"


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    """Check whether a value is the missing-node sentinel."""
    return value is MISSING


def field_named(value: Any, name: str) -> Any:
    """Return member ``name`` of a JSON object, or MISSING."""
    if isinstance(value, dict) and name in value:
        return value[name]
    return MISSING


class JsonPointer:
    """An immutable path into a JSON document."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Tuple[str, ...] = ()):
        self._tokens = tuple(tokens)

    @classmethod
    def from_fragment(cls, fragment: str) -> "JsonPointer":
        """
        Parse a URI fragment (without the leading ``#``) as a JSON Pointer.

        Args:
            fragment: Fragment text, possibly percent-encoded (e.g. "/definitions/a")

        Returns:
            JsonPointer for the fragment

        Raises:
            InvalidReferenceError: if the fragment is not a JSON Pointer
        """
        try:
            decoded = unquote(fragment, errors="strict")
        except UnicodeDecodeError as e:
            raise InvalidReferenceError(f"fragment is not valid percent-encoded UTF-8: {fragment!r}") from e

        if not decoded:
            return cls()

        if not decoded.startswith("/"):
            raise InvalidReferenceError(f"fragment is not a JSON Pointer: {fragment!r}")

        return cls(tuple(_unescape(token) for token in decoded[1:].split("/")))

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def is_empty(self) -> bool:
        return not self._tokens

    def append(self, token: Any) -> "JsonPointer":
        """Return a new pointer one level deeper."""
        return JsonPointer(self._tokens + (str(token),))

    def resolve(self, document: Any) -> Any:
        """
        Walk the pointer through a document.

        Returns:
            The value at this location, or MISSING if any step does not exist
        """
        current = document
        for token in self._tokens:
            if isinstance(current, dict):
                current = _member(current, token)
            elif isinstance(current, list):
                if not _ARRAY_INDEX.match(token):
                    return MISSING
                index = int(token)
                current = current[index] if index < len(current) else MISSING
            else:
                return MISSING

            if current is MISSING:
                return MISSING

        return current

    def to_fragment(self) -> str:
        """Render as a percent-encoded URI fragment (without ``#``)."""
        return quote(str(self), safe="/~!$&'()*+,;=:@")

    def __str__(self):
        return "".join("/" + _escape(token) for token in self._tokens)

    def __repr__(self):
        return f"JsonPointer({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, JsonPointer):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self):
        return hash(self._tokens)


def _member(obj: dict, token: str) -> Any:
    """Look up an object member, matching non-string keys (YAML ints, bools) by their text."""
    if token in obj:
        return obj[token]
    for key, value in obj.items():
        if not isinstance(key, str) and str(key) == token:
            return value
    return MISSING


def _unescape(token: str) -> str:
    """Undo ~1 and ~0 escapes, rejecting any other use of ``~``."""
    parts: List[str] = token.split("~")
    result = parts[0]
    for part in parts[1:]:
        if part.startswith("0"):
            result += "~" + part[1:]
        elif part.startswith("1"):
            result += "/" + part[1:]
        else:
            raise InvalidReferenceError(f"illegal escape in JSON Pointer token: {token!r}")
    return result


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")
