"""Exceptions raised while parsing, loading and resolving schema references."""

from enum import Enum


class ResolutionErrorKind(Enum):
    """Why a $ref chain could not be resolved."""

    MALFORMED_REFERENCE_TARGET = "malformed_reference_target"
    LOOP_DETECTED = "loop_detected"
    CONTAINER_LOAD_FAILURE = "container_load_failure"
    DANGLING_REFERENCE = "dangling_reference"
    HOP_LIMIT_EXCEEDED = "hop_limit_exceeded"


class SchemaRefError(Exception):
    """Base class for all schema reference errors."""


class InvalidReferenceError(SchemaRefError):
    """A string could not be turned into a JSON reference or pointer."""


class ContainerLoadError(SchemaRefError):
    """The loader could not produce a container for a document root."""

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"cannot load schema at {locator!r}: {reason}")


class RefResolutionError(SchemaRefError):
    """A single hop of $ref resolution failed."""

    def __init__(self, kind: ResolutionErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)
