"""Per-validation state: the current container and the message report."""

from dataclasses import dataclass, field
from typing import List, Optional

from .containers import SchemaContainer
from .errors import ResolutionErrorKind, SchemaRefError


@dataclass
class ValidationContext:
    """
    Mutable state of one top-level validation run.

    Holds the container whose document the schema currently being processed
    lives in. Not safe to share between concurrent validations.
    """

    container: SchemaContainer

    def set_container(self, container: SchemaContainer) -> None:
        self.container = container


@dataclass
class ReportEntry:
    """One message of a validation report."""

    message: str
    kind: Optional[ResolutionErrorKind] = None


@dataclass
class ValidationReport:
    """Append-only list of validation messages."""

    entries: List[ReportEntry] = field(default_factory=list)

    def add_message(self, message: str, kind: Optional[ResolutionErrorKind] = None) -> None:
        self.entries.append(ReportEntry(message=message, kind=kind))

    def add_error(self, error: SchemaRefError) -> None:
        """Append an error's message, keeping its kind when it has one."""
        self.add_message(str(error), getattr(error, "kind", None))

    @property
    def messages(self) -> List[str]:
        return [entry.message for entry in self.entries]

    @property
    def kinds(self) -> List[Optional[ResolutionErrorKind]]:
        return [entry.kind for entry in self.entries]

    @property
    def is_success(self) -> bool:
        return not self.entries
