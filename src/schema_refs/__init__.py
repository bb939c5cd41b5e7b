"""JSON Schema $ref resolution stage and its supporting value types."""

from .containers import SchemaContainer, SchemaNode
from .context import ReportEntry, ValidationContext, ValidationReport
from .data_classes import ResolutionResult, ResolverConfig, StageResult
from .errors import (ContainerLoadError, InvalidReferenceError,
                     RefResolutionError, ResolutionErrorKind, SchemaRefError)
from .json_pointer import MISSING, JsonPointer, field_named, is_missing
from .json_ref import JsonRef, is_uri_string
from .loader import SchemaLoader
from .parser import ParseResult, SchemaParser
from .pipeline import Stage, ValidationPipeline
from .ref_resolver import RefResolverStage, resolve_references
from .reference_scanner import ReferenceScanner
from .syntax import SyntaxStage

__all__ = [
    "JsonRef",
    "JsonPointer",
    "MISSING",
    "is_missing",
    "field_named",
    "is_uri_string",
    "SchemaContainer",
    "SchemaNode",
    "SchemaParser",
    "ParseResult",
    "SchemaLoader",
    "ValidationContext",
    "ValidationReport",
    "ReportEntry",
    "ResolverConfig",
    "ResolutionResult",
    "StageResult",
    "Stage",
    "ValidationPipeline",
    "RefResolverStage",
    "SyntaxStage",
    "resolve_references",
    "ReferenceScanner",
    "SchemaRefError",
    "InvalidReferenceError",
    "ContainerLoadError",
    "RefResolutionError",
    "ResolutionErrorKind",
]
