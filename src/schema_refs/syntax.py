"""Syntax stage: structural checks on fully dereferenced schema nodes."""

from typing import TYPE_CHECKING

from .containers import SchemaNode
from .context import ValidationContext, ValidationReport
from .data_classes import StageResult
from .json_pointer import field_named, is_missing
from .json_ref import is_uri_string
from .pipeline import Stage

if TYPE_CHECKING:
    from .loader import SchemaLoader


class SyntaxStage(Stage):
    """Checks that a resolved node has the shape of a schema."""

    def __init__(self, loader: "SchemaLoader"):
        # Kept so later keyword checks can resolve sub-schema references
        self.loader = loader

    def run(self, context: ValidationContext, report: ValidationReport, schema_node: SchemaNode) -> StageResult:
        node = schema_node.node

        if isinstance(node, bool):
            return StageResult(success=True, schema_node=schema_node)

        if not isinstance(node, dict):
            report.add_message(f"schema is not an object (found {_json_type(node)})")
            return StageResult(success=False, schema_node=schema_node)

        ref = field_named(node, "$ref")
        if not is_missing(ref) and not is_uri_string(ref):
            report.add_message(f'"$ref" value is not a valid URI: {ref!r}')
            return StageResult(success=False, schema_node=schema_node)

        return StageResult(success=True, schema_node=schema_node)


def _json_type(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__
