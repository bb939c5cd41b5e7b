"""Validation stage abstraction and the fixed-order pipeline driver."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

from .containers import SchemaContainer, SchemaNode
from .context import ValidationContext, ValidationReport
from .data_classes import ResolverConfig, StageResult

if TYPE_CHECKING:
    from .loader import SchemaLoader


class Stage(ABC):
    """One step of schema validation."""

    @abstractmethod
    def run(self, context: ValidationContext, report: ValidationReport, schema_node: SchemaNode) -> StageResult:
        """Process a schema node, appending problems to the report."""


class ValidationPipeline:
    """Runs stages in a fixed order, handing each the node the previous one produced."""

    def __init__(self, stages: List[Stage]):
        if not stages:
            raise ValueError("A validation pipeline needs at least one stage")
        self.stages = list(stages)

    @classmethod
    def create(cls, loader: "SchemaLoader", config: Optional[ResolverConfig] = None) -> "ValidationPipeline":
        """Reference resolution followed by syntax checks, both sharing the loader."""
        from .ref_resolver import RefResolverStage

        resolver = RefResolverStage(loader, config)
        return cls([resolver, resolver.next()])

    def validate(self, context: ValidationContext, report: ValidationReport, schema_node: SchemaNode) -> StageResult:
        """
        Run every stage until one fails.

        Returns:
            StageResult of the last stage that ran
        """
        result = StageResult(success=True, schema_node=schema_node)
        for stage in self.stages:
            result = stage.run(context, report, result.schema_node)
            if not result.success:
                break
        return result

    def check(self, container: SchemaContainer, node=None) -> Tuple[StageResult, ValidationReport]:
        """Validate a node of a container with a fresh context and report."""
        if node is None:
            node = container.document

        context = ValidationContext(container)
        report = ValidationReport()
        result = self.validate(context, report, SchemaNode(container, node))
        return result, report
