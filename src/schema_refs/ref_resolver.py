"""Reference resolution: the first stage of the schema validation pipeline."""

import logging
from typing import Any, Dict, Optional

from .containers import SchemaContainer, SchemaNode
from .context import ValidationContext, ValidationReport
from .data_classes import ResolutionResult, ResolverConfig, StageResult
from .errors import ContainerLoadError, InvalidReferenceError, RefResolutionError, ResolutionErrorKind
from .json_pointer import field_named, is_missing
from .json_ref import JsonRef, is_uri_string
from .loader import SchemaLoader
from .pipeline import Stage
from .syntax import SyntaxStage

logger = logging.getLogger(__name__)

REF_FIELD = "$ref"


def resolve_references(
    loader: SchemaLoader, container: SchemaContainer, node: Any, max_hops: Optional[int] = None
) -> ResolutionResult:
    """
    Follow the $ref chain of a schema node until it reaches concrete content.

    Each hop resolves the ``$ref`` value against the locator of the container
    in effect, switching to another document through the loader when the
    target lives elsewhere. Visited targets are only tracked for this call, so
    a repeated target means the chain loops.

    Args:
        loader: Source of containers for other documents
        container: Container the node belongs to
        node: JSON value to dereference
        max_hops: Optional ceiling on the number of hops, None for unbounded

    Returns:
        ResolutionResult with the final container and node, or the error that stopped resolution.
        On failure ``container`` is the last container successfully switched to.
    """
    visited: Dict[JsonRef, None] = {}
    current = node

    # A $ref that is not a URI is not a reference; the syntax stage reports it
    while is_uri_string(field_named(current, REF_FIELD)):
        try:
            if max_hops is not None and len(visited) >= max_hops:
                raise RefResolutionError(
                    ResolutionErrorKind.HOP_LIMIT_EXCEEDED,
                    f"$ref problem: more than {max_hops} hops: {_format_refs(visited)}",
                )

            target = _next_target(container.locator, current[REF_FIELD], visited)
            if not container.contains(target):
                container = _switch_container(loader, target)
            current = _dereference(container, target)
        except RefResolutionError as e:
            logger.warning(f"Reference resolution failed: {e}")
            return ResolutionResult(success=False, container=container, visited=list(visited), error=e)

    return ResolutionResult(success=True, container=container, node=current, visited=list(visited))


def _next_target(source: JsonRef, ref_text: str, visited: Dict[JsonRef, None]) -> JsonRef:
    """Compute the absolute target of a $ref and record it as visited."""
    try:
        target = source.resolve(JsonRef.from_string(ref_text))
    except InvalidReferenceError as e:
        raise RefResolutionError(ResolutionErrorKind.MALFORMED_REFERENCE_TARGET, f"$ref problem: {e}") from e

    if target in visited:
        raise RefResolutionError(
            ResolutionErrorKind.LOOP_DETECTED, f"$ref problem: ref loop detected: {_format_refs(visited)}"
        )

    visited[target] = None
    logger.debug(f"Following $ref {ref_text!r} from {source} to {target}")
    return target


def _switch_container(loader: SchemaLoader, target: JsonRef) -> SchemaContainer:
    try:
        container = loader.get_container(target.root)
    except ContainerLoadError as e:
        raise RefResolutionError(ResolutionErrorKind.CONTAINER_LOAD_FAILURE, f"$ref problem: {e}") from e

    logger.debug(f"Switched container to {container.locator}")
    return container


def _dereference(container: SchemaContainer, target: JsonRef) -> Any:
    resolved = target.fragment.resolve(container.document)
    if is_missing(resolved):
        raise RefResolutionError(ResolutionErrorKind.DANGLING_REFERENCE, f"$ref problem: dangling JSON ref {target}")
    return resolved


def _format_refs(visited: Dict[JsonRef, None]) -> str:
    return "[" + ", ".join(str(ref) for ref in visited) + "]"


class RefResolverStage(Stage):
    """
    First stage of the validation pipeline.

    Dereferences the schema node before any other stage looks at it. Most
    schemas are not references, in which case the node passes through
    unchanged. The next stage is always a SyntaxStage sharing the same loader.
    """

    def __init__(self, loader: SchemaLoader, config: Optional[ResolverConfig] = None):
        self.loader = loader
        self.config = config or ResolverConfig()

    def run(self, context: ValidationContext, report: ValidationReport, schema_node: SchemaNode) -> StageResult:
        """Resolve the node against the context's current container."""
        result = resolve_references(self.loader, context.container, schema_node.node, self.config.max_hops)

        # Only containers the loader produced ever reach the context
        context.set_container(result.container)

        if not result.success:
            report.add_error(result.error)
            return StageResult(success=False, schema_node=schema_node)

        if result.visited and self.config.log_steps:
            hops = " -> ".join(str(ref) for ref in result.visited)
            logger.info(f"Resolved {len(result.visited)} hop(s): {hops}")

        return StageResult(success=True, schema_node=result.schema_node)

    def resolve(self, context: ValidationContext, report: ValidationReport, schema_node: SchemaNode) -> bool:
        """Boolean form of run(): True when the node is fully dereferenced."""
        return self.run(context, report, schema_node).success

    def next(self) -> SyntaxStage:
        return SyntaxStage(self.loader)
