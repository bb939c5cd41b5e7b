"""Resolve command - dereference one node of a schema document."""

import json
import logging
import sys

from src.cli.config import Config
from src.schema_refs.context import ValidationContext, ValidationReport
from src.schema_refs.containers import SchemaNode
from src.schema_refs.data_classes import ResolverConfig
from src.schema_refs.errors import ContainerLoadError, InvalidReferenceError
from src.schema_refs.json_pointer import JsonPointer, is_missing
from src.schema_refs.loader import SchemaLoader
from src.schema_refs.ref_resolver import RefResolverStage

logger = logging.getLogger(__name__)


def resolve_command(config: Config, schema_file: str, pointer: str = ""):
    """Print the fully dereferenced node found at pointer in schema_file."""
    path = config.schema_path(schema_file)
    if not config.is_supported(path):
        logger.error(f"❌ Unsupported schema file extension: {path.suffix}")
        sys.exit(1)

    loader = SchemaLoader()
    try:
        container = loader.load_file(path)
        start = JsonPointer.from_fragment(pointer)
    except (ContainerLoadError, InvalidReferenceError) as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    node = start.resolve(container.document)
    if is_missing(node):
        logger.error(f"❌ No node at {start} in {container.locator}")
        sys.exit(1)

    logger.info(f"📄 Resolving {container.locator}#{start}")

    context = ValidationContext(container)
    report = ValidationReport()
    stage = RefResolverStage(loader, ResolverConfig.from_config(config))
    result = stage.run(context, report, SchemaNode(container, node))

    if not result.success:
        for message in report.messages:
            logger.error(f"❌ {message}")
        sys.exit(1)

    output = {
        "locator": str(result.schema_node.container.locator),
        "node": result.schema_node.node,
    }
    print(json.dumps(output, indent=2))
