"""Check command - run the validation pipeline on every $ref in a schema document."""

import logging
import sys

from src.cli.config import Config
from src.schema_refs.data_classes import ResolverConfig
from src.schema_refs.errors import ContainerLoadError
from src.schema_refs.loader import SchemaLoader
from src.schema_refs.pipeline import ValidationPipeline
from src.schema_refs.reference_scanner import ReferenceScanner

logger = logging.getLogger(__name__)


def check_command(config: Config, schema_file: str):
    """Resolve each $ref-bearing node and report which ones fail."""
    path = config.schema_path(schema_file)
    if not config.is_supported(path):
        logger.error(f"❌ Unsupported schema file extension: {path.suffix}")
        sys.exit(1)

    loader = SchemaLoader()
    try:
        container = loader.load_file(path)
    except ContainerLoadError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    pipeline = ValidationPipeline.create(loader, ResolverConfig.from_config(config))
    reference_nodes = ReferenceScanner().find_reference_nodes(container.document)
    logger.info(f"🔗 Found {len(reference_nodes)} $ref node(s) in {container.locator}")

    failures = 0
    for pointer, node in reference_nodes:
        result, report = pipeline.check(container, node)
        location = f"#{pointer}"
        if result.success:
            print(f"OK    {location}")
        else:
            failures += 1
            print(f"FAIL  {location}: {'; '.join(report.messages)}")

    logger.info(f"📊 {len(reference_nodes) - failures} passed, {failures} failed")

    if failures:
        sys.exit(1)
