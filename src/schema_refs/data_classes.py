"""Data classes for the schema reference resolution pipeline."""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .containers import SchemaContainer, SchemaNode
from .errors import RefResolutionError
from .json_ref import JsonRef

if TYPE_CHECKING:
    from ..cli.config import Config


@dataclass
class ResolverConfig:
    """Configuration for $ref resolution."""

    max_hops: Optional[int] = None  # None means unbounded
    log_steps: bool = False

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Create configuration from environment variables."""
        return cls(
            max_hops=parse_max_hops(os.getenv("REF_MAX_HOPS", "")),
            log_steps=os.getenv("LOG_RESOLUTION_STEPS", "false").lower() == "true",
        )

    @classmethod
    def from_config(cls, config: "Config") -> "ResolverConfig":
        """Create config from Config object."""
        return cls(max_hops=config.ref_max_hops, log_steps=config.log_resolution_steps)


def parse_max_hops(value: Optional[str]) -> Optional[int]:
    """Read a hop ceiling; empty means unbounded."""
    if value is None or not value.strip():
        return None
    max_hops = int(value)
    if max_hops < 1:
        raise ValueError(f"REF_MAX_HOPS must be a positive integer, got {value!r}")
    return max_hops


@dataclass
class ResolutionResult:
    """Outcome of following one node's $ref chain."""

    success: bool
    container: SchemaContainer
    node: object = None
    visited: List[JsonRef] = field(default_factory=list)
    error: Optional[RefResolutionError] = None

    @property
    def schema_node(self) -> Optional[SchemaNode]:
        if not self.success:
            return None
        return SchemaNode(self.container, self.node)


@dataclass
class StageResult:
    """Outcome of running one pipeline stage."""

    success: bool
    schema_node: SchemaNode
