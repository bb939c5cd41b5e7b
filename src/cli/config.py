"""Configuration management for the schema-refs CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.schema_refs.data_classes import parse_max_hops


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from project root .env
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Schema documents
        self.schema_base_dir = os.getenv("SCHEMA_BASE_DIR", ".")
        self.supported_extensions = os.getenv("SUPPORTED_EXTENSIONS", ".json,.yaml,.yml").split(",")

        # Reference resolution
        self.ref_max_hops = parse_max_hops(os.getenv("REF_MAX_HOPS", ""))
        self.log_resolution_steps = os.getenv("LOG_RESOLUTION_STEPS", "false").lower() == "true"

    def schema_path(self, file_path: str) -> Path:
        """Resolve a schema path given on the command line against SCHEMA_BASE_DIR."""
        path = Path(file_path)
        if path.is_absolute():
            return path
        return Path(self.schema_base_dir) / path

    def is_supported(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.supported_extensions
