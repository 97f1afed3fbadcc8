"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Kit sources (filesystem, in-memory) and output writing
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ConverterConfig, load_converter_config
from infrastructure.io import FileSystemKitSource, KitSource, load_kit_metadata

__all__ = [
    # Kit access (most commonly used)
    "KitSource",
    "FileSystemKitSource",
    "load_kit_metadata",
    # Configuration
    "load_converter_config",
    "ConverterConfig",
]
