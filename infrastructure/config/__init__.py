"""
Configuration management: models, loading, and validation.

Handles:
- ConverterConfig: Main conversion configuration
- Package / icon set identity and validation rules
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import apply_env_overrides, load_converter_config
from infrastructure.config.models import (
    ConverterConfig,
    IconSetConfig,
    KitLayoutConfig,
    PackageConfig,
)

__all__ = [
    # Main config (most commonly used)
    "ConverterConfig",
    "load_converter_config",
    # Sections
    "KitLayoutConfig",
    "PackageConfig",
    "IconSetConfig",
    # Overrides
    "apply_env_overrides",
]
