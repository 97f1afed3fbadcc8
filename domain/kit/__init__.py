"""
Kit metadata parsing.

All functions in this module are pure (no file I/O).
"""

from domain.kit.metadata import KitMetadata, parse_icon_entry, parse_kit_metadata

__all__ = [
    "KitMetadata",
    "parse_kit_metadata",
    "parse_icon_entry",
]
