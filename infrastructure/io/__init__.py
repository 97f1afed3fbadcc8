"""I/O utilities: kit sources, metadata loading and output writing."""

from infrastructure.io.base import KitSource
from infrastructure.io.fs import ensure_directory, ensure_exists, write_json
from infrastructure.io.kit import FileSystemKitSource, InMemoryKitSource, load_kit_metadata

__all__ = [
    "KitSource",
    "FileSystemKitSource",
    "InMemoryKitSource",
    "load_kit_metadata",
    "ensure_exists",
    "ensure_directory",
    "write_json",
]
