"""Base interface for reading a FontAwesome kit."""

from abc import ABC, abstractmethod
from typing import Any


class KitSource(ABC):
    """
    Abstract read-only view of a kit.

    Paths are given as relative parts (e.g. ``("svgs", "solid", "house.svg")``).
    All concrete sources must implement:
    - is_dir(): Whether the parts name a directory
    - list_dirs(): Sorted subdirectory names
    - list_files(): Sorted file names, optionally filtered by suffix
    - read_text(): UTF-8 file contents
    - read_json(): Decoded JSON document
    """

    @abstractmethod
    def describe(self, *parts: str) -> str:
        """Human-readable location, used in validation and log messages."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, *parts: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_dir(self, *parts: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_dirs(self, *parts: str) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def list_files(self, *parts: str, suffix: str | None = None) -> list[str]:
        raise NotImplementedError

    @abstractmethod
    def read_text(self, *parts: str) -> str:
        """
        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        raise NotImplementedError

    @abstractmethod
    def read_json(self, *parts: str) -> Any:
        """
        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON
        """
        raise NotImplementedError
