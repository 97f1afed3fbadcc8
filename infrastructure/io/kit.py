"""Kit sources: filesystem-backed and in-memory, plus metadata loading."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from domain.kit import KitMetadata, parse_kit_metadata
from infrastructure.io.base import KitSource

logger = logging.getLogger(__name__)


class FileSystemKitSource(KitSource):
    """Reads a kit unpacked on local disk."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)

    def describe(self, *parts: str) -> str:
        return str(self._path(*parts))

    def exists(self, *parts: str) -> bool:
        return self._path(*parts).exists()

    def is_dir(self, *parts: str) -> bool:
        return self._path(*parts).is_dir()

    def list_dirs(self, *parts: str) -> list[str]:
        return sorted(p.name for p in self._path(*parts).iterdir() if p.is_dir())

    def list_files(self, *parts: str, suffix: str | None = None) -> list[str]:
        return sorted(
            p.name
            for p in self._path(*parts).iterdir()
            if p.is_file() and (suffix is None or p.name.endswith(suffix))
        )

    def read_text(self, *parts: str) -> str:
        return self._path(*parts).read_text(encoding="utf-8")

    def read_json(self, *parts: str) -> Any:
        with self._path(*parts).open("r", encoding="utf-8") as f:
            return json.load(f)


class InMemoryKitSource(KitSource):
    """
    Kit held in a dict of relative path -> file contents.

    Directories are implied by the file paths. Values that are not strings are
    treated as JSON documents (``read_text`` returns them serialized).
    """

    def __init__(self, files: Mapping[str, Any], *, dirs: tuple[str, ...] = ()) -> None:
        self.files = {self._key(k.split("/")): v for k, v in files.items()}
        self.dirs: set[str] = {self._key(d.split("/")) for d in dirs}
        self.dirs.add("")
        for key in list(self.files) + list(self.dirs):
            segments = key.split("/")
            for i in range(1, len(segments)):
                self.dirs.add("/".join(segments[:i]))

    @staticmethod
    def _key(parts: "tuple[str, ...] | list[str]") -> str:
        return "/".join(p for p in parts if p)

    def _children(self, prefix: str, keys: "set[str] | list[str]") -> set[str]:
        lead = f"{prefix}/" if prefix else ""
        rest = (k[len(lead):] for k in keys if k.startswith(lead))
        return {r for r in rest if r and "/" not in r}

    def describe(self, *parts: str) -> str:
        return f"memory://{self._key(parts)}"

    def exists(self, *parts: str) -> bool:
        key = self._key(parts)
        return key in self.files or key in self.dirs

    def is_dir(self, *parts: str) -> bool:
        return self._key(parts) in self.dirs

    def list_dirs(self, *parts: str) -> list[str]:
        if not self.is_dir(*parts):
            raise FileNotFoundError(self.describe(*parts))
        return sorted(self._children(self._key(parts), self.dirs))

    def list_files(self, *parts: str, suffix: str | None = None) -> list[str]:
        if not self.is_dir(*parts):
            raise FileNotFoundError(self.describe(*parts))
        names = self._children(self._key(parts), list(self.files))
        return sorted(n for n in names if suffix is None or n.endswith(suffix))

    def read_text(self, *parts: str) -> str:
        key = self._key(parts)
        if key not in self.files:
            raise FileNotFoundError(self.describe(*parts))
        value = self.files[key]
        return value if isinstance(value, str) else json.dumps(value)

    def read_json(self, *parts: str) -> Any:
        key = self._key(parts)
        if key not in self.files:
            raise FileNotFoundError(self.describe(*parts))
        value = self.files[key]
        return json.loads(value) if isinstance(value, str) else value


def load_kit_metadata(source: KitSource, metadata_dir: str) -> KitMetadata:
    """
    Load every ``*.json`` document in the metadata directory into one name-keyed mapping.

    Documents are merged in filename order (later files override earlier icon names).
    Unreadable or undecodable documents are logged and skipped.

    Raises:
        ValueError: If a decoded document is not a mapping of icon name -> entry
    """
    metadata: KitMetadata = {}
    for filename in source.list_files(metadata_dir, suffix=".json"):
        try:
            document = source.read_json(metadata_dir, filename)
        except (OSError, ValueError) as e:
            logger.error("Error reading metadata file %s: %s", source.describe(metadata_dir, filename), e)
            continue

        try:
            parsed = parse_kit_metadata(document)
        except ValueError as e:
            raise ValueError(f"Invalid metadata document {source.describe(metadata_dir, filename)}: {e}") from e

        logger.debug("Loaded %d metadata entries from %s", len(parsed), filename)
        metadata.update(parsed)

    logger.info("Metadata loaded: %d icons", len(metadata))
    return metadata
