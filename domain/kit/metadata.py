"""Parse FontAwesome kit metadata (``metadata/icons.json``) into IconSourceRecords."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from domain.schemas import IconSourceRecord, SvgDescriptor

logger = logging.getLogger(__name__)

KitMetadata = dict[str, IconSourceRecord]


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _parse_descriptors(name: str, svg_raw: Any) -> dict[str, SvgDescriptor]:
    if not isinstance(svg_raw, dict):
        return {}

    descriptors: dict[str, SvgDescriptor] = {}
    for style, block in svg_raw.items():
        if not isinstance(block, dict):
            continue
        try:
            descriptors[str(style)] = SvgDescriptor.model_validate(block)
        except ValidationError as e:
            logger.warning("Ignoring malformed svg descriptor for %s/%s: %s", name, style, e.errors()[0]["msg"])
    return descriptors


def parse_icon_entry(name: str, entry: Mapping[str, Any]) -> IconSourceRecord:
    """
    Convert one raw metadata entry into an IconSourceRecord.

    Only the fields the converter needs are kept: unicode, label,
    alias names, search terms, styles and the per-style svg descriptors.
    """
    aliases = entry.get("aliases") or {}
    search = entry.get("search") or {}

    unicode = entry.get("unicode")
    return IconSourceRecord(
        name=name,
        unicode=str(unicode) if unicode is not None else None,
        label=entry.get("label") if isinstance(entry.get("label"), str) else None,
        aliases=_string_list(aliases.get("names")) if isinstance(aliases, dict) else [],
        search_terms=_string_list(search.get("terms")) if isinstance(search, dict) else [],
        styles=_string_list(entry.get("styles")),
        svg=_parse_descriptors(name, entry.get("svg")),
    )


def parse_kit_metadata(data: Mapping[str, Any]) -> KitMetadata:
    """
    Parse a pre-loaded metadata document (icon name -> entry).

    This is a pure function - it does NOT perform file I/O.
    The JSON loading happens in infrastructure.io.kit.

    Raises:
        ValueError: If the document is not a mapping
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Metadata document must be a mapping of icon name -> entry, got {type(data).__name__}")

    metadata: KitMetadata = {}
    for name, entry in data.items():
        if not isinstance(entry, Mapping):
            logger.warning("Skipping metadata entry %r: expected an object, got %s", name, type(entry).__name__)
            continue
        metadata[str(name)] = parse_icon_entry(str(name), entry)
    return metadata
