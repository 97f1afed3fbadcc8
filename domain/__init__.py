"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for kit metadata, icon records and icon sets
- svg: SVG normalization (file text and metadata descriptors)
- kit: Metadata parsing into name-keyed source records
- store: In-memory (name, style) icon table
- iconset: Iconify icon set assembly
"""

from domain.schemas import IconRecord, IconSourceRecord, NormalizedSvg, StyleIconSet, SvgDescriptor
from domain.store import IconStore

__all__ = [
    "IconRecord",
    "IconSourceRecord",
    "NormalizedSvg",
    "StyleIconSet",
    "SvgDescriptor",
    "IconStore",
]
