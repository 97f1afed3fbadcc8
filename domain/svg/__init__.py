"""
SVG normalization for FontAwesome glyphs.

Turns SVG files and embedded metadata descriptors into inner markup plus geometry.
All functions in this module are pure (no file I/O).
"""

from domain.svg.normalizer import (
    DEFAULT_SVG_DIMENSION,
    build_path_body,
    extract_body,
    normalize_descriptor,
    normalize_svg_text,
    parse_dimension,
    parse_view_box,
)

__all__ = [
    "DEFAULT_SVG_DIMENSION",
    "normalize_svg_text",
    "normalize_descriptor",
    "extract_body",
    "build_path_body",
    "parse_dimension",
    "parse_view_box",
]
