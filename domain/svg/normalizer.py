"""
SVG normalization: extract inner markup and geometry from SVG text or metadata descriptors.

All functions in this module are pure (no file I/O) and never raise on bad input:
anything that cannot be turned into a usable icon yields ``None``.
"""

import math
import re
from xml.sax.saxutils import escape

from lxml import etree

from domain.schemas import Number, NormalizedSvg, SvgDescriptor

# FontAwesome's native glyph grid
DEFAULT_SVG_DIMENSION = 512

_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(%?)")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_ATTR_ENTITIES = {'"': "&quot;"}


def _compact(value: float) -> Number:
    """Return ints for integral values so 320.0 serializes as 320."""
    return int(value) if float(value).is_integer() else float(value)


def _positive(value: float | None) -> Number | None:
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return _compact(value)


def parse_dimension(value: object) -> Number | None:
    """
    Parse a width/height attribute value.

    A leading number is accepted with any unit suffix ("128px" -> 128).
    Percentages, non-numeric and non-positive values yield None.

    Examples:
        >>> parse_dimension("128px")
        128
        >>> parse_dimension("100%") is None
        True
    """
    if value is None:
        return None
    match = _LEADING_NUMBER_RE.match(str(value))
    if not match or match.group(2):
        return None
    return _positive(float(match.group(1)))


def parse_view_box(value: str | None) -> tuple[float, float, float, float] | None:
    """Split a viewBox string into four numbers (whitespace and/or comma separated)."""
    if not value:
        return None
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        numbers = tuple(float(p) for p in parts)
    except ValueError:
        return None
    if not all(math.isfinite(n) for n in numbers):
        return None
    return numbers  # type: ignore[return-value]


def format_view_box(numbers: "list[float] | tuple[float, ...]") -> str:
    return " ".join(str(_compact(n)) for n in numbers)


def _parse_svg_root(text: str | None) -> "etree._Element | None":
    """Parse SVG text into its root <svg> element, or None if it is not a well-formed SVG document."""
    if not text or not text.strip():
        return None

    parser = etree.XMLParser(remove_comments=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(text.strip().encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError):
        return None

    if root is None or etree.QName(root).localname != "svg":
        return None
    return root


def _inner_markup(root: "etree._Element") -> str:
    """Serialize the children of ``root`` (not the element itself), without namespace declarations."""
    for el in root.iter():
        if isinstance(el.tag, str):
            el.tag = etree.QName(el).localname
    etree.cleanup_namespaces(root)

    parts = [escape(root.text or "")]
    parts.extend(etree.tostring(child, encoding="unicode", with_tail=True) for child in root)
    return "".join(parts).strip()


def extract_body(text: str | None) -> str | None:
    """Return the inner markup of an SVG document, or None if it is unparsable or empty."""
    root = _parse_svg_root(text)
    if root is None:
        return None
    return _inner_markup(root) or None


def build_path_body(path: str | list[str] | None) -> str | None:
    """Wrap each non-empty path string in a ``<path>`` element; None if there is nothing to wrap."""
    if not path:
        return None

    segments = [path] if isinstance(path, str) else path
    elements = [
        f'<path d="{escape(segment, _ATTR_ENTITIES)}" fill="currentColor" />'
        for segment in segments
        if isinstance(segment, str) and segment.strip()
    ]
    return "\n".join(elements) if elements else None


def normalize_svg_text(text: str | None) -> NormalizedSvg | None:
    """
    Normalize the contents of a standalone SVG file.

    Resolution order:
      - viewBox: required, passed through verbatim (trimmed)
      - width/height: explicit attributes -> viewBox 3rd/4th component -> DEFAULT_SVG_DIMENSION

    Returns:
        NormalizedSvg, or None if the text is not a usable SVG (missing viewBox, empty body, parse error)
    """
    root = _parse_svg_root(text)
    if root is None:
        return None

    view_box = (root.get("viewBox") or "").strip()
    numbers = parse_view_box(view_box)
    if numbers is None:
        return None

    width = parse_dimension(root.get("width")) or _positive(numbers[2]) or DEFAULT_SVG_DIMENSION
    height = parse_dimension(root.get("height")) or _positive(numbers[3]) or DEFAULT_SVG_DIMENSION

    body = _inner_markup(root)
    if not body:
        return None

    return NormalizedSvg(body=body, width=width, height=height, view_box=view_box)


def normalize_descriptor(descriptor: SvgDescriptor | None) -> NormalizedSvg | None:
    """
    Normalize an embedded metadata descriptor (no SVG file involved).

    Body: inner markup of ``raw`` if usable, otherwise synthesized from ``path``.
    Width/height: explicit fields -> descriptor viewBox -> DEFAULT_SVG_DIMENSION.
    viewBox: descriptor viewBox -> "0 0 {width} {height}".
    """
    if descriptor is None:
        return None

    body = extract_body(descriptor.raw) or build_path_body(descriptor.path)
    if not body:
        return None

    numbers = descriptor.view_box
    width = (
        _positive(descriptor.width)
        or (_positive(numbers[2]) if numbers else None)
        or DEFAULT_SVG_DIMENSION
    )
    height = (
        _positive(descriptor.height)
        or (_positive(numbers[3]) if numbers else None)
        or DEFAULT_SVG_DIMENSION
    )
    view_box = format_view_box(numbers) if numbers else f"0 0 {width} {height}"

    return NormalizedSvg(body=body, width=width, height=height, view_box=view_box)
