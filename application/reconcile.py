"""Reconcile SVG files with kit metadata and stage the resulting icons."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from application.constants import SVG_SUFFIX
from application.validation import KitStructureError, check_required_dirs
from domain.kit import KitMetadata
from domain.schemas import IconRecord, IconSourceRecord, NormalizedSvg, SvgDescriptor
from domain.store import IconStore
from domain.svg import normalize_descriptor, normalize_svg_text
from infrastructure.config.models import KitLayoutConfig
from infrastructure.io.base import KitSource
from infrastructure.observability.logging import clear_style_context, set_log_context

logger = logging.getLogger(__name__)


@dataclass
class ReconcileReport:
    """Counters for one reconciliation pass. Skips are silent; they only show up here."""

    written: int = 0
    missing_metadata: int = 0
    missing_geometry: int = 0
    malformed_files: int = 0
    per_style: dict[str, int] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return self.missing_metadata + self.missing_geometry

    def record(self, style: str) -> None:
        self.written += 1
        self.per_style[style] = self.per_style.get(style, 0) + 1


def resolve_geometry(file_svg: NormalizedSvg | None, descriptor: SvgDescriptor | None) -> NormalizedSvg | None:
    """
    Pick the geometry for one (icon, style) pair.

    A usable SVG file wins outright (body, width, height and viewBox);
    otherwise the metadata descriptor is normalized; None if neither yields a body.
    """
    if file_svg is not None:
        return file_svg
    return normalize_descriptor(descriptor)


def build_icon_record(name: str, style: str, geometry: NormalizedSvg, source: IconSourceRecord) -> IconRecord:
    return IconRecord(
        name=name,
        style=style,
        body=geometry.body,
        width=geometry.width,
        height=geometry.height,
        view_box=geometry.view_box or f"0 0 {geometry.width} {geometry.height}",
        unicode=source.unicode,
        search_terms=list(source.search_terms),
        aliases=list(source.aliases),
    )


def reconcile_icon(
    name: str,
    style: str,
    svg_text: str | None,
    source: IconSourceRecord | None,
) -> IconRecord | None:
    """Reconcile a single pair from raw SVG file text (None when there is no file) and its metadata entry."""
    if source is None:
        return None
    file_svg = normalize_svg_text(svg_text) if svg_text is not None else None
    geometry = resolve_geometry(file_svg, source.svg.get(style))
    if geometry is None:
        return None
    return build_icon_record(name, style, geometry, source)


def _read_svg(source: KitSource, parts: tuple[str, ...]) -> str | None:
    try:
        return source.read_text(*parts)
    except (OSError, ValueError) as e:
        logger.debug("Unreadable SVG %s: %s", source.describe(*parts), e)
        return None


def _read_svg_texts(
    source: KitSource,
    style_parts: tuple[str, ...],
    names: Sequence[str],
    read_workers: int,
) -> dict[str, str | None]:
    """Read ``{name}.svg`` for every name; order of the result does not depend on thread scheduling."""
    paths = [(*style_parts, f"{name}{SVG_SUFFIX}") for name in names]

    if read_workers <= 1 or len(paths) <= 1:
        texts = [_read_svg(source, p) for p in paths]
    else:
        with ThreadPoolExecutor(max_workers=read_workers) as executor:
            texts = list(executor.map(lambda p: _read_svg(source, p), paths))

    return dict(zip(names, texts))


def reconcile_kit(
    source: KitSource,
    metadata: KitMetadata,
    store: IconStore,
    *,
    layout: KitLayoutConfig | None = None,
    read_workers: int = 1,
) -> ReconcileReport:
    """
    Walk every style directory and upsert one IconRecord per reconcilable (name, style) pair.

    Pairs for a style are the union of ``svgs/<style>/*.svg`` files and metadata entries
    that embed a descriptor for that style. Pairs without a metadata entry or without any
    usable geometry are skipped silently (counted in the report).

    Raises:
        KitStructureError: If a required kit directory is missing (before any icon work)
    """
    layout = layout or KitLayoutConfig()
    errors = check_required_dirs(source, layout)
    if errors:
        raise KitStructureError(errors)

    report = ReconcileReport()
    styles = source.list_dirs(layout.svgs)
    logger.info("Reconciling %d styles against %d metadata entries...", len(styles), len(metadata))

    try:
        for style in styles:
            set_log_context(style=style)

            file_names = sorted(
                f[: -len(SVG_SUFFIX)] for f in source.list_files(layout.svgs, style, suffix=SVG_SUFFIX)
            )
            described = {name for name, entry in metadata.items() if style in entry.svg}
            names = sorted(set(file_names) | described)

            texts = _read_svg_texts(source, (layout.svgs, style), file_names, read_workers)

            for name in names:
                entry = metadata.get(name)
                if entry is None:
                    report.missing_metadata += 1
                    logger.debug("Skipping %s/%s: no metadata entry", style, name)
                    continue

                file_svg = None
                if name in texts:
                    file_svg = normalize_svg_text(texts[name])
                    if file_svg is None:
                        report.malformed_files += 1
                        logger.debug("Unusable SVG file for %s/%s; falling back to metadata", style, name)

                geometry = resolve_geometry(file_svg, entry.svg.get(style))
                if geometry is None:
                    report.missing_geometry += 1
                    logger.debug("Skipping %s/%s: no usable geometry", style, name)
                    continue

                store.upsert(build_icon_record(name, style, geometry, entry))
                report.record(style)

            logger.info("Style %s: %d icons staged", style, report.per_style.get(style, 0))
    finally:
        clear_style_context()

    logger.info(
        "Reconciliation done: %d icons staged, %d skipped (no metadata=%d, no geometry=%d), %d unusable SVG files",
        report.written,
        report.skipped,
        report.missing_metadata,
        report.missing_geometry,
        report.malformed_files,
    )
    return report
