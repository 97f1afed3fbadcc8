"""Export staged icons as per-style Iconify icon sets."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from application.constants import ICONS_DIRNAME
from domain.iconset import build_style_icon_set, style_prefix
from domain.schemas import StyleIconSet
from domain.store import IconStore
from infrastructure.config.models import ConverterConfig
from infrastructure.io.fs import write_json
from infrastructure.utils.formatting import humanize_style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    icon_sets: dict[str, StyleIconSet] = field(default_factory=dict)
    total_icons: int = 0
    omitted_styles: list[str] = field(default_factory=list)


def resolve_styles(cfg: ConverterConfig, store: IconStore) -> list[str]:
    """Configured styles, or every style present in the store when none are configured."""
    return list(cfg.selected_styles) if cfg.selected_styles else store.list_styles()


def assemble_icon_sets(
    store: IconStore,
    cfg: ConverterConfig,
    styles: Sequence[str] | None = None,
) -> ExportResult:
    """
    Build one StyleIconSet per selected style that has at least one staged icon.

    Args:
        store: Populated IconStore
        cfg: ConverterConfig (icon set identity, package version)
        styles: Styles to export; defaults to resolve_styles(cfg, store)

    Returns:
        ExportResult; total_icons is the sum of info.total over the emitted sets.
        Styles without icons are listed in omitted_styles and produce no set.
    """
    if styles is None:
        styles = resolve_styles(cfg, store)

    sets: dict[str, StyleIconSet] = {}
    omitted: list[str] = []
    total = 0

    for style in dict.fromkeys(styles):
        records = store.list_by_style(style)
        if not records:
            logger.info("Style %s has no icons; omitted from export", style)
            omitted.append(style)
            continue

        sets[style] = build_style_icon_set(
            records,
            prefix=style_prefix(cfg.icon_set.prefix, style),
            name=f"{cfg.icon_set.name} {humanize_style(style)}",
            version=cfg.package.version,
            author_name=cfg.icon_set.author_name,
            license_title=cfg.icon_set.license_title,
            license_spdx=cfg.icon_set.license_spdx,
            width=cfg.icon_set.width,
            height=cfg.icon_set.height,
            include_aliases=cfg.icon_set.include_aliases,
        )
        total += len(records)
        logger.debug("Assembled icon set %s (%d icons)", sets[style].prefix, len(records))

    return ExportResult(icon_sets=sets, total_icons=total, omitted_styles=omitted)


def write_icon_sets(result: ExportResult, output_dir: Path) -> list[Path]:
    """Write each icon set to ``<output_dir>/icons/<style>.json``."""
    paths: list[Path] = []
    for style, icon_set in result.icon_sets.items():
        path = write_json(output_dir / ICONS_DIRNAME / f"{style}.json", icon_set.to_document())
        logger.info("Saved icon set %s: %s", icon_set.prefix, path)
        paths.append(path)
    return paths
