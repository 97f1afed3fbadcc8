"""Conversion summary table and logging."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import SUMMARY_COLUMNS
from application.export import ExportResult
from application.reconcile import ReconcileReport
from domain.iconset import style_prefix
from domain.store import IconStore
from infrastructure.config.models import ConverterConfig
from infrastructure.utils.formatting import humanize_style

logger = logging.getLogger(__name__)


def build_summary_table(store: IconStore, result: ExportResult, cfg: ConverterConfig) -> pd.DataFrame:
    """
    One row per style that is either staged or selected.

    Columns:
      - style: style directory name
      - label: display label
      - prefix: Iconify prefix the style exports under
      - icons: staged icon count
      - selected: whether an icon set was emitted for the style
    """
    styles = sorted(set(store.list_styles()) | set(result.icon_sets) | set(result.omitted_styles))
    rows = [
        {
            "style": style,
            "label": humanize_style(style),
            "prefix": style_prefix(cfg.icon_set.prefix, style),
            "icons": store.count(style),
            "selected": style in result.icon_sets,
        }
        for style in styles
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def save_summary_table(df: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Saved conversion summary: %s", path)
    return path


def log_conversion_summary(
    *,
    cfg: ConverterConfig,
    report: ReconcileReport,
    result: ExportResult,
    summary_df: pd.DataFrame,
    output_dir: Path,
) -> None:
    """Log a human-readable summary of the run."""
    logger.info("=" * 60)
    logger.info("Package generated: %s@%s", cfg.package.name, cfg.package.version)
    logger.info("Output directory: %s", output_dir)
    logger.info("Styles: %s", ", ".join(result.icon_sets) or "-")
    if result.omitted_styles:
        logger.warning("Styles without icons (omitted): %s", ", ".join(result.omitted_styles))
    logger.info("Total icons: %d", result.total_icons)
    logger.info(
        "Skipped pairs: %d (no metadata=%d, no geometry=%d)",
        report.skipped,
        report.missing_metadata,
        report.missing_geometry,
    )
    if not summary_df.empty:
        logger.info("Per-style summary:\n%s", summary_df.to_string(index=False))
    logger.info("Remember: keep this package private and do not distribute it.")
    logger.info("=" * 60)
