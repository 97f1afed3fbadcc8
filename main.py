"""
CLI entrypoint for the FontAwesome -> Iconify converter.

This script performs the following steps:
- loads .env and configs/converter.yaml (both optional), applies CLI overrides
- validates the kit layout (metadata/, svgs/, otfs/)
- loads the kit metadata and reconciles every (icon, style) pair into an in-memory store
- exports one Iconify icon set per selected style under <output_dir>/icons/
- saves a per-style summary table and a resolved config snapshot
- logs a human-readable summary of the run
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    KitStructureError,
    assemble_icon_sets,
    build_summary_table,
    log_conversion_summary,
    reconcile_kit,
    save_summary_table,
    validate_kit,
    write_icon_sets,
)
from application.constants import CONFIG_SNAPSHOT_FILENAME, LICENSING_NOTICE, LOG_FILENAME, SUMMARY_FILENAME
from domain.store import IconStore
from infrastructure.config import ConverterConfig, load_converter_config
from infrastructure.constants import CONVERTER_FILE
from infrastructure.io import FileSystemKitSource, ensure_directory, ensure_exists, load_kit_metadata, write_json
from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context
from infrastructure.utils import humanize_style

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Convert a FontAwesome kit into Iconify icon sets")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to converter.yaml (default: {CONVERTER_FILE} if it exists)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, ignored if missing)",
    )
    p.add_argument("--kit", type=str, default=None, help="Kit root directory (overrides config)")
    p.add_argument("--output", type=str, default=None, help="Output directory (overrides config)")
    p.add_argument(
        "--styles",
        type=str,
        default=None,
        help="Comma-separated styles to export, e.g. solid,regular (default: all)",
    )
    p.add_argument("--list-styles", action="store_true", help="Print the styles found in the kit and exit.")
    p.add_argument("--search", type=str, default=None, help="Print icons matching QUERY and exit.")
    p.add_argument("--console-level", type=str, default="INFO", choices=LEVELS, help="Console log level")
    p.add_argument("--file-level", type=str, default="DEBUG", choices=LEVELS, help="File log level")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ConverterConfig:
    if args.config:
        config_path: Path | None = Path(args.config)
        ensure_exists(config_path, "converter.yaml")
    else:
        config_path = CONVERTER_FILE if CONVERTER_FILE.exists() else None

    cfg = load_converter_config(config_path)

    overrides: dict[str, object] = {}
    if args.kit:
        overrides["kit_root"] = Path(args.kit)
    if args.output:
        overrides["output_dir"] = Path(args.output)
    if args.styles is not None:
        overrides["selected_styles"] = args.styles
    if not overrides:
        return cfg

    # Re-validate so CLI values go through the same normalization as YAML values
    return ConverterConfig.model_validate({**cfg.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = _resolve_config(args)
    inspect_only = bool(args.list_styles or args.search is not None)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{cfg.package.name}_{cfg.package.version}"

    configure_logging(
        log_file=None if inspect_only else cfg.output_dir / LOG_FILENAME,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, kit_root=str(cfg.kit_root))

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.warning(LICENSING_NOTICE)

    # ---- Validate kit ----
    source = FileSystemKitSource(cfg.kit_root)
    validation = validate_kit(source, cfg.layout)
    if not validation.is_valid:
        logger.error("Kit validation failed for %s:", cfg.kit_root)
        for error in validation.errors:
            logger.error("  - %s", error)
        return 1
    for warning in validation.warnings:
        logger.warning(warning)

    # ---- Parse kit ----
    metadata = load_kit_metadata(source, cfg.layout.metadata)
    store = IconStore()
    try:
        report = reconcile_kit(source, metadata, store, layout=cfg.layout, read_workers=cfg.read_workers)
    except KitStructureError as e:
        for error in e.errors:
            logger.error("  - %s", error)
        return 1

    available = store.list_styles()
    logger.info("Parsed kit with %d styles available: %s", len(available), ", ".join(available))
    if not available:
        logger.error("No icons found in the kit")
        return 1

    if args.list_styles:
        for style in available:
            print(f"{style}\t{humanize_style(style)}\t{store.count(style)}")
        return 0

    if args.search is not None:
        for record in store.search(args.search, cfg.selected_styles):
            print(f"{record.style}\t{record.name}\t{record.unicode or '-'}")
        return 0

    # ---- Export ----
    ensure_directory(cfg.output_dir)
    result = assemble_icon_sets(store, cfg)
    if not result.icon_sets:
        logger.error("None of the selected styles (%s) have icons", ", ".join(cfg.selected_styles or []))
        return 1

    write_icon_sets(result, cfg.output_dir)

    write_json(
        cfg.output_dir / CONFIG_SNAPSHOT_FILENAME,
        {"config": cfg.model_dump(mode="json"), "run": get_log_context()},
    )

    summary_df = build_summary_table(store, result, cfg)
    save_summary_table(summary_df, cfg.output_dir / SUMMARY_FILENAME)

    log_conversion_summary(
        cfg=cfg,
        report=report,
        result=result,
        summary_df=summary_df,
        output_dir=cfg.output_dir,
    )
    logger.info("Detailed log: %s", cfg.output_dir / LOG_FILENAME)
    return 0


if __name__ == "__main__":
    sys.exit(main())
