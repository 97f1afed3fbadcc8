"""Structural validation of the kit layout, run before any icon is processed."""

import logging

from application.constants import METADATA_SUFFIX
from domain.schemas import ValidationResult
from infrastructure.config.models import KitLayoutConfig
from infrastructure.io.base import KitSource

logger = logging.getLogger(__name__)


class KitStructureError(FileNotFoundError):
    """Required kit directories are missing; carries the aggregated list of problems."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Kit validation failed: " + "; ".join(self.errors))


def check_required_dirs(source: KitSource, layout: KitLayoutConfig) -> list[str]:
    """Return one message per required directory that is missing or not a directory."""
    errors: list[str] = []
    for dirname in layout.required:
        if not source.exists(dirname):
            errors.append(f"Missing required directory: {source.describe(dirname)}")
        elif not source.is_dir(dirname):
            errors.append(f"{source.describe(dirname)} is not a directory")
    return errors


def validate_kit(source: KitSource, layout: KitLayoutConfig) -> ValidationResult:
    """
    Check the kit layout.

    Errors (fatal):
      - a required directory (metadata, svgs, fonts) is missing or not a directory
      - the metadata directory holds no JSON documents
    Warnings:
      - the svgs directory has no style subdirectories
    """
    result = ValidationResult()
    for message in check_required_dirs(source, layout):
        result.add_error(message)

    if not result.is_valid:
        return result

    if not source.list_files(layout.metadata, suffix=METADATA_SUFFIX):
        result.add_error("No metadata JSON files found in metadata directory")

    if not source.list_dirs(layout.svgs):
        result.warnings.append("No SVG subdirectories found - kit may be incomplete")

    logger.debug(
        "Kit validation: valid=%s errors=%d warnings=%d",
        result.is_valid,
        len(result.errors),
        len(result.warnings),
    )
    return result
