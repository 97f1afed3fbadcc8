"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the conversion workflow: validate kit -> reconcile -> export.
"""

from application.export import ExportResult, assemble_icon_sets, resolve_styles, write_icon_sets
from application.reconcile import ReconcileReport, reconcile_icon, reconcile_kit
from application.summary import build_summary_table, log_conversion_summary, save_summary_table
from application.validation import KitStructureError, validate_kit

__all__ = [
    # Main workflows
    "validate_kit",
    "reconcile_kit",
    "assemble_icon_sets",
    "write_icon_sets",
    # Single-icon reconciliation
    "reconcile_icon",
    # Results
    "ReconcileReport",
    "ExportResult",
    "KitStructureError",
    # Style selection
    "resolve_styles",
    # Summary
    "build_summary_table",
    "save_summary_table",
    "log_conversion_summary",
]
