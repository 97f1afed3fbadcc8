"""Application-level constants."""

# Output filenames
ICONS_DIRNAME = "icons"
SUMMARY_FILENAME = "summary.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
LOG_FILENAME = "convert.log"

SVG_SUFFIX = ".svg"
METADATA_SUFFIX = ".json"

# Summary table columns
SUMMARY_COLUMNS = ["style", "label", "prefix", "icons", "selected"]

LICENSING_NOTICE = """
FONTAWESOME TO ICONIFY CONVERTER - LICENSING NOTICE

This tool is designed for personal use only. FontAwesome Pro icons are subject to
strict licensing terms that prohibit redistribution, commercial use without proper
licensing, and any form of public sharing.

IMPORTANT LEGAL RESTRICTIONS:
- Generated packages MUST be marked as private
- Do not publish to NPM or any public registry
- Do not distribute the generated package
- Use only for personal/internal projects
- Maintain compliance with FontAwesome's terms of service
"""
