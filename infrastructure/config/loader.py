"""Configuration loading from YAML files and environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from infrastructure.config.models import ConverterConfig
from infrastructure.constants import ENV_KIT_ROOT, ENV_OUTPUT_DIR

logger = logging.getLogger(__name__)

# env var -> top-level converter.yaml key
ENV_OVERRIDES: dict[str, str] = {
    ENV_KIT_ROOT: "kit_root",
    ENV_OUTPUT_DIR: "output_dir",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def apply_env_overrides(data: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Return a copy of ``data`` with non-empty FA2ICONIFY_* environment variables applied."""
    environ = os.environ if environ is None else environ
    merged = dict(data)
    for env_name, key in ENV_OVERRIDES.items():
        value = (environ.get(env_name) or "").strip()
        if value:
            logger.debug("Config override from %s: %s=%s", env_name, key, value)
            merged[key] = value
    return merged


def load_converter_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ConverterConfig:
    """
    Load converter.yaml (optional) and construct a validated ConverterConfig.

    Args:
        path: YAML config file; None means built-in defaults only
        environ: Environment mapping for overrides (defaults to os.environ)

    Raises:
        FileNotFoundError: If ``path`` is given but missing
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(path) if path is not None else {}

    # Relative kit/output paths in the YAML are resolved against the config file's directory
    if path is not None:
        base = path.parent
        for key in ("kit_root", "output_dir"):
            if data.get(key) is not None and not Path(str(data[key])).is_absolute():
                data[key] = base / str(data[key])

    data = apply_env_overrides(data, environ)
    try:
        return ConverterConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid converter config{f' in {path}' if path else ''}: {e}") from e
