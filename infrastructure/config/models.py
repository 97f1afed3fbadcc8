"""Configuration models (Pydantic classes)."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from infrastructure.constants import (
    KIT_FONTS_DIRNAME,
    KIT_METADATA_DIRNAME,
    KIT_ROOT,
    KIT_SVGS_DIRNAME,
    OUTPUT_DIR,
)

NPM_NAME_RE = re.compile(r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$")
NPM_NAME_MAX_LENGTH = 214
SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
PREFIX_RE = re.compile(r"^[a-z0-9-]+$")


class KitLayoutConfig(BaseModel):
    """Subdirectory names inside the kit root."""

    metadata: str = KIT_METADATA_DIRNAME
    svgs: str = KIT_SVGS_DIRNAME
    fonts: str = KIT_FONTS_DIRNAME

    @property
    def required(self) -> list[str]:
        return [self.metadata, self.svgs, self.fonts]


class PackageConfig(BaseModel):
    """Identity of the generated package (used in icon set info blocks and the run summary)."""

    name: str = "fa-pro-iconify"
    version: str = "1.0.0"
    description: str = "FontAwesome Pro icons as Iconify icon set"

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        value = value.strip()
        if not NPM_NAME_RE.match(value) or len(value) > NPM_NAME_MAX_LENGTH:
            raise ValueError(f"Invalid NPM package name format: {value!r}")
        return value

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        value = value.strip()
        if not SEMVER_RE.match(value):
            raise ValueError(f"Invalid semantic version format: {value!r}")
        return value


class IconSetConfig(BaseModel):
    """Values stamped into every exported StyleIconSet."""

    name: str = Field(default="FontAwesome Pro", description="Base icon set name; the style label is appended.")
    prefix: str = Field(default="fa-pro", description="Base Iconify prefix; '-<style>' is appended.")
    author_name: str = "FontAwesome to Iconify Converter"
    license_title: str = "FontAwesome Pro License"
    license_spdx: str = "UNLICENSED"
    width: int = Field(default=512, gt=0)
    height: int = Field(default=512, gt=0)
    include_aliases: bool = Field(
        default=False,
        description="If true, emit an Iconify 'aliases' block built from metadata alias names.",
    )

    @field_validator("prefix")
    @classmethod
    def _validate_prefix(cls, value: str) -> str:
        value = value.strip()
        if not PREFIX_RE.match(value):
            raise ValueError("Prefix must contain only lowercase letters, numbers, and hyphens")
        return value


class ConverterConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from converter.yaml
    - Environment and CLI overrides applied by the loader / entrypoint
    - Consumed by validation, reconciliation and export
    """

    kit_root: Path = Field(default_factory=lambda: KIT_ROOT, description="Root of the unpacked FontAwesome kit.")
    layout: KitLayoutConfig = Field(default_factory=KitLayoutConfig)
    package: PackageConfig = Field(default_factory=PackageConfig)
    icon_set: IconSetConfig = Field(default_factory=IconSetConfig)

    output_dir: Path = Field(default_factory=lambda: OUTPUT_DIR, description="Where icon sets are written.")
    selected_styles: list[str] | None = Field(
        default=None,
        description="Styles to export. None exports every style found in the kit.",
    )
    read_workers: int = Field(default=1, ge=1, description="Threads used to read SVG files.")

    @field_validator("selected_styles", mode="before")
    @classmethod
    def _split_styles(cls, value: object) -> object:
        if isinstance(value, str):
            return value.split(",")
        return value

    @model_validator(mode="after")
    def _validate(self) -> "ConverterConfig":
        if not str(self.output_dir).strip():
            raise ValueError("output_dir is required")

        if self.selected_styles is not None:
            styles: list[str] = []
            for style in self.selected_styles:
                style = str(style).strip().lower()
                if style and style not in styles:
                    styles.append(style)
            self.selected_styles = styles or None

        return self
