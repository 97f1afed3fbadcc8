"""Pydantic models for kit metadata, reconciled icons, and exported icon sets."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

Number = int | float


class SvgDescriptor(BaseModel):
    """Per-style SVG descriptor embedded in the kit metadata (``icons.json`` -> ``svg.<style>``)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    raw: str | None = None
    path: str | list[str] | None = None
    view_box: list[float] | None = Field(default=None, alias="viewBox")
    width: float | None = None
    height: float | None = None

    @field_validator("path", mode="before")
    @classmethod
    def _keep_string_segments(cls, value: Any) -> Any:
        # Duotone descriptors may carry empty/null segments next to real ones
        if isinstance(value, list):
            return [segment for segment in value if isinstance(segment, str)]
        return value

    @field_validator("view_box", mode="before")
    @classmethod
    def _require_usable_view_box(cls, value: Any) -> Any:
        # Four finite numbers with a positive size, anything else counts as absent
        if not isinstance(value, (list, tuple)) or len(value) != 4:
            return None
        try:
            numbers = [float(v) for v in value]
        except (TypeError, ValueError):
            return None
        if not all(math.isfinite(n) for n in numbers) or numbers[2] <= 0 or numbers[3] <= 0:
            return None
        return list(value)


class IconSourceRecord(BaseModel):
    """One metadata entry from the kit, keyed by icon name."""

    model_config = ConfigDict(extra="ignore")

    name: str
    unicode: str | None = None
    label: str | None = None
    aliases: list[str] = Field(default_factory=list)
    search_terms: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)
    svg: dict[str, SvgDescriptor] = Field(default_factory=dict)


class NormalizedSvg(BaseModel):
    """Inner markup plus geometry extracted from an SVG file or descriptor."""

    model_config = ConfigDict(frozen=True)

    body: str
    width: Number
    height: Number
    view_box: str


class IconRecord(BaseModel):
    """Canonical (name, style) icon staged in the IconStore."""

    name: str = Field(..., min_length=1)
    style: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1, description="Inner SVG markup, without the outer <svg> tag.")
    width: Number = Field(..., gt=0)
    height: Number = Field(..., gt=0)
    view_box: str
    unicode: str | None = None
    search_terms: list[str] = Field(default_factory=list)
    aliases: list[str] = Field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return self.name, self.style


class IconGeometry(BaseModel):
    """Iconify icon entry (``icons.<name>`` in an icon set document)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str
    width: Number
    height: Number
    left: Number = 0
    top: Number = 0
    rotate: int = 0
    h_flip: bool = Field(default=False, alias="hFlip")
    v_flip: bool = Field(default=False, alias="vFlip")


class IconAlias(BaseModel):
    model_config = ConfigDict(frozen=True)

    parent: str


class IconSetAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class IconSetLicense(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    spdx: str


class IconSetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    total: int
    version: str
    author: IconSetAuthor
    license: IconSetLicense


class StyleIconSet(BaseModel):
    """Iconify-compatible icon set for a single FontAwesome style."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    icons: dict[str, IconGeometry]
    aliases: dict[str, IconAlias] | None = None
    width: Number
    height: Number
    info: IconSetInfo

    def to_document(self) -> dict[str, Any]:
        """Serialize with Iconify key names (``hFlip``/``vFlip``); ``aliases`` only when present."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationResult(BaseModel):
    """Outcome of the structural kit check."""

    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False
