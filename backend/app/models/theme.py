"""Icon theme data shapes shared with the scanner/exporter."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from app.svg.colors import is_hex_color, normalize_hex

# Always lower-case "#rrggbb" once normalized
HexColor = str


class SvgFile(BaseModel):
    """An SVG file loaded into memory. Owned by the caller; never mutated here."""

    path: str
    size: int = Field(default=0, ge=0)
    content: str


class ColorMapping(BaseModel):
    """A single before/after color substitution."""

    original: HexColor
    replacement: HexColor

    @field_validator("original", "replacement")
    @classmethod
    def _normalize(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"expected #rgb or #rrggbb hex color, got {value!r}")
        return normalize_hex(value)


class ScanResult(BaseModel):
    source_dir: str
    preview_svgs: list[SvgFile] = Field(default_factory=list)
    total_svg_count: int = 0
    non_svg_count: int = 0


class ExportResult(BaseModel):
    output_dir: str
    svgs_processed: int = 0
    files_copied: int = 0
