"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from app.models.theme import ColorMapping, SvgFile
from app.svg.colors import is_hex_color, normalize_hex


class ExtractColorsRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class ExtractMultipleRequest(BaseModel):
    svgs: list[SvgFile] = Field(..., description="SVG files whose palettes are merged")


class ReplaceColorRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    original: str = Field(..., description="Color to replace (#rgb or #rrggbb)")
    replacement: str = Field(..., description="Color to write in its place (#rgb or #rrggbb)")

    @field_validator("original", "replacement")
    @classmethod
    def _normalize_hex(cls, value: str) -> str:
        if not is_hex_color(value):
            raise ValueError(f"expected #rgb or #rrggbb hex color, got {value!r}")
        return normalize_hex(value)


class ApplyMappingsRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    mappings: list[ColorMapping] = Field(
        default_factory=list,
        description="Substitutions applied in order",
    )
