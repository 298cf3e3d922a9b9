"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.config import APP_VERSION


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = APP_VERSION


class ColorsResponse(BaseModel):
    colors: list[str] = Field(default_factory=list)
    count: int = 0


class RecolorResponse(BaseModel):
    svg: str
    changed: bool = False
