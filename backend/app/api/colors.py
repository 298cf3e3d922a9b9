"""POST /api/colors/* -- palette extraction and hex recoloring of raw SVG text."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.config import Settings
from app.dependencies import get_settings
from app.models.requests import (
    ApplyMappingsRequest,
    ExtractColorsRequest,
    ExtractMultipleRequest,
    ReplaceColorRequest,
)
from app.models.responses import ColorsResponse, RecolorResponse
from app.svg.colors import (
    apply_color_mappings,
    extract_colors,
    extract_colors_from_multiple,
    replace_color_in_svg,
)

router = APIRouter(prefix="/colors")
logger = logging.getLogger(__name__)


@router.post("/extract", response_model=ColorsResponse)
async def extract(request: ExtractColorsRequest) -> ColorsResponse:
    colors = extract_colors(request.svg)
    return ColorsResponse(colors=colors, count=len(colors))


@router.post("/extract-multiple", response_model=ColorsResponse)
async def extract_multiple(
    request: ExtractMultipleRequest,
    settings: Settings = Depends(get_settings),
) -> ColorsResponse:
    if len(request.svgs) > settings.max_batch_svgs:
        logger.warning(
            "Rejected palette batch of %d SVGs (limit %d)",
            len(request.svgs), settings.max_batch_svgs,
        )
        raise HTTPException(
            status_code=413,
            detail=f"At most {settings.max_batch_svgs} SVGs per request",
        )
    colors = extract_colors_from_multiple(request.svgs)
    return ColorsResponse(colors=colors, count=len(colors))


@router.post("/replace", response_model=RecolorResponse)
async def replace(request: ReplaceColorRequest) -> RecolorResponse:
    svg = replace_color_in_svg(request.svg, request.original, request.replacement)
    return RecolorResponse(svg=svg, changed=svg != request.svg)


@router.post("/apply", response_model=RecolorResponse)
async def apply(request: ApplyMappingsRequest) -> RecolorResponse:
    svg = apply_color_mappings(request.svg, request.mappings)
    logger.info("Applied %d color mappings", len(request.mappings))
    return RecolorResponse(svg=svg, changed=svg != request.svg)
