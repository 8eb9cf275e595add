"""POST /api/icon — convert an exported SVG into a createSvgIcon module."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from iconpaths.codegen import ensure_svg_text, render_display_html, render_icon_module
from iconpaths.core import IconPathsResult, convert_svg
from iconpaths.errors import IconPathsError
from iconpaths.models.requests import IconRequest
from iconpaths.models.responses import EscapedIconResponse, IconResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _convert(req: IconRequest) -> IconPathsResult:
    try:
        return convert_svg(ensure_svg_text(req.svg, req.name))
    except IconPathsError as e:
        logger.warning("Export of %r failed: %s", req.name, e)
        raise HTTPException(status_code=422, detail=f'Error exporting "{req.name}": {e}') from e


@router.post("/icon", response_model=IconResponse)
def icon(req: IconRequest) -> IconResponse:
    start = time.perf_counter()
    result = _convert(req)
    elapsed = (time.perf_counter() - start) * 1000
    return IconResponse(
        paths=result.paths,
        source=render_icon_module(result.paths, req.name),
        multiple_children=result.multiple_children,
        passes=result.passes,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/icon/escaped", response_model=EscapedIconResponse)
def icon_escaped(req: IconRequest) -> EscapedIconResponse:
    result = _convert(req)
    return EscapedIconResponse(html=render_display_html(render_icon_module(result.paths, req.name)))
