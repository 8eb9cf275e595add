"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IconRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup as exported by the design tool")
    name: str = Field(default="Icon", description="Component display name passed to createSvgIcon")
