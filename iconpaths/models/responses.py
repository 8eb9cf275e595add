"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class IconResponse(BaseModel):
    paths: str = Field(..., description="JSX children: one element or a keyed list literal")
    source: str = Field(..., description="Generated createSvgIcon module")
    multiple_children: bool = False
    passes: int = Field(default=0, description="Optimizer passes until the markup stopped changing")
    processing_time_ms: float = 0.0


class EscapedIconResponse(BaseModel):
    html: str = Field(..., description="HTML-escaped module wrapped for display")
